"""On-disk formats handled by the codec registry."""

from rgss_serializer.formats.base_format import BaseFormat
from rgss_serializer.formats.marshal_format import DataFileFormat, Marshaller, PickleMarshaller
from rgss_serializer.formats.raw_format import RawFormat
from rgss_serializer.formats.save_stream import SaveStreamFormat, dump_sequence, load_sequence
from rgss_serializer.formats.yaml_format import YamlFormat, dump_yaml, load_yaml

__all__ = [
    'BaseFormat', 'DataFileFormat', 'Marshaller', 'PickleMarshaller',
    'RawFormat', 'SaveStreamFormat', 'YamlFormat',
    'dump_sequence', 'load_sequence', 'dump_yaml', 'load_yaml',
]
