"""YAML text files.

Dumper classes are built per call so that the line and table widths come
from the run's ``ConversionOptions`` instead of module-level state. Project
files are trusted, so the full Python loader is used to restore arbitrary
marshalled objects.
"""

import sys
from typing import Any

import yaml

from rgss_serializer.domain.constants import UNLIMITED
from rgss_serializer.domain.models import ConversionOptions, Table
from rgss_serializer.formats.base_format import BaseFormat

TABLE_TAG = '!table'
_SEQ_TAG = 'tag:yaml.org,2002:seq'


def _table_rows(data: list[int], row_width: int) -> list[list[int]]:
    if not data:
        return []
    width = len(data) if row_width == UNLIMITED or row_width <= 0 else row_width
    return [data[i:i + width] for i in range(0, len(data), width)]


def make_dumper(table_width: int) -> type:
    """Build a Dumper class that writes Tables with ``table_width`` entries per row."""

    class ProjectDumper(yaml.Dumper):
        pass

    def represent_table(dumper: yaml.Dumper, table: Table) -> yaml.MappingNode:
        alias_key, dumper.alias_key = dumper.alias_key, None
        rows = _table_rows(table.data, table_width)
        row_nodes = [dumper.represent_sequence(_SEQ_TAG, row, flow_style=True) for row in rows]
        pairs = [
            (dumper.represent_data('xsize'), dumper.represent_data(table.xsize)),
            (dumper.represent_data('ysize'), dumper.represent_data(table.ysize)),
            (dumper.represent_data('zsize'), dumper.represent_data(table.zsize)),
            (dumper.represent_data('data'), yaml.SequenceNode(_SEQ_TAG, row_nodes, flow_style=False)),
        ]
        node = yaml.MappingNode(TABLE_TAG, pairs, flow_style=False)
        if alias_key is not None:
            dumper.represented_objects[alias_key] = node
        return node

    ProjectDumper.add_representer(Table, represent_table)
    return ProjectDumper


class ProjectLoader(yaml.Loader):
    pass


def _construct_table(loader: yaml.Loader, node: yaml.MappingNode) -> Table:
    mapping = loader.construct_mapping(node, deep=True)
    data = [value for row in mapping.get('data') or [] for value in row]
    return Table(
        xsize=mapping['xsize'],
        ysize=mapping.get('ysize', 1),
        zsize=mapping.get('zsize', 1),
        data=data,
    )


ProjectLoader.add_constructor(TABLE_TAG, _construct_table)


def yaml_width(line_width: int) -> int:
    """Map the configured line width onto PyYAML's ``width`` argument."""
    if line_width == UNLIMITED or line_width <= 0:
        return sys.maxsize
    return line_width


def dump_yaml(data: Any, stream, options: ConversionOptions) -> None:
    yaml.dump(
        data,
        stream,
        Dumper=make_dumper(options.table_width),
        width=yaml_width(options.line_width),
        allow_unicode=True,
        sort_keys=options.sort_keys,
        default_flow_style=False,
    )


def load_yaml(stream) -> Any:
    return yaml.load(stream, Loader=ProjectLoader)


class YamlFormat(BaseFormat):
    """A single YAML document per file."""

    def load(self, path: str) -> Any:
        with open(path, 'r', encoding='utf-8') as f:
            return load_yaml(f)

    def dump(self, path: str, data: Any, options: ConversionOptions) -> None:
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            dump_yaml(data, f, options)
