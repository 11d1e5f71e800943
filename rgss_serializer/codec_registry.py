"""Codec registry mapping codec ids to load/dump formats."""

import logging
import os
import tempfile
from typing import Any

from rgss_serializer.domain.enums import CodecId
from rgss_serializer.domain.models import ConversionOptions
from rgss_serializer.formats.base_format import BaseFormat
from rgss_serializer.formats.marshal_format import Marshaller, PickleMarshaller

log = logging.getLogger(__name__)


class CodecRegistry:
    """Registry mapping codec ids to format instances.

    Every load and dump goes through :meth:`load` / :meth:`dump`, which log
    the offending file on failure and re-raise the original exception.
    """

    def __init__(self, marshaller: Marshaller | None = None):
        self._formats: dict[CodecId, BaseFormat] = {}
        self.marshaller = marshaller or PickleMarshaller()
        self._register_default_formats()

    def _register_default_formats(self) -> None:
        from rgss_serializer.formats.marshal_format import DataFileFormat
        from rgss_serializer.formats.raw_format import RawFormat
        from rgss_serializer.formats.save_stream import SaveStreamFormat
        from rgss_serializer.formats.yaml_format import YamlFormat

        self.register_codec(CodecId.DATA_FILE, DataFileFormat(self.marshaller))
        self.register_codec(CodecId.YAML_FILE, YamlFormat())
        self.register_codec(CodecId.RAW_FILE, RawFormat())
        self.register_codec(CodecId.SAVE_STREAM, SaveStreamFormat(self.marshaller))

    def get_format(self, codec_id: CodecId) -> BaseFormat:
        try:
            return self._formats[codec_id]
        except KeyError:
            raise KeyError(f"No format registered for {codec_id}") from None

    def register_codec(self, codec_id: CodecId, fmt: BaseFormat) -> None:
        self._formats[codec_id] = fmt

    def get_supported_codecs(self) -> list[CodecId]:
        return list(self._formats.keys())

    def load(self, codec_id: CodecId, path: str) -> Any:
        fmt = self.get_format(codec_id)
        try:
            return fmt.load(path)
        except Exception:
            log.error("Exception loading %s", path)
            raise

    def dump(
        self,
        codec_id: CodecId,
        path: str,
        data: Any,
        stamp_time: float,
        options: ConversionOptions,
    ) -> None:
        """Write ``data`` and set the file's mtime to ``stamp_time``.

        The stamp is the source's mtime rather than the current time, so a
        later staleness check compares against when the source last changed.
        Output goes to a temporary file beside ``path`` and replaces it only
        once fully written, so a failed dump leaves any previous file intact.
        """
        fmt = self.get_format(codec_id)
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{os.path.basename(path)}.",
                suffix='.tmp',
                dir=os.path.dirname(path) or None,
            )
            os.close(fd)
            fmt.dump(tmp_path, data, options)
            os.utime(tmp_path, (stamp_time, stamp_time))
            os.replace(tmp_path, path)
        except Exception:
            log.error("Exception dumping %s", path)
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
