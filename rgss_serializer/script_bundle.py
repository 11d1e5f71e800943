"""Script bundle splitter and joiner.

The bundle is one binary container holding an ordered list of
``[id, name, compressed_code]`` rows. Splitting writes a YAML index of
``[id, name, filename]`` rows plus one text file per entry that has code;
joining rebuilds the container from the index and those files.

Output layout::

    YAML/Scripts.yaml       index, in bundle order
    Scripts/<name>.rb       one file per non-empty entry
    Scripts/<name>.1.rb     later entries whose name collides
"""

import logging
import os
from typing import Any

from rgss_serializer.block_codec import BlockCodec
from rgss_serializer.codec_registry import CodecRegistry
from rgss_serializer.domain.constants import SCRIPT_EXT
from rgss_serializer.domain.enums import CodecId
from rgss_serializer.domain.models import (
    ConversionOptions, ConversionResult, ScriptEntry, ScriptIndexEntry,
)
from rgss_serializer.errors import MissingDependencyError, MissingSourceError
from rgss_serializer.name_allocator import NameAllocator
from rgss_serializer.staleness import is_stale, newest_mtime, oldest_mtime

log = logging.getLogger(__name__)


def _as_text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, bytes):
        return value.decode('utf-8', errors='surrogateescape')
    return str(value)


def build_index(
    entries: list[ScriptEntry], ext: str = SCRIPT_EXT,
) -> tuple[list[ScriptIndexEntry], list[tuple[str, bytes]]]:
    """Assign file names to entries that have code.

    Returns the index in entry order and the ``(filename, code)`` pairs to
    write, also in entry order.
    """
    allocator = NameAllocator(ext)
    index: list[ScriptIndexEntry] = []
    pending: list[tuple[str, bytes]] = []
    for entry in entries:
        if entry.code:
            filename = allocator.allocate(entry.name)
            index.append(ScriptIndexEntry(id=entry.id, name=entry.name, filename=filename))
            pending.append((filename, entry.code))
        else:
            index.append(ScriptIndexEntry(id=entry.id, name=entry.name))
    return index, pending


class ScriptBundleCodec:
    """Converts the script bundle to text and back."""

    def __init__(
        self,
        registry: CodecRegistry | None = None,
        block_codec: BlockCodec | None = None,
        ext: str = SCRIPT_EXT,
    ):
        self.registry = registry or CodecRegistry()
        self.block_codec = block_codec or BlockCodec()
        self.ext = ext

    # ── Bundle I/O ───────────────────────────────────────────────────────

    def load_entries(self, bundle_file: str) -> list[ScriptEntry]:
        """Read a bundle and decompress every entry.

        Names the marshaller returns as bytes are decoded as UTF-8, so a
        later join writes them back as text; ids and code are kept as is.
        """
        rows = self.registry.load(CodecId.DATA_FILE, bundle_file)
        entries = []
        for script_id, name, block in rows:
            name = _as_text(name)
            try:
                code = self.block_codec.decompress(block)
            except Exception:
                log.error("Exception decompressing script %r in %s", name, bundle_file)
                raise
            entries.append(ScriptEntry(id=script_id, name=name, code=code))
        return entries

    def dump_entries(
        self,
        bundle_file: str,
        entries: list[ScriptEntry],
        stamp_time: float,
        options: ConversionOptions,
    ) -> None:
        """Compress every entry and write the bundle."""
        rows = [
            [entry.id, entry.name, self.block_codec.compress(entry.code)]
            for entry in entries
        ]
        self.registry.dump(CodecId.DATA_FILE, bundle_file, rows, stamp_time, options)

    # ── Conversion ───────────────────────────────────────────────────────

    def split(
        self,
        src_file: str,
        dest_file: str,
        script_dir: str,
        options: ConversionOptions,
    ) -> ConversionResult:
        """Bundle -> YAML index plus one text file per non-empty entry.

        Skipped when the index and every expected script file exist and none
        is older than the bundle (minus the grace margin). Only mtimes are
        compared, so a hand-edited script with an old mtime is not rewritten.
        """
        if not os.path.exists(src_file):
            raise MissingSourceError(f"Missing {os.path.basename(src_file)}", src_file)

        entries = self.load_entries(src_file)
        index, pending = build_index(entries, self.ext)
        script_files = [(os.path.join(script_dir, name), code) for name, code in pending]

        check_time = not options.force and os.path.exists(dest_file)
        oldest_time = None
        if check_time:
            oldest_time = oldest_mtime([dest_file] + [path for path, _ in script_files])

        src_time = os.path.getmtime(src_file)
        if not is_stale(check_time, src_time, oldest_time):
            log.info("Skipping scripts to text")
            return ConversionResult(skipped=[src_file])

        log.info("Converting scripts to text")
        self.registry.dump(
            CodecId.YAML_FILE, dest_file, [entry.to_row() for entry in index], src_time, options,
        )
        for path, code in script_files:
            self.registry.dump(CodecId.RAW_FILE, path, code, src_time, options)
        return ConversionResult(converted=[dest_file] + [path for path, _ in script_files])

    def join(
        self,
        src_file: str,
        dest_file: str,
        script_dir: str,
        options: ConversionOptions,
    ) -> ConversionResult:
        """YAML index plus script files -> bundle.

        Every file the index names must exist. The bundle is stamped with the
        newest mtime among the index and the script files.
        """
        if not os.path.exists(src_file):
            raise MissingSourceError(f"Missing {os.path.basename(src_file)}", src_file)

        rows = self.registry.load(CodecId.YAML_FILE, src_file) or []
        index = [ScriptIndexEntry.from_row(row) for row in rows]

        dependencies = []
        for entry in index:
            if entry.filename:
                path = os.path.join(script_dir, entry.filename)
                if not os.path.exists(path):
                    raise MissingDependencyError(f"Missing script file {entry.filename}", path)
                dependencies.append(path)

        entries = []
        for entry in index:
            code = b''
            if entry.filename:
                code = self.registry.load(CodecId.RAW_FILE, os.path.join(script_dir, entry.filename))
            entries.append(ScriptEntry(id=entry.id, name=entry.name, code=code))

        newest_time = newest_mtime([src_file] + dependencies)
        check_time = not options.force and os.path.exists(dest_file)
        dest_time = os.path.getmtime(dest_file) if check_time else None
        if not is_stale(check_time, newest_time, dest_time):
            log.info("Skipping scripts to binary")
            return ConversionResult(skipped=[src_file])

        log.info("Converting scripts to binary")
        self.dump_entries(dest_file, entries, newest_time, options)
        return ConversionResult(converted=[dest_file])
