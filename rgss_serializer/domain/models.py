"""Shared data models used across serializer modules."""

from dataclasses import dataclass, field
from typing import Any

from rgss_serializer.domain.constants import DEFAULT_LINE_WIDTH, DEFAULT_TABLE_WIDTH
from rgss_serializer.domain.enums import CodecId


@dataclass
class ScriptEntry:
    """One element of a script bundle, with its code already decompressed."""

    id: int
    name: str
    code: bytes = b''


@dataclass
class ScriptIndexEntry:
    """Text-side descriptor for one script entry.

    ``filename`` is None exactly when the entry has no code.
    """

    id: int
    name: str
    filename: str | None = None

    def to_row(self) -> list[Any]:
        return [self.id, self.name, self.filename]

    @classmethod
    def from_row(cls, row: list[Any]) -> 'ScriptIndexEntry':
        script_id, name, filename = row
        return cls(id=script_id, name=name or '', filename=filename)


@dataclass
class Table:
    """Three-dimensional integer grid stored as a flat list (x fastest)."""

    xsize: int
    ysize: int = 1
    zsize: int = 1
    data: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        expected = self.xsize * self.ysize * self.zsize
        if not self.data:
            self.data = [0] * expected
        elif len(self.data) != expected:
            raise ValueError(
                f"Table data has {len(self.data)} entries, expected {expected}"
            )

    def __getitem__(self, key: tuple[int, ...]) -> int:
        return self.data[self._offset(key)]

    def __setitem__(self, key: tuple[int, ...], value: int) -> None:
        self.data[self._offset(key)] = value

    def _offset(self, key: tuple[int, ...]) -> int:
        x, y, z = (tuple(key) + (0, 0))[:3]
        return x + y * self.xsize + z * self.xsize * self.ysize


@dataclass(frozen=True)
class ConversionOptions:
    """Options controlling a conversion run."""

    force: bool = False
    line_width: int = DEFAULT_LINE_WIDTH
    table_width: int = DEFAULT_TABLE_WIDTH
    sort_keys: bool = False


@dataclass(frozen=True)
class FileSetSpec:
    """One side of a conversion: where files live and how to read/write them."""

    directory: str
    ext: str
    exclude: frozenset[str] = frozenset()
    file_codec: CodecId = CodecId.DATA_FILE
    save_codec: CodecId = CodecId.SAVE_STREAM


@dataclass(frozen=True)
class ConversionJob:
    """One direction of one asset class."""

    source: FileSetSpec
    destination: FileSetSpec
    options: ConversionOptions = field(default_factory=ConversionOptions)


@dataclass
class ConversionResult:
    """Summary of what a conversion step did."""

    converted: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def merge(self, other: 'ConversionResult') -> 'ConversionResult':
        self.converted.extend(other.converted)
        self.skipped.extend(other.skipped)
        return self
