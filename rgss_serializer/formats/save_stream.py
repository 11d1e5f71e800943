"""Save files: a sequence of independently marshalled chunks.

There is no framing between chunks; each one is delimited by the
marshaller itself, and reading stops once the stream is exhausted.
"""

import os
from typing import Any, Iterable

from rgss_serializer.domain.models import ConversionOptions
from rgss_serializer.formats.base_format import BaseFormat
from rgss_serializer.formats.marshal_format import Marshaller, PickleMarshaller


def dump_sequence(path: str, chunks: Iterable[Any], marshaller: Marshaller) -> None:
    with open(path, 'wb') as f:
        for chunk in chunks:
            marshaller.dump(chunk, f)


def load_sequence(path: str, marshaller: Marshaller) -> list[Any]:
    chunks = []
    with open(path, 'rb') as f:
        size = os.fstat(f.fileno()).st_size
        while f.tell() < size:
            chunks.append(marshaller.load(f))
    return chunks


class SaveStreamFormat(BaseFormat):
    """Chunk stream for save-game files."""

    def __init__(self, marshaller: Marshaller | None = None):
        self.marshaller = marshaller or PickleMarshaller()

    def load(self, path: str) -> list[Any]:
        return load_sequence(path, self.marshaller)

    def dump(self, path: str, data: Any, options: ConversionOptions) -> None:
        dump_sequence(path, data, self.marshaller)
