"""Binary object-graph files."""

import pickle
from abc import ABC, abstractmethod
from typing import Any, BinaryIO

from rgss_serializer.domain.models import ConversionOptions
from rgss_serializer.formats.base_format import BaseFormat


class Marshaller(ABC):
    """Object-graph binary codec.

    Implementations must be self-delimiting: ``load`` consumes exactly the
    bytes of one object so several objects can share a stream.
    """

    @abstractmethod
    def dump(self, obj: Any, fp: BinaryIO) -> None:
        """Append one marshalled object to ``fp``."""

    @abstractmethod
    def load(self, fp: BinaryIO) -> Any:
        """Read exactly one object from ``fp``."""


class PickleMarshaller(Marshaller):
    """Marshaller backed by :mod:`pickle` at the highest protocol."""

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL):
        self.protocol = protocol

    def dump(self, obj: Any, fp: BinaryIO) -> None:
        pickle.dump(obj, fp, protocol=self.protocol)

    def load(self, fp: BinaryIO) -> Any:
        return pickle.load(fp)


class DataFileFormat(BaseFormat):
    """A single marshalled object per file."""

    def __init__(self, marshaller: Marshaller | None = None):
        self.marshaller = marshaller or PickleMarshaller()

    def load(self, path: str) -> Any:
        with open(path, 'rb') as f:
            return self.marshaller.load(f)

    def dump(self, path: str, data: Any, options: ConversionOptions) -> None:
        with open(path, 'wb') as f:
            self.marshaller.dump(data, f)
