"""Base class for load/dump routines registered with the codec registry."""

from abc import ABC, abstractmethod
from typing import Any

from rgss_serializer.domain.models import ConversionOptions


class BaseFormat(ABC):
    """One on-disk representation of a payload."""

    @abstractmethod
    def load(self, path: str) -> Any:
        """Read the payload stored at ``path``."""

    @abstractmethod
    def dump(self, path: str, data: Any, options: ConversionOptions) -> None:
        """Write ``data`` to ``path``, replacing any existing file."""
