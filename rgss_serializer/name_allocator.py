"""Unique, filesystem-safe script file names."""
import re

from rgss_serializer.domain.constants import BLANK_SCRIPT_NAME, NAME_SEPARATOR, SCRIPT_EXT

_UNSAFE_RUN_RE = re.compile(r'[^0-9A-Za-z]+')


def sanitize_filename(label: str) -> str:
    """Collapse every run of non-alphanumeric characters into one separator."""
    return _UNSAFE_RUN_RE.sub(NAME_SEPARATOR, label)


class NameAllocator:
    """Hands out file names that are unique (case-insensitively) within one bundle.

    The first label for a given base yields ``base + ext``; later collisions
    yield ``base.1 + ext``, ``base.2 + ext`` and so on. Results depend on the
    order labels are allocated in. Create one instance per bundle split.
    """

    def __init__(self, ext: str = SCRIPT_EXT):
        self.ext = ext
        self._counters: dict[str, int] = {}
        self._allocated: list[str] = []

    def allocate(self, label: str) -> str:
        base = sanitize_filename(label) or BLANK_SCRIPT_NAME
        key = base.upper()
        if key in self._counters:
            self._counters[key] += 1
            name = f"{base}.{self._counters[key]}{self.ext}"
        else:
            self._counters[key] = 0
            name = f"{base}{self.ext}"
        self._allocated.append(name)
        return name

    @property
    def allocated(self) -> list[str]:
        """Names handed out so far, in allocation order."""
        return list(self._allocated)
