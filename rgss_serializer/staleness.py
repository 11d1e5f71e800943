"""Timestamp-based staleness decisions.

A conversion output is fresh when every input it depends on is not newer
than the output, allowing a one-second grace margin for mtime truncation.
Freshness is decided from modification times only; file contents are never
inspected.
"""

import os
from typing import Iterable

from rgss_serializer.domain.constants import GRACE_MARGIN


def is_stale(
    check_enabled: bool,
    witness_time: float | None,
    comparison_time: float | None,
) -> bool:
    """Decide whether an output must be regenerated.

    Args:
        check_enabled: False when conversion is forced or no prior output
            exists; the answer is then always stale.
        witness_time: Newest relevant input time.
        comparison_time: Oldest relevant output time.
    """
    if not check_enabled or witness_time is None or comparison_time is None:
        return True
    return not (witness_time - GRACE_MARGIN < comparison_time)


def newest_mtime(paths: Iterable[str]) -> float | None:
    """Newest mtime across ``paths``; every path must exist."""
    times = [os.path.getmtime(p) for p in paths]
    return max(times) if times else None


def oldest_mtime(paths: Iterable[str]) -> float | None:
    """Oldest mtime across ``paths``, or None if any of them is missing."""
    times = []
    for p in paths:
        if not os.path.exists(p):
            return None
        times.append(os.path.getmtime(p))
    return min(times) if times else None


def file_is_stale(src_file: str, dest_file: str, force: bool) -> bool:
    """Single source/destination pair."""
    check = not force and os.path.exists(dest_file)
    dest_time = os.path.getmtime(dest_file) if check else None
    return is_stale(check, os.path.getmtime(src_file), dest_time)
