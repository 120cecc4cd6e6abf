"""
Throttle Table

Bookkeeping of recently admitted request fingerprints. Owned and mutated
by a single ThrottleController; not thread-safe on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class ThrottleEntry:
    """State of the most recent admission for one fingerprint."""
    resolved: bool
    timestamp: float


class ThrottleTable:
    """
    Mapping of fingerprint -> ThrottleEntry.

    Holds at most one entry per fingerprint. Entries are only removed by
    ``collect_garbage`` and only once resolved; an unresolved entry stays
    until its request completes, however old it is.
    """

    def __init__(self) -> None:
        self._entries: dict[str, ThrottleEntry] = {}

    def get(self, fingerprint: str) -> Optional[ThrottleEntry]:
        return self._entries.get(fingerprint)

    def admit(self, fingerprint: str, now: float) -> ThrottleEntry:
        """Create or overwrite the entry for a freshly admitted request."""
        entry = ThrottleEntry(resolved=False, timestamp=now)
        self._entries[fingerprint] = entry
        return entry

    def mark_resolved(self, fingerprint: str) -> bool:
        """Flag an entry as resolved, keeping its timestamp."""
        entry = self._entries.get(fingerprint)
        if entry is None:
            return False
        entry.resolved = True
        return True

    def collect_garbage(self, now: float, window: float) -> int:
        """
        Drop resolved entries whose window has elapsed.

        Returns:
            Number of entries removed
        """
        stale = [
            key for key, entry in self._entries.items()
            if entry.resolved and now - entry.timestamp >= window
        ]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def pending(self) -> list[str]:
        """Fingerprints admitted but not yet resolved."""
        return [key for key, entry in self._entries.items() if not entry.resolved]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, fingerprint: object) -> bool:
        return fingerprint in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))
