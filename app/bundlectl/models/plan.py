"""Copy plan models.

This module defines the data structures produced by a closure walk and
consumed by the copy executor.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class CopyEntry:
    """A single file to copy into the payload.

    Attributes:
        package: Package that owns the file.
        source: Absolute manifest path on the build host.
        destination: Path relative to the installation prefix.
    """

    package: str
    source: str
    destination: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.source:
            msg = "Source path cannot be empty"
            raise ValueError(msg)
        if not self.destination:
            msg = f"Destination path cannot be empty (source: {self.source})"
            raise ValueError(msg)


class CopyPlan:
    """Ordered list of copy entries, deduplicated by destination.

    The first entry claiming a destination wins; later entries for the
    same destination are ignored.
    """

    def __init__(self, entries: Iterable[CopyEntry] = ()) -> None:
        self._entries: dict[str, CopyEntry] = {}
        for entry in entries:
            self.add(entry)

    def add(self, entry: CopyEntry) -> bool:
        """Add an entry unless its destination is already planned.

        Args:
            entry: Entry to add.

        Returns:
            True if the entry was added, False if it was a duplicate.
        """
        if entry.destination in self._entries:
            return False
        self._entries[entry.destination] = entry
        return True

    @property
    def destinations(self) -> list[str]:
        """Planned destination paths in plan order."""
        return list(self._entries)

    def __iter__(self) -> Iterator[CopyEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, destination: object) -> bool:
        return destination in self._entries

    def to_list(self) -> list[dict[str, str]]:
        """Convert the plan to a JSON-serializable list."""
        return [
            {"package": e.package, "source": e.source, "destination": e.destination}
            for e in self
        ]


@dataclass(slots=True)
class ClosureResult:
    """Outcome of one closure computation.

    Attributes:
        plan: Files to copy.
        processed: Packages visited, in visit order.
        pruned: Visited packages whose filtered manifest was empty.
    """

    plan: CopyPlan = field(default_factory=CopyPlan)
    processed: list[str] = field(default_factory=list)
    pruned: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert the result to a JSON-serializable dictionary."""
        return {
            "packages": list(self.processed),
            "pruned": list(self.pruned),
            "files": self.plan.to_list(),
        }


@dataclass(slots=True)
class CopyReport:
    """Outcome of executing a copy plan.

    Attributes:
        copied: Entries copied during this run (or that would be, in dry-run).
        skipped: Entries whose destination already existed.
    """

    copied: list[CopyEntry] = field(default_factory=list)
    skipped: list[CopyEntry] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of entries considered."""
        return len(self.copied) + len(self.skipped)
