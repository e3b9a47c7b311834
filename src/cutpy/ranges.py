from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open interval [start, end) over 0-based unit indices.

    Users write 1-based positions; ``Range(0, 1)`` is position 1.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start < self.end:
            raise ValueError(f"invalid range [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def indices(self) -> range:
        return range(self.start, self.end)

    def format(self) -> str:
        # Back to the 1-based user-facing form.
        if self.end - self.start == 1:
            return str(self.end)
        return f"{self.start + 1}-{self.end}"


# Order is significant; duplicates and overlaps are kept.
PositionList = tuple[Range, ...]
