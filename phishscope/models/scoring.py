"""Internal scoring types passed from detectors to the aggregator."""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple


class FlagSet:
    """
    Ordered set of human-readable flags.

    Keeps first-insertion order, drops duplicates (case-sensitive) and
    ignores empty or ``None`` entries.
    """

    def __init__(self, flags: Optional[Iterable[Optional[str]]] = None):
        self._flags: dict = {}
        if flags:
            self.extend(flags)

    def add(self, flag: Optional[str]) -> None:
        if flag and flag not in self._flags:
            self._flags[flag] = None

    def extend(self, flags: Iterable[Optional[str]]) -> None:
        for flag in flags:
            self.add(flag)

    def to_list(self) -> List[str]:
        return list(self._flags)

    def __contains__(self, flag: object) -> bool:
        return flag in self._flags

    def __iter__(self) -> Iterator[str]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __repr__(self) -> str:
        return f"FlagSet({self.to_list()!r})"


def clamp_score(value: float, lower: int = 0, upper: int = 100) -> int:
    """Round down to an integer score inside ``[lower, upper]``."""
    return max(lower, min(upper, int(value)))


@dataclass(frozen=True)
class SubScore:
    """Independent output of one detector."""
    detector: str
    score: int = 0
    flags: Tuple[str, ...] = ()

    @classmethod
    def build(cls, detector: str, score: float, flags: Iterable[Optional[str]] = ()) -> "SubScore":
        """Clamp the score and normalize the flags into an immutable sub-score."""
        return cls(detector=detector, score=clamp_score(score), flags=tuple(FlagSet(flags)))

    @classmethod
    def empty(cls, detector: str) -> "SubScore":
        return cls(detector=detector)
