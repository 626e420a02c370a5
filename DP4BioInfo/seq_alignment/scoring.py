"""
Linear scoring scheme for global and local alignment
"""

import numbers
from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringPolicy:
    """Match / mismatch / per-step gap scores (all signed integers)"""
    match: int = 5
    mismatch: int = -3
    gap: int = -4

    def __post_init__(self):
        for name in ("match", "mismatch", "gap"):
            value = getattr(self, name)
            # bool is an int subclass but never a meaningful score
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise TypeError(
                    f"{name} must be an integer, got {type(value).__name__}: {value!r}"
                )
            object.__setattr__(self, name, int(value))

    def substitution(self, a: str, b: str) -> int:
        """Score for aligning symbol `a` against symbol `b`"""
        return self.match if a == b else self.mismatch

    def __str__(self) -> str:
        return f"(Match, Mismatch, Gap) = ({self.match}, {self.mismatch}, {self.gap})"
