"""Rule — a failure message paired with a predicate over the target."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]


@dataclass(frozen=True)
class Rule(Generic[T]):
    """A single named check.

    INVARIANT: ``predicate`` is pure and total over the target type.
    A predicate that raises is a caller bug; the exception propagates.

    Attributes:
        message: Human-readable message reported when the predicate fails.
        predicate: Returns truthy when *target* satisfies the rule.
    """

    message: str
    predicate: Predicate[T]

    def passes(self, target: T) -> bool:
        return bool(self.predicate(target))
