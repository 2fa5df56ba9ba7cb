"""Validator and Builder — the public entry points.

Usage::

    validator = (
        Validator.builder()
        .rule("must be positive", lambda n: n > 0)
        .rule("must be even", lambda n: n % 2 == 0)
        .fail_fast()
        .build()
    )
    validator.validate(-3)  # ["must be positive"]

INVARIANT: a built Validator is immutable. ``build()`` snapshots the
builder's rules, so later ``rule()`` calls never reach an existing Validator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from ruleval.domain.results import ValidationResult
from ruleval.domain.rules import Predicate, Rule
from ruleval.domain.strategies import EvaluationStrategy, StrategyName, get_strategy

if TYPE_CHECKING:
    from ruleval.config.settings import RulevalSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Validator(Generic[T]):
    """An ordered, immutable rule set bound to one evaluation strategy.

    Safe to share between threads as long as the predicates are.
    """

    rules: tuple[Rule[T], ...]
    strategy: EvaluationStrategy

    def __post_init__(self) -> None:
        # Frozen, so bypass __setattr__ to take a private copy of the rules.
        object.__setattr__(self, "rules", tuple(self.rules))

    @staticmethod
    def builder() -> Builder[T]:
        """Start a new :class:`Builder` (defaults to collect-all)."""
        return Builder()

    def validate(self, target: T) -> list[str]:
        """Return the failure messages for *target*; empty means valid."""
        errors = self.strategy.evaluate(self.rules, target)
        logger.debug(
            "Validated against %d rules (%s): %d failed",
            len(self.rules),
            self.strategy.name,
            len(errors),
        )
        return errors

    def check(self, target: T) -> ValidationResult:
        """Like :meth:`validate`, wrapped in a :class:`ValidationResult`."""
        errors = self.validate(target)
        return ValidationResult(
            valid=not errors,
            errors=errors,
            strategy=self.strategy.name,
        )

    def __len__(self) -> int:
        return len(self.rules)

    def __bool__(self) -> bool:
        # Zero rules is a legal, always-passing validator.
        return True


class Builder(Generic[T]):
    """Mutable accumulator of rules that produces immutable validators.

    Not thread-safe. A builder may be built more than once; every
    ``build()`` returns an independent snapshot of the rules so far.
    """

    def __init__(self, strategy: EvaluationStrategy | None = None) -> None:
        self._rules: list[Rule[T]] = []
        self._strategy: EvaluationStrategy = strategy or get_strategy(StrategyName.COLLECT_ALL)

    @classmethod
    def from_settings(cls, settings: RulevalSettings) -> Builder[T]:
        """Builder whose initial strategy is ``settings.default_strategy``."""
        return cls(get_strategy(settings.default_strategy))

    def rule(self, message: str, predicate: Predicate[T]) -> Builder[T]:
        self._rules.append(Rule(message, predicate))
        return self

    def fail_fast(self) -> Builder[T]:
        self._strategy = get_strategy(StrategyName.FAIL_FAST)
        return self

    def collect_all(self) -> Builder[T]:
        self._strategy = get_strategy(StrategyName.COLLECT_ALL)
        return self

    def strategy(self, name: str) -> Builder[T]:
        """Select a registered strategy by name.

        Raises:
            UnknownStrategyError: If *name* is not registered.
        """
        self._strategy = get_strategy(name)
        return self

    def build(self) -> Validator[T]:
        validator: Validator[T] = Validator(tuple(self._rules), self._strategy)
        logger.debug("Built validator: %d rules, strategy=%s", len(validator), self._strategy.name)
        return validator
