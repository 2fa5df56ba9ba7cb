"""Evaluation strategy ABC and registry.

A strategy decides how rule failures are aggregated:
- ``fail_fast``: stop at the first failing rule.
- ``collect_all``: evaluate every rule and report each failure.

Strategies hold no state, so one shared instance per variant lives in
:data:`STRATEGY_REGISTRY`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import StrEnum
from typing import Any

from ruleval.domain.rules import Rule
from ruleval.errors import UnknownStrategyError


class StrategyName(StrEnum):
    """Built-in evaluation strategies."""

    FAIL_FAST = "fail_fast"
    COLLECT_ALL = "collect_all"


class EvaluationStrategy(ABC):
    """Abstract base class for evaluation strategies."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy identifier (e.g. 'fail_fast')."""
        ...

    @abstractmethod
    def evaluate(self, rules: Sequence[Rule[Any]], target: Any) -> list[str]:
        """Apply *rules* to *target* in order and return failure messages."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# ---------------------------------------------------------------------------
# Concrete strategies
# ---------------------------------------------------------------------------


class FailFast(EvaluationStrategy):
    """Report only the first failing rule.

    INVARIANT: predicates after the first failure are never invoked.
    """

    @property
    def name(self) -> str:
        return str(StrategyName.FAIL_FAST)

    def evaluate(self, rules: Sequence[Rule[Any]], target: Any) -> list[str]:
        for rule in rules:
            if not rule.passes(target):
                return [rule.message]
        return []


class CollectAll(EvaluationStrategy):
    """Report every failing rule, in rule order.

    INVARIANT: each predicate is invoked exactly once per evaluation.
    """

    @property
    def name(self) -> str:
        return str(StrategyName.COLLECT_ALL)

    def evaluate(self, rules: Sequence[Rule[Any]], target: Any) -> list[str]:
        return [rule.message for rule in rules if not rule.passes(target)]


STRATEGY_REGISTRY: dict[str, EvaluationStrategy] = {}


def _register_strategies() -> None:
    """Populate :data:`STRATEGY_REGISTRY` with the built-in strategies."""
    STRATEGY_REGISTRY[str(StrategyName.FAIL_FAST)] = FailFast()
    STRATEGY_REGISTRY[str(StrategyName.COLLECT_ALL)] = CollectAll()


def get_strategy(name: str) -> EvaluationStrategy:
    """Look up a registered strategy by *name*.

    Raises:
        UnknownStrategyError: If *name* is not registered.
    """
    try:
        return STRATEGY_REGISTRY[str(name)]
    except KeyError:
        raise UnknownStrategyError(str(name), sorted(STRATEGY_REGISTRY)) from None


_register_strategies()
