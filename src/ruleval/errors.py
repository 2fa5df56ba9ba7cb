"""Errors raised by ruleval itself.

A failed rule is never an error: ``validate()`` reports it as a message.
Exceptions raised inside a predicate propagate to the caller unchanged.
"""

from __future__ import annotations


class RulevalError(Exception):
    """Base class for errors raised by the library."""


class UnknownStrategyError(RulevalError, ValueError):
    """Raised when a strategy name is not in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown evaluation strategy: {name!r}. Available: {available}")
