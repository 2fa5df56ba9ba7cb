"""Shared pytest fixtures and test helpers for ruleval tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from ruleval.domain.rules import Rule
from ruleval.validator import Builder, Validator


class CountingPredicate:
    """Wrap a predicate and count how many times it is invoked."""

    def __init__(self, fn: Callable[[Any], bool]) -> None:
        self._fn = fn
        self.calls = 0

    def __call__(self, target: Any) -> bool:
        self.calls += 1
        return self._fn(target)


@pytest.fixture
def sign_parity_rules() -> list[Rule[int]]:
    """``must be positive`` then ``must be even``, over integers."""
    return [
        Rule("must be positive", lambda n: n > 0),
        Rule("must be even", lambda n: n % 2 == 0),
    ]


@pytest.fixture
def sign_parity_builder() -> Builder[int]:
    """Builder preloaded with the positive/even rules, default strategy."""
    builder: Builder[int] = Validator.builder()
    return builder.rule("must be positive", lambda n: n > 0).rule(
        "must be even", lambda n: n % 2 == 0
    )
