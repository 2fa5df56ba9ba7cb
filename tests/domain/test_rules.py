"""Tests for the Rule data holder."""

import dataclasses

import pytest

from ruleval.domain.rules import Rule


class TestRule:
    def test_fields(self) -> None:
        rule = Rule("must be positive", lambda n: n > 0)
        assert rule.message == "must be positive"
        assert rule.predicate(1) is True

    def test_passes(self) -> None:
        rule = Rule("must be positive", lambda n: n > 0)
        assert rule.passes(5)
        assert not rule.passes(-5)

    def test_passes_uses_truthiness(self) -> None:
        rule = Rule("must be non-empty", len)
        assert rule.passes("abc") is True
        assert rule.passes("") is False

    def test_frozen(self) -> None:
        rule = Rule("msg", lambda n: True)
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.message = "changed"  # type: ignore[misc]

    def test_predicate_error_propagates(self) -> None:
        rule = Rule("needs a length", len)
        with pytest.raises(TypeError):
            rule.passes(42)
