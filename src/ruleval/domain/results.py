"""ValidationResult — structured outcome of a single validation."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class ValidationResult(BaseModel):
    """Messages from one ``Validator.check`` call.

    INVARIANT: ``valid`` is True exactly when ``errors`` is empty.

    Attributes:
        valid: True when no rule failed.
        errors: Failure messages in rule order.
        strategy: Name of the strategy that produced ``errors``.
    """

    model_config = {"frozen": True}

    valid: bool
    errors: list[str] = Field(default_factory=list)
    strategy: str

    @model_validator(mode="after")
    def _valid_matches_errors(self) -> ValidationResult:
        if self.valid != (not self.errors):
            msg = f"valid={self.valid} contradicts {len(self.errors)} error(s)"
            raise ValueError(msg)
        return self
