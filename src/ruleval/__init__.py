"""ruleval — predicate rule validation with fail-fast or collect-all evaluation."""

from ruleval.domain.results import ValidationResult
from ruleval.domain.rules import Predicate, Rule
from ruleval.domain.strategies import (
    CollectAll,
    EvaluationStrategy,
    FailFast,
    StrategyName,
    get_strategy,
)
from ruleval.errors import RulevalError, UnknownStrategyError
from ruleval.validator import Builder, Validator

__version__ = "0.1.0"

__all__ = [
    "Builder",
    "CollectAll",
    "EvaluationStrategy",
    "FailFast",
    "Predicate",
    "Rule",
    "RulevalError",
    "StrategyName",
    "UnknownStrategyError",
    "ValidationResult",
    "Validator",
    "get_strategy",
]
