"""Library settings — init kwargs and ``RULEVAL_*`` env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs   — passed to :meth:`RulevalSettings.load`
  2. Env vars      — ``RULEVAL_*`` prefix
  3. Code defaults — baked into the fields below

``Validator.builder()`` never consults settings; use
``Builder.from_settings`` to start from the configured default strategy.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings

from ruleval.config.logging import configure_logging
from ruleval.domain.strategies import StrategyName


class RulevalSettings(BaseSettings):
    """Frozen settings for ruleval.

    Attributes:
        default_strategy: Initial strategy for ``Builder.from_settings``.
        verbose: Enable DEBUG logging for the ``ruleval`` logger.
        log_json: Render logs as JSON lines.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "RULEVAL_",
    }

    default_strategy: StrategyName = StrategyName.COLLECT_ALL
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def load(cls, **overrides: Any) -> RulevalSettings:
        """Construct settings; *overrides* win over environment variables."""
        return cls(**overrides)


def configure_logging_from(settings: RulevalSettings) -> None:
    """Apply the logging flags carried by *settings*."""
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
