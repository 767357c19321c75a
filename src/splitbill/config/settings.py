"""Settings — env vars and explicit overrides in one frozen object.

Priority chain (highest to lowest):
  1. Init kwargs  — values passed by the embedding application
  2. Env vars     — ``SPLITBILL_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class SplitBillSettings(BaseSettings):
    """Runtime settings for splitbill.

    Only logging is configurable; bill arithmetic has no knobs.

    Attributes:
        verbose: Emit DEBUG logs from ``splitbill.*`` loggers.
        log_json: Render logs as JSON lines instead of console text.
    """

    model_config = SettingsConfigDict(frozen=True, env_prefix="SPLITBILL_")

    verbose: bool = False
    log_json: bool = False

    def setup_logging(self) -> None:
        """Apply these settings to structlog and the stdlib root logger."""
        from splitbill.config.logging import configure_logging

        configure_logging(verbose=self.verbose, log_json=self.log_json)
