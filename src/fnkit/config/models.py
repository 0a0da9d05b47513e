"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fnkit.toml only contains overrides.
Settings cover ambient behaviour only; validation semantics are fixed in code.
"""

from __future__ import annotations

from pydantic import BaseModel


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False
