"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, datefmt.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class LocaleConfig(BaseModel):
    """[locale] section."""

    model_config = {"frozen": True}

    # CLDR or BCP47 tag used by ``datefmt now`` when --locale is omitted.
    # None defers to the process locale (LC_TIME / LANG).
    default: str | None = None
