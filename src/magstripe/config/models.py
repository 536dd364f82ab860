"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, magstripe.toml only contains
overrides. An empty or missing file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- magstripe.toml sections ---


class DecodeConfig(BaseModel):
    """[decode] section."""

    model_config = {"frozen": True}

    clear_raw_data: bool = True
    strict: bool = False


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    show_descriptions: bool = True
