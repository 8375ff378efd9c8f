"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dtneid.toml only contains overrides.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class BinaryFormat(StrEnum):
    """Text encoding for CBOR bytes on the command line."""

    HEX = "hex"
    BASE64 = "base64"


# --- dtneid.toml sections ---


class CodecConfig(BaseModel):
    """[codec] section."""

    model_config = {"frozen": True}

    canonical: bool = True
    binary_format: BinaryFormat = BinaryFormat.HEX


class DtnEidConfig(BaseModel):
    """Root config model mirroring dtneid.toml."""

    model_config = {"frozen": True}

    codec: CodecConfig = Field(default_factory=CodecConfig)
