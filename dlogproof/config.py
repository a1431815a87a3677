"""Pydantic configuration for proof parameters and its JSON loader."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from .curve import SECP256K1
from .errors import ConfigError
from .group import Group
from .hash import HashFunction, hash_function
from .nonce import DEFAULT_NONCE_ATTEMPTS

_GROUPS = {"secp256k1": SECP256K1}


class ProofConfig(BaseModel):
    """Collaborators and limits used by prover and verifier."""

    group: Literal["secp256k1"] = Field(
        default="secp256k1", description="Prime-order group backing the proof",
    )
    hash_name: Literal["sha512", "sha384", "sha256", "sha3_512", "blake2b"] = Field(
        default="sha512", description="Hash used for the Fiat-Shamir challenge",
    )
    nonce_attempts: int = Field(
        default=DEFAULT_NONCE_ATTEMPTS,
        description="Rejection-sampling draws before giving up on a nonce",
        ge=1,
        le=1024,
    )

    def group_impl(self) -> Group:
        return _GROUPS[self.group]

    def hash_fn(self) -> HashFunction:
        return hash_function(self.hash_name)


def load_config(path: Optional[Union[str, Path]] = None) -> ProofConfig:
    """Load and validate a JSON configuration file.

    Args:
        path: Path to the config file.  ``None`` or a missing file gives
              the defaults.

    Returns:
        Validated configuration object

    Raises:
        ConfigError: If the file exists but is invalid
    """
    if path is None:
        return ProofConfig()
    path = Path(path)
    if not path.exists():
        return ProofConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8") or "{}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {path} must be a JSON object")
    try:
        return ProofConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed: {e}") from e
