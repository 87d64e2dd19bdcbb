#!/usr/bin/env python3
"""
ZKSIGNER - Core Configuration

Chain selection, key material sources, and environment management.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dotenv import load_dotenv

_dotenv_loaded = False


def _ensure_dotenv() -> None:
    """Load .env file exactly once, on first call."""
    global _dotenv_loaded
    if not _dotenv_loaded:
        load_dotenv()
        _dotenv_loaded = True


class ChainId(Enum):
    """Ethereum networks the layer-2 can settle on."""

    MAINNET = 1
    ROPSTEN = 3
    RINKEBY = 4
    LOCALHOST = 9

    @classmethod
    def parse(cls, value: str) -> "ChainId":
        """Accept either the numeric id or the enum name."""
        value = value.strip()
        if value.isdigit():
            return cls(int(value))
        return cls[value.upper()]


@dataclass
class SignerConfig:
    """
    Everything a signing session needs to know before it starts.
    Key material is hex encoded; never both required, raw key wins.
    """

    # Network
    chain_id: Optional[ChainId] = None  # None: ZKSYNC_CHAIN_ID, else MAINNET

    # Key material (hex, optional 0x prefix)
    seed: str = ""
    private_key: str = ""

    # Logging
    log_level: str = "INFO"
    log_file: str = "zksigner.log"

    def __post_init__(self):
        """Fill env-based defaults after dataclass init (avoids module-level side effects)."""
        _ensure_dotenv()
        if self.chain_id is None:
            self.chain_id = ChainId.MAINNET
            env_chain = os.getenv("ZKSYNC_CHAIN_ID", "")
            if env_chain:
                try:
                    self.chain_id = ChainId.parse(env_chain)
                except (KeyError, ValueError):
                    # Left for validate() to report
                    self._bad_chain = env_chain
        if not self.seed:
            self.seed = os.getenv("ZKSYNC_SIGNER_SEED", "")
        if not self.private_key:
            self.private_key = os.getenv("ZKSYNC_PRIVATE_KEY", "")

    def __repr__(self) -> str:
        """Redact key material to prevent accidental secret leakage in logs."""
        seed_display = "***" if self.seed else "(empty)"
        pk_display = "***" if self.private_key else "(empty)"
        return (
            f"SignerConfig(chain_id={self.chain_id.name}, "
            f"seed='{seed_display}', "
            f"private_key='{pk_display}', "
            f"log_level={self.log_level})"
        )

    def validate(self) -> list[str]:
        """Collect every configuration problem instead of stopping at the first."""
        errors = []

        bad_chain = getattr(self, "_bad_chain", None)
        if bad_chain:
            errors.append(f"Unknown chain id '{bad_chain}' (set ZKSYNC_CHAIN_ID)")

        for name in ("seed", "private_key"):
            value = getattr(self, name)
            if value and not _is_hex(value):
                errors.append(f"{name} must be hex encoded")

        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown log level '{self.log_level}'")

        return errors


def _is_hex(value: str) -> bool:
    try:
        decode_hex(value)
    except ValueError:
        return False
    return True


def decode_hex(value: str) -> bytes:
    """Decode hex with or without a 0x prefix."""
    if value.startswith(("0x", "0X")):
        value = value[2:]
    return bytes.fromhex(value)
