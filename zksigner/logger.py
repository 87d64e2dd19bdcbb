#!/usr/bin/env python3
"""
ZKSIGNER - Logging System

Every signature leaves a trace. Key material never does.
"""

import logging
from logging.handlers import RotatingFileHandler

from .config import SignerConfig


class SignerLogger:
    """
    Thin wrapper around the "ZKSIGNER" logger with signing-domain events.
    """

    def __init__(self, config: SignerConfig):
        self.logger = logging.getLogger("ZKSIGNER")
        self.logger.setLevel(getattr(logging, config.log_level.upper()))

        # logging.getLogger returns the same instance every time, so handlers
        # stack when SignerLogger is built more than once (e.g. in tests).
        if not self.logger.handlers:
            console = logging.StreamHandler()
            console.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)8s | %(message)s',
                datefmt='%H:%M:%S'
            ))
            self.logger.addHandler(console)

            if config.log_file:
                file_handler = RotatingFileHandler(
                    config.log_file,
                    maxBytes=10_000_000,  # 10MB
                    backupCount=5
                )
                file_handler.setFormatter(logging.Formatter(
                    '%(asctime)s | %(levelname)8s | %(name)s | %(message)s'
                ))
                self.logger.addHandler(file_handler)

    def signer_ready(self, public_key_hash: str):
        """A signing identity is available."""
        self.logger.info(f"SIGNER READY: {public_key_hash}")

    def transaction_signed(self, tx_type: str, nonce: int, message_len: int):
        """One more transaction carries a signature."""
        self.logger.info(f"SIGNED {tx_type}: nonce={nonce} ({message_len} bytes)")

    def error(self, context: str, error: Exception):
        self.logger.error(f"{context}: {str(error)}")

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def debug(self, message: str):
        self.logger.debug(message)
