"""
Configuration management for mf2kit.
Handles environment variables and library settings.
"""
import logging
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Library configuration loaded from environment variables."""

    # Logging
    LOG_LEVEL: str = os.getenv("MF2KIT_LOG_LEVEL", "WARNING")
    LOG_FORMAT: str = os.getenv("MF2KIT_LOG_FORMAT", "console")  # json or console

    # Type tag marking a person/organisation card
    CARD_TYPE: str = os.getenv("MF2KIT_CARD_TYPE", "h-card")

    # Flattener nesting cutoff
    MAX_FLATTEN_DEPTH: int = int(os.getenv("MF2KIT_MAX_FLATTEN_DEPTH", "64"))

    @classmethod
    def get_log_level(cls) -> int:
        """
        Numeric logging level for LOG_LEVEL.

        Unknown level names fall back to WARNING.
        """
        level = getattr(logging, cls.LOG_LEVEL.upper(), None)
        if not isinstance(level, int):
            return logging.WARNING
        return level


config = Config()
