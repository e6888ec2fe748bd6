"""Journal Guru - personalised journal prompt generator."""

__version__ = "0.3.0"

from journalguru.core.config import JournalGuruConfig, config

__all__ = [
    "JournalGuruConfig",
    "config",
]
