"""Stable import path for the engine.

The implementation lives in `engine.py`; callers import from here.
"""

from .engine import (
    CorruptDataError,
    DecodingFailedError,
    DecryptionFailedError,
    EmptyResultError,
    InvalidCharacterError,
    UltraCompactError,
    cli,
    main,
    ultracompact,
)

__all__ = [
    "CorruptDataError",
    "DecodingFailedError",
    "DecryptionFailedError",
    "EmptyResultError",
    "InvalidCharacterError",
    "UltraCompactError",
    "cli",
    "main",
    "ultracompact",
]
