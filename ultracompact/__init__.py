"""
ULTRACOMPACT - short alphanumeric encryption tokens

gzip compresses the plaintext, AES-256-CBC encrypts it with a key and IV
derived from the password, and the ciphertext is written as one base62
number. Tokens contain only ``0-9a-zA-Z``.
"""

from .main import (
    CorruptDataError,
    DecodingFailedError,
    DecryptionFailedError,
    EmptyResultError,
    InvalidCharacterError,
    UltraCompactError,
    ultracompact,
)
from .api_strings import (
    base62_decode,
    base62_encode,
    decrypt_bytes,
    decrypt_text,
    decrypt_text_async,
    derive_key_and_iv,
    encrypt_bytes,
    encrypt_text,
    encrypt_text_async,
)
from .api_files import (
    decrypt_file,
    decrypt_file_async,
    encrypt_file,
    encrypt_file_async,
)
from .version import __version__

Pipeline = ultracompact.Pipeline
KeyMaterial = ultracompact.KeyMaterial


# ============================================================================
# ALIASES (names used by the original command line tools)
# ============================================================================

def encrypt(plaintext: str, password: str | bytes):
    """Encrypt text into a base62 token (alias of encrypt_text)."""
    return encrypt_text(plaintext, password)


def decrypt(token: str, password: str | bytes):
    """
    Decrypt a base62 token back into text.

    Args:
        token: Base62 token produced by encrypt()/encrypt_text()
        password: Password used during encryption

    Returns:
        Decrypted plain text

    Raises:
        InvalidCharacterError: token contains characters outside 0-9a-zA-Z
        DecryptionFailedError: wrong password or truncated token
        CorruptDataError: decrypted data is not a valid gzip stream
        DecodingFailedError: plaintext is not UTF-8 (use decrypt_bytes)
    """
    return decrypt_text(token, password)


__all__ = [
    "CorruptDataError",
    "DecodingFailedError",
    "DecryptionFailedError",
    "EmptyResultError",
    "InvalidCharacterError",
    "KeyMaterial",
    "Pipeline",
    "UltraCompactError",
    "__version__",
    "base62_decode",
    "base62_encode",
    "decrypt",
    "decrypt_bytes",
    "decrypt_file",
    "decrypt_file_async",
    "decrypt_text",
    "decrypt_text_async",
    "derive_key_and_iv",
    "encrypt",
    "encrypt_bytes",
    "encrypt_file",
    "encrypt_file_async",
    "encrypt_text",
    "encrypt_text_async",
    "ultracompact",
]
