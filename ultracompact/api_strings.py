"""String/byte codec convenience wrappers."""

from .main import ultracompact


def base62_encode(data: bytes):
    return ultracompact.base62_encode(data)


def base62_decode(text: str):
    return ultracompact.base62_decode(text)


def derive_key_and_iv(password: str | bytes):
    return ultracompact.derive_key_and_iv(password)


def encrypt_text(plaintext: str, password: str | bytes):
    return ultracompact.encrypt_text(plaintext, password)


def decrypt_text(token: str, password: str | bytes):
    return ultracompact.decrypt_text(token, password)


def encrypt_bytes(data: bytes, password: str | bytes):
    return ultracompact.encrypt_bytes(data, password)


def decrypt_bytes(token: str, password: str | bytes):
    return ultracompact.decrypt_bytes(token, password)


async def encrypt_text_async(plaintext: str, password: str | bytes):
    return await ultracompact.encrypt_text_async(plaintext, password)


async def decrypt_text_async(token: str, password: str | bytes):
    return await ultracompact.decrypt_text_async(token, password)


__all__ = [
    "base62_decode",
    "base62_encode",
    "decrypt_bytes",
    "decrypt_text",
    "decrypt_text_async",
    "derive_key_and_iv",
    "encrypt_bytes",
    "encrypt_text",
    "encrypt_text_async",
]
