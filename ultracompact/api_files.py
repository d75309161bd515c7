"""File-oriented convenience wrappers."""

import sys
import warnings

from .main import ultracompact


def _with_friendly_interrupt(fn, *args, **kwargs):
    try:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", RuntimeWarning)
            result = fn(*args, **kwargs)
        for item in caught:
            msg = str(item.message).strip()
            if msg:
                print(f"⚠ {msg}", file=sys.stderr)
        return result
    except KeyboardInterrupt:
        raise KeyboardInterrupt("Exiting...") from None


def encrypt_file(
    src: str,
    dest: str | None = None,
    password: str | bytes = "",
    *,
    verify: bool = False,
):
    return _with_friendly_interrupt(
        ultracompact.encrypt_file,
        src,
        dest,
        password,
        verify=verify,
    )


def decrypt_file(src: str, dest: str | None = None, password: str | bytes = ""):
    return _with_friendly_interrupt(ultracompact.decrypt_file, src, dest, password)


async def encrypt_file_async(
    src: str,
    dest: str | None = None,
    password: str | bytes = "",
    *,
    verify: bool = False,
):
    return encrypt_file(src, dest, password, verify=verify)


async def decrypt_file_async(src: str, dest: str | None = None, password: str | bytes = ""):
    return decrypt_file(src, dest, password)


__all__ = [
    "decrypt_file",
    "decrypt_file_async",
    "encrypt_file",
    "encrypt_file_async",
]
