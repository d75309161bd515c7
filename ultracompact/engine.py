# ULTRACOMPACT ENCRYPTION ENGINE ->

import os as _os_module
import sys as _sys_module
import warnings as _warnings_module


class UltraCompactError(ValueError):
    """Base class for every pipeline failure."""

    kind = "error"


class InvalidCharacterError(UltraCompactError):
    kind = "invalid_character"

    def __init__(self, char: str, position: int):
        super().__init__(f"Invalid character in encrypted text: {char!r} at position {position}")
        self.char = char
        self.position = position


class DecryptionFailedError(UltraCompactError):
    """Block-cipher decryption rejected the payload (usually a wrong password)."""

    kind = "decryption_failed"


class EmptyResultError(DecryptionFailedError):
    kind = "empty_result"


class CorruptDataError(UltraCompactError):
    """The decrypted payload is not a valid gzip container."""

    kind = "corrupt_data"


class DecodingFailedError(UltraCompactError):
    kind = "decoding_failed"


class ultracompact:
    import gzip
    import hashlib
    import pathlib
    import tempfile
    import typing
    import zlib
    import os
    from cryptography.hazmat.primitives import padding
    from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

    @staticmethod
    def _env_int(name: str) -> "ultracompact.typing.Optional[int]":
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return None
        if parsed < 0:
            return None
        return parsed

    ENGINE_VERSION = "1.0.0"
    BASE62_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
    BASE62_BASE = 62
    BASE62_WORD_DIGITS = 10  # 62**10 < 2**60
    BASE62_WORD = BASE62_BASE ** BASE62_WORD_DIGITS
    AES_BLOCK_SIZE = 16
    KEY_LEN = 32
    IV_LEN = 16
    GZIP_WBITS = 31  # zlib gzip wrapper: mtime 0, no name
    GZIP_LEVEL_DEFAULT = 6  # same as `gzip -c` and zlib.gzipSync
    _GZIP_LEVEL_ENV = _env_int("ULTRACOMPACT_GZIP_LEVEL")
    GZIP_LEVEL = _GZIP_LEVEL_ENV if _GZIP_LEVEL_ENV is not None and _GZIP_LEVEL_ENV <= 9 else GZIP_LEVEL_DEFAULT
    MAX_INPUT_BYTES = _env_int("ULTRACOMPACT_MAX_INPUT_BYTES") or 32 * 1024 * 1024
    ENC_SUFFIX = ".enc"
    DEC_SUFFIX = ".dec"

    _BASE62_INDEX = {ch: idx for idx, ch in enumerate(BASE62_ALPHABET)}

    class KeyMaterial(typing.NamedTuple):
        key: bytes
        iv: bytes

    @staticmethod
    def _human_readable_size(num_bytes: int) -> str:
        value = float(num_bytes)
        for unit in ("B", "KiB", "MiB", "GiB"):
            if value < 1024 or unit == "GiB":
                return f"{value:.2f} {unit}" if unit != "B" else f"{int(value)} {unit}"
            value /= 1024
        return f"{num_bytes} B"

    @staticmethod
    def _coerce_password_bytes(
        password: "ultracompact.typing.Union[str, bytes, bytearray, memoryview]"
    ) -> bytes:
        if isinstance(password, (bytes, bytearray, memoryview)):
            return bytes(password)
        if password is None:
            raise TypeError("password must be str or bytes, not None")
        return str(password).encode("utf-8")

    @staticmethod
    def _normalize_path(path_like: "ultracompact.typing.Union[str, ultracompact.pathlib.Path]") -> "ultracompact.pathlib.Path":
        if isinstance(path_like, ultracompact.pathlib.Path):
            path = path_like
        else:
            path = ultracompact.pathlib.Path(str(path_like))
        path = path.expanduser()
        try:
            return path.resolve(strict=False)
        except OSError:
            return path

    @staticmethod
    def _ensure_existing_file(path: "ultracompact.pathlib.Path") -> None:
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")

    @staticmethod
    def _ensure_size_limit(path: "ultracompact.pathlib.Path", max_bytes: int = None) -> None:
        limit = max_bytes or ultracompact.MAX_INPUT_BYTES
        size = path.stat().st_size
        if size > limit:
            human_size = ultracompact._human_readable_size(size)
            human_limit = ultracompact._human_readable_size(limit)
            raise ValueError(
                f"{path.name} is {human_size}, exceeding the {human_limit} limit for this mode"
            )

    @staticmethod
    def _write_atomic(path: "ultracompact.pathlib.Path", data: bytes) -> int:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = ultracompact.tempfile.NamedTemporaryFile('w+b', dir=path.parent, delete=False)
        tmp_path = ultracompact.pathlib.Path(tmp.name)
        try:
            with tmp:
                tmp.write(data)
            ultracompact.os.replace(tmp_path, path)
        except BaseException:
            try:
                tmp_path.unlink()
            except FileNotFoundError:
                pass
            raise
        return len(data)

    @staticmethod
    def default_encrypt_output(src: "ultracompact.typing.Union[str, ultracompact.pathlib.Path]") -> "ultracompact.pathlib.Path":
        path = ultracompact.pathlib.Path(src)
        return path.with_name(path.name + ultracompact.ENC_SUFFIX)

    @staticmethod
    def default_decrypt_output(src: "ultracompact.typing.Union[str, ultracompact.pathlib.Path]") -> "ultracompact.pathlib.Path":
        path = ultracompact.pathlib.Path(src)
        if path.suffix == ultracompact.ENC_SUFFIX:
            return path.with_suffix(ultracompact.DEC_SUFFIX)
        return path.with_name(path.name + ultracompact.DEC_SUFFIX)

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    class Base62Codec:
        """Big-endian bytes <-> base62 text over ``0-9a-zA-Z``.

        Leading zero bytes carry no magnitude and are not preserved; an
        all-zero or empty input encodes as ``"0"``.
        """

        def encode(self, data: bytes) -> str:
            value = int.from_bytes(bytes(data), "big")
            if value == 0:
                return "0"
            alphabet = ultracompact.BASE62_ALPHABET
            width = ultracompact.BASE62_WORD_DIGITS
            words: "list[int]" = []
            while value:
                value, word = divmod(value, ultracompact.BASE62_WORD)
                words.append(word)
            out: "list[str]" = []
            for word in reversed(words):
                digits = [""] * width
                for pos in range(width - 1, -1, -1):
                    word, rem = divmod(word, ultracompact.BASE62_BASE)
                    digits[pos] = alphabet[rem]
                out.append("".join(digits))
            return "".join(out).lstrip("0")

        def decode(self, text: str) -> bytes:
            index = ultracompact._BASE62_INDEX
            width = ultracompact.BASE62_WORD_DIGITS
            value = 0
            head = len(text) % width or width
            start = 0
            end = min(head, len(text))
            while start < len(text):
                word = 0
                for offset, ch in enumerate(text[start:end]):
                    digit = index.get(ch)
                    if digit is None:
                        raise InvalidCharacterError(ch, start + offset)
                    word = word * ultracompact.BASE62_BASE + digit
                value = value * ultracompact.BASE62_BASE ** (end - start) + word
                start, end = end, end + width
            length = max(1, (value.bit_length() + 7) // 8)
            return value.to_bytes(length, "big")

    class PasswordKeyDeriver:
        """Unsalted SHA-256 key and MD5 IV, as ``openssl dgst`` produces them."""

        def derive(
            self,
            password: "ultracompact.typing.Union[str, bytes, bytearray, memoryview]"
        ) -> "ultracompact.KeyMaterial":
            pw = ultracompact._coerce_password_bytes(password)
            if not pw:
                _warnings_module.warn(
                    "Empty password: key and IV are derived from an empty string",
                    RuntimeWarning
                )
            key = ultracompact.hashlib.sha256(pw).digest()
            iv = ultracompact.hashlib.md5(pw, usedforsecurity=False).digest()
            return ultracompact.KeyMaterial(key, iv)

    class GzipCompressor:
        def __init__(self, level: "ultracompact.typing.Optional[int]" = None) -> None:
            self.level = ultracompact.GZIP_LEVEL if level is None else int(level)
            if not 0 <= self.level <= 9:
                raise ValueError(f"gzip level must be between 0 and 9, got {self.level}")

        def compress(self, data: bytes) -> bytes:
            compressor = ultracompact.zlib.compressobj(
                self.level,
                ultracompact.zlib.DEFLATED,
                ultracompact.GZIP_WBITS
            )
            return compressor.compress(bytes(data)) + compressor.flush()

        def decompress(self, blob: bytes) -> bytes:
            try:
                return ultracompact.gzip.decompress(bytes(blob))
            except (OSError, EOFError, ultracompact.zlib.error) as exc:
                raise CorruptDataError(f"Decompression failed: {exc}") from exc

    class AesCbcCipher:
        def _cipher(self, key: bytes, iv: bytes):
            if len(key) != ultracompact.KEY_LEN:
                raise ValueError(f"AES-256 key must be {ultracompact.KEY_LEN} bytes, got {len(key)}")
            if len(iv) != ultracompact.IV_LEN:
                raise ValueError(f"CBC IV must be {ultracompact.IV_LEN} bytes, got {len(iv)}")
            return ultracompact.Cipher(ultracompact.algorithms.AES(key), ultracompact.modes.CBC(iv))

        def encrypt(self, data: bytes, key: bytes, iv: bytes) -> bytes:
            encryptor = self._cipher(key, iv).encryptor()
            padder = ultracompact.padding.PKCS7(ultracompact.AES_BLOCK_SIZE * 8).padder()
            padded = padder.update(bytes(data)) + padder.finalize()
            return encryptor.update(padded) + encryptor.finalize()

        def decrypt(self, blob: bytes, key: bytes, iv: bytes) -> bytes:
            cipher = self._cipher(key, iv)
            if not blob or len(blob) % ultracompact.AES_BLOCK_SIZE:
                raise DecryptionFailedError(
                    f"Ciphertext length {len(blob)} is not a multiple of the "
                    f"{ultracompact.AES_BLOCK_SIZE}-byte block size"
                )
            decryptor = cipher.decryptor()
            padded = decryptor.update(bytes(blob)) + decryptor.finalize()
            unpadder = ultracompact.padding.PKCS7(ultracompact.AES_BLOCK_SIZE * 8).unpadder()
            try:
                return unpadder.update(padded) + unpadder.finalize()
            except ValueError as exc:
                raise DecryptionFailedError("Decryption failed: bad padding (wrong password?)") from exc

    # ------------------------------------------------------------------
    # Orchestrator
    # ------------------------------------------------------------------

    class Pipeline:
        """compress -> encrypt -> base62, and the inverse chain.

        Stages are injected; omitted ones get the production implementation.
        """

        def __init__(
            self,
            *,
            codec: "ultracompact.typing.Optional[ultracompact.Base62Codec]" = None,
            deriver: "ultracompact.typing.Optional[ultracompact.PasswordKeyDeriver]" = None,
            compressor: "ultracompact.typing.Optional[ultracompact.GzipCompressor]" = None,
            cipher: "ultracompact.typing.Optional[ultracompact.AesCbcCipher]" = None,
            max_input_bytes: "ultracompact.typing.Optional[int]" = None
        ) -> None:
            self.codec = codec or ultracompact.Base62Codec()
            self.deriver = deriver or ultracompact.PasswordKeyDeriver()
            self.compressor = compressor or ultracompact.GzipCompressor()
            self.cipher = cipher or ultracompact.AesCbcCipher()
            self.max_input_bytes = max_input_bytes or ultracompact.MAX_INPUT_BYTES

        def _realign(self, blob: bytes) -> bytes:
            # CBC output is block-aligned; restore leading zero bytes lost by the integer form
            block = ultracompact.AES_BLOCK_SIZE
            short = -len(blob) % block
            if short:
                return bytes(short) + blob
            return blob

        def encrypt_bytes(self, data: bytes, password) -> str:
            material = self.deriver.derive(password)
            compressed = self.compressor.compress(data)
            ciphertext = self.cipher.encrypt(compressed, material.key, material.iv)
            return self.codec.encode(ciphertext)

        def decrypt_bytes(self, token: str, password) -> bytes:
            ciphertext = self._realign(self.codec.decode(str(token).strip()))
            material = self.deriver.derive(password)
            compressed = self.cipher.decrypt(ciphertext, material.key, material.iv)
            if not compressed:
                raise EmptyResultError("Decryption produced no data (wrong password?)")
            return self.compressor.decompress(compressed)

        def encrypt_text(self, plaintext: str, password) -> str:
            if isinstance(plaintext, (bytes, bytearray, memoryview)):
                return self.encrypt_bytes(bytes(plaintext), password)
            return self.encrypt_bytes(plaintext.encode("utf-8"), password)

        def decrypt_text(self, token: str, password) -> str:
            data = self.decrypt_bytes(token, password)
            try:
                return data.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise DecodingFailedError(f"Decrypted data is not valid UTF-8 text: {exc}") from exc

        def encrypt_file(self, src, dest=None, password="", *, verify: bool = False) -> int:
            path = ultracompact._normalize_path(src)
            ultracompact._ensure_existing_file(path)
            ultracompact._ensure_size_limit(path, self.max_input_bytes)
            data = path.read_bytes()
            token = self.encrypt_bytes(data, password)
            if verify and self.decrypt_bytes(token, password) != data:
                raise CorruptDataError("Self-check failed: token does not decrypt to the input")
            out_path = ultracompact._normalize_path(dest) if dest else ultracompact.default_encrypt_output(path)
            return ultracompact._write_atomic(out_path, (token + "\n").encode("utf-8"))

        def decrypt_file(self, src, dest=None, password="") -> int:
            path = ultracompact._normalize_path(src)
            ultracompact._ensure_existing_file(path)
            ultracompact._ensure_size_limit(path, self.max_input_bytes)
            raw = path.read_bytes()
            try:
                token = raw.decode("utf-8").strip()
            except UnicodeDecodeError as exc:
                bad = raw[exc.start:exc.start + 1].decode("latin-1")
                raise InvalidCharacterError(bad, exc.start) from exc
            data = self.decrypt_bytes(token, password)
            out_path = ultracompact._normalize_path(dest) if dest else ultracompact.default_decrypt_output(path)
            return ultracompact._write_atomic(out_path, data)

    @staticmethod
    def _pipeline() -> "ultracompact.Pipeline":
        return ultracompact.Pipeline()

    # ------------------------------------------------------------------
    # Public surface
    # ------------------------------------------------------------------

    @staticmethod
    def base62_encode(data: bytes) -> str:
        return ultracompact.Base62Codec().encode(data)

    @staticmethod
    def base62_decode(text: str) -> bytes:
        return ultracompact.Base62Codec().decode(text)

    @staticmethod
    def derive_key_and_iv(password) -> "ultracompact.KeyMaterial":
        return ultracompact.PasswordKeyDeriver().derive(password)

    @staticmethod
    def compress(data: bytes) -> bytes:
        return ultracompact.GzipCompressor().compress(data)

    @staticmethod
    def decompress(blob: bytes) -> bytes:
        return ultracompact.GzipCompressor().decompress(blob)

    @staticmethod
    def aes_encrypt(data: bytes, key: bytes, iv: bytes) -> bytes:
        return ultracompact.AesCbcCipher().encrypt(data, key, iv)

    @staticmethod
    def aes_decrypt(blob: bytes, key: bytes, iv: bytes) -> bytes:
        return ultracompact.AesCbcCipher().decrypt(blob, key, iv)

    @staticmethod
    def encrypt_bytes(data: bytes, password) -> str:
        return ultracompact._pipeline().encrypt_bytes(data, password)

    @staticmethod
    def decrypt_bytes(token: str, password) -> bytes:
        return ultracompact._pipeline().decrypt_bytes(token, password)

    @staticmethod
    def encrypt_text(plaintext: str, password) -> str:
        """Compress, encrypt and base62-encode ``plaintext``.

        The result is deterministic: the same text and password always give
        the same token.
        """
        return ultracompact._pipeline().encrypt_text(plaintext, password)

    @staticmethod
    def decrypt_text(token: str, password) -> str:
        """Reverse :meth:`encrypt_text`.

        Raises:
            InvalidCharacterError: token is not base62
            DecryptionFailedError: padding check failed (EmptyResultError if nothing was left)
            CorruptDataError: decrypted bytes are not a valid gzip container
            DecodingFailedError: plaintext is not UTF-8
        """
        return ultracompact._pipeline().decrypt_text(token, password)

    @staticmethod
    def encrypt_file(src, dest=None, password="", *, verify: bool = False) -> int:
        return ultracompact._pipeline().encrypt_file(src, dest, password, verify=verify)

    @staticmethod
    def decrypt_file(src, dest=None, password="") -> int:
        return ultracompact._pipeline().decrypt_file(src, dest, password)

    @staticmethod
    async def encrypt_text_async(plaintext: str, password) -> str:
        return ultracompact.encrypt_text(plaintext, password)

    @staticmethod
    async def decrypt_text_async(token: str, password) -> str:
        return ultracompact.decrypt_text(token, password)

    @staticmethod
    async def encrypt_file_async(src, dest=None, password="", *, verify: bool = False) -> int:
        return ultracompact.encrypt_file(src, dest, password, verify=verify)

    @staticmethod
    async def decrypt_file_async(src, dest=None, password="") -> int:
        return ultracompact.decrypt_file(src, dest, password)


def cli(argv=None) -> int:
    import argparse

    def _cli_config_path() -> "ultracompact.pathlib.Path":
        cfg = _os_module.getenv("ULTRACOMPACT_CLI_CONFIG")
        if cfg:
            return ultracompact.pathlib.Path(cfg).expanduser()
        xdg = _os_module.getenv("XDG_CONFIG_HOME")
        if xdg:
            return ultracompact.pathlib.Path(xdg) / "ultracompact" / "cli.conf"
        appdata = _os_module.getenv("APPDATA")
        if appdata:
            return ultracompact.pathlib.Path(appdata) / "ultracompact" / "cli.conf"
        return ultracompact.pathlib.Path("~/.config/ultracompact/cli.conf").expanduser()

    def _cli_plain_mode() -> bool:
        if _os_module.getenv("ULTRACOMPACT_CLI_PLAIN"):
            return True
        if _os_module.getenv("NO_COLOR"):
            return True
        style = (_os_module.getenv("ULTRACOMPACT_CLI_STYLE") or "").strip().lower()
        if style in {"plain", "boring", "0", "false", "off"}:
            return True
        if style in {"color", "on"}:
            return False
        cfg_path = _cli_config_path()
        try:
            if cfg_path.exists():
                data = cfg_path.read_text(encoding="utf-8").lower()
                if "plain=1" in data or "plain=true" in data or "style=plain" in data:
                    return True
        except OSError:
            pass
        return not _sys_module.stdout.isatty()

    class _CliTheme:
        # status -> ANSI colour code
        CODES = {"ok": 32, "warn": 33, "err": 31, "info": 36}

        def __init__(self, plain: bool):
            self.plain = plain

        def _paint(self, status: str, msg: str) -> str:
            if self.plain:
                return msg
            return f"\033[{self.CODES[status]}m{msg}\033[0m"

        def ok(self, msg: str) -> str:
            return self._paint("ok", msg)

        def warn(self, msg: str) -> str:
            return self._paint("warn", msg)

        def err(self, msg: str) -> str:
            return self._paint("err", msg)

        def info(self, msg: str) -> str:
            return self._paint("info", msg)

    theme = _CliTheme(_cli_plain_mode())

    def _fail(msg: str) -> int:
        print(theme.err(msg), file=_sys_module.stderr)
        return 1

    parser = argparse.ArgumentParser(
        prog="ultracompact",
        description="Ultra-compact alphanumeric encryption (gzip + AES-256-CBC + base62)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text, text_help, file_help in (
        ("encrypt", "Encrypt text or a file into a base62 token",
         "Text to encrypt", "File to encrypt"),
        ("decrypt", "Decrypt a base62 token or token file",
         "Encrypted token", "Encrypted token file"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        source = sub.add_mutually_exclusive_group(required=True)
        source.add_argument("-t", "--text", default=None, help=text_help)
        source.add_argument("-f", "--file", default=None, help=file_help)
        sub.add_argument("-p", "--password", required=True, help="Password (required)")
        sub.add_argument("-o", "--output", default=None, help="Output file (optional)")
        if name == "encrypt":
            sub.add_argument(
                "--verify",
                action="store_true",
                help="Decrypt the token in memory before writing it"
            )

    b62_enc = subparsers.add_parser("b62-enc", help="Encode hex bytes as base62")
    b62_enc.add_argument("hex", help="Hex input")

    b62_dec = subparsers.add_parser("b62-dec", help="Decode base62 into hex bytes")
    b62_dec.add_argument("token", help="Base62 input")

    derive = subparsers.add_parser("derive", help="Print the key and IV derived from a password")
    derive.add_argument("-p", "--password", required=True, help="Password")

    args = parser.parse_args(argv)

    if args.command == "b62-enc":
        try:
            print(ultracompact.base62_encode(bytes.fromhex(args.hex)))
            return 0
        except ValueError as exc:
            return _fail(f"base62 encode failed: {exc}")

    if args.command == "b62-dec":
        try:
            print(ultracompact.base62_decode(args.token).hex())
            return 0
        except UltraCompactError as exc:
            return _fail(f"base62 decode failed: {exc}")

    if args.command == "derive":
        material = ultracompact.derive_key_and_iv(args.password)
        print(f"key={material.key.hex()}")
        print(f"iv={material.iv.hex()}")
        return 0

    if args.command in ("encrypt", "decrypt") and not args.password:
        return _fail("Password required")

    if args.command == "encrypt":
        try:
            if args.text is not None:
                token = ultracompact.encrypt_text(args.text, args.password)
                if args.verify and ultracompact.decrypt_text(token, args.password) != args.text:
                    return _fail("Self-check failed: token does not decrypt to the input")
                if args.output:
                    out_path = ultracompact._normalize_path(args.output)
                    ultracompact._write_atomic(out_path, (token + "\n").encode("utf-8"))
                    print(theme.ok(f"Encrypted text saved to: {out_path}"))
                else:
                    print(theme.warn("Encrypted:"))
                    print(token)
                    print(theme.info(f"Length: {len(token)} characters"))
                return 0
            out_path = args.output or ultracompact.default_encrypt_output(args.file)
            written = ultracompact.encrypt_file(args.file, out_path, args.password, verify=args.verify)
            print(theme.ok(f"File encrypted: {out_path}"))
            print(theme.info(f"Length: {written - 1} characters"))
            return 0
        except (UltraCompactError, OSError, ValueError) as exc:
            return _fail(f"Encryption failed: {exc}")

    if args.command == "decrypt":
        try:
            if args.text is not None:
                if args.output:
                    data = ultracompact.decrypt_bytes(args.text, args.password)
                    out_path = ultracompact._normalize_path(args.output)
                    ultracompact._write_atomic(out_path, data)
                    print(theme.ok(f"Saved to: {out_path}"))
                else:
                    plaintext = ultracompact.decrypt_text(args.text, args.password)
                    print(theme.warn("Decrypted:"))
                    print(plaintext)
                return 0
            out_path = args.output or ultracompact.default_decrypt_output(args.file)
            written = ultracompact.decrypt_file(args.file, out_path, args.password)
            print(theme.ok(f"File decrypted: {out_path} ({written} bytes)"))
            return 0
        except FileNotFoundError as exc:
            return _fail(str(exc))
        except (UltraCompactError, OSError, ValueError) as exc:
            return _fail(f"Decryption failed: {exc}")

    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
