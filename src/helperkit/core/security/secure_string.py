"""
In-memory protected strings.

``SecureString`` keeps its contents encrypted with a per-instance Fernet key
so the plaintext never sits in an immutable ``str`` while stored.
``reveal`` converts it back to plaintext through a scratch buffer that is
wiped on every exit path.
"""

from typing import Optional

from cryptography.fernet import Fernet, InvalidToken

from ...exceptions import InvalidArgumentError, NullArgumentError

_ENCODING = "utf-16-le"


def _zero(buffer: bytearray) -> None:
    for i in range(len(buffer)):
        buffer[i] = 0


class SecureString:
    """A mutable secret kept encrypted while at rest in memory."""

    def __init__(self):
        self._fernet = Fernet(Fernet.generate_key())
        self._token = self._fernet.encrypt(b"")
        self._length = 0
        self._read_only = False

    @classmethod
    def from_plaintext(cls, value: str, read_only: bool = True) -> "SecureString":
        """Build a secure string from ``value``."""
        if value is None:
            raise NullArgumentError("value")
        secure = cls()
        for ch in value:
            secure.append_char(ch)
        if read_only:
            secure.make_read_only()
        return secure

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"<SecureString length={self._length} read_only={self._read_only}>"

    @property
    def is_read_only(self) -> bool:
        return self._read_only

    def _check_writable(self) -> None:
        if self._read_only:
            raise InvalidArgumentError("secure_string", "instance is read-only")

    def append_char(self, ch: str) -> None:
        """Append a single character."""
        self._check_writable()
        if ch is None:
            raise NullArgumentError("ch")
        if len(ch) != 1:
            raise InvalidArgumentError("ch", "expected a single character")

        buffer = self._decrypt_to_buffer()
        try:
            buffer.extend(ch.encode(_ENCODING))
            self._token = self._fernet.encrypt(bytes(buffer))
            self._length += 1
        finally:
            _zero(buffer)

    def clear(self) -> None:
        """Remove all characters."""
        self._check_writable()
        self._token = self._fernet.encrypt(b"")
        self._length = 0

    def make_read_only(self) -> None:
        self._read_only = True

    def _decrypt_to_buffer(self) -> bytearray:
        return bytearray(self._fernet.decrypt(self._token))


def reveal(secure_string: Optional[SecureString]) -> str:
    """Return the plaintext held by ``secure_string``.

    The decrypted bytes are copied into a scratch ``bytearray`` that is zeroed
    before returning, whether decoding succeeds or fails.

    Raises:
        NullArgumentError: If ``secure_string`` is None.
        InvalidArgumentError: If the stored token cannot be decrypted.
    """
    if secure_string is None:
        raise NullArgumentError("secure_string")

    buffer = bytearray()
    try:
        buffer = secure_string._decrypt_to_buffer()
        return buffer.decode(_ENCODING)
    except InvalidToken as e:
        raise InvalidArgumentError("secure_string", "stored value could not be decrypted") from e
    finally:
        _zero(buffer)
