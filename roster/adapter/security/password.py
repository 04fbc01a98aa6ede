"""scrypt password hasher.

Encoded form: ``scrypt$<n>$<r>$<p>$<salt hex>$<hash hex>``.
"""

import hashlib
import hmac
import secrets

from roster.domain.service.credentials import PasswordHasher


class ScryptPasswordHasher(PasswordHasher):
    """PasswordHasher using hashlib.scrypt with a random 16-byte salt."""

    def __init__(self, n: int = 2**14, r: int = 8, p: int = 1) -> None:
        self.n = n
        self.r = r
        self.p = p

    def _derive(self, password: str, salt: bytes, n: int, r: int, p: int) -> bytes:
        return hashlib.scrypt(
            password.encode("utf-8"), salt=salt, n=n, r=r, p=p, dklen=32
        )

    def hash(self, password: str) -> str:
        salt = secrets.token_bytes(16)
        digest = self._derive(password, salt, self.n, self.r, self.p)
        return f"scrypt${self.n}${self.r}${self.p}${salt.hex()}${digest.hex()}"

    def verify(self, password: str, encoded: str) -> bool:
        try:
            scheme, n, r, p, salt_hex, digest_hex = encoded.split("$")
        except ValueError:
            return False
        if scheme != "scrypt":
            return False
        digest = self._derive(
            password, bytes.fromhex(salt_hex), int(n), int(r), int(p)
        )
        return hmac.compare_digest(digest, bytes.fromhex(digest_hex))
