"""Password hashing port."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Derives and checks stored password credentials."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return an encoded hash suitable for storage."""
        pass

    @abstractmethod
    def verify(self, password: str, encoded: str) -> bool:
        """Check ``password`` against a hash produced by ``hash``."""
        pass
