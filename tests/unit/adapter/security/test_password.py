"""Unit tests for ScryptPasswordHasher."""

from roster.adapter.security import ScryptPasswordHasher


class TestScryptPasswordHasher:
    """Tests for ScryptPasswordHasher."""

    def test_hash_verifies(self):
        hasher = ScryptPasswordHasher(n=2**10)

        encoded = hasher.hash("correct horse")

        assert encoded.startswith("scrypt$1024$8$1$")
        assert hasher.verify("correct horse", encoded)
        assert not hasher.verify("wrong horse", encoded)

    def test_salted(self):
        hasher = ScryptPasswordHasher(n=2**10)

        assert hasher.hash("same") != hasher.hash("same")

    def test_malformed_hash_rejected(self):
        hasher = ScryptPasswordHasher(n=2**10)

        assert not hasher.verify("anything", "not-a-hash")
        assert not hasher.verify("anything", "bcrypt$1$2$3$00$00")
