"""Unit tests for tenant credential hashing."""

from iam.application.security import hash_password, verify_password


class TestPasswordHashing:
    """Tests for hash_password and verify_password."""

    def test_hash_is_not_plaintext(self):
        hashed = hash_password("s3cret")

        assert hashed != "s3cret"
        assert hashed.startswith("$2")

    def test_verifies_matching_password(self):
        hashed = hash_password("s3cret")

        assert verify_password("s3cret", hashed) is True

    def test_rejects_wrong_password(self):
        hashed = hash_password("s3cret")

        assert verify_password("guess", hashed) is False

    def test_salts_each_hash(self):
        assert hash_password("s3cret") != hash_password("s3cret")

    def test_malformed_hash_does_not_verify(self):
        assert verify_password("s3cret", "not-a-bcrypt-hash") is False

    def test_long_passwords_are_accepted(self):
        password = "x" * 100

        assert verify_password(password, hash_password(password)) is True
