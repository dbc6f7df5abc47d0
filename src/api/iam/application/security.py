"""Credential hashing for tenant secrets.

Uses bcrypt with a per-hash random salt. Plaintext secrets are never stored
or logged.
"""

import bcrypt

# bcrypt only considers the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a tenant password using bcrypt.

    The work factor is determined by bcrypt's gensalt().

    Args:
        password: The plaintext password

    Returns:
        The bcrypt hash as a string
    """
    return bcrypt.hashpw(password.encode()[:BCRYPT_MAX_BYTES], bcrypt.gensalt()).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash using constant-time comparison.

    Args:
        password: The plaintext password to verify
        password_hash: The bcrypt hash to verify against

    Returns:
        True if the password matches the hash, False otherwise (including
        when the stored hash is malformed)
    """
    try:
        return bcrypt.checkpw(password.encode()[:BCRYPT_MAX_BYTES], password_hash.encode())
    except ValueError:
        return False
