"""Password hashing helpers backed by bcrypt."""

import bcrypt

# bcrypt ignores everything past 72 bytes
BCRYPT_MAX_BYTES = 72


def _encode(secret: str) -> bytes:
    return secret.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(secret: str, rounds: int) -> str:
    """Hash a secret with a freshly generated salt.

    Args:
        secret: Plain text secret
        rounds: bcrypt work factor

    Returns:
        bcrypt hash string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(secret), salt).decode("utf-8")


def verify_password(secret: str, hashed: str) -> bool:
    """Check a secret against a stored bcrypt hash.

    Malformed stored hashes never match.
    """
    try:
        return bcrypt.checkpw(_encode(secret), hashed.encode("utf-8"))
    except ValueError:
        return False
