"""Password hashing utilities (bcrypt)."""

import bcrypt


def hash_password(plain: str, rounds: int = 12) -> str:
    """Hash a plaintext password.

    Args:
        plain: Plaintext password
        rounds: bcrypt cost factor

    Returns:
        bcrypt hash as text
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(plain.encode("utf-8"), salt).decode()


def check_password(plain: str, hashed: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
