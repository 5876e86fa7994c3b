"""Utilities for password hashing and verification."""

from __future__ import annotations

import bcrypt

DEFAULT_ROUNDS = 10


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a plain text password with a fresh bcrypt salt of the given cost."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Return True when ``plain_password`` matches the stored bcrypt hash.

    A malformed hash is treated as a mismatch rather than an error.
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


__all__ = ["DEFAULT_ROUNDS", "hash_password", "verify_password"]
