"""Password hashing for stored user passwords (bcrypt over a SHA-256 digest).

bcrypt only reads the first 72 bytes of its input, so the password is
digested first and the base64 digest (44 bytes) is what bcrypt sees.

The service only writes hashes; verify_password is the check a login flow
would use before raising InvalidCredentialsException, and is kept next to
get_password_hash so the two stay in step.
"""

import base64
import hashlib

import bcrypt

BCRYPT_ROUNDS = 12


def _digest(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def get_password_hash(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Return the bcrypt hash stored in users.password."""
    hashed = bcrypt.hashpw(_digest(password), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches a hash from get_password_hash.

    Malformed or empty stored hashes compare as False.
    """
    try:
        return bool(
            bcrypt.checkpw(_digest(plain_password), hashed_password.encode("utf-8"))
        )
    except (ValueError, TypeError):
        return False
