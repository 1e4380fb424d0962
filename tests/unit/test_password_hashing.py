"""Password hashing helpers."""

from app.infrastructure.security.password import get_password_hash, verify_password


def test_hash_round_trip() -> None:
    hashed = get_password_hash("correct horse", rounds=4)
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)


def test_long_passwords_are_not_truncated() -> None:
    base = "x" * 80
    hashed = get_password_hash(base + "a", rounds=4)
    assert not verify_password(base + "b", hashed)


def test_malformed_hash_is_false() -> None:
    assert verify_password("anything", "not-a-bcrypt-hash") is False
    assert verify_password("anything", "") is False
