import pytest

from src.ponto_inteligente.ponto_inteligente.core.exceptions import HashingError
from src.ponto_inteligente.ponto_inteligente.security.passwords import PasswordHasher, hash_password, verify_password


def test_same_secret_hashes_differently_each_time():
    first = hash_password("p@ss", method="pbkdf2:sha256:1000")
    second = hash_password("p@ss", method="pbkdf2:sha256:1000")

    assert first != second
    assert "p@ss" not in (first, second)
    assert verify_password("p@ss", first)
    assert verify_password("p@ss", second)


def test_verify_rejects_wrong_secret():
    hashed = PasswordHasher("pbkdf2:sha256:1000")("right")

    assert not verify_password("wrong", hashed)


def test_verify_tolerates_placeholder_hash():
    assert verify_password("anything", "CHANGE_ME") is False


def test_unknown_algorithm_raises_hashing_error():
    with pytest.raises(HashingError):
        hash_password("p@ss", method="nope:nothing")
