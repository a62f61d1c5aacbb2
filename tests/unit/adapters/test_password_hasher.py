"""Unit tests for `Pbkdf2PasswordHasher`."""

import pytest

from biaslens.adapters.password_hasher import SCHEME, Pbkdf2PasswordHasher

ITERATIONS = 1_000


@pytest.fixture(name="hasher")
def _hasher() -> Pbkdf2PasswordHasher:
    return Pbkdf2PasswordHasher(iterations=ITERATIONS)


def test_hash_format(hasher):
    scheme, iterations, salt, digest = hasher.hash("s3cret").split("$")
    assert scheme == SCHEME
    assert int(iterations) == ITERATIONS
    assert len(salt) == 32  # 16 random bytes, hex
    assert len(digest) == 64  # sha256, hex


def test_hash_never_contains_password(hasher):
    assert "s3cret" not in hasher.hash("s3cret")


def test_same_password_gets_different_salts(hasher):
    assert hasher.hash("s3cret") != hasher.hash("s3cret")


def test_verify_roundtrip(hasher):
    encoded = hasher.hash("s3cret")
    assert hasher.verify("s3cret", encoded)
    assert not hasher.verify("S3cret", encoded)
    assert not hasher.verify("", encoded)


def test_verify_uses_iterations_from_hash(hasher):
    """Hashes made with another iteration count still verify."""
    encoded = Pbkdf2PasswordHasher(iterations=10).hash("s3cret")
    assert hasher.verify("s3cret", encoded)


@pytest.mark.parametrize(
    "encoded",
    [
        "",
        "plaintext",
        "md5$1000$salt$abc",
        "pbkdf2_sha256$notanint$salt$abc",
        "pbkdf2_sha256$0$salt$abc",
        "pbkdf2_sha256$1000$salt",
    ],
)
def test_malformed_hashes_never_match(hasher, encoded):
    assert hasher.verify("plaintext", encoded) is False


def test_rejects_non_positive_iterations():
    with pytest.raises(ValueError):
        Pbkdf2PasswordHasher(iterations=0)
