"""Shared test fixtures for applesignin."""

import os
from collections.abc import Callable

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from applesignin.crypto.types import SigningIdentity

TEAM_ID = "1234567890"
CLIENT_ID = "com.example.app"
KEY_ID = "0987654321"


def _ec_pem(
    curve: ec.EllipticCurve, fmt: serialization.PrivateFormat
) -> str:
    key = ec.generate_private_key(curve)
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=fmt,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep APPLE_SIGNIN_* variables from the host out of settings."""
    for name in list(os.environ):
        if name.startswith("APPLE_SIGNIN_"):
            monkeypatch.delenv(name)


@pytest.fixture
def p256_pkcs8_pem() -> str:
    """A fresh P-256 private key in PKCS8 PEM, like a downloaded .p8 file."""
    return _ec_pem(ec.SECP256R1(), serialization.PrivateFormat.PKCS8)


@pytest.fixture
def make_ec_pem() -> Callable[[ec.EllipticCurve, serialization.PrivateFormat], str]:
    """Factory for EC keys on other curves or in other encodings."""
    return _ec_pem


@pytest.fixture
def identity(p256_pkcs8_pem: str) -> SigningIdentity:
    """A signing identity backed by a fresh P-256 key."""
    return SigningIdentity(
        private_key_pem=p256_pkcs8_pem,
        team_id=TEAM_ID,
        client_id=CLIENT_ID,
        key_id=KEY_ID,
    )
