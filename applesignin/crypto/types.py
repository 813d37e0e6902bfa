"""Type definitions for client secret signing."""

from pydantic import BaseModel, ConfigDict

APPLE_AUDIENCE = "https://appleid.apple.com"
MAX_SECRET_TTL_DAYS = 180


class SigningIdentity(BaseModel):
    """Developer credentials used to sign a client secret.

    ``private_key_pem`` is the contents of the ``.p8`` file downloaded from
    the developer portal (PKCS8, P-256). ``team_id`` and ``key_id`` are the
    10-character identifiers shown in the portal; ``client_id`` is the
    Services ID, e.g. ``com.example.app``.
    """

    model_config = ConfigDict(frozen=True)

    private_key_pem: str
    team_id: str
    client_id: str
    key_id: str


class ClientSecretClaims(BaseModel):
    """Registered claims carried by a client secret."""

    model_config = ConfigDict(frozen=True)

    iss: str
    sub: str
    aud: str = APPLE_AUDIENCE
    iat: int
    exp: int
