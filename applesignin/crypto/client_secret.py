"""Client secret generation: an ES256-signed JWT assertion."""

import logging
from datetime import UTC, datetime, timedelta

import jwt

from applesignin.core.errors import InvalidKey, InvalidParameter
from applesignin.crypto.keys import load_signing_key
from applesignin.crypto.types import (
    MAX_SECRET_TTL_DAYS,
    ClientSecretClaims,
    SigningIdentity,
)

logger = logging.getLogger(__name__)


def build_claims(
    identity: SigningIdentity, ttl_days: int, now: datetime | None = None
) -> ClientSecretClaims:
    """Build the claims of a client secret valid for ``ttl_days`` days."""
    issued_at = (now or datetime.now(UTC)).replace(microsecond=0)
    expires_at = issued_at + timedelta(days=ttl_days)
    return ClientSecretClaims(
        iss=identity.team_id,
        sub=identity.client_id,
        iat=int(issued_at.timestamp()),
        exp=int(expires_at.timestamp()),
    )


def generate_client_secret(
    identity: SigningIdentity, ttl_days: int = MAX_SECRET_TTL_DAYS
) -> str:
    """Sign a client secret for the token and revoke endpoints.

    Apple refuses secrets that live longer than 180 days, so larger
    ``ttl_days`` values are rejected before the key is touched. Expiry is
    computed in whole UTC days from the issue time. The returned secret is
    not cached; callers track its expiry and mint a new one as needed.
    """
    if ttl_days > MAX_SECRET_TTL_DAYS:
        raise InvalidParameter(
            f"ttl cannot be longer than {MAX_SECRET_TTL_DAYS} days, got {ttl_days}"
        )
    if ttl_days < 1:
        raise InvalidParameter(f"ttl must be at least 1 day, got {ttl_days}")

    key = load_signing_key(identity.private_key_pem)
    claims = build_claims(identity, ttl_days)
    try:
        secret = jwt.encode(
            claims.model_dump(),
            key,
            algorithm="ES256",
            headers={"kid": identity.key_id},
        )
    except (jwt.PyJWTError, ValueError, TypeError) as exc:
        raise InvalidKey(f"cannot sign client secret: {exc}") from exc

    logger.debug(
        "Generated client secret for kid=%s ttl_days=%d", identity.key_id, ttl_days
    )
    return secret
