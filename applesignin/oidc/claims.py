"""Unverified decoding of identity tokens returned by the token endpoint.

Signatures are not checked: the id_token arrives over TLS directly from
Apple in the token response. Callers that receive tokens from any other
source must verify them against Apple's JWKS themselves.
"""

from typing import Any

import jwt
from jwt.types import Options

from applesignin.core.errors import InvalidToken

IdentityClaims = dict[str, Any]

_UNVERIFIED: Options = {
    "verify_signature": False,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
}


def extract_claims(id_token: str) -> IdentityClaims:
    """Return every claim in the token payload."""
    try:
        return jwt.decode(id_token, options=_UNVERIFIED)
    except jwt.PyJWTError as exc:
        raise InvalidToken(f"malformed identity token: {exc}") from exc


def extract_subject(id_token: str) -> str:
    """Return the ``sub`` claim, the stable unique identifier of the user."""
    subject = extract_claims(id_token).get("sub")
    if subject is None:
        return ""
    return str(subject)
