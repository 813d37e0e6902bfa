"""Client and signing settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from applesignin.crypto.types import MAX_SECRET_TTL_DAYS, SigningIdentity

VALIDATION_URL_DEFAULT = "https://appleid.apple.com/auth/token"
REVOKE_URL_DEFAULT = "https://appleid.apple.com/auth/revoke"
USER_AGENT_DEFAULT = "python-signin-with-apple"
TIMEOUT_DEFAULT = 5.0


class ClientSettings(BaseSettings):
    """Endpoints and transport settings for the token client."""

    model_config = SettingsConfigDict(env_prefix="APPLE_SIGNIN_")

    validation_url: str = VALIDATION_URL_DEFAULT
    revoke_url: str = REVOKE_URL_DEFAULT
    timeout: float = TIMEOUT_DEFAULT
    # Apple rejects requests without a recognizable user agent
    user_agent: str = USER_AGENT_DEFAULT


class SigningSettings(BaseSettings):
    """Signing identity for client secret generation."""

    model_config = SettingsConfigDict(env_prefix="APPLE_SIGNIN_")

    team_id: str = ""
    client_id: str = ""
    key_id: str = ""
    private_key: str = ""
    secret_ttl_days: int = MAX_SECRET_TTL_DAYS

    def to_identity(self) -> SigningIdentity:
        """Build the signing identity passed to secret generation."""
        return SigningIdentity(
            private_key_pem=self.private_key,
            team_id=self.team_id,
            client_id=self.client_id,
            key_id=self.key_id,
        )
