"""Type definitions for token endpoint requests and responses."""

from typing import Annotated, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

Endpoint = Literal["validation", "revoke"]


class _ClientCredentials(BaseModel):
    """Credentials shared by every token endpoint request."""

    model_config = ConfigDict(frozen=True)

    endpoint: ClassVar[Endpoint]

    client_id: str
    client_secret: str

    def form_fields(self) -> dict[str, str]:
        """Return the form fields sent for this request."""
        return {"client_id": self.client_id, "client_secret": self.client_secret}


class WebAuthRequest(_ClientCredentials):
    """Authorization code obtained through the web redirect flow."""

    endpoint: ClassVar[Endpoint] = "validation"
    kind: Literal["web_auth"] = "web_auth"

    code: str
    redirect_uri: str

    def form_fields(self) -> dict[str, str]:
        return {
            **super().form_fields(),
            "code": self.code,
            "redirect_uri": self.redirect_uri,
            "grant_type": "authorization_code",
        }


class AppAuthRequest(_ClientCredentials):
    """Authorization code obtained by a native app."""

    endpoint: ClassVar[Endpoint] = "validation"
    kind: Literal["app_auth"] = "app_auth"

    code: str

    def form_fields(self) -> dict[str, str]:
        return {
            **super().form_fields(),
            "code": self.code,
            "grant_type": "authorization_code",
        }


class RefreshGrantRequest(_ClientCredentials):
    """Refresh token exchanged for a new access token."""

    endpoint: ClassVar[Endpoint] = "validation"
    kind: Literal["refresh_grant"] = "refresh_grant"

    refresh_token: str

    def form_fields(self) -> dict[str, str]:
        return {
            **super().form_fields(),
            "refresh_token": self.refresh_token,
            "grant_type": "refresh_token",
        }


class RevokeAccessRequest(_ClientCredentials):
    """Access token to invalidate."""

    endpoint: ClassVar[Endpoint] = "revoke"
    kind: Literal["revoke_access"] = "revoke_access"

    access_token: str

    def form_fields(self) -> dict[str, str]:
        return {
            **super().form_fields(),
            "token": self.access_token,
            "token_type_hint": "access_token",
        }


class RevokeRefreshRequest(_ClientCredentials):
    """Refresh token to invalidate."""

    endpoint: ClassVar[Endpoint] = "revoke"
    kind: Literal["revoke_refresh"] = "revoke_refresh"

    refresh_token: str

    def form_fields(self) -> dict[str, str]:
        return {
            **super().form_fields(),
            "token": self.refresh_token,
            "token_type_hint": "refresh_token",
        }


TokenRequest = Annotated[
    WebAuthRequest
    | AppAuthRequest
    | RefreshGrantRequest
    | RevokeAccessRequest
    | RevokeRefreshRequest,
    Field(discriminator="kind"),
]


class TokenResponse(BaseModel):
    """Token endpoint response.

    Every field is optional. A populated ``error`` means Apple rejected the
    grant even though the call itself succeeded.
    """

    model_config = ConfigDict(extra="allow")

    access_token: str | None = None
    token_type: str | None = None
    expires_in: int | None = None
    refresh_token: str | None = None
    id_token: str | None = None
    error: str | None = None
    error_description: str | None = None
