"""Caller-facing error taxonomy.

Every error knows the HTTP status the shell should answer with and how to
render itself as a failure envelope, so flows only need to catch
``ProxyError`` and call ``to_envelope()``.
"""

from typing import Any, Dict, List, Optional


class ProxyError(Exception):
    """Base exception for lookup failures surfaced to the caller."""

    error = "Internal server error"
    status = 500

    def __init__(self, message: Optional[str] = None, **extra: Any):
        super().__init__(message or self.error)
        self.message = message
        self.extra = extra

    def to_envelope(self) -> Dict[str, Any]:
        """Render the failure envelope body."""
        body: Dict[str, Any] = {"success": False, "error": self.error}
        if self.message is not None:
            body["message"] = self.message
        body.update(self.extra)
        return body


class InvalidTopologyKey(ProxyError):
    """Unknown region or platform key."""

    status = 400

    def __init__(self, kind: str, key: Any, valid_keys: List[str]):
        self.kind = kind
        self.key = key
        self.valid_keys = list(valid_keys)
        if kind == "region":
            self.error = "Invalid region"
            super().__init__(validRegions=self.valid_keys)
        else:
            self.error = "Invalid server"
            super().__init__(validServers=self.valid_keys)


class MissingInput(ProxyError):
    """A required request field is absent."""

    status = 400

    def __init__(self, error: str, example: str):
        self.error = error
        super().__init__(example=example)


class CredentialMissing(ProxyError):
    """The API key is not configured for this process."""

    error = "Server configuration error"
    status = 500

    def __init__(self, error: Optional[str] = None, message: Optional[str] = "API key not found"):
        if error is not None:
            self.error = error
        super().__init__(message)


class CredentialInvalid(ProxyError):
    """Riot rejected the configured API key."""

    error = "API authentication failed"
    status = 403

    def __init__(self):
        super().__init__("Invalid or expired API key")


class IdentityNotFound(ProxyError):
    """No account exists for the given Riot ID."""

    error = "Summoner not found"
    status = 404

    SUGGESTIONS = (
        "Check the spelling of the game name",
        "Verify the tag line (e.g., KR1, NA1, EUW1)",
        "Make sure the account exists in the specified region",
    )

    def __init__(self, game_name: str, tag_line: str):
        super().__init__(
            f"No summoner found with Riot ID: {game_name}#{tag_line}",
            suggestions=list(self.SUGGESTIONS),
        )


class SummonerLookupFailed(ProxyError):
    """Summoner lookup failed while it was a required step."""

    status = 404

    def __init__(self, error: str, http_status: int, message: Optional[str] = None, **extra: Any):
        self.error = error
        self.status = http_status
        super().__init__(message, **extra)


class UpstreamError(ProxyError):
    """Unanticipated Riot API failure, passed through with its status."""

    def __init__(self, status: int, body: Optional[str] = None, error: str = "Riot API error"):
        self.error = error
        self.status = status
        self.body = body
        extra: Dict[str, Any] = {"status": status}
        if body is not None:
            extra["details"] = body
        super().__init__(**extra)


class TransportFailure(ProxyError):
    """Network, timeout or decoding failure talking to Riot."""

    error = "Upstream request failed"
    status = 502

    def __init__(self, cause: str):
        super().__init__(cause)


class InternalError(ProxyError):
    """Unexpected exception caught at a flow boundary."""

    def __init__(self, message: str):
        super().__init__(message)
