"""Error taxonomy shared by gateways, orchestrators and the HTTP layer.

Only the HTTP layer turns these into responses; services raise them and
orchestrators decide which ones are absorbed by fallback synthesis.
"""


class TripWiseError(Exception):
    """Base class for every error the service knows how to render."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputValidationError(TripWiseError):
    """Missing or malformed request fields. Never retried."""

    status_code = 400

    def __init__(
        self,
        message: str,
        missing: list[str] | None = None,
        invalid: list[str] | None = None,
    ):
        super().__init__(message)
        self.missing = missing or []
        self.invalid = invalid or []


class CredentialMissingError(TripWiseError):
    """A provider credential required for the operation is not configured."""

    status_code = 500

    def __init__(self, provider: str):
        super().__init__(f"{provider} API key not configured on server")
        self.provider = provider


class ProviderUnavailable(TripWiseError):
    """Timeout, transport error or HTTP error from an external provider."""

    status_code = 502

    def __init__(self, provider: str, detail: str = ""):
        message = f"{provider} unavailable"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.provider = provider
        self.detail = detail


class RecoveryFailure(TripWiseError):
    """Model output could not be turned into a structured value."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__("Failed to parse AI response")
        self.detail = detail
