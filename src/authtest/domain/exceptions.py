"""Domain exceptions."""


class AuthTestError(Exception):
    """Base exception for authtest."""

    pass


class ValidationError(AuthTestError):
    """Caller supplied input that cannot be used."""

    pass


class InvalidUrl(ValidationError):
    """Value is not an absolute http(s) URL."""

    def __init__(self, message: str = "apiBase must be a valid URL") -> None:
        super().__init__(message)


class MissingField(ValidationError):
    """Required field is absent or blank."""

    pass


class MissingApiBase(AuthTestError):
    """No override given and AQUAVIEW_API_BASE is not configured."""

    def __init__(self, message: str = "AQUAVIEW_API_BASE is not set") -> None:
        super().__init__(message)


class UpstreamUnavailable(AuthTestError):
    """AquaView API could not be reached or did not answer in time."""

    def __init__(self, detail: str, error: str) -> None:
        super().__init__(detail)
        self.detail = detail
        self.error = error
