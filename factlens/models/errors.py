"""
error taxonomy for the fact-check service.

every error carries the HTTP status it maps to; the API layer renders any
FactCheckError as {"error": message}.
"""


class FactCheckError(Exception):
    """base class for errors surfaced to API callers"""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(FactCheckError):
    """missing or empty content, or a missing/unreadable file"""

    status_code = 400


class UnsupportedImageType(InvalidInput):
    """upload whose declared content type is not image/*"""


class ImageTooLarge(InvalidInput):
    """upload above the ingestion size ceiling"""


class ProviderUnavailable(FactCheckError):
    """a provider is not configured (missing credentials)"""


class ProviderCallFailed(FactCheckError):
    """network error, timeout or non-2xx answer from an external provider"""

    def __init__(self, provider: str, message: str):
        super().__init__(f"[{provider}] {message}")
        self.provider = provider


class FactCheckProcessingFailed(FactCheckError):
    """generic failure of a fact-check request; the cause is only logged"""


class NoContentDetected(FactCheckError):
    """image analysis produced neither text nor labels to search with"""
