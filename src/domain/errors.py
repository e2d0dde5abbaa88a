"""
Custom application-specific exceptions.

Every error raised by the generation pipeline derives from BaseAppException
and carries the HTTP status the API layer answers with, plus whatever
context the caller needs to act on it (file name, upstream status, raw
model text).
"""
from typing import Optional


class BaseAppException(Exception):
    """Base exception for the application."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class UnsupportedFormat(BaseAppException):
    """Raised for uploads that are neither PDF nor plain text."""
    status_code = 415

    def __init__(self, filename: str):
        super().__init__(f"Unsupported file type: {filename}")
        self.filename = filename


class ExtractionFailure(BaseAppException):
    """Raised when a supported file cannot be decoded."""
    status_code = 422

    def __init__(self, filename: str, reason: str = ""):
        message = f"Could not extract text from '{filename}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.filename = filename


class NoMaterialProvided(BaseAppException):
    status_code = 400

    def __init__(self):
        super().__init__("Please provide either text input or at least one supported file.")


class ModelNotAllowed(BaseAppException):
    status_code = 400

    def __init__(self, model: str):
        super().__init__("Selected model is not in the approved allow list.")
        self.model = model


class GatewayNotConfigured(BaseAppException):
    status_code = 503

    def __init__(self):
        super().__init__("Gemini API key is not configured on the server.")


class GatewayError(BaseAppException):
    """Raised for transport failures and non-2xx answers from the model API."""
    status_code = 502

    def __init__(self, status: Optional[int], body: str):
        if status is None:
            message = f"Gemini API request failed: {body}"
        else:
            message = f"Gemini API error ({status}): {body}"
        super().__init__(message)
        self.status = status
        self.body = body


class ContentBlocked(BaseAppException):
    """Raised when the model API refuses the prompt on safety grounds."""
    status_code = 422

    def __init__(self, reason: str):
        super().__init__(f"Gemini blocked the prompt: {reason}.")
        self.reason = reason


class EmptyGatewayResponse(BaseAppException):
    status_code = 502

    def __init__(self):
        super().__init__("Gemini API returned an empty response.")


class MalformedModelOutput(BaseAppException):
    """Raised when the model text does not parse as the question schema."""
    status_code = 502

    def __init__(self, raw: str, reason: str = ""):
        super().__init__("The model returned an unexpected format. Please try again or adjust the prompt.")
        self.raw = raw
        self.reason = reason

    def to_dict(self) -> dict:
        return {"error": self.message, "raw": self.raw}
