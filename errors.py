"""
Error types shared by the API routes.

Every failure surfaced to the browser is an AppError: a machine-readable code,
an internal message (logged), a user-facing message and an HTTP status.
Nothing is retried; the user resubmits manually.
"""
import httpx


class AppError(Exception):

    def __init__(self, code: str, message: str, user_message: str, status_code: int = 500):
        super().__init__(message)
        self.code         = code
        self.message      = message
        self.user_message = user_message
        self.status_code  = status_code

    def to_dict(self) -> dict:
        return {
            "error":   self.message,
            "message": self.user_message,
            "code":    self.code,
        }

    def __repr__(self) -> str:
        return f"AppError({self.code!r}, {self.message!r}, status={self.status_code})"


# ── Network / API ─────────────────────────────────────────────────────────────

def network_error() -> AppError:
    return AppError(
        "NETWORK_ERROR",
        "Network request failed",
        "Unable to connect. Please check your internet connection.",
        503,
    )


def api_error(details: str | None = None) -> AppError:
    return AppError(
        "API_ERROR",
        f"API Error: {details or 'Unknown error'}",
        "Something went wrong. Please try again.",
        500,
    )


def validation_error(field: str) -> AppError:
    return AppError(
        "VALIDATION_ERROR",
        f"Validation failed for field: {field}",
        f"Please check your {field} and try again.",
        400,
    )


# ── AI service ────────────────────────────────────────────────────────────────

def ai_generation_error(what: str = "content") -> AppError:
    return AppError(
        "AI_GENERATION_ERROR",
        f"Failed to generate {what}",
        "Could not generate content. Please try again or contact support.",
        500,
    )


def ai_service_unavailable() -> AppError:
    return AppError(
        "AI_SERVICE_UNAVAILABLE",
        "AI service is unavailable",
        "The AI service is temporarily unavailable. Please try again later.",
        503,
    )


def quota_exceeded(retry: str = "") -> AppError:
    return AppError(
        "QUOTA_EXCEEDED",
        f"Gemini API quota exceeded.{retry}",
        "The AI service is busy right now. Please wait a moment and try again.",
        429,
    )


def missing_api_key() -> AppError:
    return AppError(
        "MISSING_API_KEY",
        "API key not configured",
        "Server configuration error. Please contact support.",
        500,
    )


# ── Timeouts / parsing ────────────────────────────────────────────────────────

def timeout_error() -> AppError:
    return AppError(
        "TIMEOUT_ERROR",
        "Request timed out",
        "The request took too long. Please try again.",
        408,
    )


def parse_error(detail: str) -> AppError:
    return AppError(
        "PARSE_ERROR",
        f"Failed to parse response: {detail}",
        "Failed to process server response. Please try again.",
        500,
    )


# ── Input validation ──────────────────────────────────────────────────────────

def empty_input(field_name: str, message: str | None = None) -> AppError:
    return AppError(
        "EMPTY_INPUT",
        message or f"{field_name} is empty",
        f"Please provide a {field_name.lower()}.",
        400,
    )


def invalid_input(field_name: str, reason: str) -> AppError:
    return AppError(
        "INVALID_INPUT",
        f"Invalid {field_name}: {reason}",
        f"Your {field_name.lower()} is invalid: {reason}",
        400,
    )


def from_exception(exc: BaseException) -> AppError:
    """Map any exception raised while talking to a provider onto an AppError."""
    if isinstance(exc, AppError):
        return exc
    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return timeout_error()
    if isinstance(exc, (httpx.NetworkError, ConnectionError)):
        return network_error()
    return api_error(str(exc) or type(exc).__name__)
