from typing import Optional

from codecritic.constants import EMPTY_INPUT_MESSAGE, INVALID_RESPONSE_MESSAGE, MISSING_KEY_MESSAGE


class ReviewError(Exception):
    """Base class for every failure a review request can surface."""

    user_message: Optional[str] = None

    def __str__(self) -> str:
        return self.user_message or super().__str__()


class ValidationError(ReviewError):
    user_message = EMPTY_INPUT_MESSAGE


class TransportError(ReviewError):
    def __init__(self, status_code: Optional[int] = None, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            message = f"API Error: {reason}"
        else:
            message = f"API Error: {status_code} {reason}".rstrip()
        super().__init__(message)


class EmptyResponseError(ReviewError):
    user_message = INVALID_RESPONSE_MESSAGE


class MalformedResponseError(ReviewError):
    user_message = INVALID_RESPONSE_MESSAGE

    def __init__(self, raw_text: str = ""):
        # kept for diagnostics only, never rendered
        self.raw_text = raw_text
        super().__init__(INVALID_RESPONSE_MESSAGE)


class MissingCredentialError(ReviewError):
    user_message = MISSING_KEY_MESSAGE
