"""
Submission errors raised by the subjects API client.
"""

from typing import Optional


class SubmissionError(Exception):
    """Base class for failures reported by the transport."""

    kind = "request"
    default_message = "Submission failed. Please try again."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ServerError(SubmissionError):
    """The server answered with a failure status."""

    kind = "server"
    default_message = "Server error."

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NetworkError(SubmissionError):
    """The request was sent but no response came back."""

    kind = "network"
    default_message = "No response from server. Check your backend and CORS settings."


class RequestError(SubmissionError):
    """The request could not be built or sent."""

    kind = "request"
    default_message = "Submission failed. Please try again."
