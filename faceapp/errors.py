"""
Error taxonomy for calls against the FaceApp API.
Every failure the transport client reports is an APIError subclass.
"""


class APIError(Exception):
    message = "Request failed"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def __str__(self):
        return self.message


class InvalidURL(APIError):
    message = "Invalid URL"


class InvalidResponse(APIError):
    message = "Invalid response from server"


class HTTPError(APIError):
    """4xx/5xx (other than 401) carrying the server's error message."""

    def __init__(self, status_code, message):
        self.status_code = status_code
        super().__init__(message)

    def __repr__(self):
        return f"HTTPError(status_code={self.status_code}, message={self.message!r})"


class DecodingError(APIError):
    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"Failed to decode response: {cause}")


class NetworkError(APIError):
    def __init__(self, cause):
        self.cause = cause
        super().__init__(str(cause) or cause.__class__.__name__)


class Unauthorized(APIError):
    message = "Session expired. Please login again."
