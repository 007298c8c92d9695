from typing import Any, Mapping, Optional


class ServiceValidationError(Exception):
    """Raised when submitted data is incomplete or malformed.

    Attributes:
        message: human-readable message, returned to the client verbatim
        details: optional mapping with extra context (server-side logging only)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers (400)
    """

    http_status = 400

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        return {"message": self.message}

    def __str__(self) -> str:
        return self.message


class NotFoundError(Exception):
    """Raised when no route or static asset matches the request. http_status is 404."""

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        return {"message": self.message}

    def __str__(self) -> str:
        return self.message


class StorageError(Exception):
    """Raised when a backing JSON file cannot be read, parsed or written.

    The message and cause stay server-side; handlers answer with a generic
    500 body. http_status is 500.
    """

    http_status = 500
    public_message = "An unknown error occurred!"

    def __init__(self, message: str = "Storage failure", path: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.code = code

    def to_dict(self) -> dict:
        return {"message": self.public_message}

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} ({self.path})"
        return self.message


class InvalidStateTransition(Exception):
    """Raised when a client-side state machine receives an event it cannot accept."""

    def __init__(self, current: str, event: str):
        super().__init__(f"Cannot apply '{event}' while in state '{current}'")
        self.current = current
        self.event = event


class ClientRequestError(Exception):
    """Raised by the HTTP client when a request fails or the server rejects it.

    Attributes:
        message: message suitable for display (server message when available)
        status_code: HTTP status of the response, None for transport failures
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message
