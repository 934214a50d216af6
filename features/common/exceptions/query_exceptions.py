from typing import Optional

class TideQueryError(Exception):
    """Base exception for tide query errors."""
    pass

class UpstreamFetchError(TideQueryError):
    """Raised when NOAA returns a non-success status or the transport fails."""

    def __init__(self, operation: str, status: Optional[int] = None, reason: str = ""):
        self.operation = operation
        self.status = status
        self.reason = reason
        details = []
        if status is not None:
            details.append(f"status {status}")
        if reason:
            details.append(reason)
        message = f"Failed to fetch {operation}"
        if details:
            message += f": {', '.join(details)}"
        super().__init__(message)

class UpstreamTimeoutError(UpstreamFetchError):
    """Raised when NOAA does not answer within the request deadline."""

    def __init__(self, operation: str, timeout: float):
        self.timeout = timeout
        super().__init__(operation, reason=f"timed out after {timeout:g}s")

class ParseError(TideQueryError):
    """Raised when an upstream station record cannot be parsed."""
    pass

class QueryValidationError(TideQueryError):
    """Raised when a required query argument is missing or malformed."""
    pass
