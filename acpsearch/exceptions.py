"""ACP search exception classes."""



class AcpError(Exception):
    """Base exception for all ACP search errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(AcpError):
    """Raised when client configuration is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class UsageError(AcpError):
    """Raised when search options are invalid. Always detected before any request."""

    def __init__(self, message: str) -> None:
        super().__init__("USAGE_ERROR", message)


class TransportError(AcpError):
    """Raised when a request to the directory service fails."""

    def __init__(
        self,
        code: str,
        message: str,
        request_id: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.status_code = status_code


class ClientError(TransportError):
    """Raised on 4xx responses other than rate limiting."""

    pass


class RateLimitedError(TransportError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id, status_code=429)
        self.retry_after = retry_after


class ServerError(TransportError):
    """Raised on server errors (5xx)."""

    pass
