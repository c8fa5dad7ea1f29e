"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class TickerError(AppError):
    """Base exception for ticker fetch failures."""


class TickerHttpError(TickerError):
    """Raised when the ticker endpoint answers with a non-2xx status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Ticker request returned HTTP {status_code}", code="HTTP_ERROR")


class TickerFetchError(TickerError):
    """Raised when the ticker could not be retrieved or parsed."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__, code="FETCH_ERROR")
