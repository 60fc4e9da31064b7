from typing import Optional


class ServiceException(Exception):
    """Base exception for service level failures."""

    def __init__(self, detail: str, error_code: str = "SERVICE_ERROR"):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code


class StoreLockError(ServiceException):
    """Raised when exclusive access to a store cannot be obtained."""

    def __init__(self, detail: str, timeout: Optional[float] = None):
        super().__init__(detail, error_code="STORE_LOCK_ERROR")
        self.timeout = timeout


class ClientException(ServiceException):
    """Raised by the HTTP client when the server answers outside the API contract."""

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(detail, error_code="CLIENT_ERROR")
        self.status_code = status_code
