class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400, *, detail: dict | None = None) -> None:
        super().__init__(message, status_code)
        self.detail = detail or {}


class NotFoundError(DomainError):
    """Unknown catalog, class or seat reference."""

    def __init__(self, message: str, *, detail: dict | None = None) -> None:
        super().__init__(message, 404, detail=detail)


class ConflictError(DomainError):
    """Request is well-formed but the current state does not allow it."""

    def __init__(self, message: str, *, detail: dict | None = None) -> None:
        super().__init__(message, 409, detail=detail)
