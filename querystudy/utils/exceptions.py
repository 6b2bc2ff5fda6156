"""커스텀 예외 클래스 모듈.

Custom exception classes module.
Provides pre-configured exceptions for common error patterns raised by
services and the pagination helpers. Database driver errors are not wrapped;
they propagate to the caller unchanged.

Usage:
    from querystudy.utils.exceptions import NotFoundError, BadRequestError
    raise NotFoundError("Member not found")
    raise BadRequestError("page must be >= 0")
"""


class AppError(Exception):
    """애플리케이션 예외의 기본 클래스.

    Base class for application errors.

    Args:
        detail: 오류 메시지 (Error message)
    """

    def __init__(self, detail: str = "Application error") -> None:
        super().__init__(detail)
        self.detail: str = detail


class NotFoundError(AppError):
    """요청한 리소스를 찾을 수 없을 때 사용.

    Raised when a requested resource (member, team) does not exist.
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(detail)


class DuplicateError(AppError):
    """중복 리소스 생성 시도 시 사용.

    Raised when attempting to create a resource that already exists
    (e.g. a team with the same name).
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(detail)


class BadRequestError(AppError):
    """잘못된 요청 데이터 시 사용.

    Raised when request data is invalid, e.g. a negative page index or a
    non-positive page size. Always raised before any query executes.
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(detail)
