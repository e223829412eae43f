"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Persistence errors raised by SQLAlchemy are not wrapped; only the
HTTP layer translates a missing resource into a 404.

Usage:
    from querystudy.utils.exceptions import NotFoundError
    raise NotFoundError("Member not found")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (member, team) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
