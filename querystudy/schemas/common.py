"""공통 요청 스키마 정의.

Common request schema definitions shared across API domains.
"""

from pydantic import BaseModel


# === 페이지 (Paging) 스키마 ===

class PageParams(BaseModel):
    """페이지 요청 파라미터.

    Page request parameters.

    Attributes:
        page: 요청 페이지 번호, 1부터 시작 (Page number, 1-based)
        per_page: 페이지당 항목 수 (Items per page)
    """

    page: int
    per_page: int
