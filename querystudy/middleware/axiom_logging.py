"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per search request to Axiom: method, path,
search/paging query parameters, status code, duration, active profile and
the error reason for failed requests. Without Axiom credentials the
middleware passes requests straight through.
"""

import json
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from querystudy.config import settings

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# 정수로 기록할 검색/페이징 파라미터 — Query params logged as integers
_INT_PARAMS = {"age_goe", "age_loe", "page", "per_page"}


def _normalize_params(params: dict[str, str]) -> dict[str, Any]:
    """검색 조건 파라미터를 정수/문자열로 정리합니다.

    Convert numeric search and paging params to int so they can be
    aggregated in Axiom; values that fail to parse are kept as text.
    """
    normalized: dict[str, Any] = {}
    for key, value in params.items():
        if key in _INT_PARAMS:
            try:
                normalized[key] = int(value)
                continue
            except ValueError:
                pass
        normalized[key] = value[:200]
    return normalized


async def _read_error_detail(response: Response) -> tuple[Response, str]:
    """에러 응답 body에서 사유를 추출하고 응답을 다시 감쌉니다.

    Drain the error response body, extract ``detail`` and return a new
    response carrying the same body.
    """
    body = b""
    async for chunk in response.body_iterator:  # type: ignore[attr-defined]
        body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")

    try:
        data = json.loads(body)
        detail = data.get("detail", data) if isinstance(data, dict) else data
        detail_text = detail if isinstance(detail, str) else json.dumps(detail, ensure_ascii=False)
    except (json.JSONDecodeError, UnicodeDecodeError):
        detail_text = body.decode("utf-8", errors="replace")

    rewrapped = Response(
        content=body,
        status_code=response.status_code,
        headers=dict(response.headers),
        media_type=response.media_type,
    )
    return rewrapped, detail_text[:500]


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs API requests and responses to Axiom.
    """

    def __init__(self, app: Any, client: AxiomClient | None = None) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = client
        self._dataset: str = settings.AXIOM_DATASET

        if self._client is None and settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS or self._client is None:
            return await call_next(request)

        start_time = time.time()
        error_detail: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            if status_code >= 400:
                response, error_detail = await _read_error_detail(response)
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            log_event: dict[str, Any] = {
                "app": settings.APP_NAME,
                "profile": settings.PROFILE,
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": round((time.time() - start_time) * 1000, 2),
            }
            if request.query_params:
                log_event["query_params"] = _normalize_params(dict(request.query_params))
            if request.path_params:
                log_event["path_params"] = dict(request.path_params)
            if error_detail:
                log_event["error"] = error_detail

            try:
                self._client.ingest_events(self._dataset, [log_event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break request on log failure

        return response
