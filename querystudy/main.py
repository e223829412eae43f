"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 라우터, 초기 데이터.

FastAPI application entry point — middleware, routers and start-up seeding.
Under the ``local`` profile the sample teams and members are loaded when
the application starts.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from querystudy.api import api_router
from querystudy.config import settings
from querystudy.database import engine
from querystudy.middleware.axiom_logging import AxiomLoggingMiddleware
from querystudy.seed import init_local_data


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """시작 시 local 프로필 데이터 적재, 종료 시 커넥션 풀 정리."""
    await init_local_data()
    yield
    await engine.dispose()


app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Axiom API 로깅 미들웨어 — CORS보다 먼저 등록하여 모든 요청을 캡처
app.add_middleware(AxiomLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok", "profile": settings.PROFILE}


app.include_router(api_router, prefix="/api")
