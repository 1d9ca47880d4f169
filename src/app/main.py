"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

# Routes
from src.app.routes import templates
from src.app.services.templater import Templater
from src.core.config import Configuration

# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드 (templater.yaml + 환경변수), Templater 생성
    """
    # Startup
    app.state.config = Configuration.from_environment()
    app.state.templater = Templater(app.state.config)

    yield


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="Templater",
    description="템플릿 기반 파일 생성",
    version="0.1.0",
    lifespan=lifespan,
)


# =============================================================================
# Routes
# =============================================================================

# 페이지 라우트 (HTML)
app.include_router(templates.router, prefix="/templates", tags=["Templates"])

# API 라우트
app.include_router(
    templates.api_router, prefix="/api/templates", tags=["Templates API"]
)
app.include_router(templates.files_router, prefix="/api/files", tags=["Files API"])


# =============================================================================
# Root Endpoints
# =============================================================================


@app.get("/")
async def root() -> dict[str, Any]:
    """엔드포인트 안내."""
    return {
        "message": "Templater",
        "endpoints": {
            "templates": "/templates",
            "api": "/api/templates",
            "files": "/api/files",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
