"""
Templates Routes: 템플릿 관리 + 템플릿 기반 파일 생성.

- GET /templates → 템플릿 관리 화면
- GET /api/templates → 템플릿 목록 (JSON)
- POST /api/templates → 새 템플릿
- POST /api/templates/open → templates 디렉터리를 탐색기로 열기
- POST /api/files → 템플릿으로 새 파일
"""

from typing import Any

from fastapi import APIRouter, Form, HTTPException, Request
from fastapi.responses import HTMLResponse

from src.app.services.templater import Templater
from src.domain.errors import (
    InvalidTemplateNameError,
    TemplateDirectoryMissingError,
    TemplateLoadError,
    TemplateNameCollisionError,
    TemplateNotFoundError,
    TemplaterError,
    TemplatesDirNotFoundError,
    TemplateSyntaxError,
    UnsupportedPlatformError,
)

# Routers
router = APIRouter()  # HTML pages
api_router = APIRouter()  # API endpoints
files_router = APIRouter()  # 파일 생성 API

# 에러 클래스 → HTTP 상태 코드 (없으면 500)
ERROR_STATUS_CODES: dict[type[TemplaterError], int] = {
    InvalidTemplateNameError: 400,
    TemplateNameCollisionError: 409,
    TemplateNotFoundError: 404,
    TemplateDirectoryMissingError: 404,
    TemplatesDirNotFoundError: 404,
    TemplateSyntaxError: 422,
    TemplateLoadError: 422,
    UnsupportedPlatformError: 501,
}


def get_templater(request: Request) -> Templater:
    """lifespan에서 만든 Templater 인스턴스."""
    templater: Templater = request.app.state.templater
    return templater


def to_http_exception(e: TemplaterError) -> HTTPException:
    """TemplaterError → HTTPException (detail: code, message)."""
    status_code = ERROR_STATUS_CODES.get(type(e), 500)
    return HTTPException(
        status_code=status_code,
        detail={"code": e.code, "message": e.message},
    )


# =============================================================================
# Page Routes (HTML)
# =============================================================================

@router.get("", response_class=HTMLResponse)
async def templates_page(request: Request) -> HTMLResponse:
    """템플릿 관리 화면."""
    return HTMLResponse(content="""
<!DOCTYPE html>
<html lang="ko">
<head>
    <meta charset="UTF-8">
    <title>템플릿 관리</title>
    <script src="https://unpkg.com/htmx.org@1.9.10"></script>
</head>
<body>
    <div class="container">
        <header>
            <h1>📋 템플릿 관리</h1>
            <button hx-post="/api/templates/open" hx-swap="none">폴더 열기</button>
        </header>

        <form hx-post="/api/templates" hx-target="#result">
            <label>템플릿 이름</label>
            <input type="text" name="name" placeholder="component" required>
            <button type="submit">새 템플릿</button>
        </form>

        <form hx-post="/api/files" hx-target="#result">
            <label>템플릿</label>
            <input type="text" name="template" required>
            <label>파일명 (확장자 포함)</label>
            <input type="text" name="file_name" placeholder="index.ts" required>
            <label>디렉터리</label>
            <input type="text" name="directory" required>
            <button type="submit">새 파일</button>
        </form>

        <div id="result"></div>
    </div>
</body>
</html>
    """)


# =============================================================================
# API Routes
# =============================================================================

@api_router.get("")
async def list_templates(request: Request) -> dict[str, Any]:
    """템플릿 목록."""
    try:
        templates = get_templater(request).templates()
    except TemplaterError as e:
        raise to_http_exception(e) from e

    return {"templates": [template.to_dict() for template in templates]}


@api_router.post("")
async def create_template(
    request: Request,
    name: str = Form(...),
) -> dict[str, Any]:
    """새 템플릿 (기본 구조로 생성)."""
    try:
        path = get_templater(request).new_template(name)
    except TemplaterError as e:
        raise to_http_exception(e) from e

    return {
        "success": True,
        "name": name,
        "path": str(path),
    }


@api_router.post("/open")
async def open_templates_dir(request: Request) -> dict[str, Any]:
    """templates 디렉터리를 탐색기로 연다."""
    try:
        path = get_templater(request).open_templates_dir()
    except TemplaterError as e:
        raise to_http_exception(e) from e

    return {"success": True, "path": str(path)}


@files_router.post("")
async def create_file(
    request: Request,
    template: str = Form(...),
    file_name: str = Form(...),
    directory: str = Form(...),
) -> dict[str, Any]:
    """템플릿으로 새 파일 생성 (기존 파일은 덮어씀)."""
    try:
        path = get_templater(request).new_file(file_name, template, directory)
    except TemplaterError as e:
        raise to_http_exception(e) from e

    return {
        "success": True,
        "template": template,
        "path": str(path),
    }
