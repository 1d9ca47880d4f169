"""
Templates layer: 템플릿 저장소 + 렌더링.

역할:
- templates 디렉터리 카탈로그 (store.py)
- 새 템플릿 기본 구조 (skeleton.py)
- 템플릿 모듈 로드/실행 (renderer.py)
- 템플릿 기반 파일 생성 (generator.py)

주의: 폴더 구분
- src/templates/ → 코드 (이 모듈)
- templates/ (루트) → 기본 템플릿 저장소 (설정 templates_dir로 변경 가능)
"""

from .generator import FileGenerator, build_render_context
from .renderer import TemplateRenderer
from .skeleton import FALLBACK_TEMPLATE_SKELETON
from .store import (
    TemplateStore,
    template_name_from_filename,
    validate_template_name,
)

__all__ = [
    # store
    "TemplateStore",
    "validate_template_name",
    "template_name_from_filename",
    # skeleton
    "FALLBACK_TEMPLATE_SKELETON",
    # renderer
    "TemplateRenderer",
    # generator
    "FileGenerator",
    "build_render_context",
]
