"""
템플릿 렌더러: 사용자 템플릿 모듈 로드 + render 호출.

에러 분류 (2단계):
- 로드 단계 실패 (파일 없음, import 중 예외, render 없음) → TemplateLoadError
- render(context) 호출 중 예외 (템플릿 코드 결함) → TemplateSyntaxError

템플릿은 신뢰하는 사용자 코드로 취급한다 (샌드박스 없음).
결과 문자열은 가공하지 않고 그대로 반환한다.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from types import ModuleType
from typing import Any

from src.domain.constants import TEMPLATE_RENDER_FUNCTION
from src.domain.errors import TemplateLoadError, TemplateSyntaxError
from src.domain.schemas import RenderContext, Template

logger = logging.getLogger(__name__)

RenderFunction = Callable[[RenderContext], Any]


def load_template_module(template_path: Path) -> ModuleType:
    """
    템플릿 파일을 모듈로 로드.

    매 호출마다 소스를 직접 읽어 컴파일한다. 바이트코드 캐시(__pycache__)를
    읽지도 쓰지도 않으므로, 크기와 mtime이 같은 편집도 바로 반영되고
    templates 디렉터리에 캐시 폴더가 생기지 않는다.
    sys.modules에도 등록하지 않는다.

    Args:
        template_path: 템플릿 소스 경로

    Returns:
        실행된 모듈
    """
    module = ModuleType(f"templater_template_{template_path.stem}")
    module.__file__ = str(template_path)
    code = compile(template_path.read_bytes(), str(template_path), "exec")
    exec(code, module.__dict__)
    return module


def get_render_function(module: ModuleType) -> RenderFunction:
    """모듈에서 render 함수 조회."""
    render_function = getattr(module, TEMPLATE_RENDER_FUNCTION, None)
    if not callable(render_function):
        raise AttributeError(
            f"Template module does not define a callable '{TEMPLATE_RENDER_FUNCTION}'"
        )
    return render_function


class TemplateRenderer:
    """템플릿 실행기."""

    def render(self, template: Template, context: RenderContext) -> Any:
        """
        템플릿 렌더링.

        Args:
            template: 렌더할 템플릿
            context: 완성된 RenderContext

        Returns:
            render 함수 반환값 (가공 없음)

        Raises:
            TemplateSyntaxError: render 호출 중 예외
            TemplateLoadError: 그 외 로드 실패
        """
        try:
            module = load_template_module(Path(template.path))
            render_function = get_render_function(module)
        except Exception as e:
            logger.error(f"Failed to load template '{template.name}' from {template.path}: {e}")
            raise TemplateLoadError(
                "An error occurred rendering a template.",
                template_name=template.name,
                template_path=str(template.path),
            ) from e

        try:
            return render_function(context)
        except Exception as e:
            render_context = context.to_dict()
            logger.error(
                f"Template '{template.name}' raised during render: {e!r} "
                f"(file={render_context['filename_with_extension']})"
            )
            raise TemplateSyntaxError(
                f"Your template has syntax errors: {type(e).__name__}: {e}",
                template_name=template.name,
                template_path=str(template.path),
                render_context=render_context,
            ) from e
