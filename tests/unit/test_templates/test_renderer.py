"""
test_renderer.py - 템플릿 렌더러 테스트

검증:
- render(context) 반환값을 그대로 전달
- 매 호출마다 소스에서 다시 컴파일 (바이트코드 캐시 없음)
- render 호출 중 예외 → TemplateSyntaxError (원본 메시지 포함)
- 로드 실패 (파일 없음, 문법 오류, render 없음) → TemplateLoadError
"""

import os
import sys
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import pytest

from src.domain.errors import TemplateLoadError, TemplateSyntaxError
from src.domain.schemas import Author, CreatedFile, RenderContext, Template
from src.templates.renderer import TemplateRenderer, load_template_module


@pytest.fixture
def context() -> RenderContext:
    """테스트용 RenderContext."""
    return RenderContext(
        created_file=CreatedFile(
            file_name="Button",
            extension=".tsx",
            directory_folder_name="components",
            directory_path="/workspace/components",
        ),
        filename_with_extension="Button.tsx",
        current_date=datetime(2024, 1, 15, 9, 30),
        author=Author(name="홍길동", email="gildong@example.com"),
        custom_options={"license": "MIT"},
    )


def make_template(path: Path) -> Template:
    return Template(name=path.name.split(".")[0], filename=path.name, path=path)


# =============================================================================
# 정상 렌더
# =============================================================================

class TestRender:
    """정상 렌더 테스트."""

    def test_returns_render_output(
        self,
        renderer: TemplateRenderer,
        greet_template: Path,
        context: RenderContext,
    ):
        assert renderer.render(make_template(greet_template), context) == "Hello, Button"

    def test_output_is_not_modified(
        self,
        renderer: TemplateRenderer,
        write_template: Callable[[str, str], Path],
        context: RenderContext,
    ):
        """공백/개행 가공 없음."""
        path = write_template("spaces.py", "def render(context):\n    return '  x \\n\\n'\n")

        assert renderer.render(make_template(path), context) == "  x \n\n"

    def test_context_fields_available(
        self,
        renderer: TemplateRenderer,
        write_template: Callable[[str, str], Path],
        context: RenderContext,
    ):
        """템플릿에서 context 전체 사용 가능."""
        path = write_template(
            "full.py",
            "def render(context):\n"
            "    return '|'.join([\n"
            "        context.created_file.extension,\n"
            "        context.created_file.directory_folder_name,\n"
            "        context.author.email,\n"
            "        context.custom_options['license'],\n"
            "        context.current_date.date().isoformat(),\n"
            "    ])\n",
        )

        result = renderer.render(make_template(path), context)

        assert result == ".tsx|components|gildong@example.com|MIT|2024-01-15"

    def test_reloads_modified_template(
        self,
        renderer: TemplateRenderer,
        write_template: Callable[[str, str], Path],
        context: RenderContext,
    ):
        """매 호출마다 새로 로드 (sys.modules 캐시 없음)."""
        path = write_template("live.py", "def render(context):\n    return 'one'\n")
        assert renderer.render(make_template(path), context) == "one"

        path.unlink()
        path = write_template("live.py", "def render(context):\n    return 'second'\n")

        assert renderer.render(make_template(path), context) == "second"

    def test_reloads_same_size_edit(
        self,
        renderer: TemplateRenderer,
        write_template: Callable[[str, str], Path],
        context: RenderContext,
    ):
        """크기가 같은 편집도 반영 (바이트코드 캐시 미사용)."""
        path = write_template("same.py", "def render(context):\n    return 'aaa'\n")
        assert renderer.render(make_template(path), context) == "aaa"

        stat = path.stat()
        path.write_text("def render(context):\n    return 'bbb'\n", encoding="utf-8")
        os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns))

        assert renderer.render(make_template(path), context) == "bbb"

    def test_no_bytecode_cache_in_templates_dir(
        self,
        renderer: TemplateRenderer,
        greet_template: Path,
        templates_dir: Path,
        context: RenderContext,
        monkeypatch: pytest.MonkeyPatch,
    ):
        """렌더 후 templates 디렉터리에는 템플릿 파일만 남음."""
        monkeypatch.setattr(sys, "dont_write_bytecode", False)

        renderer.render(make_template(greet_template), context)

        assert [p.name for p in templates_dir.iterdir()] == ["greet.py"]


# =============================================================================
# 실행 중 예외 → TemplateSyntaxError
# =============================================================================

class TestRenderFailure:
    """render 호출 중 예외 테스트."""

    def test_raise_in_render(
        self,
        renderer: TemplateRenderer,
        write_template: Callable[[str, str], Path],
        context: RenderContext,
    ):
        """원본 메시지 보존 + prefix."""
        path = write_template(
            "broken.py",
            "def render(context):\n    raise ValueError('missing closing brace')\n",
        )

        with pytest.raises(TemplateSyntaxError) as exc_info:
            renderer.render(make_template(path), context)

        assert exc_info.value.code == "TEMPLATE_SYNTAX_ERROR"
        assert exc_info.value.message.startswith("Your template has syntax errors: ")
        assert "missing closing brace" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_attribute_error_in_render(
        self,
        renderer: TemplateRenderer,
        write_template: Callable[[str, str], Path],
        context: RenderContext,
    ):
        """존재하지 않는 context 필드 접근."""
        path = write_template("typo.py", "def render(context):\n    return context.no_such_field\n")

        with pytest.raises(TemplateSyntaxError) as exc_info:
            renderer.render(make_template(path), context)

        assert "no_such_field" in exc_info.value.message

    def test_not_a_load_error(
        self,
        renderer: TemplateRenderer,
        write_template: Callable[[str, str], Path],
        context: RenderContext,
    ):
        """실행 중 예외는 TemplateLoadError로 다시 감싸지 않음."""
        path = write_template("boom.py", "def render(context):\n    raise RuntimeError('boom')\n")

        with pytest.raises(TemplateSyntaxError) as exc_info:
            renderer.render(make_template(path), context)

        assert not isinstance(exc_info.value, TemplateLoadError)

    def test_error_carries_render_context(
        self,
        renderer: TemplateRenderer,
        write_template: Callable[[str, str], Path],
        context: RenderContext,
    ):
        """에러 context에 직렬화된 RenderContext 포함."""
        path = write_template("bad_option.py", "def render(context):\n    raise KeyError('style')\n")

        with pytest.raises(TemplateSyntaxError) as exc_info:
            renderer.render(make_template(path), context)

        render_context = exc_info.value.context["render_context"]
        assert render_context == context.to_dict()
        assert render_context["created_file"]["file_name"] == "Button"
        assert render_context["current_date"] == "2024-01-15T09:30:00"
        assert render_context["author"] == {"name": "홍길동", "email": "gildong@example.com"}
        assert exc_info.value.to_dict()["code"] == "TEMPLATE_SYNTAX_ERROR"


# =============================================================================
# 로드 실패 → TemplateLoadError
# =============================================================================

class TestLoadFailure:
    """로드 단계 실패 테스트."""

    def test_missing_file(
        self,
        renderer: TemplateRenderer,
        templates_dir: Path,
        context: RenderContext,
    ):
        """파일 없음."""
        template = make_template(templates_dir / "ghost.py")

        with pytest.raises(TemplateLoadError) as exc_info:
            renderer.render(template, context)

        assert exc_info.value.code == "TEMPLATE_LOAD_FAILED"
        assert exc_info.value.message == "An error occurred rendering a template."
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_python_syntax_error(
        self,
        renderer: TemplateRenderer,
        write_template: Callable[[str, str], Path],
        context: RenderContext,
    ):
        """모듈 자체가 파싱 불가."""
        path = write_template("malformed.py", "def render(context)\n    return 'x'\n")

        with pytest.raises(TemplateLoadError) as exc_info:
            renderer.render(make_template(path), context)

        assert isinstance(exc_info.value.__cause__, SyntaxError)

    def test_exception_at_import(
        self,
        renderer: TemplateRenderer,
        write_template: Callable[[str, str], Path],
        context: RenderContext,
    ):
        """import 시점 예외."""
        path = write_template(
            "import_fail.py",
            "raise RuntimeError('at import')\n\ndef render(context):\n    return 'x'\n",
        )

        with pytest.raises(TemplateLoadError):
            renderer.render(make_template(path), context)

    def test_missing_render_function(
        self,
        renderer: TemplateRenderer,
        write_template: Callable[[str, str], Path],
        context: RenderContext,
    ):
        """render 함수 없음."""
        path = write_template("no_render.py", "def build(context):\n    return 'x'\n")

        with pytest.raises(TemplateLoadError) as exc_info:
            renderer.render(make_template(path), context)

        assert isinstance(exc_info.value.__cause__, AttributeError)


class TestLoadTemplateModule:
    """load_template_module 테스트."""

    def test_loads_module(self, greet_template: Path):
        module = load_template_module(greet_template)

        assert callable(module.render)
        assert module.__file__ == str(greet_template)

    def test_loads_non_py_extension(self, write_template: Callable[[str, str], Path]):
        """확장자와 무관하게 소스로 로드."""
        path = write_template("legacy.tpl", "def render(context):\n    return 'legacy'\n")

        module = load_template_module(path)

        assert module.render(None) == "legacy"
