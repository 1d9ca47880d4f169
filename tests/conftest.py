"""
Pytest fixtures for templater tests.

구성:
- templates 디렉터리는 tmp_path 아래에 만든다 (번들 templates/ 사용 금지)
- 설정은 Configuration(dict)로 직접 주입 (환경변수 영향 없음)
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from src.core.config import Configuration
from src.templates.renderer import TemplateRenderer
from src.templates.store import TemplateStore

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    """테스트용 templates 디렉터리 (생성됨)."""
    path = tmp_path / "templates"
    path.mkdir()
    return path


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """새 파일을 만들 디렉터리."""
    path = tmp_path / "workspace" / "components"
    path.mkdir(parents=True)
    return path


@pytest.fixture(autouse=True)
def lock_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """템플릿 생성 락 디렉터리를 테스트 임시 경로로 돌린다 (templates 디렉터리 밖)."""
    path = tmp_path / "locks"
    monkeypatch.setattr("src.templates.store.TEMPLATE_LOCKS_DIR", path)
    return path


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def config_data(templates_dir: Path) -> dict:
    """테스트용 설정."""
    return {
        "templates_dir": str(templates_dir),
        "author": {
            "name": "홍길동",
            "email": "gildong@example.com",
        },
        "custom_options": {
            "license": "MIT",
            "indent": 4,
        },
    }


@pytest.fixture
def config(config_data: dict) -> Configuration:
    """Configuration 인스턴스."""
    return Configuration(config_data)


# =============================================================================
# Component Fixtures
# =============================================================================

@pytest.fixture
def store(config: Configuration) -> TemplateStore:
    """TemplateStore 인스턴스."""
    return TemplateStore(config)


@pytest.fixture
def renderer() -> TemplateRenderer:
    """TemplateRenderer 인스턴스."""
    return TemplateRenderer()


@pytest.fixture
def write_template(templates_dir: Path) -> Callable[[str, str], Path]:
    """templates 디렉터리에 템플릿 소스 파일을 직접 쓴다."""

    def _write(filename: str, source: str) -> Path:
        path = templates_dir / filename
        path.write_text(source, encoding="utf-8")
        return path

    return _write


GREET_TEMPLATE = '''\
def render(context):
    return "Hello, " + context.created_file.file_name
'''


@pytest.fixture
def greet_template(write_template: Callable[[str, str], Path]) -> Path:
    """'Hello, <file_name>'을 반환하는 템플릿."""
    return write_template("greet.py", GREET_TEMPLATE)
