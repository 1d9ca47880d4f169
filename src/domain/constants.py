"""
Domain Constants: templater 전역 상수.

템플릿 파일 규칙, 기본 경로 등 시스템 전반에서 사용되는 값들.
"""

import tempfile
from pathlib import Path

# =============================================================================
# Template Files (템플릿 파일 규칙)
# =============================================================================
# templates/
# ├── default.py   # 새 템플릿의 시드 (예약 이름)
# └── greet.py     # def render(context) -> str

TEMPLATE_EXTENSION = ".py"
TEMPLATE_RENDER_FUNCTION = "render"
DEFAULT_TEMPLATE_NAME = "default"

# =============================================================================
# Paths
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent

# 설정이 없을 때 사용하는 번들 templates/ 디렉터리
DEFAULT_TEMPLATES_DIR = PROJECT_ROOT / "templates"

# 설정 파일 (TEMPLATER_CONFIG 환경변수로 변경 가능)
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "templater.yaml"

# 템플릿 생성 락 (filelock). templates 디렉터리 밖, 시스템 임시 디렉터리에 둔다.
TEMPLATE_LOCKS_DIR = Path(tempfile.gettempdir()) / "templater-locks"

# =============================================================================
# File Explorer (sys.platform → 실행 명령)
# =============================================================================

FILE_EXPLORER_COMMANDS = {
    "win32": "explorer",
    "linux": "xdg-open",
    "darwin": "open",
}
