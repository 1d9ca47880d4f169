"""
템플릿 저장소: templates 디렉터리 기반 카탈로그.

규칙:
- 디렉터리가 유일한 진실 원천 (목록은 매번 디스크에서 다시 계산)
- 템플릿 이름 = 파일명의 첫 '.' 앞부분, 중복 시 먼저 나온 파일 우선
- 템플릿 생성은 덮어쓰기 금지 (중복 이름 → fail-fast)
- 디렉터리는 필요할 때 생성, 삭제하지 않음
"""

import hashlib
import logging
import re
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock, Timeout

from src.core.config import Configuration
from src.core.explorer import open_in_file_explorer
from src.domain.constants import (
    DEFAULT_TEMPLATE_NAME,
    DEFAULT_TEMPLATES_DIR,
    TEMPLATE_EXTENSION,
    TEMPLATE_LOCKS_DIR,
)
from src.domain.errors import (
    DirectoryListError,
    FileWriteError,
    InvalidTemplateNameError,
    TemplateNameCollisionError,
    TemplatesDirCreationError,
    TemplatesDirNotFoundError,
)
from src.domain.schemas import Template
from src.templates.skeleton import load_template_skeleton

logger = logging.getLogger(__name__)

# =============================================================================
# Validation
# =============================================================================

TEMPLATE_NAME_MAX_LENGTH = 100
FORBIDDEN_CHARS = set('/\\:*?"<>|.')
WHITESPACE_PATTERN = re.compile(r"\s")


def validate_template_name(template_name: str) -> None:
    """
    템플릿 이름 유효성 검증 (UI 입력용).

    규칙:
    - 비어 있으면 안 됨
    - 최대 100자
    - 금지 문자: / \\ : * ? " < > | . 공백

    Args:
        template_name: 검증할 이름

    Raises:
        InvalidTemplateNameError
    """
    if not template_name:
        raise InvalidTemplateNameError("Template name cannot be empty.")

    if len(template_name) > TEMPLATE_NAME_MAX_LENGTH:
        raise InvalidTemplateNameError(
            f"Template name exceeds {TEMPLATE_NAME_MAX_LENGTH} characters.",
            length=len(template_name),
        )

    found_forbidden = set(template_name) & FORBIDDEN_CHARS
    if found_forbidden or WHITESPACE_PATTERN.search(template_name):
        raise InvalidTemplateNameError(
            "Template name contains forbidden characters.",
            forbidden=sorted(found_forbidden),
        )


def template_name_from_filename(filename: str) -> str:
    """파일명에서 템플릿 이름 추출 (첫 '.' 앞부분)."""
    return filename.split(".", 1)[0]


# =============================================================================
# Template Store
# =============================================================================

class TemplateStore:
    """
    templates 디렉터리 관리자.

    구조:
    <templates_dir>/
    ├── default.py   # 새 템플릿 시드 (선택)
    └── <name>.py    # def render(context) -> str
    """

    # 락 timeout (초)
    LOCK_TIMEOUT = 10.0

    def __init__(self, config: Configuration):
        """
        Args:
            config: 설정 (templates_dir 조회)
        """
        self.config = config

    # =========================================================================
    # Templates Directory
    # =========================================================================

    def templates_dir_path(self) -> Path:
        """
        templates 디렉터리 경로.

        설정(templates_dir)이 있으면 그 경로, 없으면 번들 기본 경로.
        디스크에 접근하지 않는다.
        """
        templates_dir = self.config.get("templates_dir")
        if templates_dir:
            return Path(templates_dir).expanduser()
        return DEFAULT_TEMPLATES_DIR

    def exists_templates_dir(self) -> bool:
        """templates 디렉터리 존재 여부."""
        return self.templates_dir_path().is_dir()

    def create_templates_dir_if_not_exists(self) -> Path:
        """
        templates 디렉터리 생성 (이미 있으면 그대로).

        동시에 다른 프로세스가 만든 경우도 성공으로 처리한다.

        Returns:
            templates 디렉터리 경로

        Raises:
            TemplatesDirCreationError: OS 에러로 생성 실패
        """
        templates_dir = self.templates_dir_path()
        if templates_dir.is_dir():
            return templates_dir

        try:
            templates_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TemplatesDirCreationError(
                "An error occurred when trying to create the templates directory.",
                templates_dir=str(templates_dir),
                reason=str(e),
            ) from e

        logger.info(f"Created templates directory {templates_dir}")
        return templates_dir

    def open_in_file_explorer(self) -> None:
        """
        templates 디렉터리를 OS 탐색기로 연다.

        Raises:
            TemplatesDirNotFoundError: 디렉터리 없음
            UnsupportedPlatformError: 지원하지 않는 OS
            ShellLaunchError: 탐색기 실행 실패
        """
        templates_dir = self.templates_dir_path()
        if not templates_dir.is_dir():
            raise TemplatesDirNotFoundError(
                "Templates directory not found.",
                templates_dir=str(templates_dir),
            )

        open_in_file_explorer(templates_dir)

    # =========================================================================
    # Templates
    # =========================================================================

    def template_file_path(self, template_name: str) -> Path:
        """
        템플릿 파일 경로.

        예: <templates_dir>/greet.py
        """
        return self.templates_dir_path() / f"{template_name}{TEMPLATE_EXTENSION}"

    def exists_template(self, template_name: str) -> bool:
        """템플릿 파일 존재 여부."""
        return self.template_file_path(template_name).is_file()

    def list_templates(self) -> dict[str, Template]:
        """
        템플릿 목록 조회.

        - 하위 디렉터리는 보지 않음 (파일만)
        - 디렉터리 목록 순서 유지 (정렬하지 않음)
        - 같은 이름이 여러 개면 먼저 나온 파일만 남김

        Returns:
            {name: Template}

        Raises:
            DirectoryListError: 디렉터리가 없거나 읽을 수 없음
        """
        templates_dir = self.templates_dir_path()

        try:
            entries = list(templates_dir.iterdir())
        except OSError as e:
            raise DirectoryListError(
                "Could not read the templates directory.",
                templates_dir=str(templates_dir),
                reason=str(e),
            ) from e

        templates: dict[str, Template] = {}
        for entry in entries:
            if not entry.is_file():
                continue

            name = template_name_from_filename(entry.name)
            if name in templates:
                continue

            templates[name] = Template(
                name=name,
                filename=entry.name,
                path=entry.absolute(),
            )

        return templates

    def default_template_skeleton(self) -> str:
        """
        새 템플릿의 기본 내용.

        templates/default.py가 있으면 그 내용, 없으면 내장 fallback.
        """
        return load_template_skeleton(self.template_file_path(DEFAULT_TEMPLATE_NAME))

    def _template_lock_path(self, template_name: str) -> Path:
        """
        템플릿별 락 파일 경로.

        락은 templates 디렉터리 밖(TEMPLATE_LOCKS_DIR)에 두어 사용자 폴더에
        흔적을 남기지 않는다. 파일명은 템플릿 절대 경로의 해시라서
        templates 디렉터리가 달라도 충돌하지 않는다.
        """
        template_path = str(self.template_file_path(template_name).absolute())
        digest = hashlib.sha256(template_path.encode("utf-8")).hexdigest()[:32]
        return TEMPLATE_LOCKS_DIR / f"{digest}.lock"

    @contextmanager
    def _template_lock(self, template_name: str) -> Generator[None, None, None]:
        """
        템플릿별 락 획득.

        Raises:
            FileWriteError: 락 디렉터리 생성 또는 락 파일 열기 실패
            TemplateNameCollisionError: 락 획득 실패 (다른 프로세스가 생성 중)
        """
        lock_path = self._template_lock_path(template_name)
        try:
            lock_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileWriteError(
                "Could not create the template lock directory.",
                path=str(lock_path.parent),
                reason=str(e),
            ) from e
        lock = FileLock(lock_path, timeout=self.LOCK_TIMEOUT)

        try:
            lock.acquire()
        except Timeout as e:
            raise TemplateNameCollisionError(
                f"Template '{template_name}' is being created by another process.",
                template_name=template_name,
                timeout=self.LOCK_TIMEOUT,
            ) from e
        except OSError as e:
            raise FileWriteError(
                "Could not acquire the template lock.",
                path=str(lock_path),
                reason=str(e),
            ) from e

        try:
            yield
        finally:
            lock.release()

    def create_file_template(self, template_name: str, content: str | None = None) -> Path:
        """
        새 템플릿 파일 생성.

        Args:
            template_name: 템플릿 이름
            content: 파일 내용 (None이면 기본 구조)

        Returns:
            생성된 템플릿 파일 경로

        Raises:
            TemplateNameCollisionError: 같은 이름이 이미 존재
            TemplatesDirCreationError: 디렉터리 생성 실패
            FileWriteError: 템플릿 파일 또는 락 쓰기 실패
        """
        # 중복 체크 (fail-fast)
        if self.exists_template(template_name):
            raise TemplateNameCollisionError(
                "The template name already exists, please choose another name.",
                template_name=template_name,
            )

        if content is None:
            content = self.default_template_skeleton()

        self.create_templates_dir_if_not_exists()
        template_path = self.template_file_path(template_name)

        with self._template_lock(template_name):
            try:
                # "x": 이미 있으면 FileExistsError (덮어쓰기 금지)
                with open(template_path, "x", encoding="utf-8") as f:
                    f.write(content)
            except FileExistsError as e:
                raise TemplateNameCollisionError(
                    "The template name already exists, please choose another name.",
                    template_name=template_name,
                ) from e
            except OSError as e:
                raise FileWriteError(
                    "Could not write the template file.",
                    template_name=template_name,
                    path=str(template_path),
                    reason=str(e),
                ) from e

        logger.info(f"Created template '{template_name}' at {template_path}")
        return template_path
