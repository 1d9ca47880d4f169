"""
Templater service: 사용자 액션 2개 + 보조 기능.

- new_template: 새 템플릿 만들기 (기본 구조로 시드)
- new_file: 템플릿으로 새 파일 만들기
- templates / open_templates_dir: 목록, 탐색기로 열기

UI 계층(API, CLI)은 이 서비스만 호출한다.
"""

import logging
from pathlib import Path

from src.core.config import Configuration
from src.domain.errors import TemplateNotFoundError
from src.domain.schemas import Template
from src.templates.generator import FileGenerator
from src.templates.store import TemplateStore, validate_template_name

logger = logging.getLogger(__name__)


class Templater:
    """템플릿 관련 사용자 액션."""

    def __init__(self, config: Configuration | None = None):
        self.config = config or Configuration.from_environment()
        self.store = TemplateStore(self.config)
        self.generator = FileGenerator(self.store, self.config)

    def templates(self) -> list[Template]:
        """사용 가능한 템플릿 목록 (디렉터리가 없으면 만들고 빈 목록)."""
        self.store.create_templates_dir_if_not_exists()
        return list(self.store.list_templates().values())

    def new_template(self, template_name: str) -> Path:
        """
        새 템플릿 생성.

        Args:
            template_name: 템플릿 이름 (확장자 제외)

        Returns:
            생성된 템플릿 파일 경로

        Raises:
            InvalidTemplateNameError: 이름 규칙 위반
            TemplateNameCollisionError: 이미 존재
        """
        validate_template_name(template_name)
        return self.store.create_file_template(template_name)

    def new_file(
        self,
        file_name: str,
        template_name: str,
        target_dir: Path | str,
    ) -> Path:
        """
        템플릿으로 새 파일 생성.

        Args:
            file_name: 새 파일명 (확장자 포함)
            template_name: 사용할 템플릿 이름
            target_dir: 파일을 만들 디렉터리

        Returns:
            생성된 파일 경로

        Raises:
            TemplateNotFoundError: 템플릿 없음
            TemplateDirectoryMissingError: 대상 디렉터리 없음
            TemplateSyntaxError, TemplateLoadError: 렌더 실패
        """
        self.store.create_templates_dir_if_not_exists()
        template = self.store.list_templates().get(template_name)
        if template is None:
            raise TemplateNotFoundError(
                "Inexistent template!",
                template_name=template_name,
            )

        return self.generator.create_new_file_based_on_template(template, file_name, target_dir)

    def open_templates_dir(self) -> Path:
        """templates 디렉터리를 탐색기로 연다 (없으면 먼저 생성)."""
        templates_dir = self.store.create_templates_dir_if_not_exists()
        self.store.open_in_file_explorer()
        return templates_dir
