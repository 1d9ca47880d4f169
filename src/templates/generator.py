"""
템플릿 기반 파일 생성.

흐름:
1. 템플릿 존재 재확인 (오래된 목록을 믿지 않음)
2. 대상 디렉터리 존재 확인
3. RenderContext 구성 (파일 정보 + 설정의 author/custom_options)
4. 렌더 → 대상 파일 쓰기 (이미 있으면 덮어씀)

실패 시 파일시스템에 아무것도 쓰지 않는다.
"""

import logging
from datetime import datetime
from pathlib import Path

from src.core.config import Configuration
from src.domain.errors import (
    FileWriteError,
    TemplateDirectoryMissingError,
    TemplateNotFoundError,
)
from src.domain.schemas import Author, CreatedFile, RenderContext, Template
from src.templates.renderer import TemplateRenderer
from src.templates.store import TemplateStore

logger = logging.getLogger(__name__)


def build_render_context(
    new_file_name: str,
    target_dir: Path,
    config: Configuration,
    current_date: datetime | None = None,
) -> RenderContext:
    """
    RenderContext 구성.

    Args:
        new_file_name: 새 파일명 (확장자 포함)
        target_dir: 파일을 만들 디렉터리
        config: author, custom_options 조회용
        current_date: 렌더 시각 (None이면 현재)

    Returns:
        완성된 RenderContext
    """
    file_path = Path(new_file_name)
    created_file = CreatedFile(
        file_name=file_path.stem,
        extension=file_path.suffix,
        directory_folder_name=target_dir.name,
        directory_path=str(target_dir),
    )
    author = Author(
        name=config.get("author.name"),
        email=config.get("author.email"),
    )

    return RenderContext(
        created_file=created_file,
        filename_with_extension=new_file_name,
        current_date=current_date or datetime.now(),
        author=author,
        custom_options=config.get("custom_options", {}),
    )


class FileGenerator:
    """템플릿으로 새 파일을 만든다."""

    def __init__(
        self,
        store: TemplateStore,
        config: Configuration,
        renderer: TemplateRenderer | None = None,
    ):
        self.store = store
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    def create_new_file_based_on_template(
        self,
        template: Template,
        new_file_name: str,
        target_dir: Path | str,
    ) -> Path:
        """
        템플릿으로 새 파일 생성.

        Args:
            template: 사용할 템플릿
            new_file_name: 새 파일명 (확장자 포함)
            target_dir: 파일을 만들 디렉터리

        Returns:
            생성된 파일 경로

        Raises:
            TemplateNotFoundError: 템플릿이 더 이상 없음
            TemplateDirectoryMissingError: 대상 디렉터리 없음
            TemplateSyntaxError, TemplateLoadError: 렌더 실패
            FileWriteError: 대상 파일 쓰기 실패 (하위 폴더 없음, 권한 등)
        """
        if not self.store.exists_template(template.name):
            raise TemplateNotFoundError(
                "Inexistent template!",
                template_name=template.name,
            )

        target_dir = Path(target_dir)
        if not target_dir.is_dir():
            raise TemplateDirectoryMissingError(
                "The directory to create the file does not exist.",
                directory=str(target_dir),
            )

        context = build_render_context(new_file_name, target_dir, self.config)
        content = self.renderer.render(template, context)

        new_file_path = target_dir / new_file_name
        try:
            new_file_path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write {new_file_path}: {e}")
            raise FileWriteError(
                f"Could not write the new file: {e.strerror or e}",
                path=str(new_file_path),
            ) from e

        logger.info(f"Created {new_file_path} from template '{template.name}'")
        return new_file_path
