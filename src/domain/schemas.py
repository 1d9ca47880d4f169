"""
Data schemas for templater.

규칙:
- Template은 디렉터리 조회 때마다 새로 만든다 (캐시 없음, 디스크가 원천)
- RenderContext는 render 호출 전에 완성된 상태여야 한다 (frozen)
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

# =============================================================================
# Template
# =============================================================================

@dataclass(frozen=True)
class Template:
    """templates 디렉터리의 템플릿 파일 하나."""
    name: str  # 첫 '.' 앞부분
    filename: str  # 확장자 포함 파일명
    path: Path  # 소스 파일 절대 경로

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {
            "name": self.name,
            "filename": self.filename,
            "path": str(self.path),
        }


# =============================================================================
# Render Context
# =============================================================================

@dataclass(frozen=True)
class CreatedFile:
    """새로 만들 파일 정보."""
    file_name: str  # 확장자 제외
    extension: str  # '.' 포함, 없으면 ""
    directory_folder_name: str  # 대상 디렉터리 basename
    directory_path: str  # 대상 디렉터리 전체 경로


@dataclass(frozen=True)
class Author:
    """작성자 정보 (설정에서 읽음, 비어 있을 수 있음)."""
    name: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class RenderContext:
    """
    템플릿 render 함수에 전달되는 인자.

    템플릿 예시:
        def render(context):
            return "Hello, " + context.created_file.file_name
    """
    created_file: CreatedFile
    filename_with_extension: str
    current_date: datetime
    author: Author = field(default_factory=Author)
    custom_options: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {
            "created_file": {
                "file_name": self.created_file.file_name,
                "extension": self.created_file.extension,
                "directory_folder_name": self.created_file.directory_folder_name,
                "directory_path": self.created_file.directory_path,
            },
            "filename_with_extension": self.filename_with_extension,
            "current_date": self.current_date.isoformat(),
            "author": {
                "name": self.author.name,
                "email": self.author.email,
            },
            "custom_options": self.custom_options,
        }
