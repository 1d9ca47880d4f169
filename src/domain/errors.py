"""
Error definitions for templater.

규칙:
- 조용한 실패 금지 → 모든 실패는 TemplaterError 하위 클래스로 즉시 전파
- 메시지는 사용자에게 그대로 보여줄 수 있는 문장
- 원인 예외는 `raise ... from e`로 연결 (스택 노이즈는 메시지에 넣지 않음)
"""

from typing import Any


class TemplaterError(Exception):
    """
    templater 공통 에러.

    UI 계층(API, CLI)은 code로 분기하고 message를 그대로 표시한다.

    Usage:
        raise TemplateNotFoundError("Inexistent template!", template_name="greet")
    """

    code: str = "TEMPLATER_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(f"[{self.code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Template Store ===
    TEMPLATE_EXISTS = "TEMPLATE_EXISTS"
    INVALID_TEMPLATE_NAME = "INVALID_TEMPLATE_NAME"
    TEMPLATES_DIR_CREATION_FAILED = "TEMPLATES_DIR_CREATION_FAILED"
    TEMPLATES_DIR_NOT_FOUND = "TEMPLATES_DIR_NOT_FOUND"
    DIRECTORY_LIST_FAILED = "DIRECTORY_LIST_FAILED"
    FILE_WRITE_FAILED = "FILE_WRITE_FAILED"

    # === File Explorer ===
    UNSUPPORTED_PLATFORM = "UNSUPPORTED_PLATFORM"
    SHELL_LAUNCH_FAILED = "SHELL_LAUNCH_FAILED"

    # === Render ===
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    DIRECTORY_NOT_FOUND = "DIRECTORY_NOT_FOUND"
    TEMPLATE_SYNTAX_ERROR = "TEMPLATE_SYNTAX_ERROR"
    TEMPLATE_LOAD_FAILED = "TEMPLATE_LOAD_FAILED"


# =============================================================================
# Template Store
# =============================================================================

class TemplateNameCollisionError(TemplaterError):
    """같은 이름의 템플릿이 이미 존재."""

    code = ErrorCodes.TEMPLATE_EXISTS


class InvalidTemplateNameError(TemplaterError):
    """템플릿 이름 규칙 위반 (UI 입력 검증)."""

    code = ErrorCodes.INVALID_TEMPLATE_NAME


class TemplatesDirCreationError(TemplaterError):
    """templates 디렉터리 생성 실패 (OS 에러 래핑)."""

    code = ErrorCodes.TEMPLATES_DIR_CREATION_FAILED


class TemplatesDirNotFoundError(TemplaterError):
    """templates 디렉터리 없음 (탐색기로 열기 시)."""

    code = ErrorCodes.TEMPLATES_DIR_NOT_FOUND


class DirectoryListError(TemplaterError):
    """templates 디렉터리 목록 조회 실패."""

    code = ErrorCodes.DIRECTORY_LIST_FAILED


class FileWriteError(TemplaterError):
    """템플릿/새 파일/락 경로 쓰기 실패 (OS 에러 래핑)."""

    code = ErrorCodes.FILE_WRITE_FAILED


# =============================================================================
# File Explorer
# =============================================================================

class UnsupportedPlatformError(TemplaterError):
    """지원하지 않는 OS (Windows, Linux, macOS 외)."""

    code = ErrorCodes.UNSUPPORTED_PLATFORM


class ShellLaunchError(TemplaterError):
    """탐색기 프로세스 실행 실패."""

    code = ErrorCodes.SHELL_LAUNCH_FAILED


# =============================================================================
# Render
# =============================================================================

class TemplateNotFoundError(TemplaterError):
    """호출 시점에 템플릿 파일이 없음."""

    code = ErrorCodes.TEMPLATE_NOT_FOUND


class TemplateDirectoryMissingError(TemplaterError):
    """새 파일을 만들 대상 디렉터리가 없음."""

    code = ErrorCodes.DIRECTORY_NOT_FOUND


class TemplateSyntaxError(TemplaterError):
    """템플릿의 render 함수 실행 중 예외 발생 (사용자 템플릿 결함)."""

    code = ErrorCodes.TEMPLATE_SYNTAX_ERROR


class TemplateLoadError(TemplaterError):
    """템플릿 모듈 로드 실패 등 분류되지 않은 렌더 실패."""

    code = ErrorCodes.TEMPLATE_LOAD_FAILED
