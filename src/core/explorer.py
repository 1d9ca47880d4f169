"""
File explorer launcher: OS 파일 탐색기로 디렉터리 열기.

- Windows: explorer / Linux: xdg-open / macOS: open
- fire-and-forget: 프로세스 실행 성공까지만 확인, 종료를 기다리지 않음
"""

import logging
import subprocess
import sys
from pathlib import Path

from src.domain.constants import FILE_EXPLORER_COMMANDS
from src.domain.errors import ShellLaunchError, UnsupportedPlatformError

logger = logging.getLogger(__name__)


def get_file_explorer_command(platform: str | None = None) -> str:
    """
    플랫폼별 탐색기 명령 반환.

    Args:
        platform: sys.platform 값 (None이면 현재 플랫폼)

    Raises:
        UnsupportedPlatformError: 지원하지 않는 플랫폼
    """
    platform = platform or sys.platform
    command = FILE_EXPLORER_COMMANDS.get(platform)
    if command is None:
        raise UnsupportedPlatformError(
            f"Opening folders is not supported on platform '{platform}'.",
            platform=platform,
        )
    return command


def open_in_file_explorer(directory: Path) -> subprocess.Popen:
    """
    디렉터리를 탐색기로 연다.

    Args:
        directory: 열 디렉터리

    Returns:
        실행된 프로세스 (기다리지 않음)

    Raises:
        UnsupportedPlatformError: 지원하지 않는 플랫폼
        ShellLaunchError: 명령 실행 실패
    """
    command = get_file_explorer_command()

    try:
        proc = subprocess.Popen(
            [command, str(directory)],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        raise ShellLaunchError(
            "An internal error occurred opening the templates directory.",
            command=command,
            directory=str(directory),
        ) from e

    logger.info(f"Opened {directory} with {command} (pid={proc.pid})")
    return proc
