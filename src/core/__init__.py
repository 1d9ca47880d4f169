"""
Core layer: 설정과 OS 연동.

역할:
- 설정 읽기 (config.py)
- 파일 탐색기 실행 (explorer.py)
"""

from .config import Configuration, load_config
from .explorer import get_file_explorer_command, open_in_file_explorer

__all__ = [
    # config
    "Configuration",
    "load_config",
    # explorer
    "get_file_explorer_command",
    "open_in_file_explorer",
]
