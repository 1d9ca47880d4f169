"""
Application Services.

역할:
- templater: 새 템플릿 / 템플릿 기반 새 파일 (사용자 액션)
"""

from .templater import Templater

__all__ = [
    "Templater",
]
