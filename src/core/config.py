"""
Configuration provider: 사용자 설정 읽기 전용 접근.

우선순위 (낮음 → 높음):
1. 기본값 (DEFAULT_CONFIG)
2. YAML 파일 (TEMPLATER_CONFIG 또는 프로젝트 루트 templater.yaml)
3. 환경변수 (현재 디렉터리 기준 .env 포함)

키:
- templates_dir: templates 디렉터리 경로 (없으면 번들 기본값)
- author.name / author.email: 작성자 정보
- custom_options: 템플릿에 그대로 전달되는 임의의 매핑

core는 설정을 쓰지 않는다.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from src.domain.constants import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "templates_dir": None,
    "author": {
        "name": None,
        "email": None,
    },
    "custom_options": {},
}

# 환경변수 → 설정 키
ENV_OVERRIDES = {
    "TEMPLATER_TEMPLATES_DIR": "templates_dir",
    "TEMPLATER_AUTHOR_NAME": "author.name",
    "TEMPLATER_AUTHOR_EMAIL": "author.email",
}

_MISSING = object()


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """
    설정 파일 로드.

    Args:
        config_path: YAML 경로 (None이면 TEMPLATER_CONFIG 또는 기본 경로)

    Returns:
        설정 dict (파일이 없으면 빈 dict)
    """
    if config_path is None:
        env_path = os.environ.get("TEMPLATER_CONFIG")
        config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[str, Any] | None = yaml.safe_load(f)

    logger.debug(f"Loaded config from {config_path}")
    return data or {}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """중첩 dict 병합 (override 우선)."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _set_dotted(data: dict[str, Any], key: str, value: Any) -> None:
    """'author.name' 형태 키로 값 설정."""
    *parents, leaf = key.split(".")
    node = data
    for part in parents:
        if not isinstance(node.get(part), dict):
            node[part] = {}
        node = node[part]
    node[leaf] = value


class Configuration:
    """
    읽기 전용 설정 저장소.

    Usage:
        config = Configuration.from_environment()
        config.get("author.name")
        config.get("custom_options", {})
    """

    def __init__(self, data: dict[str, Any] | None = None):
        """
        Args:
            data: 기본값 위에 덮어쓸 설정
        """
        self._data = _merge(DEFAULT_CONFIG, data or {})

    @classmethod
    def from_environment(cls, config_path: Path | None = None) -> "Configuration":
        """YAML 파일 + 환경변수(.env 포함)로 설정 구성."""
        load_dotenv(find_dotenv(usecwd=True))
        data = load_config(config_path)

        for env_key, config_key in ENV_OVERRIDES.items():
            value = os.environ.get(env_key)
            if value:
                _set_dotted(data, config_key, value)

        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """
        설정 값 조회.

        Args:
            key: 점으로 구분된 키 (예: "author.email")
            default: 값이 없거나 None일 때 반환

        Returns:
            설정 값 (mapping은 복사본)
        """
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict):
                return default
            node = node.get(part, _MISSING)
            if node is _MISSING:
                return default

        if node is None:
            return default
        return copy.deepcopy(node)
