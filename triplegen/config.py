"""통합 설정 로더 모듈.

YAML 설정 파일을 로드하고 관리합니다.
환경변수 오버라이드를 지원합니다.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


# 기본 설정 디렉토리
DEFAULT_CONFIG_DIR = Path(os.environ.get("TRIPLEGEN_CONFIG_DIR", "configs"))

DEFAULT_NAMESPACE = "http://my.graph#"
DEFAULT_FILE_PATTERN = "triples{index:03d}.nt"
DEFAULT_MANIFEST_NAME = "__MANIFEST.txt"


def load_yaml(path: Path | str) -> Dict[str, Any]:
    """YAML 파일 로드."""
    path = Path(path)
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_env_or_default(key: str, default: Any) -> Any:
    """환경변수 또는 기본값 반환."""
    env_val = os.environ.get(key)
    if env_val is not None:
        # 타입 변환
        if isinstance(default, bool):
            return env_val.lower() in ("true", "1", "yes")
        if isinstance(default, int):
            return int(env_val)
        if isinstance(default, float):
            return float(env_val)
        return env_val
    return default


@dataclass
class AppConfig:
    """앱 전역 설정."""

    name: str = "triplegen"
    version: str = "1.0.0"
    description: str = "Synthetic N-Triples corpus generator"


@dataclass
class LoggingConfig:
    """로깅 설정."""

    level: str = "WARNING"
    json_format: bool = True
    file: Optional[str] = None
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5


@dataclass
class OutputConfig:
    """출력 파일 설정."""

    namespace: str = DEFAULT_NAMESPACE
    file_pattern: str = DEFAULT_FILE_PATTERN
    manifest_name: str = DEFAULT_MANIFEST_NAME
    encoding: str = "utf-8"


class Config:
    """통합 설정 클래스."""

    _instance: Optional["Config"] = None

    def __init__(self, config_dir: Path | str = DEFAULT_CONFIG_DIR):
        self.config_dir = Path(config_dir)
        self._app: Optional[AppConfig] = None
        self._logging: Optional[LoggingConfig] = None
        self._output: Optional[OutputConfig] = None
        self._raw: Dict[str, Any] = {}
        self._load_all()

    @classmethod
    def get_instance(cls, config_dir: Path | str = DEFAULT_CONFIG_DIR) -> "Config":
        """싱글톤 인스턴스 반환."""
        if cls._instance is None:
            cls._instance = cls(config_dir)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """싱글톤 인스턴스 리셋 (테스트용)."""
        cls._instance = None

    def _load_all(self) -> None:
        """설정 파일 로드."""
        self._raw = load_yaml(self.config_dir / "generator.yaml")

    @property
    def app(self) -> AppConfig:
        """앱 설정."""
        if self._app is None:
            app_cfg = self._raw.get("app", {})
            self._app = AppConfig(
                name=app_cfg.get("name", "triplegen"),
                version=app_cfg.get("version", "1.0.0"),
                description=app_cfg.get("description", ""),
            )
        return self._app

    @property
    def logging(self) -> LoggingConfig:
        """로깅 설정."""
        if self._logging is None:
            log_cfg = self._raw.get("logging", {})
            self._logging = LoggingConfig(
                level=get_env_or_default("TRIPLEGEN_LOG_LEVEL", log_cfg.get("level", "WARNING")),
                json_format=get_env_or_default("TRIPLEGEN_JSON_LOGS", log_cfg.get("json_format", True)),
                file=get_env_or_default("TRIPLEGEN_LOG_FILE", log_cfg.get("file")),
                max_bytes=log_cfg.get("max_bytes", 10 * 1024 * 1024),
                backup_count=log_cfg.get("backup_count", 5),
            )
        return self._logging

    @property
    def output(self) -> OutputConfig:
        """출력 파일 설정."""
        if self._output is None:
            out_cfg = self._raw.get("output", {})
            self._output = OutputConfig(
                namespace=get_env_or_default("TRIPLEGEN_NAMESPACE", out_cfg.get("namespace", DEFAULT_NAMESPACE)),
                file_pattern=out_cfg.get("file_pattern", DEFAULT_FILE_PATTERN),
                manifest_name=out_cfg.get("manifest_name", DEFAULT_MANIFEST_NAME),
                encoding=out_cfg.get("encoding", "utf-8"),
            )
        return self._output

    def get_raw(self, section: str) -> Dict[str, Any]:
        """원시 설정 데이터 반환."""
        return self._raw.get(section, {})


# 편의 함수
def get_config(config_dir: Path | str = DEFAULT_CONFIG_DIR) -> Config:
    """설정 인스턴스 반환."""
    return Config.get_instance(config_dir)
