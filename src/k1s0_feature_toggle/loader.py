"""YAML 設定ファイルの読み込み"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .config import FeatureToggleConfig
from .exceptions import ConfigError, FeatureToggleErrorCodes
from .merger import deep_merge


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(
            code=FeatureToggleErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    except yaml.YAMLError as e:
        raise ConfigError(
            code=FeatureToggleErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            code=FeatureToggleErrorCodes.VALIDATION,
            message=f"Config root must be a mapping, got {type(data).__name__}: {path}",
        )
    return data


def load(
    base_path: Path,
    env_path: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> FeatureToggleConfig:
    """設定ファイルを読み込んで FeatureToggleConfig を返す。

    base_path: ベース設定ファイルパス（必須）
    env_path: 環境別設定ファイルパス（オプション）。存在する場合はベースにマージ。
    overrides: ホストアプリケーションから渡す上書き値。ファイルより優先する。
    """
    data = _read_yaml(base_path)
    if env_path is not None and env_path.exists():
        data = deep_merge(data, _read_yaml(env_path))
    if overrides:
        data = deep_merge(data, dict(overrides))
    try:
        return FeatureToggleConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            code=FeatureToggleErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
