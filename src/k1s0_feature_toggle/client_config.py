"""クライアントへ渡す設定の生成"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .config import FeatureToggleConfig
from .experiment import validate_experiment


def build_client_config(
    config: FeatureToggleConfig,
    experiment_data: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """クライアント側ランタイムに埋め込む設定辞書を返す。

    A/B テスト設定はここで検証し、不正な場合は InvalidExperimentError を送出する。
    検証を通った設定は受け取った形のまま出力する。
    """
    experiment = validate_experiment(experiment_data)
    return {
        "featureClassPrefix": config.markers.class_prefix,
        "preferenceNamespace": config.preferences.namespace,
        "debounceMs": int(config.preferences.debounce_seconds * 1000),
        "abTestEnrollment": dict(experiment_data) if experiment is not None else {},
    }
