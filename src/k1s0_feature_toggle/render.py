"""サーバー側描画時のマーカークラス生成"""

from __future__ import annotations

from collections.abc import Iterable

from .manager import FeatureManager
from .markers import FeatureState, marker_class
from .models import RootClasses


def feature_classes(
    manager: FeatureManager,
    feature_names: Iterable[str],
    prefix: str,
) -> list[str]:
    """各フィーチャーを 1 回ずつ評価してマーカークラスを返す。"""
    return [
        marker_class(prefix, name, FeatureState.from_bool(manager.is_feature_enabled(name)))
        for name in dict.fromkeys(feature_names)
    ]


def render_root_classes(
    manager: FeatureManager,
    feature_names: Iterable[str] | None,
    prefix: str,
    legacy: bool = False,
) -> RootClasses:
    """マーカーを付与したルートのクラス名を返す。

    feature_names が None の場合は登録済みの全フィーチャーを対象にする。
    legacy=True ではルート移行前の形式（<body> 側）で出力する。
    """
    names = manager.feature_names() if feature_names is None else feature_names
    classes = feature_classes(manager, names, prefix)
    if legacy:
        return RootClasses(body=classes)
    return RootClasses(html=classes)
