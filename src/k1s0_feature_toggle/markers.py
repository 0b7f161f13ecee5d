"""フィーチャー状態マーカー（クラス名）の命名と読み書き"""

from __future__ import annotations

from collections.abc import Container
from enum import StrEnum
from typing import Protocol


class FeatureState(StrEnum):
    """ルート要素上のフィーチャー状態。"""

    ENABLED = "enabled"
    DISABLED = "disabled"
    UNSET = "unset"

    @classmethod
    def from_bool(cls, enabled: bool) -> FeatureState:
        return cls.ENABLED if enabled else cls.DISABLED


class _MutableClassList(Protocol):
    def add(self, token: str) -> None: ...

    def remove(self, token: str) -> None: ...


def marker_class(prefix: str, name: str, state: FeatureState) -> str:
    """`<prefix>-<name>-enabled` / `<prefix>-<name>-disabled` を返す。"""
    if state is FeatureState.UNSET:
        raise ValueError("UNSET has no marker class")
    return f"{prefix}-{name}-{state.value}"


def read_state(classes: Container[str], prefix: str, name: str) -> FeatureState:
    """クラス集合からフィーチャー状態を読み取る。

    enabled マーカーを優先する（両方付いた不正なマークアップは有効として扱う）。
    """
    if marker_class(prefix, name, FeatureState.ENABLED) in classes:
        return FeatureState.ENABLED
    if marker_class(prefix, name, FeatureState.DISABLED) in classes:
        return FeatureState.DISABLED
    return FeatureState.UNSET


def write_state(
    classes: _MutableClassList, prefix: str, name: str, state: FeatureState
) -> None:
    """フィーチャー状態を書き込む。反対側のマーカーは必ず取り除く。"""
    enabled = marker_class(prefix, name, FeatureState.ENABLED)
    disabled = marker_class(prefix, name, FeatureState.DISABLED)
    classes.remove(enabled)
    classes.remove(disabled)
    if state is not FeatureState.UNSET:
        classes.add(enabled if state is FeatureState.ENABLED else disabled)
