"""ドキュメント上のフィーチャー状態の読み書きと永続化"""

from __future__ import annotations

import logging

from .config import MarkersSection, PreferencesSection
from .debounce import KeyedDebouncer
from .document import Document
from .exceptions import UnknownFeatureToggleError
from .markers import FeatureState, marker_class, read_state, write_state
from .models import User
from .preferences import PreferenceStore

logger = logging.getLogger(__name__)


class FeatureStateSynchronizer:
    """クライアント側のフィーチャー状態を管理する。

    状態は現行ルート（<html>）のマーカーが正であり、レガシールート（<body>）は
    ルート移行前にキャッシュされたマークアップを読むためだけに参照する。
    """

    def __init__(
        self,
        document: Document,
        user: User,
        store: PreferenceStore,
        markers: MarkersSection | None = None,
        preferences: PreferencesSection | None = None,
    ) -> None:
        self._document = document
        self._user = user
        self._store = store
        self._markers = markers or MarkersSection()
        self._preferences = preferences or PreferencesSection()
        self._debouncer = KeyedDebouncer(self._preferences.debounce_seconds)

    @property
    def _prefix(self) -> str:
        return self._markers.class_prefix

    def is_enabled(self, name: str) -> bool:
        """フィーチャーが有効か。現行ルートに無ければレガシールートも参照する。"""
        enabled = marker_class(self._prefix, name, FeatureState.ENABLED)
        return (
            enabled in self._document.document_element.class_list
            or enabled in self._document.body.class_list
        )

    def state(self, name: str) -> FeatureState:
        """現行ルート、レガシールートの順に状態を読む。"""
        current = read_state(self._document.document_element.class_list, self._prefix, name)
        if current is not FeatureState.UNSET:
            return current
        return read_state(self._document.body.class_list, self._prefix, name)

    def toggle_classes(self, name: str, override: bool | None = None) -> bool:
        """マーカーを切り替えて新しい状態を返す。永続化はしない。

        override を指定するとマーカーの有無に関わらずその状態を現行ルートに書き込む。
        現行ルートにマーカーが無い場合はレガシールートの状態から遷移し、
        結果を現行ルートへ移す。

        Raises:
            UnknownFeatureToggleError: override 無しで、どちらのルートにもマーカーが無い場合
        """
        root = self._document.document_element.class_list
        legacy = self._document.body.class_list
        current = read_state(root, self._prefix, name)
        migrating = current is FeatureState.UNSET
        if migrating:
            current = read_state(legacy, self._prefix, name)
            if current is FeatureState.UNSET and override is None:
                raise UnknownFeatureToggleError(name)

        enabled = override if override is not None else current is FeatureState.DISABLED
        write_state(root, self._prefix, name, FeatureState.from_bool(enabled))
        if migrating:
            write_state(legacy, self._prefix, name, FeatureState.UNSET)
        logger.debug(
            "Feature toggled",
            extra={"feature": name, "enabled": enabled, "migrated": migrating},
        )
        return enabled

    def toggle(self, name: str, override: bool | None = None) -> bool:
        """フィーチャーを切り替え、新しい状態を保存して返す。"""
        enabled = self.toggle_classes(name, override)
        self.save(name, enabled)
        return enabled

    def save(self, name: str, enabled: bool) -> None:
        """ログインユーザーの場合のみ、デバウンスして設定を書き込む。

        書き込みの予約に失敗してもログに残すだけで、呼び出し元には伝播しない。
        """
        if self._user.is_anonymous:
            return
        key = self._preferences.key_for(name)
        value = 1 if enabled else 0

        async def write() -> None:
            await self._store.set_option(key, value)

        try:
            self._debouncer.call(key, write)
        except RuntimeError as e:
            logger.warning(
                "Failed to schedule preference write",
                extra={"key": key, "error": str(e)},
            )

    async def drain(self) -> None:
        """実行中の設定書き込みの完了を待つ。"""
        await self._debouncer.drain()
