"""ユーザー設定の書き込みインターフェース"""

from __future__ import annotations

from abc import ABC, abstractmethod
from urllib.parse import quote

import httpx

from .config import PreferencesSection
from .exceptions import PreferenceWriteError


class PreferenceStore(ABC):
    """ユーザー設定ストア抽象基底クラス。"""

    @abstractmethod
    async def set_option(self, key: str, value: int) -> None:
        """キーに 0 / 1 を保存する。"""
        ...


class InMemoryPreferenceStore(PreferenceStore):
    """テスト用インメモリ設定ストア。"""

    def __init__(self) -> None:
        self._options: dict[str, int] = {}
        self.writes: list[tuple[str, int]] = []

    async def set_option(self, key: str, value: int) -> None:
        self._options[key] = value
        self.writes.append((key, value))

    def get_option(self, key: str) -> int | None:
        return self._options.get(key)


class HttpPreferenceStore(PreferenceStore):
    """httpx を使った設定 API クライアント。"""

    def __init__(self, config: PreferencesSection) -> None:
        self._config = config
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if config.api_key:
            headers["X-API-Key"] = config.api_key
        self._headers = headers

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.base_url,
            headers=self._headers,
            timeout=self._config.timeout_seconds,
        )

    async def set_option(self, key: str, value: int) -> None:
        try:
            async with self._make_client() as client:
                resp = await client.post(
                    f"/api/v1/preferences/{quote(key, safe='')}",
                    json={"value": value},
                )
        except httpx.HTTPError as e:
            raise PreferenceWriteError(
                f"Failed to save preference {key}: {e}",
                cause=e,
            ) from e
        if resp.status_code >= 400:
            raise PreferenceWriteError(
                f"Failed to save preference {key}: HTTP {resp.status_code}: {resp.text}"
            )
