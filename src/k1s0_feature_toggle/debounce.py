"""キーごとの asyncio デバウンス"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class KeyedDebouncer:
    """キーごとに最後の呼び出しだけを待機時間後に実行する。

    同じキーへの呼び出しは保留中のタイマーを置き換え、異なるキーは独立して
    デバウンスされる。実行時の例外はログに記録して捨てる。
    """

    def __init__(
        self,
        wait_seconds: float,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._wait_seconds = wait_seconds
        self._loop = loop
        self._timers: dict[str, asyncio.TimerHandle] = {}
        self._tasks: set[asyncio.Task[None]] = set()

    def call(self, key: str, func: Callable[[], Awaitable[None]]) -> None:
        """func の実行を予約する。実行中のイベントループが必要。"""
        loop = self._loop or asyncio.get_running_loop()
        timer = self._timers.pop(key, None)
        if timer is not None:
            timer.cancel()
        self._timers[key] = loop.call_later(self._wait_seconds, self._fire, loop, key, func)

    def pending_keys(self) -> list[str]:
        """タイマー待機中のキー一覧。"""
        return list(self._timers)

    async def drain(self) -> None:
        """実行中のタスクの完了を待つ。待機中のタイマーは発火させない。"""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _fire(
        self,
        loop: asyncio.AbstractEventLoop,
        key: str,
        func: Callable[[], Awaitable[None]],
    ) -> None:
        self._timers.pop(key, None)
        task = loop.create_task(self._run(key, func))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, key: str, func: Callable[[], Awaitable[None]]) -> None:
        try:
            await func()
        except Exception as e:
            logger.warning(
                "Debounced call failed",
                extra={"key": key, "error": str(e)},
            )
