"""フィーチャー判定に使う要件の実装"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .experiment import Experiment
from .models import User


@runtime_checkable
class Requirement(Protocol):
    """名前付きの引数なし真偽値条件。"""

    @property
    def name(self) -> str: ...

    def is_met(self) -> bool: ...


@dataclass(frozen=True)
class SimpleRequirement:
    """登録時に値が確定している要件。"""

    name: str
    value: bool

    def is_met(self) -> bool:
        return self.value


@dataclass(frozen=True)
class DynamicRequirement:
    """フィーチャー評価時に遅延評価される要件。"""

    name: str
    predicate: Callable[[], bool]

    def is_met(self) -> bool:
        return bool(self.predicate())


class ABTestRequirement:
    """A/B テストの treatment 側に振り分けられたユーザーで満たされる要件。

    振り分けは実験名とユーザー ID のハッシュで決まるため、同じユーザーには
    常に同じ結果を返す。匿名ユーザーと無効な実験では常に満たされない。
    """

    def __init__(self, experiment: Experiment, user: User, name: str | None = None) -> None:
        self._experiment = experiment
        self._user = user
        self._name = name or experiment.name

    @property
    def name(self) -> str:
        return self._name

    def is_met(self) -> bool:
        if not self._experiment.enabled or self._user.is_anonymous:
            return False
        digest = hashlib.sha256(
            f"{self._experiment.name}:{self._user.user_id}".encode()
        ).hexdigest()
        return int(digest[:8], 16) % 2 == 0
