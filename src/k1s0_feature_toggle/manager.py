"""要件の合成によるフィーチャー判定"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from .exceptions import (
    DuplicateFeatureError,
    DuplicateRequirementError,
    UnknownFeatureError,
    UnknownRequirementError,
)
from .requirements import DynamicRequirement, Requirement, SimpleRequirement

logger = logging.getLogger(__name__)


class FeatureManager:
    """要件とフィーチャーのレジストリ。

    1 インスタンスが 1 つの判定コンテキスト（1 リクエストの描画など）に対応する。
    フィーチャーは登録された全要件が満たされた場合のみ有効になる。
    評価結果はキャッシュしない。
    """

    def __init__(self) -> None:
        self._requirements: dict[str, Requirement] = {}
        self._features: dict[str, tuple[str, ...]] = {}

    def register_simple_requirement(self, name: str, value: bool) -> None:
        """値が確定している要件を登録する。"""
        self._add_requirement(SimpleRequirement(name, bool(value)))

    def register_requirement(
        self,
        requirement: Requirement | str,
        predicate: Callable[[], bool] | None = None,
    ) -> None:
        """遅延評価される要件を登録する。

        要件オブジェクトを直接渡すか、名前と述語関数を渡す。
        """
        if isinstance(requirement, str):
            if predicate is None:
                raise TypeError(f"predicate is required for requirement {requirement}")
            requirement = DynamicRequirement(requirement, predicate)
        self._add_requirement(requirement)

    def _add_requirement(self, requirement: Requirement) -> None:
        if requirement.name in self._requirements:
            raise DuplicateRequirementError(requirement.name)
        self._requirements[requirement.name] = requirement

    def register_feature(self, name: str, requirements: str | Iterable[str]) -> None:
        """フィーチャーを登録する。

        要件の存在チェックは評価時まで遅延するため、要件とフィーチャーの
        登録順序は問わない。
        """
        if name in self._features:
            raise DuplicateFeatureError(name)
        if isinstance(requirements, str):
            requirements = [requirements]
        self._features[name] = tuple(dict.fromkeys(requirements))

    def is_feature_enabled(self, name: str) -> bool:
        """フィーチャーが有効かを判定する。

        参照する要件がすべて登録済みかを先に確認してから、登録順に評価し、
        最初に満たされない要件で打ち切る。要件が 1 つも無いフィーチャーは無効とする。
        """
        requirement_names = self.requirements_of(name)
        for requirement_name in requirement_names:
            if requirement_name not in self._requirements:
                raise UnknownRequirementError(requirement_name, feature=name)

        enabled = bool(requirement_names)
        for requirement_name in requirement_names:
            if not self._requirements[requirement_name].is_met():
                enabled = False
                break
        logger.debug(
            "Feature evaluated",
            extra={"feature": name, "enabled": enabled},
        )
        return enabled

    def is_requirement_met(self, name: str) -> bool:
        requirement = self._requirements.get(name)
        if requirement is None:
            raise UnknownRequirementError(name)
        return requirement.is_met()

    def has_feature(self, name: str) -> bool:
        return name in self._features

    def feature_names(self) -> list[str]:
        """登録順のフィーチャー名一覧。"""
        return list(self._features)

    def requirements_of(self, name: str) -> tuple[str, ...]:
        try:
            return self._features[name]
        except KeyError:
            raise UnknownFeatureError(name) from None
