"""判定コンテキストごとの FeatureManager の組み立て"""

from __future__ import annotations

from .config import FeatureToggleConfig
from .constants import (
    FEATURE_LATEST_SKIN,
    REQUIREMENT_LATEST_SKIN_VERSION,
    REQUIREMENT_LOGGED_IN,
)
from .experiment import Experiment
from .manager import FeatureManager
from .models import User
from .requirements import ABTestRequirement


def build_feature_manager(
    user: User,
    skin_version: str,
    config: FeatureToggleConfig | None = None,
    experiment: Experiment | None = None,
) -> FeatureManager:
    """リクエスト 1 回分の FeatureManager を新しく組み立てる。

    標準要件（LoggedIn, LatestSkinVersion）、実験があればその A/B テスト要件、
    LatestSkin フィーチャーと設定ファイルで宣言されたフィーチャーを登録する。
    """
    config = config or FeatureToggleConfig()
    manager = FeatureManager()
    manager.register_simple_requirement(REQUIREMENT_LOGGED_IN, not user.is_anonymous)
    manager.register_simple_requirement(
        REQUIREMENT_LATEST_SKIN_VERSION,
        skin_version == config.skin.latest_version,
    )
    if experiment is not None:
        manager.register_requirement(ABTestRequirement(experiment, user))

    manager.register_feature(FEATURE_LATEST_SKIN, [REQUIREMENT_LATEST_SKIN_VERSION])
    for name, requirements in config.features.items():
        manager.register_feature(name, requirements)
    return manager
