"""要件名・フィーチャー名・既定値の定数"""

from __future__ import annotations

REQUIREMENT_LOGGED_IN: str = "LoggedIn"
REQUIREMENT_LATEST_SKIN_VERSION: str = "LatestSkinVersion"

FEATURE_LATEST_SKIN: str = "LatestSkin"

DEFAULT_CLASS_PREFIX: str = "vector-feature"
DEFAULT_PREFERENCE_NAMESPACE: str = "vector"
DEFAULT_DEBOUNCE_SECONDS: float = 0.5

EXPERIMENT_BUCKET_UNSAMPLED: str = "unsampled"
EXPERIMENT_BUCKET_CONTROL: str = "control"
