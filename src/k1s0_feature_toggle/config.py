"""設定型定義（pydantic BaseModel）"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from .constants import (
    DEFAULT_CLASS_PREFIX,
    DEFAULT_DEBOUNCE_SECONDS,
    DEFAULT_PREFERENCE_NAMESPACE,
)


class MarkersSection(BaseModel):
    """マーカークラス設定。"""

    class_prefix: str = Field(default=DEFAULT_CLASS_PREFIX, min_length=1)


class PreferencesSection(BaseModel):
    """ユーザー設定の永続化設定。"""

    namespace: str = Field(default=DEFAULT_PREFERENCE_NAMESPACE, min_length=1)
    debounce_seconds: float = Field(default=DEFAULT_DEBOUNCE_SECONDS, ge=0.0)
    base_url: str = "http://localhost:8080"
    api_key: str = ""
    timeout_seconds: float = 5.0

    def key_for(self, feature: str) -> str:
        """`<namespace>-<feature>` を返す。"""
        return f"{self.namespace}-{feature}"


class SkinSection(BaseModel):
    """スキン設定。"""

    latest_version: str = "2"


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class ObservabilitySection(BaseModel):
    """可観測性設定。"""

    log: LogSection = Field(default_factory=LogSection)


class FeatureToggleConfig(BaseModel):
    """feature_toggle 設定全体。"""

    markers: MarkersSection = Field(default_factory=MarkersSection)
    preferences: PreferencesSection = Field(default_factory=PreferencesSection)
    skin: SkinSection = Field(default_factory=SkinSection)
    features: dict[str, list[str]] = Field(default_factory=dict)
    observability: ObservabilitySection = Field(default_factory=ObservabilitySection)

    @field_validator("features", mode="before")
    @classmethod
    def _normalize_features(cls, value: Any) -> Any:
        # `name: Requirement` と `name:`（要件なし）の短縮形を受け付ける
        if not isinstance(value, dict):
            return value
        return {
            name: [requirements] if isinstance(requirements, str) else (requirements or [])
            for name, requirements in value.items()
        }
