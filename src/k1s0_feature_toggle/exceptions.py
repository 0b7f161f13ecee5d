"""feature_toggle ライブラリの例外型定義"""

from __future__ import annotations


class FeatureToggleError(Exception):
    """feature_toggle ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class FeatureToggleErrorCodes:
    """FeatureToggleError のエラーコード定数。"""

    DUPLICATE_REQUIREMENT: str = "DUPLICATE_REQUIREMENT"
    DUPLICATE_FEATURE: str = "DUPLICATE_FEATURE"
    UNKNOWN_FEATURE: str = "UNKNOWN_FEATURE"
    UNKNOWN_REQUIREMENT: str = "UNKNOWN_REQUIREMENT"
    UNKNOWN_FEATURE_TOGGLE: str = "UNKNOWN_FEATURE_TOGGLE"
    INVALID_EXPERIMENT: str = "INVALID_EXPERIMENT"
    PREFERENCE_WRITE_FAILED: str = "PREFERENCE_WRITE_FAILED"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"


class DuplicateRequirementError(FeatureToggleError):
    """同名の要件が既に登録されている。"""

    def __init__(self, name: str) -> None:
        super().__init__(
            FeatureToggleErrorCodes.DUPLICATE_REQUIREMENT,
            f"Requirement already registered: {name}",
        )
        self.name = name


class DuplicateFeatureError(FeatureToggleError):
    """同名のフィーチャーが既に登録されている。"""

    def __init__(self, name: str) -> None:
        super().__init__(
            FeatureToggleErrorCodes.DUPLICATE_FEATURE,
            f"Feature already registered: {name}",
        )
        self.name = name


class UnknownFeatureError(FeatureToggleError):
    """登録されていないフィーチャーを評価しようとした。"""

    def __init__(self, name: str) -> None:
        super().__init__(
            FeatureToggleErrorCodes.UNKNOWN_FEATURE,
            f"Feature not registered: {name}",
        )
        self.name = name


class UnknownRequirementError(FeatureToggleError):
    """フィーチャーが未登録の要件を参照している。"""

    def __init__(self, name: str, feature: str | None = None) -> None:
        message = f"Requirement not registered: {name}"
        if feature is not None:
            message += f" (referenced by feature {feature})"
        super().__init__(FeatureToggleErrorCodes.UNKNOWN_REQUIREMENT, message)
        self.name = name
        self.feature = feature


class UnknownFeatureToggleError(FeatureToggleError):
    """どちらのルートにもマーカーが無いフィーチャーをトグルしようとした。"""

    def __init__(self, name: str) -> None:
        super().__init__(
            FeatureToggleErrorCodes.UNKNOWN_FEATURE_TOGGLE,
            f"Attempt to toggle unknown feature: {name}",
        )
        self.name = name


class InvalidExperimentError(FeatureToggleError):
    """A/B テスト設定の構造が不正。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(FeatureToggleErrorCodes.INVALID_EXPERIMENT, message, cause)


class PreferenceWriteError(FeatureToggleError):
    """ユーザー設定の書き込みに失敗した。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(FeatureToggleErrorCodes.PREFERENCE_WRITE_FAILED, message, cause)


class ConfigError(FeatureToggleError):
    """設定ファイルの読み込み・検証エラー。"""
