"""A/B テスト登録設定の検証"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .constants import EXPERIMENT_BUCKET_CONTROL, EXPERIMENT_BUCKET_UNSAMPLED
from .exceptions import InvalidExperimentError


class ExperimentBucket(BaseModel):
    """A/B テストのバケット。"""

    model_config = ConfigDict(populate_by_name=True)

    sampling_rate: float = Field(alias="samplingRate", ge=0.0, le=1.0)

    @field_validator("sampling_rate", mode="before")
    @classmethod
    def _require_number(cls, value: Any) -> Any:
        # bool は int のサブクラスなので明示的に除外する
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"samplingRate must be a number, got {type(value).__name__}")
        return value


class Experiment(BaseModel):
    """A/B テスト登録設定。"""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    enabled: bool
    buckets: dict[str, ExperimentBucket]

    @model_validator(mode="after")
    def _require_buckets(self) -> Experiment:
        for bucket in (EXPERIMENT_BUCKET_UNSAMPLED, EXPERIMENT_BUCKET_CONTROL):
            if bucket not in self.buckets:
                raise ValueError(f"buckets.{bucket} is required")
        return self


def _describe(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(p) for p in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(parts)


def validate_experiment(data: Mapping[str, Any] | None) -> Experiment | None:
    """A/B テスト設定を検証して Experiment を返す。

    None や空の設定は「実験なし」として None を返す。
    構造が不正な場合は違反箇所を含むメッセージで InvalidExperimentError を送出する。
    """
    if data is None or (isinstance(data, Mapping) and not data):
        return None
    if not isinstance(data, Mapping):
        raise InvalidExperimentError(
            f"Experiment must be a mapping, got {type(data).__name__}"
        )
    try:
        return Experiment.model_validate(dict(data))
    except ValidationError as e:
        name = data.get("name", "<unnamed>")
        raise InvalidExperimentError(
            f"Invalid experiment {name}: {_describe(e)}",
            cause=e,
        ) from e
