"""build_feature_manager のユニットテスト"""

import pytest
from k1s0_feature_toggle import (
    ANONYMOUS,
    DuplicateFeatureError,
    FeatureToggleConfig,
    User,
    build_feature_manager,
    validate_experiment,
)
from k1s0_feature_toggle.constants import (
    FEATURE_LATEST_SKIN,
    REQUIREMENT_LATEST_SKIN_VERSION,
    REQUIREMENT_LOGGED_IN,
)


def make_config(features: dict[str, list[str]] | None = None) -> FeatureToggleConfig:
    return FeatureToggleConfig.model_validate(
        {"skin": {"latest_version": "2"}, "features": features or {}}
    )


@pytest.mark.parametrize(("version", "expected"), [("2", True), ("1", False)])
def test_latest_skin_feature(version: str, expected: bool) -> None:
    manager = build_feature_manager(User("1"), version, make_config())
    assert manager.is_feature_enabled(FEATURE_LATEST_SKIN) is expected
    assert manager.is_requirement_met(REQUIREMENT_LATEST_SKIN_VERSION) is expected


def test_logged_in_requirement() -> None:
    assert build_feature_manager(User("1"), "2").is_requirement_met(REQUIREMENT_LOGGED_IN) is True
    assert build_feature_manager(ANONYMOUS, "2").is_requirement_met(REQUIREMENT_LOGGED_IN) is False


def test_config_declared_features() -> None:
    config = make_config({"modernToolbar": [REQUIREMENT_LOGGED_IN, REQUIREMENT_LATEST_SKIN_VERSION]})
    assert build_feature_manager(User("1"), "2", config).is_feature_enabled("modernToolbar") is True
    assert build_feature_manager(User("1"), "1", config).is_feature_enabled("modernToolbar") is False
    assert build_feature_manager(ANONYMOUS, "2", config).is_feature_enabled("modernToolbar") is False


def test_config_cannot_redeclare_builtin_feature() -> None:
    config = make_config({FEATURE_LATEST_SKIN: [REQUIREMENT_LOGGED_IN]})
    with pytest.raises(DuplicateFeatureError):
        build_feature_manager(User("1"), "2", config)


def test_experiment_requirement_registered() -> None:
    experiment = validate_experiment(
        {
            "name": "vector.sticky_header",
            "enabled": True,
            "buckets": {"unsampled": {"samplingRate": 0}, "control": {"samplingRate": 0.5}},
        }
    )
    config = make_config({"stickyHeader": ["vector.sticky_header"]})
    manager = build_feature_manager(ANONYMOUS, "2", config, experiment)
    assert manager.is_feature_enabled("stickyHeader") is False


def test_each_call_builds_fresh_manager() -> None:
    first = build_feature_manager(User("1"), "2")
    second = build_feature_manager(User("1"), "2")
    assert first is not second
    assert first.feature_names() == [FEATURE_LATEST_SKIN]
