"""要件実装のユニットテスト"""

from k1s0_feature_toggle import (
    ABTestRequirement,
    DynamicRequirement,
    Experiment,
    ExperimentBucket,
    Requirement,
    SimpleRequirement,
    User,
    validate_experiment,
)


def make_experiment(enabled: bool = True) -> Experiment:
    return Experiment(
        name="vector.sticky_header",
        enabled=enabled,
        buckets={
            "unsampled": ExperimentBucket(sampling_rate=0),
            "control": ExperimentBucket(sampling_rate=0.5),
        },
    )


def test_simple_requirement() -> None:
    assert SimpleRequirement("a", True).is_met() is True
    assert SimpleRequirement("a", False).is_met() is False


def test_dynamic_requirement_coerces_to_bool() -> None:
    req = DynamicRequirement("d", lambda: 1)  # type: ignore[arg-type, return-value]
    assert req.is_met() is True


def test_requirements_satisfy_protocol() -> None:
    experiment = make_experiment()
    assert isinstance(SimpleRequirement("a", True), Requirement)
    assert isinstance(DynamicRequirement("d", lambda: True), Requirement)
    assert isinstance(ABTestRequirement(experiment, User("1")), Requirement)


def test_ab_requirement_name_defaults_to_experiment() -> None:
    experiment = make_experiment()
    assert ABTestRequirement(experiment, User("1")).name == "vector.sticky_header"
    assert ABTestRequirement(experiment, User("1"), name="StickyHeader").name == "StickyHeader"


def test_ab_requirement_anonymous_never_met() -> None:
    assert ABTestRequirement(make_experiment(), User()).is_met() is False


def test_ab_requirement_disabled_experiment_never_met() -> None:
    experiment = make_experiment(enabled=False)
    assert not any(ABTestRequirement(experiment, User(str(i))).is_met() for i in range(50))


def test_ab_requirement_splits_users() -> None:
    """ユーザーが両方のグループに振り分けられること。"""
    experiment = make_experiment()
    results = {ABTestRequirement(experiment, User(str(i))).is_met() for i in range(50)}
    assert results == {True, False}


def test_ab_requirement_is_stable() -> None:
    experiment = make_experiment()
    for i in range(20):
        user = User(str(i))
        assert (
            ABTestRequirement(experiment, user).is_met()
            == ABTestRequirement(experiment, user).is_met()
        )


def test_ab_requirement_accepts_validated_experiment() -> None:
    """境界で検証した設定（camelCase）をそのまま要件に渡せること。"""
    experiment = validate_experiment(
        {
            "name": "vector.sticky_header",
            "enabled": True,
            "buckets": {"unsampled": {"samplingRate": 0}, "control": {"samplingRate": 0.5}},
        }
    )
    assert experiment == make_experiment()
    for i in range(20):
        user = User(str(i))
        assert (
            ABTestRequirement(experiment, user).is_met()
            == ABTestRequirement(make_experiment(), user).is_met()
        )
