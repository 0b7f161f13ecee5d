"""k1s0 feature toggle library."""

from .client_config import build_client_config
from .config import FeatureToggleConfig
from .debounce import KeyedDebouncer
from .document import ClassList, Document, Element
from .exceptions import (
    ConfigError,
    DuplicateFeatureError,
    DuplicateRequirementError,
    FeatureToggleError,
    FeatureToggleErrorCodes,
    InvalidExperimentError,
    PreferenceWriteError,
    UnknownFeatureError,
    UnknownFeatureToggleError,
    UnknownRequirementError,
)
from .experiment import Experiment, ExperimentBucket, validate_experiment
from .loader import load
from .logger import new_logger
from .manager import FeatureManager
from .markers import FeatureState, marker_class, read_state, write_state
from .merger import deep_merge
from .models import ANONYMOUS, RootClasses, User
from .preferences import HttpPreferenceStore, InMemoryPreferenceStore, PreferenceStore
from .render import feature_classes, render_root_classes
from .requirements import ABTestRequirement, DynamicRequirement, Requirement, SimpleRequirement
from .sync import FeatureStateSynchronizer
from .wiring import build_feature_manager

__all__ = [
    "ABTestRequirement",
    "ANONYMOUS",
    "ClassList",
    "ConfigError",
    "Document",
    "DuplicateFeatureError",
    "DuplicateRequirementError",
    "DynamicRequirement",
    "Element",
    "Experiment",
    "ExperimentBucket",
    "FeatureManager",
    "FeatureState",
    "FeatureStateSynchronizer",
    "FeatureToggleConfig",
    "FeatureToggleError",
    "FeatureToggleErrorCodes",
    "HttpPreferenceStore",
    "InMemoryPreferenceStore",
    "InvalidExperimentError",
    "KeyedDebouncer",
    "PreferenceStore",
    "PreferenceWriteError",
    "Requirement",
    "RootClasses",
    "SimpleRequirement",
    "UnknownFeatureError",
    "UnknownFeatureToggleError",
    "UnknownRequirementError",
    "User",
    "build_client_config",
    "build_feature_manager",
    "deep_merge",
    "feature_classes",
    "load",
    "marker_class",
    "new_logger",
    "read_state",
    "render_root_classes",
    "validate_experiment",
    "write_state",
]
