"""ロガー設定のユニットテスト"""

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from k1s0_feature_toggle import new_logger
from k1s0_feature_toggle.config import LogSection


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    library_logger = logging.getLogger("k1s0_feature_toggle")
    for handler in library_logger.handlers[:]:
        library_logger.removeHandler(handler)
    library_logger.setLevel(logging.NOTSET)
    structlog.reset_defaults()


def test_new_logger_json_format() -> None:
    logger = new_logger(LogSection(level="INFO", format="json"))
    assert logger is not None


def test_new_logger_text_format() -> None:
    logger = new_logger(LogSection(level="DEBUG", format="text"))
    assert logger is not None
    assert logging.getLogger("k1s0_feature_toggle").level == logging.DEBUG


def test_new_logger_default_params() -> None:
    """デフォルト設定でロガーが作成できること。"""
    logger = new_logger()
    bound = logger.bind(feature="limited-width")
    assert bound is not None


def test_library_records_rendered_as_json(capsys: pytest.CaptureFixture[str]) -> None:
    """ライブラリ内部の標準 logging 出力が extra のフィールド付き JSON になること。"""
    new_logger(LogSection(level="DEBUG", format="json"))
    logging.getLogger("k1s0_feature_toggle.sync").debug(
        "Feature toggled",
        extra={"feature": "limited-width", "enabled": True},
    )
    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "Feature toggled"
    assert record["feature"] == "limited-width"
    assert record["enabled"] is True
    assert record["level"] == "debug"
    assert record["logger"] == "k1s0_feature_toggle.sync"
    assert "timestamp" in record


def test_level_filters_library_records(capsys: pytest.CaptureFixture[str]) -> None:
    new_logger(LogSection(level="WARNING", format="json"))
    logging.getLogger("k1s0_feature_toggle.sync").info("Feature toggled")
    assert capsys.readouterr().out == ""


def test_repeated_setup_does_not_duplicate_handlers() -> None:
    """繰り返し呼んでもハンドラーが増えないこと。"""
    new_logger()
    new_logger(LogSection(format="text"))
    assert len(logging.getLogger("k1s0_feature_toggle").handlers) == 1
