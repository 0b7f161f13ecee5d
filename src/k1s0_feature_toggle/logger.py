"""ライブラリログの出力設定"""

from __future__ import annotations

import logging
import sys

import structlog

from .config import LogSection

LIBRARY_LOGGER = "k1s0_feature_toggle"

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _renderer(config: LogSection) -> structlog.types.Processor:
    if config.format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def new_logger(config: LogSection | None = None) -> structlog.stdlib.BoundLogger:
    """ライブラリのログ出力を設定し、ホスト用の structlog ロガーを返す。

    ライブラリ内部のモジュールは標準 logging に `extra=` 付きで出力する。
    そのレコードも structlog と同じ形式（JSON ならフィーチャー名などの
    フィールドを含む 1 行）で stdout に書き出すよう、ライブラリロガーの
    ハンドラーを差し替える。繰り返し呼んでもハンドラーは増えない。
    """
    config = config or LogSection()
    log_level = getattr(logging, config.level.upper(), logging.INFO)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[*_SHARED_PROCESSORS, structlog.stdlib.ExtraAdder()],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(config),
        ],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in library_logger.handlers[:]:
        library_logger.removeHandler(existing)
    library_logger.addHandler(handler)
    library_logger.setLevel(log_level)

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    return structlog.stdlib.get_logger(LIBRARY_LOGGER)
