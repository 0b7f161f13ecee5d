"""設定辞書のディープマージ"""

from __future__ import annotations

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """base と override をディープマージして新しい辞書を返す。

    override の値が優先され、リスト（フィーチャーの要件一覧など）は置換する。
    override で null を指定したキーは結果から取り除くため、環境別設定で
    ベースに宣言されたフィーチャーを外せる。
    """
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if value is None:
            result.pop(key, None)
        elif isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
