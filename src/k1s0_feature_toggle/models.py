"""feature_toggle データモデル"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """判定対象のユーザー。user_id が無ければ匿名ユーザー。"""

    user_id: str | None = None

    @property
    def is_anonymous(self) -> bool:
        return not self.user_id


ANONYMOUS = User()


@dataclass
class RootClasses:
    """2 つのルート要素に付与するクラス名。

    html: 現行ルート（<html> 要素）
    body: レガシールート（<body> 要素）
    """

    html: list[str] = field(default_factory=list)
    body: list[str] = field(default_factory=list)

    def html_attribute(self) -> str:
        return " ".join(self.html)

    def body_attribute(self) -> str:
        return " ".join(self.body)
