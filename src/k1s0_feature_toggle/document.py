"""クライアント側ドキュメントの最小モデル"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .models import RootClasses


class ClassList:
    """順序を保持する重複なしのクラストークン列（DOMTokenList 相当）。"""

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._tokens: dict[str, None] = dict.fromkeys(t for t in tokens if t)

    @classmethod
    def parse(cls, value: str) -> ClassList:
        """class 属性の文字列から生成する。"""
        return cls(value.split())

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def contains(self, token: str) -> bool:
        return token in self._tokens

    def add(self, token: str) -> None:
        self._tokens.setdefault(token, None)

    def remove(self, token: str) -> None:
        """トークンを取り除く。存在しなければ何もしない。"""
        self._tokens.pop(token, None)

    @property
    def value(self) -> str:
        return " ".join(self._tokens)

    def __repr__(self) -> str:
        return f"ClassList({self.value!r})"


@dataclass
class Element:
    """クラスリストを持つ要素。"""

    tag: str
    class_list: ClassList = field(default_factory=ClassList)


@dataclass
class Document:
    """現行ルート（<html>）とレガシールート（<body>）を持つドキュメント。"""

    document_element: Element = field(default_factory=lambda: Element("html"))
    body: Element = field(default_factory=lambda: Element("body"))

    @classmethod
    def from_class_attributes(cls, html: str = "", body: str = "") -> Document:
        return cls(
            document_element=Element("html", ClassList.parse(html)),
            body=Element("body", ClassList.parse(body)),
        )

    @classmethod
    def from_root_classes(cls, classes: RootClasses) -> Document:
        """サーバー側で生成したクラス名からドキュメントを組み立てる。"""
        return cls(
            document_element=Element("html", ClassList(classes.html)),
            body=Element("body", ClassList(classes.body)),
        )
