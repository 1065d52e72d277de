"""Shared fixtures for maxo tests."""

from __future__ import annotations

import pytest

from maxo.items import Item
from maxo.lexer import Lexer


class ListSink:
    """Collects items synchronously so the Lexer can run without a thread."""

    def __init__(self) -> None:
        self.items: list[Item] = []
        self.closed = False
        self.error: BaseException | None = None

    def send(self, item: Item) -> None:
        self.items.append(item)

    def close(self, error: BaseException | None = None) -> None:
        self.closed = True
        self.error = error


def lex_items(source: str) -> list[Item]:
    """Run the state machine on the calling thread and return every item."""
    sink = ListSink()
    Lexer(source, sink).run()
    return sink.items


@pytest.fixture
def sink() -> ListSink:
    return ListSink()
