"""Tests for scan() and ScanHandle: the producer thread and its lifetime."""

from __future__ import annotations

import gc
import time
from contextvars import ContextVar

import pytest

from maxo import ScanConfig, scan, scan_config_context
from maxo.items import Item, ItemKind
from maxo.lexer import Lexer

FAST = ScanConfig(buffer_size=1, poll_interval=0.01, join_timeout=2.0)


def wait_for(predicate, timeout: float = 2.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


class TestDelivery:
    """Verify items arrive in order and end-of-sequence is clean."""

    def test_next_item_sequence(self) -> None:
        with scan("go rocks", config=FAST) as handle:
            assert handle.next_item() == Item(0, ItemKind.TEXT, "go")
            assert handle.next_item() == Item(2, ItemKind.WHITESPACE, " ")
            assert handle.next_item() == Item(3, ItemKind.TEXT, "rocks")
            assert handle.next_item() == Item(8, ItemKind.EOF, "")
            assert handle.next_item() is None
            assert handle.next_item() is None

    def test_empty_input_yields_only_eof(self) -> None:
        with scan("", config=FAST) as handle:
            assert list(handle) == [Item(0, ItemKind.EOF, "")]

    def test_terminal_recorded(self) -> None:
        with scan("abc", config=FAST) as handle:
            assert handle.terminal is None
            list(handle)
            assert handle.terminal == Item(3, ItemKind.EOF, "")

    def test_long_input_order_preserved_with_single_slot(self) -> None:
        source = " ".join(f"word{n}" for n in range(2000))
        with scan(source, config=FAST) as handle:
            items = list(handle)

        assert items[-1].kind is ItemKind.EOF
        assert "".join(i.value for i in items) == source
        positions = [i.position for i in items]
        assert positions == sorted(positions)

    def test_bytes_input_is_decoded(self) -> None:
        with scan("héllo wörld".encode(), config=FAST) as handle:
            values = [i.value for i in handle]
        assert values == ["héllo", " ", "wörld", ""]

    def test_invalid_utf8_bytes_end_with_error(self) -> None:
        with scan(b"ok \xff\xfe", config=FAST) as handle:
            items = list(handle)

        assert [i.kind for i in items] == [ItemKind.TEXT, ItemKind.WHITESPACE, ItemKind.ERROR]
        assert "U+DCFF" in items[-1].value

    def test_producer_finishes_after_terminal(self) -> None:
        handle = scan("a b c", config=FAST)
        list(handle)
        assert wait_for(lambda: handle.done)
        handle.close()


class TestLifetime:
    """Verify the handle never leaks a blocked producer."""

    def test_close_mid_scan_stops_producer(self) -> None:
        handle = scan("x " * 10_000, config=FAST)
        first = handle.next_item()
        handle.close()

        assert first is not None
        assert handle.done
        assert handle.next_item() is None

    def test_close_without_reading(self) -> None:
        handle = scan("a b c d e f", config=FAST)
        handle.close()
        assert handle.done

    def test_close_is_idempotent(self) -> None:
        handle = scan("abc", config=FAST)
        handle.close()
        handle.close()
        assert "closed" in repr(handle)

    def test_context_manager_closes(self) -> None:
        with scan("x " * 10_000, config=FAST) as handle:
            handle.next_item()
        assert handle.done

    def test_abandoned_handle_cancels_producer(self) -> None:
        handle = scan("x " * 10_000, config=FAST)
        thread = handle._thread
        handle.next_item()
        del handle
        gc.collect()

        thread.join(2.0)
        assert not thread.is_alive()

    def test_cancel_does_not_join(self) -> None:
        handle = scan("x " * 10_000, config=FAST)
        handle.cancel()
        assert wait_for(lambda: handle.done)
        handle.close()


class TestProducerContext:
    """Verify the producer runs with the caller's context and config."""

    def test_context_variables_follow_producer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        marker: ContextVar[str] = ContextVar("marker", default="unset")

        def report_marker(lexer: Lexer) -> None:
            return lexer.errorf("%s", marker.get())

        monkeypatch.setattr("maxo.lexer.states.lex_text", report_marker)
        token = marker.set("caller")
        try:
            with scan("abc", config=FAST) as handle:
                item = handle.next_item()
        finally:
            marker.reset(token)

        assert item == Item(0, ItemKind.ERROR, "caller")

    def test_context_config_used_by_default(self) -> None:
        config = ScanConfig(buffer_size=7, thread_name="maxo-test")
        with scan_config_context(config):
            handle = scan("abc")
        with handle:
            assert handle.config is config
            assert handle._thread.name == "maxo-test"

    def test_explicit_config_wins(self) -> None:
        with scan_config_context(ScanConfig(buffer_size=7)):
            with scan("abc", config=FAST) as handle:
                assert handle.config is FAST


class TestProducerFailure:
    """Verify unexpected producer exceptions reach the consumer."""

    def test_crash_reraised_in_consumer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def boom(lexer: Lexer) -> None:
            raise RuntimeError("boom")

        monkeypatch.setattr("maxo.lexer.states.lex_text", boom)
        with scan("abc", config=FAST) as handle:
            with pytest.raises(RuntimeError, match="boom"):
                handle.next_item()
            assert handle.next_item() is None

    def test_items_before_crash_still_delivered(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def emit_then_fail(lexer: Lexer) -> None:
            lexer.next()
            lexer.emit(ItemKind.TEXT)
            raise KeyError("late")

        monkeypatch.setattr("maxo.lexer.states.lex_text", emit_then_fail)
        with scan("abc", config=FAST) as handle:
            assert handle.next_item() == Item(0, ItemKind.TEXT, "a")
            with pytest.raises(KeyError):
                handle.next_item()
