"""Tests for wren.testing — the in-memory browser host."""

import pytest

from wren.testing import MemoryAnchor, MemoryWindow


class TestLocation:
    def test_initial_state(self) -> None:
        window = MemoryWindow(path="/start", hash="#/x")
        assert window.location.get_path() == "/start"
        assert window.location.get_hash() == "#/x"

    def test_hash_without_prefix(self) -> None:
        window = MemoryWindow(hash="/x")
        assert window.location.get_hash() == "#/x"

    def test_empty_hash(self) -> None:
        assert MemoryWindow().location.get_hash() == ""

    def test_set_hash_queues_hashchange(self) -> None:
        window = MemoryWindow()
        events: list[object] = []
        window.add_event_listener("hashchange", events.append)

        window.location.set_hash("/a")
        assert events == []
        assert window.pending == 1

        assert window.run_pending() == 1
        assert events == [None]
        assert window.hash_writes == 1
        assert window.history_length == 2

    def test_set_same_hash_is_silent(self) -> None:
        window = MemoryWindow(hash="#/a")
        window.location.set_hash("#/a")
        assert window.pending == 0
        assert window.hash_writes == 0


class TestHistory:
    def test_push_state_fires_nothing(self) -> None:
        window = MemoryWindow()
        events: list[object] = []
        window.add_event_listener("popstate", events.append)

        window.history.push_state("/a")

        assert window.location.get_path() == "/a"
        assert window.push_count == 1
        assert window.pending == 0
        assert events == []

    def test_back_fires_popstate(self) -> None:
        window = MemoryWindow()
        events: list[object] = []
        window.add_event_listener("popstate", events.append)
        window.history.push_state("/a")

        window.history.back()
        window.run_pending()

        assert window.location.get_path() == "/"
        assert events == [None]

    def test_back_without_push_state_support(self) -> None:
        window = MemoryWindow(push_state=False)
        popped: list[object] = []
        changed: list[object] = []
        window.add_event_listener("popstate", popped.append)
        window.add_event_listener("hashchange", changed.append)
        window.location.set_hash("/a")
        window.run_pending()

        window.history.back()
        window.run_pending()

        assert popped == []
        assert changed == [None, None]
        assert window.location.get_hash() == ""

    def test_back_at_first_entry_is_noop(self) -> None:
        window = MemoryWindow()
        window.history.back()
        assert window.pending == 0
        assert window.location.get_path() == "/"

    def test_push_discards_forward_entries(self) -> None:
        window = MemoryWindow()
        window.history.push_state("/a")
        window.history.push_state("/b")
        window.history.back()
        window.history.push_state("/c")
        assert window.history_length == 3
        assert window.location.get_path() == "/c"


class TestEvents:
    def test_remove_listener(self) -> None:
        window = MemoryWindow()
        events: list[object] = []
        window.add_event_listener("popstate", events.append)
        window.remove_event_listener("popstate", events.append)
        window.dispatch("popstate")
        assert events == []
        assert window.listener_count("popstate") == 0

    def test_remove_unknown_listener(self) -> None:
        window = MemoryWindow()
        window.remove_event_listener("popstate", print)
        assert window.listener_count("popstate") == 0


class TestTaskQueue:
    def test_drains_nested_tasks(self) -> None:
        window = MemoryWindow()
        ran: list[str] = []
        window.defer(lambda: window.defer(lambda: ran.append("inner")))
        assert window.run_pending() == 2
        assert ran == ["inner"]

    def test_limit(self) -> None:
        window = MemoryWindow()

        def again() -> None:
            window.defer(again)

        window.defer(again)
        with pytest.raises(RuntimeError, match="did not drain"):
            window.run_pending(limit=10)

    def test_error_leaves_rest_queued(self) -> None:
        window = MemoryWindow()
        ran: list[int] = []

        def boom() -> None:
            raise ValueError("boom")

        window.defer(boom)
        window.defer(lambda: ran.append(1))
        with pytest.raises(ValueError, match="boom"):
            window.run_pending()
        assert window.pending == 1
        window.run_pending()
        assert ran == [1]


class TestAnchor:
    def test_listeners_are_not_deduplicated(self) -> None:
        anchor = MemoryAnchor("/a")
        listener = print
        anchor.add_event_listener("click", listener)
        anchor.add_event_listener("click", listener)
        assert anchor.listener_count() == 2

    def test_click_reports_prevented(self) -> None:
        anchor = MemoryAnchor("/a")
        anchor.add_event_listener("click", lambda event: event.prevent_default())
        assert anchor.click() is True

    def test_click_without_listeners(self) -> None:
        assert MemoryAnchor("/a").click() is False

    def test_document_links_require_href(self) -> None:
        window = MemoryWindow(links=["/a", MemoryAnchor(None, id="x"), ""])
        assert [a.get_attribute("href") for a in window.document.links()] == ["/a", ""]
        assert window.document.anchors[1].get_attribute("id") == "x"
