"""Tests for LogStore."""

import pytest

from netlog.models.log_models import LogEntry
from netlog.store.log_store import LogStore


def _entry(i: int) -> LogEntry:
    return LogEntry(request_type="GET", path=f"/items/{i}")


class TestAddLog:
    def test_starts_empty(self, store):
        assert store.current_logs() == ()
        assert len(store) == 0

    def test_prepends(self, store):
        e1, e2, e = _entry(1), _entry(2), _entry(0)
        store.add_log(e2)
        store.add_log(e1)
        assert store.current_logs() == (e1, e2)

        store.add_log(e)

        assert store.current_logs() == (e, e1, e2)

    def test_get_then_post_scenario(self, store, get_entry, post_entry):
        store.add_log(get_entry)
        store.add_log(post_entry)

        logs = store.current_logs()
        assert [(log.request_type, log.path) for log in logs] == [
            ("POST", "/y"),
            ("GET", "/x"),
        ]

        store.clear_logs()
        assert store.current_logs() == ()

    def test_no_deduplication(self, store, get_entry):
        store.add_log(get_entry)
        store.add_log(LogEntry(request_type="GET", path="/x"))
        assert len(store) == 2

    def test_new_sequence_per_publish(self, store, get_entry, post_entry):
        store.add_log(get_entry)
        before = store.current_logs()
        store.add_log(post_entry)
        assert before == (get_entry,)
        assert store.current_logs() is not before

    def test_unbounded_by_default(self, store):
        for i in range(500):
            store.add_log(_entry(i))
        assert len(store) == 500
        assert store.max_entries is None


class TestClearLogs:
    def test_clear_empty_store(self, store):
        store.clear_logs()
        assert store.current_logs() == ()

    def test_clear_after_adds(self, store):
        for i in range(3):
            store.add_log(_entry(i))
        store.clear_logs()
        assert store.current_logs() == ()
        assert len(store) == 0


class TestSubscribe:
    def test_one_notification_per_mutation(self, store, get_entry, post_entry):
        received = []
        store.subscribe(received.append)

        store.add_log(get_entry)
        store.add_log(post_entry)
        store.clear_logs()

        assert received == [
            (get_entry,),
            (post_entry, get_entry),
            (),
        ]

    def test_every_subscriber_notified_in_order(self, store, get_entry):
        calls = []
        store.subscribe(lambda logs: calls.append(("first", logs)))
        store.subscribe(lambda logs: calls.append(("second", logs)))

        store.add_log(get_entry)

        assert calls == [("first", (get_entry,)), ("second", (get_entry,))]

    def test_listener_sees_latest_state(self, store, get_entry):
        seen = []
        store.subscribe(lambda logs: seen.append(store.current_logs() is logs))
        store.add_log(get_entry)
        assert seen == [True]

    def test_unsubscribe(self, store, get_entry, post_entry):
        received = []
        unsubscribe = store.subscribe(received.append)
        store.add_log(get_entry)
        unsubscribe()
        store.add_log(post_entry)
        unsubscribe()
        assert received == [(get_entry,)]

    def test_unsubscribe_inside_listener(self, store, get_entry, post_entry):
        received = []

        def once(logs):
            received.append(logs)
            unsubscribe()

        unsubscribe = store.subscribe(once)
        store.add_log(get_entry)
        store.add_log(post_entry)

        assert received == [(get_entry,)]

    def test_logs_notifier_exposed(self, store, get_entry):
        received = []
        store.logs_notifier.add_listener(received.append)
        store.add_log(get_entry)
        assert received == [(get_entry,)]
        assert store.logs_notifier.value == (get_entry,)


class TestMaxEntries:
    def test_oldest_evicted(self):
        store = LogStore(max_entries=2)
        for i in range(4):
            store.add_log(_entry(i))
        assert store.current_logs() == (_entry(3), _entry(2))

    def test_subscribers_see_bounded_sequence(self):
        store = LogStore(max_entries=1)
        received = []
        store.subscribe(received.append)
        store.add_log(_entry(1))
        store.add_log(_entry(2))
        assert received == [(_entry(1),), (_entry(2),)]

    @pytest.mark.parametrize("bad", [0, -1])
    def test_invalid_bound(self, bad):
        with pytest.raises(ValueError):
            LogStore(max_entries=bad)


class TestExportPayloads:
    def test_newest_first(self, store, get_entry, post_entry):
        store.add_log(get_entry)
        store.add_log(post_entry)
        payloads = store.export_payloads()
        assert [p["type"] for p in payloads] == ["POST", "GET"]
        assert [p["path"] for p in payloads] == ["/y", "/x"]

    def test_empty(self, store):
        assert store.export_payloads() == []
