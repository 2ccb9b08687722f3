"""Tests for conversation context management."""

import threading
import time

from ingres_bot.config.constants import Intent
from ingres_bot.orchestrator.context import ConversationContext, ConversationStore


def test_create_context_defaults():
    ctx = ConversationContext.create("session-1")
    assert ctx.session_id == "session-1"
    assert ctx.last_intent is Intent.UNKNOWN
    assert ctx.last_location is None
    assert list(ctx.history) == []
    assert ctx.query_count == 0
    assert ctx.session_start <= time.time()


def test_create_context_without_id_assigns_one():
    first = ConversationContext.create()
    second = ConversationContext.create()
    assert first.session_id
    assert first.session_id != second.session_id


def test_update_records_turn():
    ctx = ConversationContext.create("s1")
    ctx.update("Show me Punjab data", Intent.QUERY_LOCATION, location="punjab", state="punjab")
    assert ctx.last_intent is Intent.QUERY_LOCATION
    assert ctx.last_location == "punjab"
    assert ctx.last_state == "punjab"
    assert ctx.query_count == 1
    assert list(ctx.history) == ["Show me Punjab data"]


def test_update_without_location_keeps_previous():
    ctx = ConversationContext.create("s1")
    ctx.update("Show me Punjab data", Intent.QUERY_LOCATION, location="punjab")
    ctx.update("Any recommendations?", Intent.POLICY_SUGGESTION, location=None)
    ctx.update("More", Intent.FOLLOW_UP_QUESTION, location="")
    assert ctx.last_location == "punjab"
    assert ctx.last_intent is Intent.FOLLOW_UP_QUESTION
    assert ctx.query_count == 3


def test_history_is_bounded_and_ordered():
    ctx = ConversationContext.create("s1")
    for i in range(12):
        ctx.update(f"q{i}", Intent.UNKNOWN)
    assert len(ctx.history) == 10
    assert ctx.history[0] == "q2"
    assert ctx.history[-1] == "q11"
    assert ctx.query_count == 12


def test_custom_history_size():
    ctx = ConversationContext.create("s1", history_size=3)
    for i in range(5):
        ctx.update(f"q{i}", Intent.UNKNOWN)
    assert list(ctx.history) == ["q2", "q3", "q4"]


def test_mark_clarification():
    ctx = ConversationContext.create("s1")
    ctx.mark_clarification("xyzzy plugh")
    assert ctx.awaiting_clarification
    assert ctx.pending_question == "xyzzy plugh"
    ctx.mark_clarification(None)
    assert not ctx.awaiting_clarification
    assert ctx.pending_question is None


def test_destroy_clears_fields():
    ctx = ConversationContext.create("s1")
    ctx.update("Show me Punjab data", Intent.QUERY_LOCATION, location="punjab", district="amritsar")
    ctx.destroy()
    assert list(ctx.history) == []
    assert ctx.last_location is None
    assert ctx.last_district is None
    assert ctx.last_intent is Intent.UNKNOWN
    assert ctx.query_count == 0


def test_to_summary():
    ctx = ConversationContext.create("s1")
    ctx.update("Hello", Intent.GREETING)
    summary = ctx.to_summary()
    assert summary["session_id"] == "s1"
    assert summary["history"] == ["Hello"]
    assert summary["last_intent"] == "greeting"


def test_store_get_or_create_returns_same_context():
    store = ConversationStore()
    assert store.get_or_create("a") is store.get_or_create("a")
    assert store.get("missing") is None
    assert len(store) == 1


def test_store_uses_history_size():
    store = ConversationStore(history_size=2)
    assert store.get_or_create("a").history.maxlen == 2


def test_store_session_lock_is_stable():
    store = ConversationStore()
    lock = store.session_lock("a")
    store.get_or_create("a")
    assert store.session_lock("a") is lock
    assert store.session_lock("b") is not lock


def test_store_destroy():
    store = ConversationStore()
    ctx = store.get_or_create("a")
    ctx.update("Hello", Intent.GREETING)
    assert store.destroy("a") is True
    assert store.destroy("a") is False
    assert store.get("a") is None
    assert list(ctx.history) == []


def test_store_cleanup_idle():
    store = ConversationStore()
    idle = store.get_or_create("idle")
    store.get_or_create("active")
    idle.last_active = time.monotonic() - 100
    assert store.cleanup_idle(50) == 1
    assert store.get("idle") is None
    assert store.get("active") is not None


def test_store_destroy_waits_for_turn_in_progress():
    store = ConversationStore()
    ctx = store.get_or_create("a")
    in_turn = threading.Event()
    finish_turn = threading.Event()
    destroyed: list[bool] = []

    def turn() -> None:
        with store.session_guard("a"):
            in_turn.set()
            finish_turn.wait(timeout=5)
            ctx.update("Hello", Intent.GREETING)

    worker = threading.Thread(target=turn)
    worker.start()
    assert in_turn.wait(timeout=5)
    destroyer = threading.Thread(target=lambda: destroyed.append(store.destroy("a")))
    destroyer.start()
    destroyer.join(timeout=0.2)
    assert destroyer.is_alive()
    assert store.get("a") is ctx

    finish_turn.set()
    worker.join(timeout=5)
    destroyer.join(timeout=5)
    assert destroyed == [True]
    assert store.get("a") is None
    assert list(ctx.history) == []


def test_store_guard_after_destroy_uses_current_lock():
    store = ConversationStore()
    store.get_or_create("a")
    old_lock = store.session_lock("a")
    store.destroy("a")
    with store.session_guard("a") as lock:
        assert lock is store.session_lock("a")
        assert lock is not old_lock
        assert lock.locked()
    assert not lock.locked()


def test_store_cleanup_idle_skips_busy_sessions():
    store = ConversationStore()
    ctx = store.get_or_create("busy")
    ctx.last_active = time.monotonic() - 100
    with store.session_guard("busy"):
        assert store.cleanup_idle(50) == 0
        assert store.get("busy") is ctx
    assert store.cleanup_idle(50) == 1
    assert store.get("busy") is None
