"""
Session service against an in-memory SQLite database: create/get/list, upsert semantics,
idempotent response delete, cascading session delete, draft generation.
"""
import logging

import pytest

from app import metrics
from app.models.biography_response import BiographyResponse
from app.services import biography_sessions as svc
from app.services.errors import (
    DraftNotFound,
    InvalidLevel,
    InvalidResponse,
    InvalidSubject,
    NoResponses,
    NotFound,
)

Q_GRATEFUL = "What are you most grateful for in your life?"


def test_create_session_validates(db):
    with pytest.raises(InvalidLevel):
        svc.create_session(db, "Jane Doe", "epic")
    with pytest.raises(InvalidSubject):
        svc.create_session(db, "   ", "brief")
    s = svc.create_session(db, "  Jane Doe ", "brief")
    assert s.id is not None
    assert s.subject_name == "Jane Doe"
    assert s.status == "in_progress"
    assert s.draft is None


def test_get_session_not_found(db):
    with pytest.raises(NotFound):
        svc.get_session(db, 999)


def test_save_response_twice_updates_in_place(db):
    s = svc.create_session(db, "Jane Doe", "ultra_brief")
    first = svc.save_response(db, s.id, "reflections", Q_GRATEFUL, "my dog")
    second = svc.save_response(db, s.id, "reflections", Q_GRATEFUL, "my family")
    assert first.id == second.id
    _, responses = svc.get_session(db, s.id)
    assert len(responses) == 1
    assert responses[0].answer == "my family"


def test_save_response_keeps_insertion_order(db):
    s = svc.create_session(db, "Jane Doe", "moderate")
    svc.save_response(db, s.id, "legacy", "L1", "a")
    svc.save_response(db, s.id, "early_life", "E1", "b")
    svc.save_response(db, s.id, "legacy", "L1", "c")
    _, responses = svc.get_session(db, s.id)
    assert [(r.topic, r.answer) for r in responses] == [("legacy", "c"), ("early_life", "b")]


def test_save_response_validation(db):
    s = svc.create_session(db, "Jane Doe", "brief")
    with pytest.raises(NotFound):
        svc.save_response(db, s.id + 1, "legacy", "Q", "A")
    for topic, question, answer in [("", "Q", "A"), ("legacy", "  ", "A"), ("legacy", "Q", "")]:
        with pytest.raises(InvalidResponse):
            svc.save_response(db, s.id, topic, question, answer)
    assert svc.get_session(db, s.id)[1] == []


def test_save_response_update_touches_session(db):
    a = svc.create_session(db, "Ann", "brief")
    svc.save_response(db, a.id, "legacy", "Q", "first")
    svc.create_session(db, "Bob", "brief")
    assert [s.subject_name for s, _ in svc.list_sessions(db)] == ["Bob", "Ann"]
    svc.save_response(db, a.id, "legacy", "Q", "second")
    assert [s.subject_name for s, _ in svc.list_sessions(db)] == ["Ann", "Bob"]


def test_save_response_concurrent_insert_becomes_update(db, monkeypatch, caplog):
    s = svc.create_session(db, "Jane Doe", "brief")
    original = svc.save_response(db, s.id, "legacy", "Q", "old")
    original_id = original.id

    real_find = svc._find_response
    calls = []

    def find_misses_first(*args):
        calls.append(args)
        return None if len(calls) == 1 else real_find(*args)

    monkeypatch.setattr(svc, "_find_response", find_misses_first)
    caplog.set_level(logging.INFO, logger=svc.logger.name)
    saved = svc.save_response(db, s.id, "legacy", "Q", "new")

    assert len(calls) == 2
    assert saved.id == original_id
    _, responses = svc.get_session(db, s.id)
    assert [(r.id, r.answer) for r in responses] == [(original_id, "new")]
    assert any("Biography response updated" in rec.getMessage() for rec in caplog.records)


def test_list_sessions_recent_first_with_counts(db):
    a = svc.create_session(db, "Ann", "brief")
    b = svc.create_session(db, "Bob", "brief")
    svc.save_response(db, a.id, "legacy", "Q1", "x")
    svc.save_response(db, a.id, "legacy", "Q2", "y")
    rows = svc.list_sessions(db)
    assert [(s.subject_name, n) for s, n in rows] == [("Ann", 2), ("Bob", 0)]
    assert b.id in {s.id for s, _ in rows}


def test_delete_response_is_idempotent(db):
    s = svc.create_session(db, "Jane Doe", "brief")
    other = svc.create_session(db, "Other", "brief")
    rid = svc.save_response(db, s.id, "legacy", "Q", "A").id
    svc.delete_response(db, other.id, rid)  # wrong session: no effect
    assert len(svc.get_session(db, s.id)[1]) == 1
    svc.delete_response(db, s.id, rid)
    svc.delete_response(db, s.id, rid)
    assert svc.get_session(db, s.id)[1] == []


def test_delete_session_cascades(db):
    sid = svc.create_session(db, "Jane Doe", "brief").id
    rid = svc.save_response(db, sid, "legacy", "Q", "A").id
    keep = svc.create_session(db, "Keep", "brief")
    svc.save_response(db, keep.id, "legacy", "Q", "A")
    svc.delete_session(db, sid)
    with pytest.raises(NotFound):
        svc.get_session(db, sid)
    assert db.query(BiographyResponse).filter(BiographyResponse.session_id == sid).count() == 0
    svc.delete_response(db, sid, rid)  # orphaned id: no-op
    assert len(svc.get_session(db, keep.id)[1]) == 1
    with pytest.raises(NotFound):
        svc.delete_session(db, sid)


def test_delete_session_failure_rolls_back(db, monkeypatch):
    sid = svc.create_session(db, "Jane Doe", "brief").id
    svc.save_response(db, sid, "legacy", "Q1", "A")
    svc.save_response(db, sid, "legacy", "Q2", "B")

    def failing_commit():
        raise RuntimeError("disk full")

    with monkeypatch.context() as m:
        m.setattr(db, "commit", failing_commit)
        with pytest.raises(RuntimeError):
            svc.delete_session(db, sid)

    session, responses = svc.get_session(db, sid)
    assert session.subject_name == "Jane Doe"
    assert [r.question for r in responses] == ["Q1", "Q2"]


def test_generate_session_draft(db):
    s = svc.create_session(db, "Jane Doe", "ultra_brief")
    with pytest.raises(NoResponses):
        svc.generate_session_draft(db, s.id)
    db.refresh(s)
    assert s.status == "in_progress"
    with pytest.raises(DraftNotFound):
        svc.get_draft(db, s.id)

    before = metrics.drafts_generated_total
    svc.save_response(db, s.id, "reflections", Q_GRATEFUL, "my family")
    draft = svc.generate_session_draft(db, s.id)
    assert "# The Life of Jane Doe" in draft
    assert "my family." in draft
    session, stored = svc.get_draft(db, s.id)
    assert stored == draft
    assert session.status == "draft_generated"
    assert metrics.drafts_generated_total == before + 1


def test_generate_session_draft_not_found(db):
    with pytest.raises(NotFound):
        svc.generate_session_draft(db, 42)
