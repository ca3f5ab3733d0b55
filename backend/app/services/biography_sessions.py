"""
Biography interview sessions and their stored responses (SQLAlchemy).
Every function takes the request's DB session first; each write commits once and rolls back on failure,
so a failed call leaves nothing half-written.
"""
import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app import metrics
from app.config import settings
from app.models.biography_response import BiographyResponse
from app.models.biography_session import BiographySession, STATUS_DRAFT_GENERATED, STATUS_IN_PROGRESS
from app.services.errors import DraftNotFound, InvalidResponse, InvalidSubject, NotFound
from app.services.narrative import generate_draft
from app.services.plan_builder import get_level

logger = logging.getLogger(__name__)


def _load_session(db: Session, session_id: int) -> BiographySession:
    session = db.query(BiographySession).filter(BiographySession.id == session_id).first()
    if not session:
        raise NotFound("Session not found")
    return session


def _responses_for(db: Session, session_id: int) -> list[BiographyResponse]:
    return (
        db.query(BiographyResponse)
        .filter(BiographyResponse.session_id == session_id)
        .order_by(BiographyResponse.id)
        .all()
    )


def create_session(db: Session, subject_name: str, detail_level: str) -> BiographySession:
    """New in_progress session. InvalidLevel for an unknown level, InvalidSubject for a blank name."""
    level = get_level(detail_level)
    name = (subject_name or "").strip() if isinstance(subject_name, str) else ""
    if not name:
        raise InvalidSubject("subject_name is required")
    if len(name) > settings.max_subject_name_chars:
        raise InvalidSubject(f"subject_name must be at most {settings.max_subject_name_chars} characters")
    session = BiographySession(subject_name=name, detail_level=level.id, status=STATUS_IN_PROGRESS)
    db.add(session)
    db.commit()
    db.refresh(session)
    logger.info("Biography session created id=%s level=%s", session.id, session.detail_level)
    return session


def get_session(db: Session, session_id: int) -> tuple[BiographySession, list[BiographyResponse]]:
    """Session plus its responses in the order they were first saved."""
    session = _load_session(db, session_id)
    return session, _responses_for(db, session.id)


def list_sessions(db: Session) -> list[tuple[BiographySession, int]]:
    """All sessions, most recently updated first, each with its response count."""
    counts = (
        db.query(BiographyResponse.session_id, func.count(BiographyResponse.id).label("n"))
        .group_by(BiographyResponse.session_id)
        .subquery()
    )
    rows = (
        db.query(BiographySession, func.coalesce(counts.c.n, 0))
        .outerjoin(counts, counts.c.session_id == BiographySession.id)
        .order_by(BiographySession.updated_at.desc(), BiographySession.id.desc())
        .all()
    )
    return [(s, int(n)) for s, n in rows]


def _find_response(db: Session, session_id: int, topic: str, question: str) -> BiographyResponse | None:
    return (
        db.query(BiographyResponse)
        .filter(
            BiographyResponse.session_id == session_id,
            BiographyResponse.topic == topic,
            BiographyResponse.question == question,
        )
        .first()
    )


def save_response(db: Session, session_id: int, topic: str, question: str, answer: str) -> BiographyResponse:
    """
    Create-or-update the answer for (session, topic, question). An existing row keeps its id and
    position; only the answer changes. The session's updated_at is touched either way.
    """
    session = _load_session(db, session_id)
    if not all(isinstance(v, str) and v.strip() for v in (topic, question, answer)):
        raise InvalidResponse("topic, question, and answer required")

    existing = _find_response(db, session.id, topic, question)
    updated = existing is not None
    try:
        if existing:
            existing.answer = answer
            response = existing
        else:
            response = BiographyResponse(session_id=session.id, topic=topic, question=question, answer=answer)
            db.add(response)
        session.touch()
        db.commit()
    except IntegrityError:
        # Another request inserted the same triple between our lookup and commit; update that row.
        db.rollback()
        logger.warning("save_response: concurrent insert for session_id=%s topic=%s; updating instead", session_id, topic)
        response = _find_response(db, session_id, topic, question)
        if response is None:
            raise
        updated = True
        response.answer = answer
        _load_session(db, session_id).touch()
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(response)
    logger.info(
        "Biography response %s session_id=%s topic=%s response_id=%s",
        "updated" if updated else "saved", session_id, topic, response.id,
    )
    return response


def delete_response(db: Session, session_id: int, response_id: int) -> None:
    """Idempotent: a missing response, or one belonging to another session, is left alone."""
    deleted = (
        db.query(BiographyResponse)
        .filter(BiographyResponse.id == response_id, BiographyResponse.session_id == session_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        logger.info("Biography response deleted session_id=%s response_id=%s", session_id, response_id)


def delete_session(db: Session, session_id: int) -> None:
    """Delete the session and all its responses in one transaction."""
    session = _load_session(db, session_id)
    try:
        n = (
            db.query(BiographyResponse)
            .filter(BiographyResponse.session_id == session.id)
            .delete(synchronize_session=False)
        )
        db.delete(session)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("delete_session failed session_id=%s; rolled back", session_id)
        raise
    logger.info("Biography session deleted id=%s (%s responses)", session_id, n)


def generate_session_draft(db: Session, session_id: int) -> str:
    """Weave the draft, store it on the session and mark it draft_generated. NoResponses if nothing answered."""
    session, responses = get_session(db, session_id)
    draft = generate_draft(session, responses)
    session.draft = draft
    session.status = STATUS_DRAFT_GENERATED
    session.touch()
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    metrics.increment_drafts_generated_total()
    logger.info("Biography draft generated session_id=%s responses=%s chars=%s", session_id, len(responses), len(draft))
    return draft


def get_draft(db: Session, session_id: int) -> tuple[BiographySession, str]:
    session = _load_session(db, session_id)
    if not session.draft:
        raise DraftNotFound("No draft generated yet. Generate the draft first.")
    return session, session.draft
