"""
Biography API: detail levels, question plans, interview sessions, responses, navigation,
draft generation and export. Service errors are turned into HTTP errors here.
"""
import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.biography_response import BiographyResponse
from app.models.biography_session import BiographySession
from app.schemas.biography import (
    CursorModel,
    DetailLevelListResponse,
    DetailLevelResponse,
    DraftResponse,
    InterviewStateResponse,
    NavigateRequest,
    OkResponse,
    ProgressModel,
    QuestionPlanResponse,
    ResponseEnvelope,
    ResponseRecord,
    ResponseSaveRequest,
    SessionCreateRequest,
    SessionDetailResponse,
    SessionEnvelope,
    SessionListResponse,
    SessionResponse,
    TopicPlanResponse,
    TopicProgressModel,
)
from app.services import biography_sessions as sessions_service
from app.services import navigator
from app.services.errors import BiographyError, InvalidIndex
from app.services.export_docx import build_docx
from app.services.plan_builder import all_levels, build_plan

router = APIRouter(prefix="/biography", tags=["biography"])
logger = logging.getLogger(__name__)


def _http_error(e: BiographyError) -> HTTPException:
    logger.debug("Biography request rejected (%s): %s", type(e).__name__, e.message)
    return HTTPException(status_code=e.status_code, detail=e.message)


def _session_to_response(s: BiographySession, response_count: int | None = None) -> SessionResponse:
    return SessionResponse(
        id=s.id,
        subject_name=s.subject_name,
        detail_level=s.detail_level,
        status=s.status,
        draft=s.draft,
        created_at=s.created_at,
        updated_at=s.updated_at,
        response_count=response_count,
    )


def _response_to_record(r: BiographyResponse) -> ResponseRecord:
    return ResponseRecord(
        id=r.id,
        session_id=r.session_id,
        topic=r.topic,
        question=r.question,
        answer=r.answer,
        created_at=r.created_at,
    )


def _plan_to_response(plan) -> list[TopicPlanResponse]:
    return [TopicPlanResponse(**entry.to_dict()) for entry in plan]


def _interview_state(session: BiographySession, responses: list, plan, cursor) -> InterviewStateResponse:
    current = navigator.current_question(plan, cursor)
    topic_id = question = None
    existing = None
    if current:
        entry, question = current
        topic_id = entry.id
        existing = navigator.find_existing_answer(responses, topic_id, question)
    return InterviewStateResponse(
        session=_session_to_response(session, len(responses)),
        plan=_plan_to_response(plan),
        cursor=CursorModel(topic_index=cursor.topic_index, question_index=cursor.question_index),
        topic_id=topic_id,
        question=question,
        existing_answer=_response_to_record(existing) if existing else None,
        is_first=navigator.is_first(cursor),
        is_last=navigator.is_last(plan, cursor),
        progress=ProgressModel(**navigator.progress(plan, responses)),
        topics=[TopicProgressModel(**t) for t in navigator.topic_progress(plan, responses)],
    )


def _download_name(subject_name: str, ext: str) -> str:
    return quote(f"{subject_name or 'biography'} - Life Story.{ext}")


@router.get("/levels", response_model=DetailLevelListResponse)
def list_levels():
    """Available detail levels with the number of questions each one asks."""
    return DetailLevelListResponse(levels=[DetailLevelResponse(**lvl) for lvl in all_levels()])


@router.get("/questions", response_model=QuestionPlanResponse)
def get_questions(level: str = ""):
    """Question plan for a detail level (?level=moderate)."""
    if not level:
        raise HTTPException(status_code=400, detail="level query param required")
    try:
        plan = build_plan(level)
    except BiographyError as e:
        raise _http_error(e)
    return QuestionPlanResponse(plan=_plan_to_response(plan))


@router.post("/sessions", response_model=SessionEnvelope)
def create_session(data: SessionCreateRequest, db: Session = Depends(get_db)):
    try:
        session = sessions_service.create_session(db, data.subject_name, data.detail_level)
    except BiographyError as e:
        raise _http_error(e)
    return SessionEnvelope(session=_session_to_response(session))


@router.get("/sessions", response_model=SessionListResponse)
def list_sessions(db: Session = Depends(get_db)):
    """All sessions, most recently updated first, with response_count."""
    rows = sessions_service.list_sessions(db)
    return SessionListResponse(sessions=[_session_to_response(s, n) for s, n in rows])


@router.get("/sessions/{session_id}", response_model=SessionDetailResponse)
def get_session(session_id: int, db: Session = Depends(get_db)):
    try:
        session, responses = sessions_service.get_session(db, session_id)
    except BiographyError as e:
        raise _http_error(e)
    return SessionDetailResponse(
        session=_session_to_response(session, len(responses)),
        responses=[_response_to_record(r) for r in responses],
    )


@router.get("/sessions/{session_id}/interview", response_model=InterviewStateResponse)
def get_interview_state(session_id: int, db: Session = Depends(get_db)):
    """Resume an interview: plan for the session's level, cursor after the last answer, progress."""
    try:
        session, responses = sessions_service.get_session(db, session_id)
        plan = build_plan(session.detail_level)
    except BiographyError as e:
        raise _http_error(e)
    cursor = navigator.initial_cursor(plan, responses)
    return _interview_state(session, responses, plan, cursor)


@router.post("/sessions/{session_id}/navigate", response_model=InterviewStateResponse)
def navigate(session_id: int, data: NavigateRequest, db: Session = Depends(get_db)):
    """Move the client's cursor: advance / skip (same step), retreat, skip_topic, or jump to topic_index."""
    try:
        session, responses = sessions_service.get_session(db, session_id)
        plan = build_plan(session.detail_level)
        cursor = navigator.Cursor(data.cursor.topic_index, data.cursor.question_index)
        if data.action == "jump":
            if data.topic_index is None:
                raise InvalidIndex("topic_index required for jump")
            cursor = navigator.jump_to_topic(plan, data.topic_index)
        else:
            if navigator.current_question(plan, cursor) is None:
                raise InvalidIndex(f"Cursor out of range: {tuple(cursor)}")
            if data.action in ("advance", "skip"):
                cursor = navigator.advance(plan, cursor)
            elif data.action == "retreat":
                cursor = navigator.retreat(plan, cursor)
            else:
                cursor = navigator.skip_topic(plan, cursor)
    except BiographyError as e:
        raise _http_error(e)
    return _interview_state(session, responses, plan, cursor)


@router.post("/sessions/{session_id}/responses", response_model=ResponseEnvelope)
def save_response(session_id: int, data: ResponseSaveRequest, db: Session = Depends(get_db)):
    """Store an answer; saving the same (topic, question) again replaces the answer."""
    try:
        response = sessions_service.save_response(db, session_id, data.topic, data.question, data.answer)
    except BiographyError as e:
        raise _http_error(e)
    return ResponseEnvelope(response=_response_to_record(response))


@router.delete("/sessions/{session_id}/responses/{response_id}", response_model=OkResponse)
def delete_response(session_id: int, response_id: int, db: Session = Depends(get_db)):
    try:
        sessions_service.get_session(db, session_id)
    except BiographyError as e:
        raise _http_error(e)
    sessions_service.delete_response(db, session_id, response_id)
    return OkResponse()


@router.post("/sessions/{session_id}/generate", response_model=DraftResponse)
def generate_draft(session_id: int, db: Session = Depends(get_db)):
    """Generate the biography draft, store it on the session (status draft_generated) and return it."""
    try:
        draft = sessions_service.generate_session_draft(db, session_id)
    except BiographyError as e:
        raise _http_error(e)
    return DraftResponse(draft=draft)


@router.get("/sessions/{session_id}/draft.md")
def download_draft(session_id: int, db: Session = Depends(get_db)):
    """Stored draft as a Markdown file."""
    try:
        session, draft = sessions_service.get_draft(db, session_id)
    except BiographyError as e:
        raise _http_error(e)
    return Response(
        content=draft,
        media_type="text/markdown; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{_download_name(session.subject_name, 'md')}"},
    )


@router.post("/sessions/{session_id}/export")
def export_docx(session_id: int, db: Session = Depends(get_db)):
    """Export the stored draft to .docx."""
    try:
        session, _ = sessions_service.get_draft(db, session_id)
    except BiographyError as e:
        raise _http_error(e)
    buf = build_docx(session)
    return StreamingResponse(
        buf,
        media_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{_download_name(session.subject_name, 'docx')}"},
    )


@router.delete("/sessions/{session_id}", response_model=OkResponse)
def delete_session(session_id: int, db: Session = Depends(get_db)):
    """Delete a session and all of its responses."""
    try:
        sessions_service.delete_session(db, session_id)
    except BiographyError as e:
        raise _http_error(e)
    return OkResponse()
