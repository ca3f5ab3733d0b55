"""
Biography interview request/response schemas.
Request fields are plain strings; emptiness and level checks happen in the service so the
API returns the same 400 errors the service raises.
"""
from datetime import datetime
from typing import Literal
from pydantic import BaseModel


class DetailLevelResponse(BaseModel):
    id: str
    label: str
    description: str
    page_estimate: str
    max_depth: int
    question_count: int


class DetailLevelListResponse(BaseModel):
    levels: list[DetailLevelResponse]


class TopicPlanResponse(BaseModel):
    id: str
    name: str
    icon: str
    description: str
    questions: list[str]


class QuestionPlanResponse(BaseModel):
    plan: list[TopicPlanResponse]


class SessionCreateRequest(BaseModel):
    subject_name: str = ""
    detail_level: str = ""


class SessionResponse(BaseModel):
    id: int
    subject_name: str
    detail_level: str
    status: str
    draft: str | None = None
    created_at: datetime
    updated_at: datetime
    response_count: int | None = None  # set on list

    class Config:
        from_attributes = True


class SessionEnvelope(BaseModel):
    session: SessionResponse


class SessionListResponse(BaseModel):
    sessions: list[SessionResponse]


class ResponseSaveRequest(BaseModel):
    topic: str = ""
    question: str = ""
    answer: str = ""


class ResponseRecord(BaseModel):
    id: int
    session_id: int
    topic: str
    question: str
    answer: str
    created_at: datetime

    class Config:
        from_attributes = True


class ResponseEnvelope(BaseModel):
    response: ResponseRecord


class SessionDetailResponse(BaseModel):
    session: SessionResponse
    responses: list[ResponseRecord]


class CursorModel(BaseModel):
    topic_index: int = 0
    question_index: int = 0


class ProgressModel(BaseModel):
    answered: int
    total: int
    percent: int


class TopicProgressModel(BaseModel):
    topic_id: str
    answered: int
    total: int
    complete: bool


class InterviewStateResponse(BaseModel):
    """Everything the interview screen needs to render the question under the cursor."""
    session: SessionResponse
    plan: list[TopicPlanResponse]
    cursor: CursorModel
    topic_id: str | None = None
    question: str | None = None
    existing_answer: ResponseRecord | None = None  # pre-fill when revisiting an answered question
    is_first: bool
    is_last: bool  # at the end the client offers "Generate draft" instead of advancing
    progress: ProgressModel
    topics: list[TopicProgressModel]


class NavigateRequest(BaseModel):
    action: Literal["advance", "skip", "retreat", "skip_topic", "jump"]
    cursor: CursorModel = CursorModel()
    topic_index: int | None = None  # required for jump


class DraftResponse(BaseModel):
    draft: str


class OkResponse(BaseModel):
    ok: bool = True
