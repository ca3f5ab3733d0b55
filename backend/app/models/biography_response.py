"""
BiographyResponse: one stored answer to one (topic, question) pair within a session.
question is the verbatim prompt text, not a key into the question bank (the bank may change).
At most one row per (session_id, topic, question); a second save updates answer in place.
"""
from datetime import datetime
from sqlalchemy import String, Text, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from app.database import Base
from app.models.biography_session import utcnow


class BiographyResponse(Base):
    __tablename__ = "biography_responses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    session_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("biography_sessions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    topic: Mapped[str] = mapped_column(String(100), nullable=False)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    __table_args__ = (
        UniqueConstraint("session_id", "topic", "question", name="biography_responses_session_topic_question_key"),
    )

    session = relationship("BiographySession", back_populates="responses")
