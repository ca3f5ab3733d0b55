"""
BiographySession: one life-story interview for one subject at one detail level.
Status in_progress until a draft is generated (draft_generated); draft holds the Markdown.
"""
from datetime import datetime, timezone
from sqlalchemy import String, Text, Integer, DateTime, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from app.database import Base

STATUS_IN_PROGRESS = "in_progress"
STATUS_DRAFT_GENERATED = "draft_generated"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BiographySession(Base):
    __tablename__ = "biography_sessions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    subject_name: Mapped[str] = mapped_column(String(255), nullable=False)
    detail_level: Mapped[str] = mapped_column(String(30), nullable=False)
    status: Mapped[str] = mapped_column(String(30), nullable=False, default=STATUS_IN_PROGRESS)
    draft: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), index=True
    )

    __table_args__ = (
        CheckConstraint(
            "status IN ('in_progress', 'draft_generated')", name="biography_sessions_status_check"
        ),
    )

    responses = relationship(
        "BiographyResponse",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="BiographyResponse.id",
    )

    def touch(self) -> None:
        self.updated_at = utcnow()
