"""Biography sessions and responses.

Revision ID: 001
Revises:
Create Date: Initial

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "biography_sessions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("subject_name", sa.String(255), nullable=False),
        sa.Column("detail_level", sa.String(30), nullable=False),
        sa.Column("status", sa.String(30), nullable=False, server_default="in_progress"),
        sa.Column("draft", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("status IN ('in_progress', 'draft_generated')", name="biography_sessions_status_check"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_biography_sessions_updated_at", "biography_sessions", ["updated_at"], unique=False)

    op.create_table(
        "biography_responses",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("session_id", sa.Integer(), nullable=False),
        sa.Column("topic", sa.String(100), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["session_id"], ["biography_sessions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("session_id", "topic", "question", name="biography_responses_session_topic_question_key"),
    )
    op.create_index("ix_biography_responses_session_id", "biography_responses", ["session_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_biography_responses_session_id", table_name="biography_responses")
    op.drop_table("biography_responses")
    op.drop_index("ix_biography_sessions_updated_at", table_name="biography_sessions")
    op.drop_table("biography_sessions")
