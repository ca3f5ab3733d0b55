"""
SQLAlchemy models. Import here so Alembic and app can use them.
"""
from app.models.biography_session import BiographySession
from app.models.biography_response import BiographyResponse

__all__ = ["BiographySession", "BiographyResponse"]
