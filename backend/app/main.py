"""
FastAPI application entrypoint.
Biography interview API. Run with: uvicorn app.main:app --reload --port 8000

API base path: routes are mounted at root (no /api/v1 prefix).
  - Levels/plans: GET /biography/levels, GET /biography/questions?level=...
  - Sessions: POST /biography/sessions, GET /biography/sessions, GET/DELETE /biography/sessions/{id}
  - Interview: GET /biography/sessions/{id}/interview, POST /biography/sessions/{id}/navigate
  - Responses: POST /biography/sessions/{id}/responses, DELETE /biography/sessions/{id}/responses/{rid}
  - Drafts: POST /biography/sessions/{id}/generate, GET .../draft.md, POST .../export

Authentication is handled in front of this service; sessions are not scoped by user here.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from app.config import settings
from app.api.biography import router as biography_router

app = FastAPI(
    title="Life Story Interview API",
    description="Biography interviews: question plans by detail level, resumable sessions, Markdown drafts.",
    version="0.1.0",
)

_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins if _origins else ["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(biography_router)


@app.on_event("startup")
def startup():
    """Configure logging and init the SQLite DB."""
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    _log = logging.getLogger("app.main")
    from app.database import init_sqlite_db
    init_sqlite_db()
    from app.services.plan_builder import all_levels
    counts = ", ".join(f"{lvl['id']}={lvl['question_count']}" for lvl in all_levels())
    _log.info("Question bank loaded (%s).", counts)
    if not settings.is_sqlite:
        _log.info("Non-SQLite database: make sure migrations are applied (alembic upgrade head).")


@app.get("/", response_class=HTMLResponse)
def root():
    """Root: minimal page so the app 'loads' in browser; links to API docs."""
    return """
    <!DOCTYPE html>
    <html>
    <head><meta charset="utf-8"><title>Life Story Interview API</title></head>
    <body style="font-family: system-ui; max-width: 600px; margin: 2rem auto; padding: 1rem;">
    <h1>Life Story Interview API</h1>
    <p>This is the <strong>API server</strong> (port 8000). It returns JSON, not the web app.</p>
    <ul>
    <li><a href="/docs">OpenAPI docs (Swagger)</a></li>
    <li><a href="/redoc">ReDoc</a></li>
    <li>Health: <a href="/health">/health</a></li>
    <li>Detail levels: <a href="/biography/levels">/biography/levels</a></li>
    </ul>
    </body>
    </html>
    """


@app.get("/health")
def health():
    """Health check (JSON)."""
    return {"status": "ok", "message": "Life Story Interview API"}
