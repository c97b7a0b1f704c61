from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import CORS_ORIGINS, ENABLE_DEBUG_ROUTES, LOG_LEVEL
from app.core.errors import ThinkHubError
from app.core.logging_config import configure_logging

configure_logging(LOG_LEVEL)

from app.db.base import Base, engine, log_db_diagnostics, utcnow  # noqa: E402

# Import models so create_all picks them up
from app.auth.models import User  # noqa: E402,F401
from app.tutorials.models import Tutorial, UserLike  # noqa: E402,F401
from app.projects.models import Project  # noqa: E402,F401
from app.resources.models import Resource, UserDownload  # noqa: E402,F401
from app.roadmaps.models import Roadmap, UserProgress  # noqa: E402,F401
from app.ai.models import ChatMessage  # noqa: E402,F401
from app.challenges.models import Certificate, Challenge, UserPoints  # noqa: E402,F401

from app.admin.routes import router as admin_router  # noqa: E402
from app.ai.routes import router as ai_router  # noqa: E402
from app.auth.routes import router as auth_router  # noqa: E402
from app.challenges.routes import router as challenge_router  # noqa: E402
from app.dashboard.routes import router as dashboard_router  # noqa: E402
from app.projects.routes import router as project_router  # noqa: E402
from app.resources.routes import router as resource_router  # noqa: E402
from app.roadmaps.routes import router as roadmap_router  # noqa: E402
from app.search.routes import router as search_router  # noqa: E402
from app.subscriptions.routes import router as subscription_router  # noqa: E402
from app.tutorials.routes import router as tutorial_router  # noqa: E402
from app.uploads.routes import router as upload_router  # noqa: E402
from app.web.debug_routes import router as debug_router  # noqa: E402


app = FastAPI(title="ThinkHub", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=CORS_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create database tables (still useful in dev; in production prefer Alembic)
Base.metadata.create_all(bind=engine)
log_db_diagnostics()

# Log OpenAI status once at startup (unified client)
from app.ai.openai_client import log_startup as _ai_log_startup  # noqa: E402

_ai_log_startup()


@app.exception_handler(ThinkHubError)
async def handle_domain_error(request: Request, exc: ThinkHubError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Only expose debug routes (including diagnostics) when explicitly enabled.
if ENABLE_DEBUG_ROUTES:
    app.include_router(debug_router)

# Include routers
app.include_router(auth_router)
app.include_router(tutorial_router)
app.include_router(project_router)
app.include_router(resource_router)
app.include_router(search_router)
app.include_router(roadmap_router)
app.include_router(ai_router)
app.include_router(challenge_router)
app.include_router(subscription_router)
app.include_router(dashboard_router)
app.include_router(admin_router)
app.include_router(upload_router)


@app.get("/healthcheck")
def healthcheck():
    return {"status": "ok", "timestamp": utcnow().isoformat() + "Z"}
