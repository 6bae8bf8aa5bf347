"""FastAPI application entrypoint."""

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

import database
from core.env import env_list
from core.env_utils import load_dotenv_if_available
from core.logging import get_logger, setup_logging
from web import routers

load_dotenv_if_available()
setup_logging()
logger = get_logger(__name__)

app = FastAPI(
    title="BrainyBox API",
    description="Bookmark collections with revocable public share links.",
    version="0.1.0",
)

origins = env_list("CORS_ALLOW_ORIGINS", ["http://localhost:5173"])

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SQLAlchemyError)
async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Storage failures surface as an opaque server error."""
    logger.error("Database error while handling %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": {"code": "server.error", "message": "Server error."}},
    )


def ping_database() -> bool:
    """Run a trivial query; failures are logged, never returned to the caller."""
    db = database.SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        logger.warning("Database ping failed", exc_info=True)
        return False
    finally:
        db.close()


@app.get("/healthz", include_in_schema=False)
def readiness_check():
    """Readiness check including a database round trip."""
    db_ok = ping_database()
    payload = {"status": "ok" if db_ok else "unhealthy", "database": {"ok": db_ok}}
    status_code = status.HTTP_200_OK if db_ok else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(status_code=status_code, content=payload)


app.include_router(routers.auth.router, prefix="/api/v1")
app.include_router(routers.content.router, prefix="/api/v1")
app.include_router(routers.share.router, prefix="/api/v1")
app.include_router(routers.profile.router, prefix="/api/v1")
