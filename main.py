"""Application entry point for the NutriStrong plan API.

Defines the FastAPI app, middleware and exception handlers, and includes the
routers from the `api` package. The `lifespan` handler creates database
tables on startup.
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.config import get_settings
from core.error_handlers import register_exception_handlers
from core.exceptions import PersistenceError
from core.logger import get_logger
from database import init_db
from database.deps import get_db_read
from api.ai import router as ai_router
from api.auth import router as auth_router
from api.profile import router as profile_router
from api.meals import router as meals_router
from api.workouts import router as workouts_router
from api.progress import router as progress_router

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables before serving requests."""
    init_db()
    logger.info("Database initialized")
    yield


app = FastAPI(title="NutriStrong Plan API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        raise
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


@app.get("/health")
def health(db: Session = Depends(get_db_read)):
    """Report service health and database connectivity.

    Raises:
        PersistenceError: If the database cannot be reached.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.exception("Health check failed")
        raise PersistenceError(f"Database health check failed: {exc}", operation="health") from exc
    return {"success": True, "data": {"status": "healthy", "database": "connected"}}


app.include_router(auth_router)
app.include_router(ai_router)
app.include_router(profile_router)
app.include_router(meals_router)
app.include_router(workouts_router)
app.include_router(progress_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=3001, reload=True)
