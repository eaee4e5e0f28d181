"""Application entry point for the BeanBuilt coaching API.

Defines the FastAPI app factory, middleware, exception handlers and includes
API routers from the `api` package. The `lifespan` handler opens the
process-wide database handle on startup and disposes it on shutdown.
"""

from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session
from contextlib import asynccontextmanager

from database import Database
from database.deps import get_db_read
from core.config import get_settings
from core.exceptions import DatabaseError
from core.logger import get_logger
from core.error_handlers import register_exception_handlers
from api.profile import router as profile_router
from api.plans import router as plans_router
from api.reset import router as reset_router
from api.status import router as status_router
from api.tips import router as tips_router

logger = get_logger("main")


def create_app(database: Database = None) -> FastAPI:
    """Build the application.

    Args:
        database: Prebuilt connection handle. When omitted, one is created
            from WRITE_DATABASE_URL / READ_DATABASE_URL at startup.
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Fastapi lifespan context: open the database before serving requests."""
        db = database or Database(settings.write_database_url, settings.read_database_url)
        db.init_db()
        app.state.database = db
        yield
        if database is None:
            db.dispose()

    app = FastAPI(title="BeanBuilt Coaching API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
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
            logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
            return response
        except Exception:
            logger.exception("Request error: %s %s", request.method, request.url.path)
            raise

    @app.get("/health")
    def health(db: Session = Depends(get_db_read)):
        """Return basic health status and database connectivity.

        Raises:
            DatabaseError: If database connection fails.
        """
        try:
            db.execute(text("SELECT 1"))
            return {"status": "healthy", "database": "connected"}
        except Exception:
            logger.exception("Health check failed")
            raise DatabaseError("Database health check failed", operation="health")

    # include routers
    app.include_router(profile_router)
    app.include_router(plans_router)
    app.include_router(reset_router)
    app.include_router(status_router)
    app.include_router(tips_router)

    return app


app = create_app()


if __name__ == "__main__":
    # Allow starting the app via `python ./main.py`
    try:
        import uvicorn
    except Exception as exc:
        raise RuntimeError("uvicorn is required to run the app. Install with `pip install uvicorn[standard]`. Error: %s" % exc)

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
