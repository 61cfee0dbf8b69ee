"""
Dialog Admin Server - Main FastAPI Application

This module builds the FastAPI application for the Dialog Admin server.
It serves the admin endpoints for the auto-responder settings.
"""

import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import uvicorn

from config import LoadConfig
from exceptions import DialogAPIError, InternalServerError
from managers import DatabaseManager, SettingsStore
from version import SERVICE_NAME, __version__
import admin_sessions

logger = logging.getLogger(__name__)


# ==================== Logging ====================

def ConfigureLogging(config: dict) -> None:
    """
    Configure logging to write to the console and, if log_dir is set,
    to a dated rotating log file
    """
    handlers = [logging.StreamHandler()]

    if config.get("log_dir"):
        logs_dir = Path(config["log_dir"])
        logs_dir.mkdir(parents=True, exist_ok=True)
        log_filename = logs_dir / f"dialog-server-{datetime.now().strftime('%Y-%m-%d')}.log"

        # File handler with rotation (max 10MB per file, keep 10 backup files)
        handlers.append(RotatingFileHandler(
            log_filename,
            maxBytes=10 * 1024 * 1024,
            backupCount=10,
            encoding='utf-8'
        ))

    logging.basicConfig(
        level=config.get("log_level", "INFO"),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


# ==================== Lifespan Events ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan event handler for startup and shutdown
    Creates the database manager unless one was supplied to CreateApp
    """
    logger.info(f"{SERVICE_NAME} starting up...")

    config = app.state.config
    owns_db_manager = app.state.db_manager is None

    if owns_db_manager:
        app.state.db_manager = DatabaseManager(config["database_path"])
    app.state.db_manager.InitializeDatabase()
    app.state.settings_store = SettingsStore(app.state.db_manager)

    admin_sessions.SESSION_LIFETIME_HOURS = config["session_lifetime_hours"]

    logger.info("Server startup complete")

    yield

    logger.info(f"{SERVICE_NAME} shutting down...")
    admin_sessions.CleanupExpiredSessions()
    if owns_db_manager:
        app.state.db_manager.Dispose()
    logger.info("Shutdown complete")


# ==================== Exception Handlers ====================

async def HandleDialogAPIError(request: Request, exc: DialogAPIError) -> JSONResponse:
    """Render API errors as the {success, error} envelope"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message}
    )


async def HandleUnexpectedError(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler. Logs the failure, returns no details"""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}")
    return await HandleDialogAPIError(request, InternalServerError())


# ==================== FastAPI Application ====================

def CreateApp(config: Optional[dict] = None, db_manager: Optional[DatabaseManager] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        config: Configuration dictionary (defaults to LoadConfig())
        db_manager: Database manager to use instead of one built from
                    config["database_path"]

    Returns:
        FastAPI application
    """
    app = FastAPI(
        title=SERVICE_NAME,
        description="Admin API for the dialog auto-responder settings",
        version=__version__,
        lifespan=lifespan
    )

    app.state.config = config if config is not None else LoadConfig()
    app.state.db_manager = db_manager

    app.add_exception_handler(DialogAPIError, HandleDialogAPIError)
    app.add_exception_handler(Exception, HandleUnexpectedError)

    # ==================== Include Routers ====================

    from routes import status
    from routes.admin import auto_responder as admin_auto_responder

    app.include_router(status.router)
    app.include_router(admin_auto_responder.router)

    return app


# ==================== Main Entry Point ====================

def main() -> None:
    """
    Run the server using uvicorn
    """
    config = LoadConfig()
    ConfigureLogging(config)

    logger.info(f"Starting {SERVICE_NAME} on {config['host']}:{config['port']}...")

    uvicorn.run(
        CreateApp(config),
        host=config["host"],
        port=config["port"],
        log_level=config["log_level"].lower()
    )


if __name__ == "__main__":
    main()
