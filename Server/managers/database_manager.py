"""
Dialog Admin Server - Database Manager

This module manages the database connection and schema initialization.
One DatabaseManager lives for the whole process and is handed to request
handlers through the application state.
"""

import logging
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from models.database import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Manages database connection and initialization
    """

    def __init__(self, db_path: str = "database/dialog.db"):
        """
        Initialize database manager

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path

        # Ensure database directory exists
        db_dir = Path(db_path).parent
        if db_dir and str(db_dir) != '.':
            db_dir.mkdir(parents=True, exist_ok=True)

        # Requests are served from a thread pool, so the connection pool must
        # hand SQLite connections across threads
        self.engine = create_engine(
            f"sqlite:///{db_path}",
            echo=False,
            connect_args={"check_same_thread": False}
        )
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine, expire_on_commit=False)

    def InitializeDatabase(self) -> None:
        """
        Create all tables that don't exist yet
        """
        Base.metadata.create_all(bind=self.engine)
        logger.info(f"Database ready at {self.db_path}")

    def GetSession(self):
        """
        Get a new database session

        Returns:
            Session: SQLAlchemy session
        """
        return self.SessionLocal()

    def Dispose(self) -> None:
        """Close all pooled connections"""
        self.engine.dispose()
