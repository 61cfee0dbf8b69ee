"""
Dialog Admin Server - Settings Store

Key-value persistence over the dialog_settings table.
"""

import logging
from typing import Dict, Iterable, Optional

from sqlalchemy.dialects.sqlite import insert

from models.database import DialogSetting
from managers.database_manager import DatabaseManager

logger = logging.getLogger(__name__)


class SettingsStore:
    """
    Reads and upserts string values by key

    Each call opens its own database session, so one store instance can be
    shared by concurrent requests.
    """

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    def Get(self, key: str) -> Optional[str]:
        """
        Get the stored value for a key

        Returns:
            The value, or None if the key has never been written
        """
        return self.GetMany([key]).get(key)

    def GetMany(self, keys: Iterable[str]) -> Dict[str, str]:
        """
        Get stored values for several keys

        Returns:
            Dictionary of key -> value. Keys without a row are omitted.
        """
        keys = list(keys)
        db_session = self.db_manager.GetSession()
        try:
            records = db_session.query(DialogSetting).filter(DialogSetting.key.in_(keys)).all()
            return {record.key: record.value for record in records}
        finally:
            db_session.close()

    def Upsert(self, key: str, value: str) -> None:
        """Create or overwrite a single setting"""
        self.UpsertMany({key: value})

    def UpsertMany(self, values: Dict[str, str]) -> None:
        """
        Create or overwrite several settings in one transaction

        Either every value is stored or, on error, none is.

        Args:
            values: Dictionary of key -> value
        """
        db_session = self.db_manager.GetSession()
        try:
            for key, value in values.items():
                # Single-statement upsert keeps concurrent first writes of a key from colliding
                statement = insert(DialogSetting).values(key=key, value=value)
                db_session.execute(statement.on_conflict_do_update(
                    index_elements=[DialogSetting.key],
                    set_={"value": statement.excluded.value}
                ))

            db_session.commit()
        except Exception:
            db_session.rollback()
            raise
        finally:
            db_session.close()

        logger.debug(f"Stored settings: {', '.join(values)}")
