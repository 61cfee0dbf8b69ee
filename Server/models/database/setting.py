"""
Dialog Admin Server - Dialog Setting Database Model

Generic key-value settings table. Values are stored as text and
interpreted by the application (booleans as "true"/"false").
"""

from sqlalchemy import Column, String, Text

from models.database.base import Base


class DialogSetting(Base):
    """
    Dialog settings table - one row per configuration key
    """
    __tablename__ = "dialog_settings"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
