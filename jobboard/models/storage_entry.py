"""
Key-value storage database model
One row per storage key, value is a JSON-encoded blob
"""
from sqlalchemy import Column, String, Text, DateTime
from datetime import datetime
from jobboard.core.database import Base


class StorageEntry(Base):
    __tablename__ = "storage_entries"

    key = Column(String(200), primary_key=True, index=True)
    value = Column(Text, nullable=False)
    updatedAt = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<StorageEntry {self.key}>"
