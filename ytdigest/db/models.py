"""
SQLAlchemy models for the ytdigest database.
"""

from sqlalchemy import Column, String, Text, DateTime, Integer

from ytdigest.db.database import Base


class HistoryRecord(Base):
    """A summary history entry. Higher ``seq`` is newer."""
    __tablename__ = "history_entries"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), nullable=False, unique=True)
    video_id = Column(String(20), nullable=False, unique=True, index=True)
    url = Column(String(2048), nullable=False)
    summary = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<HistoryRecord(id='{self.id}', video_id='{self.video_id}')>"
