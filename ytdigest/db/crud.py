"""
CRUD operations for the ytdigest database.

History writes touch single rows, so requests that overlap never overwrite
each other's entries.
"""

from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ytdigest.db.models import HistoryRecord
from ytdigest.models.schemas import HistoryEntry
from ytdigest.utils.logger import logging


def list_history(db: Session) -> List[HistoryEntry]:
    """Get all history entries, newest first."""
    records = db.query(HistoryRecord).order_by(HistoryRecord.seq.desc()).all()
    return [HistoryEntry.model_validate(record) for record in records]


def get_history_entry_by_video(db: Session, video_id: str) -> HistoryRecord:
    """Get the history record for a video, if any."""
    return db.query(HistoryRecord).filter(HistoryRecord.video_id == video_id).first()


def add_history_entry(db: Session, entry: HistoryEntry, limit: int) -> HistoryEntry:
    """
    Insert a history entry and evict the oldest rows beyond ``limit``.

    Returns:
        The stored entry; the already recorded one if the video exists
    """
    existing = get_history_entry_by_video(db, entry.video_id)
    if existing is not None:
        return HistoryEntry.model_validate(existing)

    record = HistoryRecord(
        id=entry.id,
        video_id=entry.video_id,
        url=entry.url,
        summary=entry.summary,
        created_at=entry.created_at,
    )
    try:
        db.add(record)
        db.flush()
    except IntegrityError:
        # Another request recorded the same video first
        db.rollback()
        return HistoryEntry.model_validate(get_history_entry_by_video(db, entry.video_id))

    try:
        stale = [
            seq for (seq,) in db.query(HistoryRecord.seq)
            .order_by(HistoryRecord.seq.desc())
            .offset(limit)
            .all()
        ]
        if stale:
            db.query(HistoryRecord).filter(HistoryRecord.seq.in_(stale)).delete(synchronize_session=False)
            logging.debug(f"Evicted {len(stale)} history entries")
        db.commit()
    except Exception as e:
        db.rollback()
        logging.error(f"Error saving history entry: {e}")
        raise
    return HistoryEntry.model_validate(record)


def delete_history_entry(db: Session, entry_id: str) -> bool:
    """Delete a history entry by id. Returns False if it did not exist."""
    try:
        deleted = db.query(HistoryRecord).filter(HistoryRecord.id == entry_id).delete(synchronize_session=False)
        db.commit()
    except Exception as e:
        db.rollback()
        logging.error(f"Error deleting history entry {entry_id}: {e}")
        raise
    return deleted > 0
