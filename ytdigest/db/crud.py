"""
CRUD operations for the YouTube digest database.
"""

import datetime
from typing import List, Optional, Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ytdigest.db.database import get_session_factory
from ytdigest.db.models import Summary
from ytdigest.models.schemas import StoredSummary, TranscriptSource
from ytdigest.utils.exceptions import PersistenceError
from ytdigest.utils.logger import logging


def get_summary(db: Session, video_id: str, language: str) -> Optional[Summary]:
    """Get the summary row for a (video, language) pair."""
    return db.query(Summary).filter(
        Summary.video_id == video_id,
        Summary.language == language
    ).first()


class SummaryStore:
    """Get-or-create/update access to persisted summaries."""

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        """
        Args:
            session_factory: Callable returning a new Session (defaults to the
                process-wide factory, resolved on first use)
        """
        self._session_factory = session_factory

    def _session(self) -> Session:
        factory = self._session_factory or get_session_factory()
        return factory()

    def find(self, video_id: str, language: str) -> Optional[StoredSummary]:
        """Look up a stored summary without side effects."""
        try:
            with self._session() as db:
                summary = get_summary(db, video_id, language)
                return StoredSummary.model_validate(summary) if summary else None
        except SQLAlchemyError as e:
            logging.error(f"Failed to read summary for {video_id}/{language}: {str(e)}")
            raise PersistenceError(f"Failed to read summary: {str(e)}", video_id=video_id) from e

    def upsert(
        self,
        video_id: str,
        language: str,
        content: str,
        mode: str,
        source: TranscriptSource,
        title: str = "YouTube Video Summary",
    ) -> StoredSummary:
        """
        Create or update the summary for a (video, language) pair.

        An existing row keeps its title and created_at; content, mode, source
        and updated_at are replaced.
        """
        source_value = TranscriptSource(source).value
        now = datetime.datetime.utcnow()

        try:
            with self._session() as db:
                try:
                    summary = get_summary(db, video_id, language)
                    if summary:
                        summary.content = content
                        summary.mode = mode
                        summary.source = source_value
                        summary.updated_at = now
                    else:
                        summary = Summary(
                            video_id=video_id,
                            title=title,
                            content=content,
                            language=language,
                            mode=mode,
                            source=source_value,
                            created_at=now,
                            updated_at=now,
                        )
                        db.add(summary)
                    db.commit()
                    db.refresh(summary)
                except SQLAlchemyError:
                    db.rollback()
                    raise

                logging.info(f"Summary saved to database: video={video_id} language={language} id={summary.id}")
                return StoredSummary.model_validate(summary)
        except SQLAlchemyError as e:
            logging.error(f"Failed to save summary for {video_id}/{language}: {str(e)}")
            raise PersistenceError(f"Failed to save summary: {str(e)}", video_id=video_id) from e

    def list_recent(self) -> List[StoredSummary]:
        """All stored summaries, newest first."""
        try:
            with self._session() as db:
                rows = db.query(Summary).order_by(Summary.created_at.desc(), Summary.id.desc()).all()
                return [StoredSummary.model_validate(row) for row in rows]
        except SQLAlchemyError as e:
            logging.error(f"Failed to list summaries: {str(e)}")
            raise PersistenceError(f"Failed to list summaries: {str(e)}") from e

    def get(self, summary_id: int) -> Optional[StoredSummary]:
        """Fetch one stored summary by its ID."""
        try:
            with self._session() as db:
                summary = db.query(Summary).filter(Summary.id == summary_id).first()
                return StoredSummary.model_validate(summary) if summary else None
        except SQLAlchemyError as e:
            logging.error(f"Failed to fetch summary {summary_id}: {str(e)}")
            raise PersistenceError(f"Failed to fetch summary: {str(e)}") from e
