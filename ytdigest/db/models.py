"""
SQLAlchemy models for the YouTube digest database.
"""

import datetime
from sqlalchemy import Column, String, Text, DateTime, Integer, Index

from ytdigest.db.database import Base


class Summary(Base):
    """Model representing a video summary in one language."""
    __tablename__ = "summaries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    video_id = Column(String(20), nullable=False)  # YouTube video ID
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    language = Column(String(50), nullable=False)
    mode = Column(String(50), nullable=False)
    source = Column(String(20), nullable=False)  # captioned / transcribed
    created_at = Column(DateTime, default=datetime.datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.datetime.utcnow, onupdate=datetime.datetime.utcnow)

    # Lookup key; uniqueness is kept by upsert, not by the database
    __table_args__ = (Index("ix_summaries_video_language", "video_id", "language"),)

    def __repr__(self):
        return f"<Summary(id={self.id}, video_id='{self.video_id}', language='{self.language}')>"
