"""
User Model - Marketplace participants

Users are referenced by jobs (as client or assigned freelancer) and by
applications (as applicant). Profile fields are managed elsewhere; this
service only reads them to enrich application responses.
"""

from sqlalchemy import Column, String, Text, DateTime
from app.database import Base, utc_now
import uuid


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(100), nullable=False, unique=True)
    avatar_url = Column(String(2000), nullable=True)
    bio = Column(Text, nullable=True)
    role = Column(String(20), nullable=False, default="FREELANCER")
    created_at = Column(DateTime, nullable=False, default=utc_now)
