"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)


class ScriptModel(Base):
    __tablename__ = "scripts"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    title = Column(Text, nullable=False)
    niche = Column(Text, nullable=False)
    content_type = Column(Text, nullable=False)
    tone = Column(Text, nullable=False)
    length = Column(Text, nullable=False)
    notes = Column(Text)
    hook = Column(Text, nullable=False)
    body = Column(Text, nullable=False)
    cta = Column(Text, nullable=False)
    is_favorite = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    community_entries = relationship(
        "CommunityScriptModel",
        back_populates="script",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class CommunityScriptModel(Base):
    __tablename__ = "community_scripts"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    script_id = Column(String(36), ForeignKey("scripts.id", ondelete="CASCADE"), nullable=False, index=True)
    anonymous_username = Column(String(100), nullable=False)
    likes = Column(Integer, nullable=False, default=0)
    shares = Column(Integer, nullable=False, default=0)
    is_visible = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), nullable=False)

    script = relationship("ScriptModel", back_populates="community_entries")
