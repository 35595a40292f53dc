from core.database import Base
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from models.mixins import CreatedAtMixin

class UserSession(Base, CreatedAtMixin):
    """
    One issued refresh token, stored as its SHA-256 hash.

    Each session is its own row, so appending a session is a single INSERT and
    concurrent logins for the same user cannot overwrite each other. Rows are
    never updated; expiry is checked, not extended.
    """
    __tablename__ = "user_sessions"

    #pk
    id = Column(Integer, primary_key=True, index=True)

    #fk
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    #relationships
    user = relationship("User", back_populates="sessions")

    token_hash = Column(String(64), nullable=False, unique=True, index=True)
    # Absolute UNIX timestamp (seconds)
    expires_at = Column(Integer, nullable=False)
