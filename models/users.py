import secrets
from core.database import Base
from sqlalchemy import Column, Integer, String, event, inspect
from sqlalchemy.orm import relationship
from models.mixins import CreatedAtMixin
from utils.hashing import get_password_hash, is_password_hash


def generate_token_salt() -> str:
    return secrets.token_hex(32)


class User(Base, CreatedAtMixin):
    __tablename__ = "users"

    #pk
    id = Column(Integer, primary_key=True, index=True)

    #relationships
    sessions = relationship("UserSession", back_populates="user", order_by="UserSession.id",
                            cascade="all, delete-orphan", passive_deletes=True)
    lists = relationship("TaskList", back_populates="user",
                         cascade="all, delete-orphan", passive_deletes=True)

    email = Column(String(255), unique=True, nullable=False, index=True)
    # Assign plaintext; the pre-save hook below stores the bcrypt hash instead
    password = Column(String(255), nullable=False)
    token_salt = Column(String(64), nullable=False, default=generate_token_salt)


@event.listens_for(User, "before_insert")
@event.listens_for(User, "before_update")
def hash_password_before_save(mapper, connection, target: User):
    """
    Replace a newly assigned plaintext password with its hash.

    Values that already carry a hash format marker are left alone, so saving
    a loaded user again never hashes the hash. A failure here aborts the flush.
    """
    if not inspect(target).attrs.password.history.has_changes():
        return
    if target.password is None or is_password_hash(target.password):
        return
    target.password = get_password_hash(target.password)
