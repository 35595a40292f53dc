from core.database import Base
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from .mixins import CreatedAtMixin, UpdatedAtMixin

class Task(Base, CreatedAtMixin, UpdatedAtMixin):
    __tablename__ = "tasks"

    #pk
    id = Column(Integer, primary_key=True, index=True)

    #fk
    list_id = Column(Integer, ForeignKey("lists.id", ondelete="CASCADE"), nullable=False, index=True)

    #relationships
    task_list = relationship("TaskList", back_populates="tasks")

    title = Column(String(255), nullable=False)
    completed = Column(Boolean, default=False, nullable=False)
