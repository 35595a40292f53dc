from core.database import Base
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from .mixins import CreatedAtMixin, UpdatedAtMixin

class TaskList(Base, CreatedAtMixin, UpdatedAtMixin):
    __tablename__ = "lists"

    #pk
    id = Column(Integer, primary_key=True, index=True)

    #fk
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    #relationships
    user = relationship("User", back_populates="lists")
    tasks = relationship("Task", back_populates="task_list", order_by="Task.id",
                         cascade="all, delete-orphan", passive_deletes=True)

    title = Column(String(255), nullable=False)
