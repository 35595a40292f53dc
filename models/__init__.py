from models.users import User
from models.user_sessions import UserSession
from models.lists import TaskList
from models.tasks import Task

__all__ = ["User", "UserSession", "TaskList", "Task"]
