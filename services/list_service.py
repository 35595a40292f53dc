from sqlalchemy.orm import Session
from core.exceptions import NotFound
from models.lists import TaskList
from models.tasks import Task
from schemas.list_schemas import (CreateListRequest, UpdateListRequest, CreateTaskRequest,
                                  UpdateTaskRequest, ListResponse, TaskResponse)


class ListService:
    """
    List and task CRUD scoped to a single owner.

    Every query filters on the owner id, so a list or task belonging to
    another user behaves exactly like one that does not exist (NotFound).
    Updates and deletes are single conditional statements; the affected row
    count is the found / not-found signal.
    """

    @staticmethod
    def get_lists(user_id: int, db: Session) -> list[TaskList]:
        return db.query(TaskList).filter(TaskList.user_id == user_id).order_by(TaskList.id).all()

    @staticmethod
    def create_list(user_id: int, body: CreateListRequest, db: Session) -> TaskList:
        model = TaskList(title=body.title, user_id=user_id)
        db.add(model)
        db.commit()
        db.refresh(model)
        return model

    @staticmethod
    def get_list(user_id: int, list_id: int, db: Session) -> TaskList:
        model = db.query(TaskList).filter(TaskList.id == list_id, TaskList.user_id == user_id).one_or_none()
        if model is None:
            raise NotFound("List not found")
        return model

    @staticmethod
    def update_list(user_id: int, list_id: int, body: UpdateListRequest, db: Session) -> TaskList:
        updated = (
            db.query(TaskList)
            .filter(TaskList.id == list_id, TaskList.user_id == user_id)
            .update({"title": body.title}, synchronize_session=False)
        )
        db.commit()
        if not updated:
            raise NotFound("List not found")
        return ListService.get_list(user_id, list_id, db)

    @staticmethod
    def delete_list(user_id: int, list_id: int, db: Session) -> ListResponse:
        model = ListService.get_list(user_id, list_id, db)
        removed = ListResponse.model_validate(model)
        db.query(Task).filter(Task.list_id == model.id).delete(synchronize_session=False)
        db.delete(model)
        db.commit()
        return removed

    @staticmethod
    def _owned_tasks(user_id: int, list_id: int, db: Session):
        return (
            db.query(Task)
            .join(TaskList, Task.list_id == TaskList.id)
            .filter(TaskList.id == list_id, TaskList.user_id == user_id)
        )

    @staticmethod
    def get_tasks(user_id: int, list_id: int, db: Session) -> list[Task]:
        # An unowned list must 404 rather than look like an empty one
        ListService.get_list(user_id, list_id, db)
        return ListService._owned_tasks(user_id, list_id, db).order_by(Task.id).all()

    @staticmethod
    def create_task(user_id: int, list_id: int, body: CreateTaskRequest, db: Session) -> Task:
        task_list = ListService.get_list(user_id, list_id, db)
        model = Task(title=body.title, list_id=task_list.id)
        db.add(model)
        db.commit()
        db.refresh(model)
        return model

    @staticmethod
    def get_task(user_id: int, list_id: int, task_id: int, db: Session) -> Task:
        model = ListService._owned_tasks(user_id, list_id, db).filter(Task.id == task_id).one_or_none()
        if model is None:
            raise NotFound("Task not found")
        return model

    @staticmethod
    def update_task(user_id: int, list_id: int, task_id: int, body: UpdateTaskRequest, db: Session) -> Task:
        model = ListService.get_task(user_id, list_id, task_id, db)
        changes = body.model_dump(exclude_unset=True, exclude_none=True)
        if changes:
            updated = (
                db.query(Task)
                .filter(Task.id == model.id, Task.list_id == model.list_id)
                .update(changes, synchronize_session=False)
            )
            db.commit()
            if not updated:
                raise NotFound("Task not found")
            db.refresh(model)
        return model

    @staticmethod
    def delete_task(user_id: int, list_id: int, task_id: int, db: Session) -> TaskResponse:
        model = ListService.get_task(user_id, list_id, task_id, db)
        removed = TaskResponse.model_validate(model)
        db.delete(model)
        db.commit()
        return removed
