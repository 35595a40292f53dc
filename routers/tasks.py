from fastapi import APIRouter, Request
from schemas.list_schemas import CreateTaskRequest, UpdateTaskRequest, TaskResponse
from services.list_service import ListService
from utils.deps import db_dependency, user_dependency

router = APIRouter(
    prefix="/lists/{list_id}/tasks",
    tags=["tasks"]
)


@router.get("", response_model=list[TaskResponse])
async def get_tasks(request: Request, list_id: int, user: user_dependency, db: db_dependency):
    return ListService.get_tasks(user.user_id, list_id, db)


@router.post("", response_model=TaskResponse)
async def create_task(request: Request, list_id: int, body: CreateTaskRequest,
    user: user_dependency, db: db_dependency):
    return ListService.create_task(user.user_id, list_id, body, db)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(request: Request, list_id: int, task_id: int, user: user_dependency, db: db_dependency):
    return ListService.get_task(user.user_id, list_id, task_id, db)


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(request: Request, list_id: int, task_id: int, body: UpdateTaskRequest,
    user: user_dependency, db: db_dependency):
    return ListService.update_task(user.user_id, list_id, task_id, body, db)


@router.delete("/{task_id}", response_model=TaskResponse)
async def delete_task(request: Request, list_id: int, task_id: int, user: user_dependency, db: db_dependency):
    return ListService.delete_task(user.user_id, list_id, task_id, db)
