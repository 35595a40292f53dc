from fastapi import APIRouter, Request
from starlette import status
from schemas.list_schemas import CreateListRequest, UpdateListRequest, ListResponse
from services.list_service import ListService
from utils.deps import db_dependency, user_dependency
from utils.logger import get_logger

logger = get_logger(__name__)


router = APIRouter(
    prefix="/lists",
    tags=["lists"]
)


@router.get("", response_model=list[ListResponse])
async def get_lists(request: Request, user: user_dependency, db: db_dependency):
    """All lists owned by the authenticated user."""
    return ListService.get_lists(user.user_id, db)


@router.post("", response_model=ListResponse, status_code=status.HTTP_200_OK)
async def create_list(request: Request, body: CreateListRequest, user: user_dependency, db: db_dependency):
    model = ListService.create_list(user.user_id, body, db)
    logger.info("List created", extra={"user_id": user.user_id, "list_id": model.id})
    return model


@router.get("/{list_id}", response_model=ListResponse)
async def get_list(request: Request, list_id: int, user: user_dependency, db: db_dependency):
    return ListService.get_list(user.user_id, list_id, db)


@router.patch("/{list_id}", response_model=ListResponse)
async def update_list(request: Request, list_id: int, body: UpdateListRequest,
    user: user_dependency, db: db_dependency):
    return ListService.update_list(user.user_id, list_id, body, db)


@router.delete("/{list_id}", response_model=ListResponse)
async def delete_list(request: Request, list_id: int, user: user_dependency, db: db_dependency):
    """Delete a list and every task in it."""
    removed = ListService.delete_list(user.user_id, list_id, db)
    logger.info("List deleted", extra={"user_id": user.user_id, "list_id": list_id})
    return removed
