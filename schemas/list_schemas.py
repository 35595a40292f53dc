from pydantic import BaseModel, ConfigDict, field_validator


def clean_title(value: str) -> str:
    """Titles are trimmed and must keep at least one character."""
    value = value.strip()
    if not value:
        raise ValueError('Title must not be empty')
    return value


class CreateListRequest(BaseModel):
    title: str

    @field_validator('title')
    @classmethod
    def validate_title(cls, value):
        return clean_title(value)


class UpdateListRequest(BaseModel):
    title: str

    @field_validator('title')
    @classmethod
    def validate_title(cls, value):
        return clean_title(value)


class ListResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    user_id: int


class CreateTaskRequest(BaseModel):
    title: str

    @field_validator('title')
    @classmethod
    def validate_title(cls, value):
        return clean_title(value)


class UpdateTaskRequest(BaseModel):
    title: str | None = None
    completed: bool | None = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, value):
        if value is None:
            return value
        return clean_title(value)


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    completed: bool
    list_id: int
