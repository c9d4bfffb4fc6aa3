from pydantic import BaseModel, Field

from app.models.category import CATEGORY_NAME_MAX_LENGTH


class CategoryRequest(BaseModel):
    """
    Schema for creating or replacing a category.
    Leave `user_id` empty for a system-wide category.
    """

    name: str = Field(..., min_length=1, max_length=CATEGORY_NAME_MAX_LENGTH, description="Category name")
    user_id: int | None = Field(default=None, description="Owning user, None for system-wide categories")
    is_default: bool = Field(default=False, description="Visible to every user")


class CategoryResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    user_id: int | None = None
    is_default: bool
