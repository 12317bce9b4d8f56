"""Pydantic schemas for Memories."""
from typing import ClassVar, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class MemoryCreate(BaseModel):
    name: str = Field(min_length=2)
    message: str = Field(min_length=1)
    photo: Optional[str] = None  # data-URI

    field_messages: ClassVar[dict[str, str]] = {
        "name": "Name is required",
        "message": "Message is required",
    }

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class MemoryOut(BaseModel):
    id: int
    name: str
    message: str
    photo: Optional[str] = None
    created_at: str

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "from_attributes": True}
