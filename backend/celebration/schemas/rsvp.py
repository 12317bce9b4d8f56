"""Pydantic schemas for RSVPs."""
from typing import ClassVar, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class RsvpCreate(BaseModel):
    full_name: str = Field(min_length=2)
    phone: str = Field(min_length=5)
    guests: int = Field(gt=0)  # forms submit this as a string
    dietary: Optional[str] = None
    message: Optional[str] = None

    field_messages: ClassVar[dict[str, str]] = {
        "fullName": "Name is required",
        "phone": "Phone number is required",
        "guests": "Number of guests is required",
    }

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class RsvpOut(BaseModel):
    id: int
    full_name: str
    phone: str
    guests: int
    dietary: Optional[str] = None
    message: Optional[str] = None
    created_at: str

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "from_attributes": True}
