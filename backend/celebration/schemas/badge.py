"""Pydantic schema for participation badges."""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class Badge(BaseModel):
    title: str
    color: str  # CSS hsl()
    earned_at: str

    model_config = {"alias_generator": to_camel, "populate_by_name": True}
