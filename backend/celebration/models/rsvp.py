"""Rsvp ORM model."""
from sqlalchemy import Column, Integer, String, Text

from celebration.database import Base


class Rsvp(Base):
    __tablename__ = "rsvps"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(200), nullable=False)
    phone = Column(String(50), nullable=False)
    guests = Column(Integer, nullable=False)
    dietary = Column(Text, nullable=True)
    message = Column(Text, nullable=True)
    created_at = Column(String(40), nullable=False)  # ISO-8601
