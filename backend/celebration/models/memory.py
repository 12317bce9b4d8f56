"""Memory ORM model."""
from sqlalchemy import Column, Integer, String, Text

from celebration.database import Base


class Memory(Base):
    __tablename__ = "memories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    photo = Column(Text, nullable=True)  # object-store URL
    created_at = Column(String(40), nullable=False)  # ISO-8601
