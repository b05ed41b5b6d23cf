"""SQLAlchemy ORM models for dealers."""

from sqlalchemy import BigInteger, Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# SQLite only autoincrements INTEGER PRIMARY KEY columns
DealerId = BigInteger().with_variant(Integer(), "sqlite")


class DealerModel(Base):
    """SQLAlchemy model for dealer table."""

    __tablename__ = "dealer"

    id = Column(DealerId, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True)
