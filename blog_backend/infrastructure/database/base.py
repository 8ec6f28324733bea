"""SQLAlchemy ORM base — the key-value table is the only mapped model."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
