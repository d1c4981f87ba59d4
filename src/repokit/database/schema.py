from sqlalchemy import Column, SmallInteger
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()

VALIDITY_COLUMN = "is_valid"


def validity_column() -> Column:
    """
    Soft-delete/visibility flag column: 1 = valid, 0 = invalid.

    Usage:
        class Order(Base):
            __tablename__ = "orders"
            id = Column(Integer, primary_key=True)
            is_valid = validity_column()
    """
    return Column(VALIDITY_COLUMN, SmallInteger, nullable=False, default=1, server_default="1")


def create_all(engine: Engine) -> None:
    Base.metadata.create_all(engine)
