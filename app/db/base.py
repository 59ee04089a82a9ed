"""SQLAlchemy declarative base and metadata."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Must match the names created in alembic/versions
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base for the progress_logs / user_goals tables."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
