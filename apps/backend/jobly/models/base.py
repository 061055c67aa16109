"""Declarative base shared by all table models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for Jobly tables."""

    pass
