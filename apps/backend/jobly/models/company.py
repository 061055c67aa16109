"""Company model, the owner of job postings."""

from typing import List, Optional

from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Company(Base):
    """Company that posts jobs."""

    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="companies_num_employees_check"),
    )

    # Primary Key - short slug
    handle: Mapped[str] = mapped_column(String(25), primary_key=True)

    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    num_employees: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    logo_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Relationships
    jobs: Mapped[List["Job"]] = relationship(
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Company(handle='{self.handle}', name='{self.name}')>"
