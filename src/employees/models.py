"""
SQLAlchemy entity model for employees, the benefit catalog, and benefit enrollments.
The same classes back both repository implementations; the in-memory repository simply
never attaches them to a session.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class AuditMixin:
    """Columns stamped by `src.employees.audit.AuditStamper`."""

    created_by: Mapped[str | None] = mapped_column(String(100), default=None)
    created_on: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), default=None)
    last_modified_by: Mapped[str | None] = mapped_column(String(100), default=None)
    last_modified_on: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), default=None
    )


class Employee(AuditMixin, Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    social_security_number: Mapped[str | None] = mapped_column(String(20), default=None)
    address1: Mapped[str | None] = mapped_column(String(200), default=None)
    address2: Mapped[str | None] = mapped_column(String(200), default=None)
    city: Mapped[str | None] = mapped_column(String(100), default=None)
    state: Mapped[str | None] = mapped_column(String(50), default=None)
    zip_code: Mapped[str | None] = mapped_column(String(20), default=None)
    phone_number: Mapped[str | None] = mapped_column(String(30), default=None)
    email: Mapped[str | None] = mapped_column(String(200), default=None)

    benefits: Mapped[list[EmployeeBenefit]] = relationship(
        back_populates="employee",
        cascade="all, delete-orphan",
        order_by="EmployeeBenefit.id",
    )

    def __repr__(self) -> str:
        return f"Employee(id={self.id!r}, first_name={self.first_name!r}, last_name={self.last_name!r})"


class Benefit(AuditMixin, Base):
    __tablename__ = "benefits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True)
    description: Mapped[str | None] = mapped_column(String(500), default=None)
    base_cost: Mapped[Decimal] = mapped_column(Numeric(10, 2))

    enrollments: Mapped[list[EmployeeBenefit]] = relationship(back_populates="benefit")


class EmployeeBenefit(Base):
    __tablename__ = "employee_benefits"
    # One enrollment per (benefit, employee) pair.
    __table_args__ = (
        UniqueConstraint(
            "benefit_id",
            "employee_id",
            name="ix_employee_benefits_benefit_id_employee_id",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(ForeignKey("employees.id", ondelete="CASCADE"))
    benefit_id: Mapped[int] = mapped_column(ForeignKey("benefits.id", ondelete="CASCADE"))
    cost_to_employee: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), default=None)

    employee: Mapped[Employee] = relationship(back_populates="benefits")
    benefit: Mapped[Benefit] = relationship(back_populates="enrollments")

    @property
    def effective_cost(self) -> Decimal | None:
        """Employee-specific override when set, otherwise the catalog base cost."""

        if self.cost_to_employee is not None:
            return self.cost_to_employee
        if self.benefit is not None:
            return self.benefit.base_cost
        return None
