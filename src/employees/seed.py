"""
Idempotent startup data for the SQL-backed store.

Each block (employees, benefits, enrollments) only runs when its table is empty, so the
routine can be called on every startup. Enrollments are matched by first name (lowest id wins)
and skipped when the employee or benefit no longer exists.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from src.employees.audit import AuditStamper
from src.employees.models import Benefit, Employee, EmployeeBenefit
from src.employees.repository import SqlAlchemyEmployeeRepository

LOGGER = logging.getLogger("employees.seed")

SEED_EMPLOYEES: tuple[dict[str, str], ...] = (
    {
        "first_name": "John",
        "last_name": "Doe",
        "social_security_number": "123-45-6789",
        "address1": "123 Main St",
        "city": "Anytown",
        "state": "NY",
        "zip_code": "12345",
        "phone_number": "555-123-4567",
        "email": "john.doe@example.com",
    },
    {
        "first_name": "Jane",
        "last_name": "Smith",
        "social_security_number": "987-65-4321",
        "address1": "456 Elm St",
        "address2": "Apt 2B",
        "city": "Othertown",
        "state": "CA",
        "zip_code": "98765",
        "phone_number": "555-987-6543",
        "email": "jane.smith@example.com",
    },
)

SEED_BENEFITS: tuple[tuple[str, str, Decimal], ...] = (
    ("Health", "Medical, dental, and vision coverage", Decimal("100.00")),
    ("Dental", "Dental coverage", Decimal("50.00")),
    ("Vision", "Vision coverage", Decimal("30.00")),
)

# (employee first name, benefit name, cost override)
SEED_ENROLLMENTS: tuple[tuple[str, str, Decimal | None], ...] = (
    ("John", "Health", Decimal("100.00")),
    ("John", "Dental", None),
    ("Jane", "Health", Decimal("120.00")),
    ("Jane", "Vision", None),
)


def _is_empty(session: Session, model: type) -> bool:
    return session.scalar(select(func.count()).select_from(model)) == 0


def seed_database(session: Session, *, stamper: AuditStamper) -> None:
    """Populate baseline employees, benefits, and enrollments where missing."""

    if _is_empty(session, Employee):
        repository = SqlAlchemyEmployeeRepository(session=session, stamper=stamper)
        for values in SEED_EMPLOYEES:
            repository.create(Employee(**values))
        LOGGER.info("Seeded %s employees.", len(SEED_EMPLOYEES))

    if _is_empty(session, Benefit):
        for name, description, base_cost in SEED_BENEFITS:
            benefit = Benefit(name=name, description=description, base_cost=base_cost)
            stamper.stamp_created(benefit)
            session.add(benefit)
        session.commit()
        LOGGER.info("Seeded %s benefits.", len(SEED_BENEFITS))

    if _is_empty(session, EmployeeBenefit):
        benefits = {benefit.name: benefit for benefit in session.scalars(select(Benefit))}
        enrolled = 0
        for first_name, benefit_name, cost in SEED_ENROLLMENTS:
            employee = session.scalars(
                select(Employee).where(Employee.first_name == first_name).order_by(Employee.id)
            ).first()
            benefit = benefits.get(benefit_name)
            if employee is None or benefit is None:
                LOGGER.info(
                    "Skipping seed enrollment %s/%s: employee or benefit is missing.",
                    first_name,
                    benefit_name,
                )
                continue
            session.add(
                EmployeeBenefit(employee_id=employee.id, benefit_id=benefit.id, cost_to_employee=cost)
            )
            enrolled += 1
        session.commit()
        LOGGER.info("Seeded %s benefit enrollments.", enrolled)
