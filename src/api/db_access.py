# This file wraps the SQLAlchemy engine and session factory used by the API.
# It exists to keep connection details out of router code and make readiness checks easy to fake in tests.
# The client also owns schema creation and the startup seed for the SQL-backed store.

from __future__ import annotations

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from src.common.db import can_connect, create_db_engine, create_session_factory
from src.employees.audit import AuditStamper
from src.employees.models import Base
from src.employees.seed import seed_database


class DatabaseClient:
    """Owns one engine and hands out ORM sessions."""

    def __init__(self, *, database_url: str | None = None, engine: Engine | None = None) -> None:
        if engine is None:
            if not database_url:
                raise ValueError("database_url or engine is required")
            engine = create_db_engine(database_url)
        self._engine: Engine = engine
        self._session_factory: sessionmaker[Session] = create_session_factory(engine)

    @property
    def engine(self) -> Engine:
        return self._engine

    def session(self) -> Session:
        return self._session_factory()

    def can_connect(self) -> bool:
        return can_connect(self._engine)

    def table_exists(self, table_name: str) -> bool:
        return inspect(self._engine).has_table(table_name)

    def create_schema(self) -> None:
        Base.metadata.create_all(self._engine)

    def seed(self, *, stamper: AuditStamper) -> None:
        with self.session() as session:
            seed_database(session, stamper=stamper)
