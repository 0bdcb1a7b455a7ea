# This file defines liveness, readiness, and version endpoints for API operations.
# It exists so orchestration and monitoring systems can verify service health quickly.
# The readiness check confirms database connectivity, that the employees table exists, and that startup bootstrap succeeded.
# The in-memory store is always ready because it has no external dependency.

from __future__ import annotations

import subprocess
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.api.db_access import DatabaseClient
from src.api.dependencies import ConfigDep, get_database_client
from src.api.schemas.health_schemas import HealthResponse, ReadinessResponse, VersionResponse
from src.employees.models import Employee

router = APIRouter(tags=["health"])
DBDep = Annotated[DatabaseClient, Depends(get_database_client)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _git_commit() -> str | None:
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
        value = completed.stdout.strip()
        return value or None
    except (OSError, subprocess.CalledProcessError):
        return None


@router.get("/health", response_model=HealthResponse)
def health(request: Request, config: ConfigDep) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
        "timestamp": _utc_now(),
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(request: Request, config: ConfigDep, db: DBDep) -> dict[str, object]:
    bootstrap_failed = bool(getattr(request.app.state, "db_bootstrap_failed", False))
    if config.employee_store == "memory":
        db_connected = False
        table_ready = True
        is_ready = True
        database = "not_used"
    else:
        db_connected = db.can_connect()
        table_ready = db_connected and db.table_exists(Employee.__tablename__)
        is_ready = db_connected and table_ready and not bootstrap_failed
        database = "reachable" if db_connected else "unreachable"

    return {
        "request_id": request.state.request_id,
        "employee_store": config.employee_store,
        "db_connected": db_connected,
        "employees_table_ready": table_ready,
        "bootstrap_failed": bootstrap_failed,
        "ready": is_ready,
        "database": database,
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(request: Request, config: ConfigDep) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "app_version": config.app_version,
        "git_commit": _git_commit(),
        "project": config.api_name,
        "version": config.app_version,
        "timestamp": _utc_now(),
    }
