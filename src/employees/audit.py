"""
Audit field stamping for entities that carry `AuditMixin` columns.
"""

from __future__ import annotations

from src.common.clock import Clock
from src.employees.models import AuditMixin


class AuditStamper:
    """Stamps created/modified audit columns from an injected clock and actor name."""

    def __init__(self, *, clock: Clock, actor: str) -> None:
        self.clock = clock
        self.actor = actor

    def stamp_created(self, entity: AuditMixin) -> None:
        entity.created_by = self.actor
        entity.created_on = self.clock.now()

    def stamp_modified(self, entity: AuditMixin) -> None:
        entity.last_modified_by = self.actor
        entity.last_modified_on = self.clock.now()
