"""Audit sink backed by the audit_log table."""

from projectguard.application.dto.audit_entry import AuditEntry


class UnitOfWorkAuditSink:
    """Writes each entry in its own unit of work."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def create_audit_log(self, entry: AuditEntry) -> None:
        async with self._uow_factory() as uow:
            await uow.audit_logs.create(entry)
            await uow.commit()
