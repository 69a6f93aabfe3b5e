"""Application layer: interfaces, search services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (record store, audit log).
"""

from app.application.interfaces import (
    IAuditLogRepository,
    IRecordStore,
    ISearchAuditEmitter,
)
from app.application.use_cases.search import SearchService

__all__ = [
    "IAuditLogRepository",
    "IRecordStore",
    "ISearchAuditEmitter",
    "SearchService",
]
