"""
Audit Repository - append-only LoggingInfo rows
"""

from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import LoggingInfo


class AuditRepository(BaseRepository[LoggingInfo]):
    def __init__(self, db: Session):
        super().__init__(db, LoggingInfo)

    def record(self, method_name: str, user_info: str) -> LoggingInfo:
        # Column limits are 100 characters
        entry = LoggingInfo(method_name=method_name[:100], user_info=user_info[:100])
        return self.create(entry)
