from sqlalchemy.orm import Session
import logging

from app.security import Caller
from domain.models import LoggingInfo
from repositories import AuditRepository

logger = logging.getLogger("cookingrecipes.audit")


class AuditService:
    @staticmethod
    def record(db: Session, method_name: str, caller: Caller) -> LoggingInfo:
        """Append a LoggingInfo row for a call made by caller"""
        user_info = f"profile_id={caller.profile_id} roles={','.join(caller.roles)}"
        entry = AuditRepository(db).record(method_name, user_info)
        logger.debug(f"audit_recorded method={method_name} {user_info}")
        return entry
