"""
Audit trail model.
"""

from sqlalchemy import Column, DateTime, Integer, String

from domain.models.database import Base, utcnow


class LoggingInfo(Base):
    """Append-only record of who called which mutating operation"""

    __tablename__ = "LoggingInfo"

    id = Column("Id", Integer, primary_key=True, index=True, unique=True)
    method_name = Column("MethodName", String(100), nullable=False)
    user_info = Column("UserInfo", String(100), nullable=False)
    date_time = Column("DateTime", DateTime(timezone=True), nullable=False, default=utcnow)
