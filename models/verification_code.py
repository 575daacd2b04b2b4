import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Index
from models.base import Base, TimestampMixin

class VerificationCode(Base, TimestampMixin):
    __tablename__ = "verification_codes"

    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    verifiable = Column(String(255), nullable=False)
    code = Column(String(255), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False)

    def is_expired(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(timezone.utc)
        exp = self.expires_at
        # SQLite hands back naive datetimes; everything is stored in UTC
        if exp.tzinfo is None:
            exp = exp.replace(tzinfo=timezone.utc)
        return exp <= now

Index("idx_verification_codes_verifiable", VerificationCode.verifiable)
