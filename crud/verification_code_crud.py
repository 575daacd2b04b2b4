from datetime import datetime, timezone
from sqlalchemy.orm import Session
from sqlalchemy import desc
from models.verification_code import VerificationCode
from schemas.verification_code_schema import VerificationCodeCreate


def get_verification_code(db: Session, verification_code_id: str):
    return db.query(VerificationCode).filter(VerificationCode.id == verification_code_id).first()


def list_verification_codes(db: Session, verifiable: str | None = None, skip: int = 0, limit: int = 100):
    q = db.query(VerificationCode)
    if verifiable:
        q = q.filter(VerificationCode.verifiable == verifiable)
    return q.order_by(desc(VerificationCode.created_at)).offset(skip).limit(limit).all()


def create_verification_code(db: Session, payload: VerificationCodeCreate):
    vc = VerificationCode(**payload.model_dump())
    db.add(vc)
    db.commit()
    db.refresh(vc)
    return vc


def delete_verification_codes_for(db: Session, verifiable: str) -> int:
    deleted = (
        db.query(VerificationCode)
        .filter(VerificationCode.verifiable == verifiable)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted


def find_valid_verification_code(db: Session, verifiable: str, code: str, now: datetime | None = None):
    now = now or datetime.now(timezone.utc)
    return (
        db.query(VerificationCode)
        .filter(
            VerificationCode.verifiable == verifiable,
            VerificationCode.code == code,
            VerificationCode.expires_at > now,
        )
        .first()
    )


def delete_verification_code(db: Session, verification_code_id: str) -> bool:
    # Conditional delete: only the caller that actually removes the row wins
    deleted = (
        db.query(VerificationCode)
        .filter(VerificationCode.id == verification_code_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted > 0


def delete_expired_verification_codes(db: Session, now: datetime | None = None) -> int:
    now = now or datetime.now(timezone.utc)
    deleted = (
        db.query(VerificationCode)
        .filter(VerificationCode.expires_at <= now)
        .delete(synchronize_session=False)
    )
    db.commit()
    return deleted
