"""Issuing and checking verification codes.

``VerificationCodeIssuer.send`` replaces any earlier codes of a verifiable
with a fresh one and notifies it; ``VerificationCodeVerifier.verify`` accepts
a code once, while it has not expired. Verifiables on the configured test
list never touch storage or delivery.
"""
import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from core.config import VerificationCodeConfig
from crud.verification_code_crud import (
    create_verification_code,
    delete_verification_code,
    delete_verification_codes_for,
    find_valid_verification_code,
)
from notifications.notifier import Notifier
from notifications.verification_code_created import make_notification
from schemas.verification_code_schema import VerificationCodeCreate
from services.code_generator import generate_code

logger = logging.getLogger(__name__)


class VerificationCodeIssuer:
    def __init__(self, db: Session, config: VerificationCodeConfig, notifier: Notifier):
        self.db = db
        self.config = config
        self.notifier = notifier

    def send(self, verifiable: str) -> None:
        if self.config.is_test_verifiable(verifiable):
            logger.debug("Skipping verification code for test verifiable %s", verifiable)
            return

        code = generate_code(self.config.length, self.config.characters)
        # Raises ConfigurationError before anything is deleted or written
        notification = make_notification(self.config.notification, code, self.config.queue)

        delete_verification_codes_for(self.db, verifiable)
        create_verification_code(
            self.db,
            VerificationCodeCreate(
                verifiable=verifiable,
                code=code,
                expires_at=datetime.now(timezone.utc) + self.config.lifetime,
            ),
        )
        logger.info("Issued verification code for %s", verifiable)

        self.notifier.send(verifiable, notification)


class VerificationCodeVerifier:
    def __init__(self, db: Session, config: VerificationCodeConfig):
        self.db = db
        self.config = config

    def verify(self, code: str, verifiable: str) -> bool:
        if self.config.is_test_verifiable(verifiable):
            return bool(self.config.test_code) and code == self.config.test_code

        record = find_valid_verification_code(self.db, verifiable, code)
        if record is None:
            logger.debug("Verification failed for %s", verifiable)
            return False

        if not delete_verification_code(self.db, record.id):
            logger.debug("Verification code for %s was already used", verifiable)
            return False
        logger.info("Verified code for %s", verifiable)
        return True


class VerificationCodes:
    """Issuer and verifier sharing one session and config."""

    def __init__(self, db: Session, config: VerificationCodeConfig, notifier: Notifier):
        self.issuer = VerificationCodeIssuer(db, config, notifier)
        self.verifier = VerificationCodeVerifier(db, config)

    def send(self, verifiable: str) -> None:
        self.issuer.send(verifiable)

    def verify(self, code: str, verifiable: str) -> bool:
        return self.verifier.verify(code, verifiable)
