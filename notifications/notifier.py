import logging
from typing import Protocol

from fastapi import BackgroundTasks

from notifications.email_service import EmailService
from notifications.verification_code_created import VerificationCodeCreatedInterface

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def send(self, verifiable: str, notification: VerificationCodeCreatedInterface) -> None:
        ...


class MailNotifier:
    """Routes verification code notifications to the verifiable's mailbox.

    A notification with a ``queue`` is handed to ``background_tasks`` when
    they are available; everything else is delivered inline.
    """

    def __init__(self, email_service: EmailService, background_tasks: BackgroundTasks | None = None):
        self.email_service = email_service
        self.background_tasks = background_tasks

    def send(self, verifiable: str, notification: VerificationCodeCreatedInterface) -> None:
        message = notification.to_mail(verifiable)
        if notification.queue and self.background_tasks is not None:
            logger.info("Queued verification code mail to %s on %s", verifiable, notification.queue)
            self.background_tasks.add_task(self.email_service.send, verifiable, message)
            return
        logger.info("Delivering verification code mail to %s", verifiable)
        self.email_service.send(verifiable, message)
