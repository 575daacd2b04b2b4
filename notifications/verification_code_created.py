"""Notifications carrying a freshly issued verification code.

Any custom notification configured for the issuer has to subclass
``VerificationCodeCreatedInterface``; ``make_notification`` enforces that
before anything is written or sent.
"""
import importlib
from abc import ABC, abstractmethod
from dataclasses import dataclass

from core.exceptions import ConfigurationError

INVALID_NOTIFICATION_MESSAGE = "The notification should implement the VerificationCodeCreatedInterface."


@dataclass(frozen=True)
class MailMessage:
    subject: str
    body: str


class VerificationCodeCreatedInterface(ABC):
    code: str
    queue: str | None

    def __init__(self, code: str, queue: str | None = None):
        self.code = code
        self.queue = queue or None

    @abstractmethod
    def to_mail(self, verifiable: str) -> MailMessage:
        ...


class VerificationCodeCreated(VerificationCodeCreatedInterface):
    def to_mail(self, verifiable: str) -> MailMessage:
        return MailMessage(
            subject="Your verification code",
            body=(
                f"Your verification code is: {self.code}\n\n"
                "If you did not request this code, you can ignore this email."
            ),
        )


def import_notification_class(path: str) -> type:
    if not path:
        return VerificationCodeCreated
    module_name, _, class_name = path.rpartition(".")
    if not module_name:
        raise ConfigurationError(f"Invalid notification path: {path!r}")
    try:
        module = importlib.import_module(module_name)
        return getattr(module, class_name)
    except (ImportError, AttributeError) as e:
        raise ConfigurationError(f"Cannot import notification {path!r}: {e}") from e


def make_notification(notification_class: type | str, code: str, queue: str | None = None) -> VerificationCodeCreatedInterface:
    if isinstance(notification_class, str):
        notification_class = import_notification_class(notification_class)
    if not (isinstance(notification_class, type) and issubclass(notification_class, VerificationCodeCreatedInterface)):
        raise ConfigurationError(INVALID_NOTIFICATION_MESSAGE)
    return notification_class(code, queue=queue)
