import logging

import pytest
from fastapi import BackgroundTasks

from core.exceptions import ConfigurationError
from notifications.email_service import EmailService
from notifications.notifier import MailNotifier
from notifications.verification_code_created import (
    INVALID_NOTIFICATION_MESSAGE,
    MailMessage,
    VerificationCodeCreated,
    make_notification,
)


class RecordingEmailService:
    def __init__(self):
        self.sent = []

    def send(self, to_email, message):
        self.sent.append((to_email, message))
        return True


def test_verification_code_created_mail_contains_code():
    message = VerificationCodeCreated("482913").to_mail("a@example.com")

    assert message.subject == "Your verification code"
    assert "482913" in message.body


def test_make_notification_sets_code_and_queue():
    notification = make_notification(VerificationCodeCreated, "abc", "q1")

    assert notification.code == "abc"
    assert notification.queue == "q1"


@pytest.mark.parametrize("notification_class", [MailMessage, object, None])
def test_make_notification_rejects_other_classes(notification_class):
    with pytest.raises(ConfigurationError) as exc:
        make_notification(notification_class, "abc")
    assert str(exc.value) == INVALID_NOTIFICATION_MESSAGE


def test_make_notification_imports_dotted_path():
    notification = make_notification("notifications.verification_code_created.VerificationCodeCreated", "abc")

    assert isinstance(notification, VerificationCodeCreated)


def test_make_notification_with_empty_path_uses_default():
    assert isinstance(make_notification("", "abc"), VerificationCodeCreated)


@pytest.mark.parametrize("path", ["VerificationCodeCreated", "notifications.verification_code_created.Missing", "nope.Nothing"])
def test_make_notification_rejects_unimportable_path(path):
    with pytest.raises(ConfigurationError, match=path):
        make_notification(path, "abc")


def test_make_notification_rejects_path_to_other_class():
    with pytest.raises(ConfigurationError) as exc:
        make_notification("notifications.verification_code_created.MailMessage", "abc")
    assert str(exc.value) == INVALID_NOTIFICATION_MESSAGE


def test_mail_notifier_delivers_inline_without_queue():
    email_service = RecordingEmailService()
    background_tasks = BackgroundTasks()

    MailNotifier(email_service, background_tasks).send("a@example.com", VerificationCodeCreated("abc"))

    assert [to for to, _ in email_service.sent] == ["a@example.com"]
    assert background_tasks.tasks == []


def test_mail_notifier_defers_queued_notification():
    email_service = RecordingEmailService()
    background_tasks = BackgroundTasks()

    MailNotifier(email_service, background_tasks).send("a@example.com", VerificationCodeCreated("abc", queue="q1"))

    assert email_service.sent == []
    assert len(background_tasks.tasks) == 1
    assert background_tasks.tasks[0].args[0] == "a@example.com"


def test_mail_notifier_delivers_queued_notification_inline_without_background_tasks():
    email_service = RecordingEmailService()

    MailNotifier(email_service).send("a@example.com", VerificationCodeCreated("abc", queue="q1"))

    assert len(email_service.sent) == 1


def test_email_service_logs_in_dev_mode(caplog):
    service = EmailService(host="", port=0, user="", password="", sender="noreply@example.com")

    with caplog.at_level(logging.INFO, logger="notifications.email_service"):
        sent = service.send("a@example.com", MailMessage(subject="Hi", body="code 123"))

    assert sent is False
    assert not service.enabled
    assert "a@example.com" in caplog.text
