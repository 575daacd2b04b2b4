from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlalchemy.orm import Session
from core.config import VerificationCodeConfig, settings
from core.database import get_db
from core.exceptions import ConfigurationError
from notifications.email_service import EmailService
from notifications.notifier import MailNotifier, Notifier
from schemas.verification_code_schema import SendCodeRequest, VerifyCodeRequest, VerifyCodeResponse
from services.verification_codes import VerificationCodeIssuer, VerificationCodeVerifier


router = APIRouter(prefix="/verification-codes", tags=["Verification Codes"])


def get_verification_code_config() -> VerificationCodeConfig:
    return settings.verification_code_config()


def get_notifier(background_tasks: BackgroundTasks) -> Notifier:
    return MailNotifier(EmailService.from_settings(settings), background_tasks)


@router.post("/send", status_code=202)
def send(
    payload: SendCodeRequest,
    db: Session = Depends(get_db),
    config: VerificationCodeConfig = Depends(get_verification_code_config),
    notifier: Notifier = Depends(get_notifier),
):
    try:
        VerificationCodeIssuer(db, config, notifier).send(payload.verifiable)
    except ConfigurationError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return {"status": "sent"}


@router.post("/verify", response_model=VerifyCodeResponse)
def verify(
    payload: VerifyCodeRequest,
    db: Session = Depends(get_db),
    config: VerificationCodeConfig = Depends(get_verification_code_config),
):
    verified = VerificationCodeVerifier(db, config).verify(payload.code, payload.verifiable)
    return VerifyCodeResponse(verified=verified)
