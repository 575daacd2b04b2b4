from datetime import datetime
from pydantic import BaseModel


class VerificationCodeBase(BaseModel):
    verifiable: str
    code: str
    expires_at: datetime


class VerificationCodeCreate(VerificationCodeBase):
    pass


class SendCodeRequest(BaseModel):
    verifiable: str


class VerifyCodeRequest(BaseModel):
    verifiable: str
    code: str


class VerifyCodeResponse(BaseModel):
    verified: bool
