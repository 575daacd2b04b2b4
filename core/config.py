from datetime import timedelta

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from notifications.verification_code_created import VerificationCodeCreated


class VerificationCodeConfig(BaseModel):
    """Read-only options handed to the issuer and verifier."""

    model_config = ConfigDict(frozen=True)

    length: int = 6
    characters: str = "0123456789"
    expire_minutes: int = 60
    queue: str | None = None
    test_verifiables: tuple[str, ...] = ()
    test_code: str = ""
    # A class, or a dotted path imported when a code is sent
    notification: type | str = VerificationCodeCreated

    @field_validator("queue")
    @classmethod
    def _empty_queue_is_unset(cls, v):
        return v or None

    @property
    def lifetime(self) -> timedelta:
        return timedelta(minutes=self.expire_minutes)

    def is_test_verifiable(self, verifiable: str) -> bool:
        return verifiable in self.test_verifiables


class Settings(BaseSettings):
    DATABASE_URL: str = ""
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_NAME: str = "verification_codes"

    LOG_LEVEL: str = "INFO"

    VERIFICATION_CODE_LENGTH: int = 6
    VERIFICATION_CODE_CHARACTERS: str = "0123456789"
    VERIFICATION_CODE_EXPIRE_MINUTES: int = 60
    VERIFICATION_CODE_QUEUE: str | None = None
    VERIFICATION_CODE_TEST_VERIFIABLES: list[str] = []
    VERIFICATION_CODE_TEST_CODE: str = ""
    VERIFICATION_CODE_NOTIFICATION: str = ""

    SMTP_HOST: str = ""
    SMTP_PORT: int = 0
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_FROM: str = "noreply@example.com"

    @property
    def SQLALCHEMY_DATABASE_URI(self):
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    def verification_code_config(self) -> VerificationCodeConfig:
        return VerificationCodeConfig(
            length=self.VERIFICATION_CODE_LENGTH,
            characters=self.VERIFICATION_CODE_CHARACTERS,
            expire_minutes=self.VERIFICATION_CODE_EXPIRE_MINUTES,
            queue=self.VERIFICATION_CODE_QUEUE,
            test_verifiables=tuple(self.VERIFICATION_CODE_TEST_VERIFIABLES),
            test_code=self.VERIFICATION_CODE_TEST_CODE,
            notification=self.VERIFICATION_CODE_NOTIFICATION or VerificationCodeCreated,
        )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
