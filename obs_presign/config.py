"""Конфигурация приложения"""

from pydantic import Field, field_validator  # type: ignore[import-untyped]
from pydantic_settings import (  # type: ignore[import-untyped]
    BaseSettings,
    SettingsConfigDict,
)

from obs_presign.models.types import DEFAULT_EXPIRES, BucketContext, Protocol


class Configuration(BaseSettings):
    """Конфигурация приложения"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Учетные данные OBS. Если не заданы, генерация URL вернет MISSING_CREDENTIAL
    key_id: str | None = Field(default=None, description="Access Key ID")
    key_secret: str | None = Field(
        default=None, description="Secret Access Key", repr=False
    )

    bucket_name: str = Field(
        default="",
        description="Имя бакета (пусто: подпись на уровне аккаунта)",
    )
    host_name: str = Field(
        default="obs.cn-north-4.myhuaweicloud.com",
        description="Хост эндпоинта OBS",
    )
    protocol: Protocol = Field(
        default=Protocol.HTTPS,
        description="Протокол итогового URL (http или https)",
    )

    # Время жизни временной ссылки, если не указано явно
    default_expires: int = Field(
        default=DEFAULT_EXPIRES,
        ge=1,
        description="Время жизни временного URL в секундах (по умолчанию 1 час)",
    )

    # Настройки логирования
    log_level: str = Field(
        default="INFO",
        description="Уровень логирования (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @field_validator("protocol", mode="before")
    @classmethod
    def normalize_protocol(cls, v: object) -> object:
        """Приводит протокол к нижнему регистру"""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Валидирует уровень логирования"""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level должен быть одним из: {valid_levels}")
        return v_upper

    def bucket_context(self) -> BucketContext:
        """Возвращает контекст бакета для генерации временных URL"""
        return BucketContext(
            bucket_name=self.bucket_name,
            host_name=self.host_name,
            protocol=self.protocol,
            access_key=self.key_id,
            secret_access_key=self.key_secret,
        )
