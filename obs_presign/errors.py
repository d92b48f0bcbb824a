"""Статусы и исключения генерации временных URL"""

from enum import Enum


class PresignStatus(str, Enum):
    """Итоговый статус генерации временного URL"""

    OK = "OK"
    INVALID_INPUT = "INVALID_INPUT"
    MISSING_CREDENTIAL = "MISSING_CREDENTIAL"
    RESOURCE_TOO_LONG = "RESOURCE_TOO_LONG"
    QUERY_TOO_LONG = "QUERY_TOO_LONG"
    STRING_TO_SIGN_TOO_LONG = "STRING_TO_SIGN_TOO_LONG"
    SIGNING_FAILURE = "SIGNING_FAILURE"
    URL_TOO_LONG = "URL_TOO_LONG"


class PresignError(Exception):
    """Базовая ошибка конвейера подписи"""

    status: PresignStatus = PresignStatus.INVALID_INPUT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.status.value}: {self.message}"


class InvalidInputError(PresignError):
    status = PresignStatus.INVALID_INPUT


class MissingCredentialError(PresignError):
    status = PresignStatus.MISSING_CREDENTIAL


class ResourceTooLongError(PresignError):
    status = PresignStatus.RESOURCE_TOO_LONG


class QueryTooLongError(PresignError):
    status = PresignStatus.QUERY_TOO_LONG


class StringToSignTooLongError(PresignError):
    status = PresignStatus.STRING_TO_SIGN_TOO_LONG


class SigningFailureError(PresignError):
    status = PresignStatus.SIGNING_FAILURE


class UrlTooLongError(PresignError):
    status = PresignStatus.URL_TOO_LONG
