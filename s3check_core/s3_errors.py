"""Централизованная обработка ошибок S3"""
import logging
from dataclasses import dataclass
from enum import Enum

from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

from s3check_core.errors import RemoteAccessError

logger = logging.getLogger(__name__)


class S3ErrorCode(Enum):
    """Известные коды ошибок S3"""
    ACCESS_DENIED = "AccessDenied"
    INVALID_ACCESS_KEY = "InvalidAccessKeyId"
    SIGNATURE_MISMATCH = "SignatureDoesNotMatch"
    EXPIRED_TOKEN = "ExpiredToken"
    UNKNOWN = "Unknown"


AUTH_ERROR_CODES = frozenset({
    S3ErrorCode.ACCESS_DENIED.value,
    S3ErrorCode.INVALID_ACCESS_KEY.value,
    S3ErrorCode.SIGNATURE_MISMATCH.value,
    S3ErrorCode.EXPIRED_TOKEN.value,
})


@dataclass
class S3ErrorResult:
    """Результат классификации ошибки S3"""
    error_code: str
    error_message: str
    is_auth_error: bool


def classify_client_error(e: ClientError) -> S3ErrorResult:
    """
    Классифицировать ClientError.

    Args:
        e: ClientError от botocore

    Returns:
        S3ErrorResult с информацией об ошибке
    """
    error_code = e.response.get("Error", {}).get("Code", S3ErrorCode.UNKNOWN.value)
    error_message = e.response.get("Error", {}).get("Message", str(e))

    return S3ErrorResult(
        error_code=error_code,
        error_message=error_message,
        is_auth_error=error_code in AUTH_ERROR_CODES,
    )


def to_remote_access_error(e: Exception, operation: str) -> RemoteAccessError:
    """
    Преобразовать исключение botocore в RemoteAccessError.

    Повторных попыток нет: любая ошибка доступа к S3 фатальна для проверки.

    Args:
        e: Исключение
        operation: Название операции для сообщения

    Returns:
        RemoteAccessError с кодом ошибки
    """
    if isinstance(e, ClientError):
        result = classify_client_error(e)
        if result.is_auth_error:
            logger.error(f"❌ Ошибка авторизации при {operation}: {result.error_code}")
        else:
            logger.error(f"❌ Ошибка S3 при {operation}: {result.error_code} - {result.error_message}")
        return RemoteAccessError(
            f"{operation}: {result.error_code} - {result.error_message}",
            error_code=result.error_code,
        )

    if isinstance(e, NoCredentialsError):
        logger.error(f"❌ Не найдены учётные данные AWS при {operation}")
        return RemoteAccessError(f"{operation}: {e}", error_code="NoCredentials")

    if isinstance(e, BotoCoreError):
        logger.error(f"❌ Ошибка соединения при {operation}: {type(e).__name__}: {e}")
        return RemoteAccessError(f"{operation}: {e}", error_code=type(e).__name__)

    logger.error(f"❌ Неожиданная ошибка {operation}: {type(e).__name__}: {e}", exc_info=True)
    return RemoteAccessError(f"{operation}: {type(e).__name__}: {e}")
