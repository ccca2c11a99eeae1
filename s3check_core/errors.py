"""Исключения S3 Check"""
from typing import Optional


class S3CheckError(Exception):
    """Базовое исключение для фатальных ошибок проверки"""
    pass


class ConfigError(S3CheckError):
    """Файл настроек отсутствует, не читается или не содержит нужных ключей"""
    pass


class FilesystemError(S3CheckError):
    """Локальная папка или файл недоступны для чтения"""
    pass


class EmptyLocalInventoryError(S3CheckError):
    """Локальная папка пуста - скорее всего неверно указан путь"""
    pass


class RemoteAccessError(S3CheckError):
    """Ошибка сессии, авторизации или листинга S3"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.error_code = error_code
