"""
Точка входа S3 Check

Сверяет локальную папку с содержимым S3 bucket и печатает отчёт в stdout.
Аргументов командной строки нет: всё берётся из файла настроек.
"""

import logging
import sys
from typing import Optional

from dotenv import load_dotenv
from rich.console import Console

from _metadata import get_version_info
from s3check.config import Settings, load_settings
from s3check.logging_config import LogContext, setup_logging
from s3check_core.errors import (
    ConfigError,
    EmptyLocalInventoryError,
    FilesystemError,
    RemoteAccessError,
)
from s3check_core.local_inventory import build_local_inventory, require_entries
from s3check_core.reconcile import reconcile
from s3check_core.remote_inventory import build_remote_inventory
from s3check_core.report import render_report
from s3check_core.s3_storage import S3Storage

logger = logging.getLogger(__name__)

# Коды выхода
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 2
EXIT_FILESYSTEM_ERROR = 3
EXIT_EMPTY_LOCAL = 4
EXIT_REMOTE_ERROR = 5


def run_check(
    settings: Settings,
    storage: Optional[S3Storage] = None,
    console: Optional[Console] = None,
) -> int:
    """
    Выполнить проверку.

    Порядок:
    1. Инвентарь локальной папки (пустая папка - ошибка)
    2. Инвентарь bucket
    3. Сверка и вывод отчёта

    Args:
        settings: Настройки
        storage: Клиент S3 (по умолчанию создаётся из настроек)
        console: Консоль для отчёта (по умолчанию stdout)

    Returns:
        EXIT_SUCCESS; расхождения - результат проверки, а не ошибка

    Raises:
        FilesystemError, EmptyLocalInventoryError, RemoteAccessError
    """
    local_root = settings.local_root

    with LogContext(
        bucket=settings.bucket_name,
        region=settings.region,
        endpoint_url=settings.endpoint_url,
        local_root=str(local_root),
    ):
        local_files = require_entries(build_local_inventory(local_root), settings.local_folder)

        if storage is None:
            storage = S3Storage(
                region=settings.region,
                bucket_name=settings.bucket_name,
                endpoint_url=settings.endpoint_url,
                profile=settings.profile,
            )
        s3_files = build_remote_inventory(storage)

        report = reconcile(s3_files, local_files)
        render_report(report, console)

    return EXIT_SUCCESS


def main() -> int:
    """Главная функция - точка входа"""
    setup_logging()
    # AWS_* переменные для boto3 можно держать в .env
    load_dotenv()

    logger.info(get_version_info())

    try:
        settings = load_settings()
        return run_check(settings)

    except ConfigError as e:
        logger.error(f"❌ Ошибка файла настроек: {e}", extra={"exit_code": EXIT_CONFIG_ERROR})
        return EXIT_CONFIG_ERROR

    except EmptyLocalInventoryError as e:
        logger.error(f"❌ {e}", extra={"exit_code": EXIT_EMPTY_LOCAL})
        return EXIT_EMPTY_LOCAL

    except FilesystemError as e:
        logger.error(f"❌ Ошибка чтения локальных файлов: {e}", extra={"exit_code": EXIT_FILESYSTEM_ERROR})
        return EXIT_FILESYSTEM_ERROR

    except RemoteAccessError as e:
        logger.error(
            f"❌ Ошибка получения файлов из S3: {e}",
            extra={"exit_code": EXIT_REMOTE_ERROR, "error_code": e.error_code},
        )
        return EXIT_REMOTE_ERROR


if __name__ == "__main__":
    sys.exit(main())
