"""
Настройки проверки

Файл настроек в формате .env (ключ=значение), ключи без учёта регистра:
    LOCALFOLDER=data
    REGION=eu-central-1
    BUCKETNAME=my-bucket
    ENDPOINTURL=https://<account>.r2.cloudflarestorage.com   # опционально
    PROFILE=backup                                          # опционально

Путь к файлу: переменная окружения S3CHECK_CONFIG, по умолчанию ./config.env
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values

from s3check_core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "S3CHECK_CONFIG"
DEFAULT_CONFIG_FILE = "config.env"

REQUIRED_KEYS = ("localfolder", "region", "bucketname")


@dataclass(frozen=True)
class Settings:
    """Настройки проверки"""
    local_folder: str
    region: str
    bucket_name: str
    endpoint_url: Optional[str] = None
    profile: Optional[str] = None

    @property
    def local_root(self) -> Path:
        """Локальная папка относительно текущей директории"""
        return Path.cwd() / self.local_folder


def get_config_path() -> Path:
    """Путь к файлу настроек из env или по умолчанию"""
    return Path(os.getenv(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE))


def _read_values(path: Path) -> Dict[str, str]:
    """Прочитать файл и привести ключи к нижнему регистру"""
    if not path.is_file():
        raise ConfigError(f"Файл настроек не найден: {path}")

    try:
        raw = dotenv_values(path, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Не удалось прочитать файл настроек {path}: {e}") from e

    return {
        key.strip().lower(): (value or "").strip()
        for key, value in raw.items()
    }


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Загрузить настройки.

    Args:
        path: Путь к файлу (по умолчанию get_config_path())

    Returns:
        Settings

    Raises:
        ConfigError: файл не читается или нет обязательного ключа
    """
    config_path = Path(path) if path is not None else get_config_path()
    logger.debug(f"Загрузка настроек из {config_path}")

    values = _read_values(config_path)

    missing = [key for key in REQUIRED_KEYS if not values.get(key)]
    if missing:
        raise ConfigError(f"Не заданы обязательные параметры в {config_path}: {', '.join(missing)}")

    settings = Settings(
        local_folder=values["localfolder"],
        region=values["region"],
        bucket_name=values["bucketname"],
        endpoint_url=values.get("endpointurl") or None,
        profile=values.get("profile") or None,
    )
    logger.info(f"Настройки загружены: {config_path}")
    return settings
