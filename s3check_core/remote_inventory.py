"""Инвентарь объектов S3 bucket"""
import logging

from s3check_core.models import Entry, Inventory
from s3check_core.s3_storage import S3Storage

logger = logging.getLogger(__name__)

FOLDER_SUFFIX = "/"


def strip_etag(etag: str) -> str:
    """Убрать ровно одну пару кавычек вокруг ETag"""
    if len(etag) >= 2 and etag.startswith('"') and etag.endswith('"'):
        return etag[1:-1]
    return etag


def build_remote_inventory(storage: S3Storage) -> Inventory:
    """
    Построить инвентарь bucket одним листингом.

    Ключ, оканчивающийся на "/", - placeholder папки (контейнер без хеша).

    Args:
        storage: Клиент S3

    Returns:
        Список Entry в порядке листинга

    Raises:
        RemoteAccessError: ошибка доступа к S3
    """
    logger.info(f"Checking s3 Bucket objects ({storage.bucket_name})...")

    inventory: Inventory = []
    for obj in storage.list_object_etags():
        key = obj["Key"]
        is_folder = key.endswith(FOLDER_SUFFIX)
        inventory.append(Entry(
            name=key,
            is_container=is_folder,
            fingerprint="" if is_folder else strip_etag(obj["ETag"]),
        ))

    logger.info(f"Найдено объектов в S3: {len(inventory)}", extra={"entry_count": len(inventory)})
    return inventory
