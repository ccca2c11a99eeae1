"""
Инвентарь локальной папки

Рекурсивный обход с MD5 хешами файлов. Имена записей нормализуются
к разделителю "/" через PurePath.as_posix(), поэтому на Windows
и на POSIX получаются одинаковые имена, сопоставимые с ключами S3.
"""
import hashlib
import logging
import os
from pathlib import Path, PurePath
from typing import Iterator, Union

from s3check_core.errors import EmptyLocalInventoryError, FilesystemError
from s3check_core.models import Entry, Inventory

logger = logging.getLogger(__name__)

HASH_CHUNK_SIZE = 8192


def compute_md5(file_path: Path) -> str:
    """Вычислить MD5 хеш файла (одно последовательное чтение)"""
    try:
        md5 = hashlib.md5()
        with open(file_path, "rb") as f:
            for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b""):
                md5.update(chunk)
        return md5.hexdigest()
    except OSError as e:
        raise FilesystemError(f"Не удалось прочитать файл {file_path}: {e}") from e


def _walk(directory: Path) -> Iterator[os.DirEntry]:
    """
    Обход в лексикографическом порядке: папка отдаётся раньше своего
    содержимого. Симлинки на папки не раскрываются.
    """
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise FilesystemError(f"Не удалось прочитать папку {directory}: {e}") from e

    for entry in entries:
        yield entry
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(Path(entry.path))


def build_local_inventory(root: Union[str, Path]) -> Inventory:
    """
    Построить инвентарь локальной папки.

    Args:
        root: Корневая папка (сама в инвентарь не попадает)

    Returns:
        Список Entry в порядке обхода

    Raises:
        FilesystemError: папка не существует или файл не читается
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise FilesystemError(f"Папка не найдена: {root_path}")

    logger.info(f"Сканирование локальной папки: {root_path}")

    inventory: Inventory = []
    for dir_entry in _walk(root_path):
        entry_path = Path(dir_entry.path)
        name = PurePath(os.path.relpath(entry_path, root_path)).as_posix()

        try:
            is_dir = dir_entry.is_dir()
            is_file = dir_entry.is_file()
        except OSError as e:
            raise FilesystemError(f"Не удалось прочитать {entry_path}: {e}") from e

        if is_dir:
            inventory.append(Entry(name=name, is_container=True))
        elif is_file:
            inventory.append(Entry(name=name, is_container=False, fingerprint=compute_md5(entry_path)))
        else:
            # FIFO, сокет, устройство или битый симлинк
            raise FilesystemError(f"Не обычный файл: {entry_path}")

    logger.info(f"Найдено локальных записей: {len(inventory)}", extra={"entry_count": len(inventory)})
    return inventory


def require_entries(inventory: Inventory, root: Union[str, Path]) -> Inventory:
    """Пустая локальная папка считается ошибкой конфигурации"""
    if not inventory:
        raise EmptyLocalInventoryError(f"Нет файлов в папке: {root}")
    return inventory
