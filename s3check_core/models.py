"""Модели данных для сверки локальной папки и S3 bucket"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set, Tuple


@dataclass(frozen=True)
class Entry:
    """
    Запись инвентаря: файл/папка на диске или объект в bucket.

    name - путь через "/" относительно корня (локально) или ключ объекта (S3).
    У контейнеров (папок) fingerprint всегда пустой.
    """
    name: str
    is_container: bool
    fingerprint: str = ""


# Упорядоченный список записей одного источника
Inventory = List[Entry]


class DiscrepancyType(str, Enum):
    """Тип несоответствия"""
    CHECKSUM_MISMATCH = "checksum_mismatch"  # Файл есть везде, но хеши разные
    REMOTE_ONLY = "remote_only"  # Файл есть в S3, но нет локально
    LOCAL_ONLY = "local_only"  # Файл есть локально, но нет в S3


@dataclass
class FileDiscrepancy:
    """Информация о несоответствии файла"""
    name: str
    discrepancy_type: DiscrepancyType
    remote_fingerprint: Optional[str] = None
    local_fingerprint: Optional[str] = None


@dataclass
class ReconciliationReport:
    """
    Результат сверки.

    remote_findings - несоответствия в порядке листинга S3,
    local_only - файлы без пары в S3 в порядке обхода диска,
    matched - имена файлов с совпавшими хешами.
    """
    remote_findings: List[FileDiscrepancy] = field(default_factory=list)
    local_only: List[FileDiscrepancy] = field(default_factory=list)
    matched: List[str] = field(default_factory=list)

    @property
    def mismatches(self) -> List[FileDiscrepancy]:
        return [
            f for f in self.remote_findings
            if f.discrepancy_type == DiscrepancyType.CHECKSUM_MISMATCH
        ]

    @property
    def remote_only(self) -> List[FileDiscrepancy]:
        return [
            f for f in self.remote_findings
            if f.discrepancy_type == DiscrepancyType.REMOTE_ONLY
        ]

    @property
    def is_clean(self) -> bool:
        """True если расхождений нет"""
        return not self.remote_findings and not self.local_only

    def classification(self) -> Set[Tuple[str, DiscrepancyType]]:
        """Множество (имя, тип) без учёта порядка вывода"""
        return {
            (f.name, f.discrepancy_type)
            for f in self.remote_findings + self.local_only
        }
