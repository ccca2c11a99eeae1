"""Сверка инвентаря S3 с локальным инвентарём"""
import logging
from typing import Dict, Set

from s3check_core.models import (
    DiscrepancyType,
    Entry,
    FileDiscrepancy,
    Inventory,
    ReconciliationReport,
)

logger = logging.getLogger(__name__)


def reconcile(remote: Inventory, local: Inventory) -> ReconciliationReport:
    """
    Сверить файлы S3 с локальными файлами.

    Контейнеры (папки) пропускаются с обеих сторон. Каждый локальный файл
    сопоставляется не более чем с одним объектом S3: сопоставленные имена
    попадают в consumed, входные списки не изменяются.

    Args:
        remote: Инвентарь S3
        local: Локальный инвентарь

    Returns:
        ReconciliationReport
    """
    report = ReconciliationReport()

    # При дублях имени выигрывает первая запись в порядке обхода
    local_by_name: Dict[str, Entry] = {}
    for entry in local:
        if not entry.is_container:
            local_by_name.setdefault(entry.name, entry)

    consumed: Set[str] = set()

    for remote_entry in remote:
        if remote_entry.is_container:
            continue

        local_entry = None
        if remote_entry.name not in consumed:
            local_entry = local_by_name.get(remote_entry.name)

        if local_entry is None:
            report.remote_findings.append(FileDiscrepancy(
                name=remote_entry.name,
                discrepancy_type=DiscrepancyType.REMOTE_ONLY,
                remote_fingerprint=remote_entry.fingerprint,
            ))
            continue

        consumed.add(remote_entry.name)
        if remote_entry.fingerprint == local_entry.fingerprint:
            report.matched.append(remote_entry.name)
        else:
            report.remote_findings.append(FileDiscrepancy(
                name=remote_entry.name,
                discrepancy_type=DiscrepancyType.CHECKSUM_MISMATCH,
                remote_fingerprint=remote_entry.fingerprint,
                local_fingerprint=local_entry.fingerprint,
            ))

    for entry in local:
        if entry.is_container or entry.name in consumed:
            continue
        report.local_only.append(FileDiscrepancy(
            name=entry.name,
            discrepancy_type=DiscrepancyType.LOCAL_ONLY,
            local_fingerprint=entry.fingerprint,
        ))

    logger.info(
        f"Сверка завершена: совпало {len(report.matched)}, "
        f"ошибок checksum {len(report.mismatches)}, "
        f"только в S3 {len(report.remote_only)}, "
        f"только локально {len(report.local_only)}"
    )
    return report
