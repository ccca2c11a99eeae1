"""Вывод отчёта сверки в консоль"""
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from s3check_core.models import DiscrepancyType, FileDiscrepancy, ReconciliationReport

REMOTE_HEADER = "----- S3 Files -----"
LOCAL_HEADER = "----- Local Files -----"


def format_finding(finding: FileDiscrepancy) -> str:
    """
    Строка отчёта для одного несоответствия.

    Args:
        finding: Несоответствие

    Returns:
        Строка отчёта без цвета
    """
    if finding.discrepancy_type == DiscrepancyType.CHECKSUM_MISMATCH:
        remote = finding.remote_fingerprint or ""
        local = finding.local_fingerprint or ""
        return f"{finding.name} - Checksum error - S3[{remote}] - Local[{local}]"

    return f"{finding.name} Not found"


def styled_finding(finding: FileDiscrepancy) -> Text:
    """Та же строка для терминала: S3 хеш зелёным, локальный красным"""
    if finding.discrepancy_type == DiscrepancyType.CHECKSUM_MISMATCH:
        return Text.assemble(
            finding.name,
            " - Checksum error - S3[",
            (finding.remote_fingerprint or "", "green"),
            "] - Local[",
            (finding.local_fingerprint or "", "red"),
            "]",
        )

    return Text(format_finding(finding))


def report_lines(report: ReconciliationReport) -> List[str]:
    """Отчёт построчно, без цвета"""
    lines = [REMOTE_HEADER]
    lines.extend(format_finding(f) for f in report.remote_findings)
    lines.append("")
    lines.append(LOCAL_HEADER)
    lines.extend(format_finding(f) for f in report.local_only)
    return lines


def render_report(report: ReconciliationReport, console: Optional[Console] = None) -> None:
    """
    Напечатать отчёт.

    Цвет выводится только в терминал. При перенаправлении stdout строки
    пишутся в файл консоли как есть: rich заменяет табуляции пробелами
    и удаляет управляющие символы, а имена файлов должны совпадать
    с реальными.
    """
    console = console or Console(highlight=False)

    if not console.is_terminal:
        console.file.write("\n".join(report_lines(report)) + "\n")
        console.file.flush()
        return

    def emit(line: Text) -> None:
        console.print(line, soft_wrap=True, highlight=False)

    emit(Text(REMOTE_HEADER))
    for finding in report.remote_findings:
        emit(styled_finding(finding))

    emit(Text(""))
    emit(Text(LOCAL_HEADER))
    for finding in report.local_only:
        emit(styled_finding(finding))
