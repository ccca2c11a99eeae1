"""
S3 Check Core - Базовая библиотека

Содержит логику построения инвентарей и сверки (без CLI).

Модули:
- models: Модели данных (Entry, FileDiscrepancy, ReconciliationReport)
- local_inventory: Обход локальной папки и MD5 хеши
- s3_storage / s3_utils: Клиент S3 и листинг bucket
- remote_inventory: Инвентарь объектов bucket
- reconcile: Сверка двух инвентарей
- report: Вывод отчёта в консоль
"""

from _metadata import __product__, __version__

__all__ = ["__product__", "__version__"]
