"""
S3 Check - Централизованные метаданные проекта

Этот модуль содержит общую информацию о продукте,
которая используется во всех частях системы.
"""

__product__ = "S3 Check"
__version__ = "0.1"
__description__ = "Сверка локальной папки с содержимым S3 bucket"
__author__ = "S3 Check Team"
__license__ = "MIT"
__status__ = "Alpha"
__python_requires__ = ">=3.11"

# Технологический стек
__tech_stack__ = {
    "python": "3.11+",
    "storage": "AWS S3 / S3-совместимые (R2, MinIO)",
    "config": "python-dotenv",
    "console": "rich",
}


def get_version_info():
    """Возвращает полную информацию о версии"""
    return f"{__product__} v{__version__} ({__status__})"
