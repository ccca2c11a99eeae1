"""
S3 клиент для AWS S3 и S3-совместимых хранилищ (R2, MinIO)

Реализация листинга вынесена в миксин:
- s3_utils.py - list_object_etags
"""
import logging
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from s3check_core.s3_errors import to_remote_access_error
from s3check_core.s3_utils import S3ListingMixin

logger = logging.getLogger(__name__)


class S3Storage(S3ListingMixin):
    """
    Клиент для чтения содержимого bucket.

    Учётные данные берутся стандартной цепочкой boto3
    (переменные окружения AWS_*, ~/.aws/credentials, профиль).
    """

    def __init__(
        self,
        region: str,
        bucket_name: str,
        endpoint_url: Optional[str] = None,
        profile: Optional[str] = None,
    ):
        """
        Args:
            region: Регион bucket
            bucket_name: Имя bucket
            endpoint_url: Endpoint для S3-совместимых хранилищ
            profile: Профиль из ~/.aws/credentials
        """
        self.region = region
        self.bucket_name = bucket_name
        self.endpoint_url = endpoint_url

        logger.info(f"S3 Region: {region}")
        logger.info(f"S3 Bucket: {bucket_name}")
        if endpoint_url:
            logger.info(f"S3 Endpoint: {endpoint_url}")

        # Без retry: проверка одноразовая, ошибка сразу фатальна
        config = Config(
            retries={"total_max_attempts": 1, "mode": "standard"},
            connect_timeout=30,
            read_timeout=60,
        )

        try:
            session = boto3.session.Session(profile_name=profile, region_name=region)
            self.s3_client = session.client("s3", endpoint_url=endpoint_url, config=config)
        except (BotoCoreError, ValueError) as e:
            raise to_remote_access_error(e, "create_session") from e

        logger.debug("S3Storage инициализирован")
