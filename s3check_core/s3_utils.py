"""Утилиты листинга S3"""
import logging

from botocore.exceptions import BotoCoreError, ClientError

from s3check_core.s3_errors import to_remote_access_error

logger = logging.getLogger(__name__)


class S3ListingMixin:
    """Миксин для листинга bucket"""

    def list_object_etags(self) -> list[dict]:
        """
        Получить ключи объектов bucket с их ETag

        Выполняется ОДИН запрос list_objects_v2. Если bucket больше одной
        страницы ответа, продолжение не запрашивается и список неполный.

        Returns:
            Список dict с ключами: Key, ETag (ETag как есть, в кавычках)

        Raises:
            RemoteAccessError: ошибка авторизации или запроса
        """
        try:
            response = self.s3_client.list_objects_v2(Bucket=self.bucket_name)
        except (ClientError, BotoCoreError) as e:
            raise to_remote_access_error(e, "list_objects_v2") from e

        if response.get("IsTruncated"):
            logger.warning(
                f"⚠️ Листинг {self.bucket_name} неполный: получена только первая страница "
                f"({response.get('KeyCount', len(response.get('Contents', [])))} объектов)"
            )

        return [
            {"Key": obj["Key"], "ETag": obj.get("ETag", "")}
            for obj in response.get("Contents", [])
        ]
