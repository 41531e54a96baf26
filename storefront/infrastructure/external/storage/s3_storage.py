"""S3-compatible theme storage (AWS S3, MinIO, etc.)."""

from __future__ import annotations

import asyncio

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from storefront.infrastructure.exceptions import StorageNotFoundError, StorageReadError

_NOT_FOUND_CODES = frozenset({"NoSuchKey", "404", "NotFound"})


class S3StorageService:
    """Reads theme objects from a bucket.

    Uses boto3 (sync) via asyncio.to_thread for the async API. Connect/read
    timeouts and retries are bounded through botocore Config so a slow bucket
    cannot hang a render.
    """

    def __init__(
        self,
        bucket: str,
        region: str = "eu-west-1",
        endpoint_url: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        force_path_style: bool = False,
        connect_timeout: float = 2.0,
        read_timeout: float = 5.0,
        client=None,
    ) -> None:
        """Initialize S3 client.

        Args:
            bucket: Bucket holding theme directories.
            region: AWS region.
            endpoint_url: Custom endpoint (MinIO).
            access_key: Optional; uses env/IAM if not set.
            secret_key: Optional.
            force_path_style: Path-style addressing (required by most MinIO setups).
            connect_timeout: Seconds to establish a connection.
            read_timeout: Seconds to wait for a response.
            client: Pre-built boto3 client (tests).
        """
        self.bucket = bucket
        if client is not None:
            self._client = client
            return
        config = Config(
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            retries={"max_attempts": 2, "mode": "standard"},
            s3={"addressing_style": "path" if force_path_style else "auto"},
        )
        extra = {} if endpoint_url is None else {"endpoint_url": endpoint_url}
        self._client = boto3.client(
            "s3",
            region_name=region,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            config=config,
            **extra,
        )

    async def read_text(self, key: str, encoding: str = "utf-8") -> str:
        def _get() -> bytes:
            resp = self._client.get_object(Bucket=self.bucket, Key=key)
            return resp["Body"].read()

        try:
            body = await asyncio.to_thread(_get)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _NOT_FOUND_CODES:
                raise StorageNotFoundError(key) from e
            raise StorageReadError(key, str(e)) from e
        except BotoCoreError as e:
            raise StorageReadError(key, str(e)) from e
        return body.decode(encoding)

    async def exists(self, key: str) -> bool:
        def _head() -> bool:
            try:
                self._client.head_object(Bucket=self.bucket, Key=key)
                return True
            except ClientError as e:
                if e.response.get("Error", {}).get("Code") in _NOT_FOUND_CODES:
                    return False
                raise

        try:
            return await asyncio.to_thread(_head)
        except (ClientError, BotoCoreError) as e:
            raise StorageReadError(key, str(e)) from e
