"""S3 storage adapter."""

from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..core.errors import TransportError
from ..ports.storage import ObjectHead

_MISSING_CODES = {"404", "NoSuchKey", "NotFound"}


class S3StorageAdapter:
    """Read-only S3 implementation of StoragePort.

    Every botocore failure is re-raised as TransportError with the original
    exception chained.
    """

    def __init__(
        self,
        client: Any = None,
        endpoint_url: str | None = None,
        region: str | None = None,
        profile: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
    ):
        if client is None:
            session = boto3.Session(profile_name=profile) if profile else boto3.Session()
            client_params: dict[str, Any] = {}
            if endpoint_url:
                client_params["endpoint_url"] = endpoint_url
            if region:
                client_params["region_name"] = region
            if access_key and secret_key:
                client_params["aws_access_key_id"] = access_key
                client_params["aws_secret_access_key"] = secret_key
            client = session.client("s3", **client_params)
        self.client = client

    def list_objects(
        self,
        bucket: str,
        prefix: str = "",
        max_keys: int = 1000,
        continuation_token: str | None = None,
    ) -> dict[str, Any]:
        params: dict[str, Any] = {"Bucket": bucket, "MaxKeys": max_keys}
        if prefix:
            params["Prefix"] = prefix
        if continuation_token:
            params["ContinuationToken"] = continuation_token

        try:
            response = self.client.list_objects_v2(**params)
        except (ClientError, BotoCoreError) as e:
            raise TransportError(f"store error: {e}") from e

        objects = [
            {
                "key": obj["Key"],
                "size": obj.get("Size", 0),
                "last_modified": obj.get("LastModified"),
            }
            for obj in response.get("Contents", [])
        ]
        return {
            "objects": objects,
            "is_truncated": response.get("IsTruncated", False),
            "next_continuation_token": response.get("NextContinuationToken"),
        }

    def head(self, bucket: str, key: str) -> ObjectHead | None:
        try:
            response = self.client.head_object(Bucket=bucket, Key=key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _MISSING_CODES:
                return None
            raise TransportError(f"store error: {e}") from e
        except BotoCoreError as e:
            raise TransportError(f"store error: {e}") from e

        return ObjectHead(
            key=key,
            size=response.get("ContentLength", 0),
            last_modified=response.get("LastModified"),
            etag=response.get("ETag", "").strip('"') or None,
        )

    def get(self, bucket: str, key: str) -> bytes | None:
        try:
            response = self.client.get_object(Bucket=bucket, Key=key)
            body: bytes = response["Body"].read()
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _MISSING_CODES:
                return None
            raise TransportError(f"store error: {e}") from e
        except BotoCoreError as e:
            raise TransportError(f"store error: {e}") from e
        return body
