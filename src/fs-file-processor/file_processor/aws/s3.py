"""S3 client wrapper for reading uploaded objects."""

# Standard Library
from typing import Optional

# Third Party
import boto3
from botocore.exceptions import BotoCoreError, ClientError
from aws_lambda_powertools import Logger

# Local Modules
from file_processor.exceptions import FetchError

# Initialize logger
logger = Logger(service="s3-client-wrapper")


class S3Client:
    """Wrapper class for AWS S3 read operations using boto3.

    The bucket is passed per call because every trigger event names its own
    source bucket.
    """

    def __init__(self, region_name: Optional[str] = None) -> None:
        """Initialize the S3Client with an optional region.

        Parameters
        ----------
        region_name : Optional[str]
            The AWS region to use. If not provided, the default region
            configured in boto3 will be used.
        """
        try:
            self._client = boto3.client("s3", region_name=region_name)
        except Exception as e:
            logger.error("Failed to create S3 client: %s", e)
            raise

    def get_object_content(self, bucket_name: str, object_key: str) -> bytes:
        """Retrieve the full content of an S3 object.

        Parameters
        ----------
        bucket_name : str
            The name of the S3 bucket holding the object.
        object_key : str
            The decoded key (path) of the object.

        Returns
        -------
        bytes
            The complete object body.

        Raises
        ------
        FetchError
            If the object is missing, access is denied, or the transfer
            fails. The boto3 error is chained as the cause.
        """
        try:
            response = self._client.get_object(
                Bucket=bucket_name, Key=object_key
            )
            content = response["Body"].read()
            return content
        except ClientError as e:
            logger.error(
                "Failed to get object content: s3://%s/%s - Error: %s",
                bucket_name,
                object_key,
                e.response.get("Error", {}).get("Message", str(e)),
            )
            raise FetchError(bucket_name, object_key) from e
        except BotoCoreError as e:
            logger.error(
                "Transport error getting object content: s3://%s/%s - Error: %s",
                bucket_name,
                object_key,
                e,
            )
            raise FetchError(bucket_name, object_key) from e
