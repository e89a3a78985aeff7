"""Exceptions raised while processing an uploaded text file.

Every failure that happens after the Lambda is triggered is surfaced as one
of these, with the original error chained as ``__cause__``. Nothing here is
retried; the Lambda runtime decides what to do with a failed invocation.
"""


class FileProcessorError(Exception):
    """Base class for all file processor errors."""


class InvalidEventError(FileProcessorError):
    """The trigger event does not contain a usable S3 record."""


class FetchError(FileProcessorError):
    """The S3 object could not be retrieved.

    Parameters
    ----------
    bucket_name : str
        The bucket the object was requested from.
    object_key : str
        The decoded key of the object.
    """

    def __init__(self, bucket_name: str, object_key: str) -> None:
        self.bucket_name = bucket_name
        self.object_key = object_key
        super().__init__(
            f"Could not fetch s3://{bucket_name}/{object_key}"
        )


class DecodeError(FileProcessorError):
    """The object content is not valid UTF-8 text."""

    def __init__(self, object_key: str) -> None:
        self.object_key = object_key
        super().__init__(f"Content of {object_key} is not valid UTF-8")


class StorageError(FileProcessorError):
    """A read or write against the results table failed.

    Parameters
    ----------
    table_name : str
        The DynamoDB table the operation targeted.
    file_name : str
        The partition key of the record involved.
    """

    def __init__(self, table_name: str, file_name: str) -> None:
        self.table_name = table_name
        self.file_name = file_name
        super().__init__(
            f"Storage operation on table {table_name} failed for {file_name}"
        )
