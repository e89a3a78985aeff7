"""Persistence of computed statistics, one record per file name."""

# Standard Library
from typing import Optional
from datetime import datetime, timezone

# Third Party
from botocore.exceptions import BotoCoreError, ClientError
from aws_lambda_powertools import Logger

# Local Modules
from file_processor.aws import DynamoDb
from file_processor.data_classes import StatisticsRecord, TextStats
from file_processor.exceptions import StorageError

# Initialize logger
logger = Logger(service="result-store")


def utc_timestamp() -> str:
    """Return the current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ResultStore:
    """Keyed upsert of statistics records into DynamoDB.

    Each ``upsert`` is a single unconditional ``PutItem``: there is no read
    before the write and no condition expression, so concurrent writes for
    the same file name resolve by whichever request DynamoDB applies last.
    """

    def __init__(self, table_name: str) -> None:
        """Initialize the store against a results table.

        Parameters
        ----------
        table_name : str
            The name of the results table. Its partition key is
            ``fileName``.
        """
        self.table_name = table_name
        self._table = DynamoDb(table_name=table_name)

    def upsert(self, file_name: str, stats: TextStats) -> StatisticsRecord:
        """Write or fully replace the record for ``file_name``.

        Parameters
        ----------
        file_name : str
            The partition key, usually the decoded S3 object key.
        stats : TextStats
            The statistics to persist.

        Returns
        -------
        StatisticsRecord
            The record as written, including its ``processed_at`` stamp.

        Raises
        ------
        ValueError
            If ``file_name`` is empty.
        StorageError
            If the put fails. The boto3 error is chained as the cause.
        """
        if not file_name:
            raise ValueError("file_name must be a non-empty string.")

        record = StatisticsRecord(
            file_name=file_name, stats=stats, processed_at=utc_timestamp()
        )
        try:
            self._table.put_item(item=record.to_item())
        except (ClientError, BotoCoreError) as e:
            raise StorageError(self.table_name, file_name) from e

        logger.debug(
            "Upserted statistics record.",
            extra={"table_name": self.table_name, "file_name": file_name},
        )
        return record

    def get(self, file_name: str) -> Optional[StatisticsRecord]:
        """Read the current record for ``file_name``.

        Parameters
        ----------
        file_name : str
            The partition key to look up.

        Returns
        -------
        Optional[StatisticsRecord]
            The stored record, or None if the file has not been processed.

        Raises
        ------
        ValueError
            If ``file_name`` is empty.
        StorageError
            If the read fails.
        """
        if not file_name:
            raise ValueError("file_name must be a non-empty string.")

        try:
            item = self._table.get_item(key={"fileName": file_name})
        except (ClientError, BotoCoreError) as e:
            raise StorageError(self.table_name, file_name) from e

        if item is None:
            return None
        return StatisticsRecord.from_item(item)
