"""DynamoDB wrapper class for the results table."""

# Standard Library
from typing import Any, Dict, Optional

# Third Party
import boto3
from botocore.exceptions import ClientError
from aws_lambda_powertools import Logger

# Initialize logger
logger = Logger(service="dynamodb-client-wrapper")


class DynamoDb:
    """A wrapper class for DynamoDB table operations using boto3.

    Only the single-item operations the results table needs are exposed.
    Errors are logged here and re-raised unchanged for the caller to wrap.
    """

    def __init__(self, table_name: str) -> None:
        """Initialize the DynamoDb instance with a table name.

        Parameters
        ----------
        table_name : str
            The name of the DynamoDB table to operate on.
        """
        # Store table name for use in all operations and logging
        self.table_name = table_name

        try:
            self._dynamodb = boto3.resource("dynamodb")
            self._table = self._dynamodb.Table(table_name)
        except Exception as e:
            logger.error(
                "Failed to create DynamoDB client for table %s: %s",
                table_name,
                e,
            )
            raise

    def put_item(self, item: Dict[str, Any]) -> Dict[str, Any]:
        """Put an item into the DynamoDB table.

        The put is unconditional, so an existing item with the same key is
        replaced entirely.

        Parameters
        ----------
        item : Dict[str, Any]
            The item to put into the table.

        Returns
        -------
        Dict[str, Any]
            The response from the DynamoDB service.

        Raises
        ------
        ClientError
            If there is an error while putting the item into the table.
        """
        try:
            response = self._table.put_item(Item=item)
            return response
        except ClientError as e:
            logger.error(
                "Failed to put item in table %s: %s",
                self.table_name,
                e.response.get("Error", {}).get("Message", str(e)),
            )
            raise
        except Exception as e:
            logger.error(
                "Unexpected error putting item in table %s: %s",
                self.table_name,
                str(e),
            )
            raise

    def get_item(self, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Get an item from the DynamoDB table by its key.

        Parameters
        ----------
        key : Dict[str, Any]
            The key of the item to retrieve.

        Returns
        -------
        Optional[Dict[str, Any]]
            The item, or None if it does not exist.

        Raises
        ------
        ClientError
            If there is an error while getting the item from the table.
        """
        try:
            response = self._table.get_item(Key=key)
            return response.get("Item")
        except ClientError as e:
            logger.error(
                "Failed to get item from table %s: %s",
                self.table_name,
                e.response.get("Error", {}).get("Message", str(e)),
            )
            raise
        except Exception as e:
            logger.error(
                "Unexpected error getting item from table %s: %s",
                self.table_name,
                str(e),
            )
            raise
