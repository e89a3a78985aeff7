# Standard Library
import json
from typing import Dict, Any

# Third Party
from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext
from aws_lambda_powertools.utilities.data_classes import S3Event, event_source

# Local Modules
from file_processor import processor
from file_processor.exceptions import InvalidEventError

# Initialize Powertools
logger = Logger()


@logger.inject_lambda_context(log_event=True)
@event_source(data_class=S3Event)
def lambda_handler(event: S3Event, context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function handler computing statistics for an uploaded text file.

    Parameters
    ----------
    event : S3Event
        The S3 event data automatically parsed by Powertools.
    context : LambdaContext
        The context object containing runtime information.

    Returns
    -------
    Dict[str, Any]
        ``statusCode`` 200 and a JSON ``body`` summarising the statistics.

    Raises
    ------
    InvalidEventError
        If the event holds no S3 records.
    FileProcessorError
        Any processing failure is logged and re-raised so the invocation is
        marked as failed.
    """
    logger.info("File processor Lambda triggered.")

    # A payload without a "Records" key is rejected like an empty one
    if not event.get("Records"):
        logger.error("S3 event contains no records.")
        raise InvalidEventError("S3 event contains no records.")

    records = list(event.records)

    # Object-created notifications carry a single record
    if len(records) > 1:
        logger.warning(
            f"S3 event contains {len(records)} records; only the first is processed."
        )

    record = records[0]
    bucket_name = record.s3.bucket.name
    # Powertools decodes the key: percent escapes and '+' as space
    object_key = record.s3.get_object.key

    logger.info(
        "Processing S3 event record.",
        extra={
            "event_name": record.event_name,
            "event_time": str(record.event_time),
            "bucket_name": bucket_name,
            "object_key": object_key,
            "object_size": record.s3.get_object.size,
        },
    )

    try:
        summary = processor.process_s3_object(bucket_name, object_key, logger)
    except Exception as e:
        logger.exception(
            f"Failed to process s3://{bucket_name}/{object_key}. Error: {e}"
        )
        raise

    logger.info(f"Successfully processed s3://{bucket_name}/{object_key}")
    return {"statusCode": 200, "body": json.dumps(summary)}
