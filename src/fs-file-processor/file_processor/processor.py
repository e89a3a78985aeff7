# Standard Library
from typing import Any, Dict

# Third Party
from aws_lambda_powertools import Logger

# Local Modules
from file_processor.aws import S3Client
from file_processor.config import RESULTS_TABLE_NAME
from file_processor.result_store import ResultStore
from file_processor.text_stats import compute_text_stats, decode_text

# Initialize logger
logger = Logger(service="file_processor_processor")

# Initialize clients once per execution environment
try:
    s3_client = S3Client()
    result_store = ResultStore(table_name=RESULTS_TABLE_NAME)
except Exception as e:
    logger.exception(f"Failed to initialize AWS clients in processor: {e}")
    s3_client = None
    result_store = None

SUCCESS_MESSAGE = "File processed successfully"


def process_s3_object(
    bucket_name: str, object_key: str, lambda_logger: Logger
) -> Dict[str, Any]:
    """Read a text file from S3, compute its statistics and store them.

    The steps run strictly in order: fetch, decode, compute, upsert. A
    failure at any step propagates unchanged and nothing is written.

    Parameters
    ----------
    bucket_name : str
        The name of the S3 bucket containing the file.
    object_key : str
        The decoded key of the file in the bucket.
    lambda_logger : Logger
        The logger instance for logging messages.

    Returns
    -------
    Dict[str, Any]
        Summary with ``message``, ``fileName``, ``lineCount``, ``wordCount``
        and ``charCount``.

    Raises
    -------
    RuntimeError
        If the S3 client or result store is not initialized.
    FetchError
        If the object could not be read.
    DecodeError
        If the object is not valid UTF-8.
    StorageError
        If the record could not be written.
    """
    if s3_client is None or result_store is None:
        raise RuntimeError("AWS clients are not initialized.")

    # Fetch the whole object before computing anything
    lambda_logger.info(f"Fetching s3://{bucket_name}/{object_key}")
    content = s3_client.get_object_content(
        bucket_name=bucket_name, object_key=object_key
    )
    lambda_logger.info(
        f"Fetched {len(content)} bytes from s3://{bucket_name}/{object_key}"
    )

    text = decode_text(content, object_key=object_key)
    stats = compute_text_stats(text)
    lambda_logger.info(
        "Computed text statistics.",
        extra={
            "object_key": object_key,
            "line_count": stats.line_count,
            "word_count": stats.word_count,
            "char_count": stats.char_count,
        },
    )

    record = result_store.upsert(file_name=object_key, stats=stats)
    lambda_logger.info(
        f"Saved statistics for {object_key} to table {result_store.table_name}",
        extra={"processed_at": record.processed_at},
    )

    return {
        "message": SUCCESS_MESSAGE,
        "fileName": object_key,
        "lineCount": stats.line_count,
        "wordCount": stats.word_count,
        "charCount": stats.char_count,
    }
