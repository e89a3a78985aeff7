"""Unit tests for the file_processor.processor module."""

# Standard Library
from unittest.mock import MagicMock, patch

# Third Party
import pytest
from botocore.exceptions import ClientError, EndpointConnectionError
from aws_lambda_powertools import Logger

# Local Modules
from file_processor import processor
from file_processor.aws import S3Client
from file_processor.exceptions import DecodeError, FetchError, StorageError
from file_processor.result_store import ResultStore
from tests.conftest import RESULTS_TABLE_NAME, SOURCE_BUCKET_NAME


@pytest.fixture
def mock_lambda_logger() -> MagicMock:
    """Provides a MagicMock for the lambda_logger argument."""
    return MagicMock(spec=Logger)


@pytest.fixture
def mocked_clients(create_source_bucket, create_results_table):
    """Swap the module-level clients for ones created inside the moto mock."""
    s3_client = S3Client()
    result_store = ResultStore(table_name=RESULTS_TABLE_NAME)
    with patch.multiple(
        processor, s3_client=s3_client, result_store=result_store
    ):
        yield {
            "s3": create_source_bucket,
            "result_store": result_store,
        }


def upload(mocked_s3, key: str, body: bytes) -> None:
    mocked_s3.put_object(Bucket=SOURCE_BUCKET_NAME, Key=key, Body=body)


def test_process_s3_object_small_file(mocked_clients, mock_lambda_logger):
    """Test the full fetch, compute and store path for a small file."""
    text = "Hello world\nThis is a test file.\n"
    upload(mocked_clients["s3"], "uploads/test.txt", text.encode("utf-8"))

    summary = processor.process_s3_object(
        SOURCE_BUCKET_NAME, "uploads/test.txt", mock_lambda_logger
    )

    assert summary == {
        "message": "File processed successfully",
        "fileName": "uploads/test.txt",
        "lineCount": 3,
        "wordCount": 7,
        "charCount": 33,
    }
    stored = mocked_clients["result_store"].get("uploads/test.txt")
    assert stored.stats.preview == text
    assert stored.stats.line_count == 3


def test_process_s3_object_empty_file(mocked_clients, mock_lambda_logger):
    """Test that an empty object is stored with one line and one word."""
    upload(mocked_clients["s3"], "empty.txt", b"")

    summary = processor.process_s3_object(
        SOURCE_BUCKET_NAME, "empty.txt", mock_lambda_logger
    )

    assert summary["lineCount"] == 1
    assert summary["wordCount"] == 1
    assert summary["charCount"] == 0
    stored = mocked_clients["result_store"].get("empty.txt")
    assert stored.stats.preview == ""


def test_process_s3_object_long_line_preview(
    mocked_clients, mock_lambda_logger
):
    """Test that only the first 100 characters are stored as preview."""
    text = "0123456789" * 15
    upload(mocked_clients["s3"], "long.txt", text.encode("utf-8"))

    summary = processor.process_s3_object(
        SOURCE_BUCKET_NAME, "long.txt", mock_lambda_logger
    )

    assert summary["charCount"] == 150
    stored = mocked_clients["result_store"].get("long.txt")
    assert stored.stats.preview == text[:100]


def test_process_s3_object_reprocessing_replaces_record(
    mocked_clients, mock_lambda_logger
):
    """Test that processing a re-uploaded file overwrites its record."""
    upload(mocked_clients["s3"], "notes.txt", b"one two three\nfour")
    processor.process_s3_object(
        SOURCE_BUCKET_NAME, "notes.txt", mock_lambda_logger
    )

    upload(mocked_clients["s3"], "notes.txt", b"five")
    processor.process_s3_object(
        SOURCE_BUCKET_NAME, "notes.txt", mock_lambda_logger
    )

    stored = mocked_clients["result_store"].get("notes.txt")
    assert stored.stats.line_count == 1
    assert stored.stats.word_count == 1
    assert stored.stats.preview == "five"


def test_process_s3_object_key_with_spaces(mocked_clients, mock_lambda_logger):
    """Test that a decoded key containing spaces is used as the file name."""
    upload(mocked_clients["s3"], "my docs/read me.txt", b"hi there")

    summary = processor.process_s3_object(
        SOURCE_BUCKET_NAME, "my docs/read me.txt", mock_lambda_logger
    )

    assert summary["fileName"] == "my docs/read me.txt"
    assert mocked_clients["result_store"].get("my docs/read me.txt")


def test_process_s3_object_missing_object(mocked_clients, mock_lambda_logger):
    """Test that a missing object raises FetchError and writes nothing."""
    with pytest.raises(FetchError) as exc_info:
        processor.process_s3_object(
            SOURCE_BUCKET_NAME, "missing.txt", mock_lambda_logger
        )

    assert exc_info.value.bucket_name == SOURCE_BUCKET_NAME
    assert exc_info.value.object_key == "missing.txt"
    assert isinstance(exc_info.value.__cause__, ClientError)
    assert mocked_clients["result_store"].get("missing.txt") is None


def test_process_s3_object_invalid_utf8(mocked_clients, mock_lambda_logger):
    """Test that undecodable content raises DecodeError and writes nothing."""
    upload(mocked_clients["s3"], "image.png", b"\x89PNG\r\n\x1a\n\xff\xd8")

    with pytest.raises(DecodeError):
        processor.process_s3_object(
            SOURCE_BUCKET_NAME, "image.png", mock_lambda_logger
        )

    assert mocked_clients["result_store"].get("image.png") is None


def test_process_s3_object_storage_failure(
    create_source_bucket, mocked_dynamodb, mock_lambda_logger
):
    """Test that a failing write propagates as StorageError."""
    upload(create_source_bucket, "notes.txt", b"some text")

    with patch.multiple(
        processor,
        s3_client=S3Client(),
        result_store=ResultStore(table_name="missing-table"),
    ):
        with pytest.raises(StorageError):
            processor.process_s3_object(
                SOURCE_BUCKET_NAME, "notes.txt", mock_lambda_logger
            )


def test_process_s3_object_uninitialized_clients(mock_lambda_logger):
    """Test that missing module-level clients raise RuntimeError."""
    with patch.multiple(processor, s3_client=None, result_store=None):
        with pytest.raises(RuntimeError):
            processor.process_s3_object(
                SOURCE_BUCKET_NAME, "notes.txt", mock_lambda_logger
            )


def test_process_s3_object_logs_statistics(mocked_clients, mock_lambda_logger):
    """Test that the computed statistics are logged with the invocation logger."""
    upload(mocked_clients["s3"], "log.txt", b"a b c")

    processor.process_s3_object(
        SOURCE_BUCKET_NAME, "log.txt", mock_lambda_logger
    )

    mock_lambda_logger.info.assert_any_call(
        "Computed text statistics.",
        extra={
            "object_key": "log.txt",
            "line_count": 1,
            "word_count": 3,
            "char_count": 5,
        },
    )


def test_process_s3_object_transport_failure_writes_nothing(
    mocked_clients, mock_lambda_logger
):
    """Test that a connection failure on fetch surfaces as FetchError."""
    s3_client = processor.s3_client
    error = EndpointConnectionError(endpoint_url="https://s3.amazonaws.com")

    with patch.object(s3_client._client, "get_object", side_effect=error):
        with pytest.raises(FetchError) as exc_info:
            processor.process_s3_object(
                SOURCE_BUCKET_NAME, "notes.txt", mock_lambda_logger
            )

    assert exc_info.value.__cause__ is error
    assert mocked_clients["result_store"].get("notes.txt") is None
