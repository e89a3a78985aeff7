"""AWS module for the file processor.

Thin wrappers around the boto3 clients used to read uploaded objects and to
write the results table.
"""

# Local Modules
from file_processor.aws.s3 import S3Client
from file_processor.aws.dynamodb import DynamoDb

__all__ = [
    "S3Client",
    "DynamoDb",
]
