"""Custom constructs for the File Stats CDK application.

- CustomDynamoDBTable: on-demand DynamoDB table with a string partition key.
- CustomLambda: Lambda function built from the Dockerfile of a ``src`` folder.
- CustomS3Bucket: private, encrypted S3 bucket.
"""

from .dynamodb_table import CustomDynamoDBTable
from .lambda_function import CustomLambda
from .s3_bucket import CustomS3Bucket

__all__ = [
    "CustomDynamoDBTable",
    "CustomLambda",
    "CustomS3Bucket",
]
