"""Statistics extraction for text files uploaded to S3.

Results are written to a DynamoDB table keyed by file name.
"""
