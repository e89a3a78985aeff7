"""Configuration for the file processor.

Values are read from the Lambda environment, which is populated by the CDK
stack at deploy time.
"""

# Standard Library
import os

# Environment variables for configuration
RESULTS_TABLE_NAME = os.environ.get(
    "RESULTS_TABLE_NAME", "FileProcessingResults"
)
