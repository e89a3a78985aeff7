# Standard Library
from typing import Optional, List

# Third Party
from aws_cdk import (
    Stack,
    Duration,
    CfnOutput,
    aws_s3 as s3,
    aws_iam as iam,
    aws_lambda as lambda_,
    aws_dynamodb as dynamodb,
    aws_s3_notifications as s3n,
)
from constructs import Construct

# Local Modules
from cdk.custom_constructs.s3_bucket import CustomS3Bucket
from cdk.custom_constructs.dynamodb_table import CustomDynamoDBTable
from cdk.custom_constructs.lambda_function import CustomLambda


class FileStatsStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        stack_suffix: Optional[str] = "",
        **kwargs,
    ) -> None:
        """File Stats Stack for AWS CDK.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        construct_id : str
            The ID of the construct.
        stack_suffix : Optional[str], optional
            Suffix to append to resource names for this stack, by default ""
        """
        super().__init__(scope, construct_id, **kwargs)

        self.stack_suffix = (stack_suffix if stack_suffix else "").lower()
        # Optional key suffix filter for the trigger, e.g. ".txt"
        self.source_key_suffix = self.node.try_get_context(
            "source_key_suffix"
        )

        # region S3 Buckets
        # Bucket receiving the text files to analyse
        self.source_bucket = self.create_s3_bucket(
            construct_id="SourceFilesBucket",
            name="file-stats-source-files",
        )
        # endregion

        # region DynamoDB Tables
        # One record per processed file, keyed by the object key
        self.results_table = self.create_dynamodb_table(
            construct_id="FileProcessingResultsTable",
            name="file-stats-processing-results",
            partition_key_name="fileName",
        )
        # endregion

        # region Lambda Functions
        self.file_processor_lambda = self.create_lambda_function(
            construct_id="FileProcessorLambda",
            src_folder_path="fs-file-processor",
            environment={
                "RESULTS_TABLE_NAME": self.results_table.table_name,
            },
            memory_size=256,
            timeout=Duration.seconds(30),
            description="Computes line, word and character statistics for uploaded text files",
        )

        # Read the source objects, write the results
        self.source_bucket.grant_read(self.file_processor_lambda)
        self.results_table.grant_write_data(self.file_processor_lambda)

        # Trigger the processor for every created object
        notification_filters = []
        if self.source_key_suffix:
            notification_filters.append(
                s3.NotificationKeyFilter(suffix=self.source_key_suffix)
            )
        self.source_bucket.add_event_notification(
            s3.EventType.OBJECT_CREATED,
            s3n.LambdaDestination(self.file_processor_lambda),
            *notification_filters,
        )
        # endregion

        CfnOutput(
            self,
            "SourceBucketNameOutput",
            value=self.source_bucket.bucket_name,
            description="Upload text files here to have them processed",
            export_name=f"file-stats-source-bucket{self.stack_suffix}",
        )
        CfnOutput(
            self,
            "ResultsTableNameOutput",
            value=self.results_table.table_name,
            description="DynamoDB table holding per-file statistics",
            export_name=f"file-stats-results-table{self.stack_suffix}",
        )

    def create_s3_bucket(
        self, construct_id: str, name: str, versioned: Optional[bool] = False
    ) -> s3.Bucket:
        """Helper method to create an S3 bucket with a specific name and versioning.

        Parameters
        ----------
        construct_id : str
            The ID of the construct.
        name : str
            The name of the S3 bucket.
        versioned : Optional[bool], optional
            Whether to enable versioning on the bucket, by default False

        Returns
        -------
        s3.Bucket
            The created S3 bucket instance.
        """
        custom_s3_bucket = CustomS3Bucket(
            scope=self,
            id=construct_id,
            name=name,
            stack_suffix=self.stack_suffix,
            versioned=versioned,
        )
        return custom_s3_bucket.bucket

    def create_dynamodb_table(
        self,
        construct_id: str,
        name: str,
        partition_key_name: str,
        partition_key_type: Optional[dynamodb.AttributeType] = None,
    ) -> dynamodb.Table:
        """Helper method to create a DynamoDB table with a specific name and partition key.

        Parameters
        ----------
        construct_id : str
            The ID of the construct.
        name : str
            The name of the DynamoDB table.
        partition_key_name : str
            The name of the partition key for the table.
        partition_key_type : Optional[dynamodb.AttributeType], optional
            The type of the partition key, by default dynamodb.AttributeType.STRING

        Returns
        -------
        dynamodb.Table
            The created DynamoDB table instance.
        """
        custom_dynamodb_table = CustomDynamoDBTable(
            scope=self,
            id=construct_id,
            name=name,
            partition_key=dynamodb.Attribute(
                name=partition_key_name,
                type=partition_key_type or dynamodb.AttributeType.STRING,
            ),
            stack_suffix=self.stack_suffix,
        )
        return custom_dynamodb_table.table

    def create_lambda_function(
        self,
        construct_id: str,
        src_folder_path: str,
        environment: Optional[dict] = None,
        memory_size: Optional[int] = 128,
        timeout: Optional[Duration] = Duration.seconds(10),
        initial_policy: Optional[List[iam.PolicyStatement]] = None,
        description: Optional[str] = None,
    ) -> lambda_.Function:
        """Helper method to create a Lambda function.

        Parameters
        ----------
        construct_id : str
            The ID of the construct.
        src_folder_path : str
            The path to the source folder for the Lambda function code.
        environment : Optional[dict], optional
            Environment variables for the Lambda function, by default None
        memory_size : Optional[int], optional
            Memory size for the Lambda function, by default 128
        timeout : Optional[Duration], optional
            Timeout for the Lambda function, by default Duration.seconds(10)
        initial_policy : Optional[List[iam.PolicyStatement]], optional
            Initial IAM policies to attach to the Lambda function, by default None
        description : Optional[str], optional
            Description for the Lambda function, by default None

        Returns
        -------
        lambda_.Function
            The created Lambda function instance.
        """
        custom_lambda = CustomLambda(
            scope=self,
            id=construct_id,
            src_folder_path=src_folder_path,
            stack_suffix=self.stack_suffix,
            environment=environment,
            memory_size=memory_size,
            timeout=timeout,
            initial_policy=initial_policy or [],
            description=description,
        )
        return custom_lambda.function
