# Standard Library
from typing import Optional

# Third Party
from aws_cdk import aws_dynamodb as dynamodb, RemovalPolicy
from constructs import Construct


class CustomDynamoDBTable(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        name: str,
        partition_key: dynamodb.Attribute,
        stack_suffix: Optional[str] = "",
        removal_policy: Optional[RemovalPolicy] = RemovalPolicy.DESTROY,
        **kwargs,
    ) -> None:
        """Custom DynamoDB Table Construct for AWS CDK.

        Tables are on-demand and keyed by a single partition key.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        name : str
            The name of the DynamoDB table.
        partition_key : dynamodb.Attribute
            The partition key for the DynamoDB table.
        stack_suffix : Optional[str], optional
            Suffix to append to the DynamoDB table name, by default ""
        removal_policy : Optional[RemovalPolicy], optional
            The removal policy for the DynamoDB table, by default
            RemovalPolicy.DESTROY
        """
        super().__init__(scope, id, **kwargs)

        if stack_suffix:
            name = f"{name}{stack_suffix}"

        self.table = dynamodb.Table(
            self,
            "DefaultTable",
            table_name=name,
            partition_key=partition_key,
            removal_policy=removal_policy,
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
        )
