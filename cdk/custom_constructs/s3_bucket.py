# Standard Library
from typing import Optional, List

# Third Party
from aws_cdk import aws_s3 as s3, RemovalPolicy, Duration
from constructs import Construct


class CustomS3Bucket(Construct):
    def __init__(
        self,
        scope: Construct,
        id: str,
        name: str,
        stack_suffix: Optional[str] = "",
        versioned: Optional[bool] = False,
        lifecycle_rules: Optional[List[s3.LifecycleRule]] = None,
        **kwargs,
    ) -> None:
        """Custom S3 Bucket Construct for AWS CDK.

        Parameters
        ----------
        scope : Construct
            The scope in which this construct is defined.
        id : str
            The ID of the construct.
        name : str
            The name of the S3 bucket.
        stack_suffix : Optional[str], optional
            Suffix to append to the S3 bucket name, by default ""
        versioned : Optional[bool], optional
            Whether the S3 bucket should be versioned, by default False
        lifecycle_rules : Optional[List[s3.LifecycleRule]], optional
            Lifecycle rules for the S3 bucket, by default a single rule
            aborting incomplete multipart uploads after 7 days
        """
        super().__init__(scope, id, **kwargs)

        if stack_suffix:
            name = f"{name}{stack_suffix}"

        if lifecycle_rules is None:
            lifecycle_rules = [
                s3.LifecycleRule(
                    id="AbortIncompleteMultipartUploads",
                    enabled=True,
                    abort_incomplete_multipart_upload_after=Duration.days(7),
                ),
            ]

        self.bucket = s3.Bucket(
            self,
            "DefaultBucket",
            bucket_name=name,
            versioned=versioned,
            encryption=s3.BucketEncryption.S3_MANAGED,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            enforce_ssl=True,
            removal_policy=RemovalPolicy.DESTROY,
            auto_delete_objects=True,
            lifecycle_rules=lifecycle_rules,
        )
