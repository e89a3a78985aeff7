#!/usr/bin/env python3
# Standard Library
import os

# Third Party
import aws_cdk as cdk

# Local Modules
from cdk.stacks import FileStatsStack

# Initialize the CDK application
app = cdk.App()

# Standard AWS environment variables for CDK
aws_env = cdk.Environment(
    account=os.getenv("CDK_DEFAULT_ACCOUNT"),
    region=os.getenv("CDK_DEFAULT_REGION"),
)

# Feature branches deploy side by side using a "stack-suffix" context value
stack_suffix = app.node.try_get_context("stack-suffix")
formatted_stack_suffix = f"-{stack_suffix}" if stack_suffix else ""
final_stack_name = f"file-stats-stack{formatted_stack_suffix}"

FileStatsStack(
    app, final_stack_name, stack_suffix=formatted_stack_suffix, env=aws_env
)

# Synthesize the app
app.synth()
