#!/usr/bin/env python3
"""CDK App for the serverless Todo API infrastructure."""

import aws_cdk as cdk

from stacks import ApiStack, DataStack

app = cdk.App()

env = cdk.Environment(
    account=app.node.try_get_context("account") or None,
    region=app.node.try_get_context("region") or "us-east-1",
)

# Data layer - DynamoDB
data_stack = DataStack(app, "TodoDataStack", env=env)

# API - Lambda + API Gateway
api_stack = ApiStack(
    app,
    "TodoApiStack",
    todo_table=data_stack.todo_table,
    env=env,
)
api_stack.add_dependency(data_stack)

app.synth()
