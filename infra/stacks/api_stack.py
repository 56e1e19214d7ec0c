"""API Stack - Lambda function and API Gateway for the todo REST API."""

from aws_cdk import BundlingOptions, Duration, Stack
from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as lambda_
from aws_cdk import aws_logs as logs
from constructs import Construct


class ApiStack(Stack):
    """API Gateway + Lambda function serving /todo and /todo/{id}."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        todo_table: dynamodb.Table,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Project root is packaged with its runtime dependencies
        code = lambda_.Code.from_asset(
            "..",
            exclude=["infra", "tests", "cdk.out", ".venv", "*.md"],
            bundling=BundlingOptions(
                image=lambda_.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    "bash",
                    "-c",
                    "pip install --no-cache-dir . -t /asset-output",
                ],
            ),
        )

        self.api_function = lambda_.Function(
            self,
            "TodoFunction",
            function_name="todo-api",
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler="todo_api.main.handler",
            code=code,
            environment={
                "TABLE_NAME": todo_table.table_name,
                "SERVICE_NAME": "todo-api",
                "LOG_LEVEL": "INFO",
            },
            timeout=Duration.seconds(10),
            memory_size=256,
            architecture=lambda_.Architecture.ARM_64,
            tracing=lambda_.Tracing.ACTIVE,
            log_retention=logs.RetentionDays.ONE_MONTH,
        )

        todo_table.grant_read_write_data(self.api_function)

        self.api = apigw.RestApi(
            self,
            "TodoApi",
            rest_api_name="Todo API",
            description="Serverless CRUD API for todo items",
            deploy_options=apigw.StageOptions(
                stage_name="v1",
                throttling_rate_limit=100,
                throttling_burst_limit=200,
                logging_level=apigw.MethodLoggingLevel.INFO,
                metrics_enabled=True,
            ),
        )

        integration = apigw.LambdaIntegration(self.api_function, proxy=True)

        # Any method is forwarded; the function answers 405 itself
        todo = self.api.root.add_resource("todo")
        todo.add_method("ANY", integration)
        todo.add_resource("{id}").add_method("ANY", integration)

        self.api_url = self.api.url
