from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Todo API settings loaded from environment."""

    # Service
    service_name: str = "todo-api"
    log_level: str = "INFO"

    # DynamoDB
    table_name: str = "Todos"

    # AWS
    aws_region: str = "us-east-1"
    aws_endpoint_url: str | None = None  # For LocalStack / DynamoDB Local

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
