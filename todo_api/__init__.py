"""Serverless CRUD API for todo items backed by DynamoDB."""

__version__ = "0.1.0"
