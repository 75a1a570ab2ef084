"""
Serverless posts API (Lambda + DynamoDB + SQS)

Where: AWS Lambda behind API Gateway (HTTP handlers) and an SQS trigger (queue handler).
What:  List/get/create blog posts in a single DynamoDB table; bulk-delete on a queue command.
Why:   Minimal CRUD backend with explicit failure semantics for each invocation type.
"""

__all__ = [
    "config",
    "commands",
    "event_handlers",
    "lambda_utils",
    "posts",
    "web_api",
]
