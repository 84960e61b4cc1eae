"""
The Lambda Adapter for the Bucket Lister service.

This module is the main entry point for the AWS Lambda function. It is
responsible for:
1.  Initializing and configuring AWS Lambda Powertools (Logger, Tracer and
    Metrics).
2.  Creating the boto3 S3 client once per execution environment.
3.  Delegating each invocation to the core handler, which lists the buckets
    and builds the statusCode/body response.

Handler path: bucket_lister.app.handler
"""

from functools import lru_cache
from typing import Any

import boto3
from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from .clients import BucketLister, S3BucketLister
from .config import get_config
from .core import handle
from .schemas import HandlerResponse

# --- Global & Reusable Components ---
CONFIG = get_config()

logger = Logger(service=CONFIG.service_name, level=CONFIG.log_level)
tracer = Tracer(service=CONFIG.service_name)
metrics = Metrics(
    namespace=CONFIG.metrics_namespace,
    service=CONFIG.service_name,
)


@lru_cache(maxsize=1)
def get_bucket_lister() -> BucketLister:
    """
    Builds the S3 bucket lister on first use and reuses it for every later
    invocation in the same execution environment.
    """
    s3_boto_client = boto3.client("s3")
    return S3BucketLister(s3_client=s3_boto_client)


@logger.inject_lambda_context()
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def handler(event: Any, context: LambdaContext) -> HandlerResponse:
    """Main Lambda handler: returns the names of all accessible S3 buckets."""
    metrics.add_dimension("environment", CONFIG.environment)
    return handle(event, lister=get_bucket_lister(), logger=logger, metrics=metrics)
