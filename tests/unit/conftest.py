"""
Shared fixtures for unit tests.
"""

from __future__ import annotations

import os
import types
import uuid

import pytest


@pytest.fixture(scope="session", autouse=True)
def _env_vars():
    """
    Ensures a deterministic environment for every test run.
    Overwrite *only* the variables needed by the handler.
    """
    original = os.environ.copy()
    os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "bucket-lister-test")
    os.environ.setdefault("POWERTOOLS_LOG_LEVEL", "INFO")
    os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
    os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
    yield
    os.environ.clear()
    os.environ.update(original)


class FakeBucketLister:
    """In-memory BucketLister: returns fixed names or raises a fixed error."""

    def __init__(self, bucket_names=None, error: Exception | None = None):
        self.bucket_names = list(bucket_names or [])
        self.error = error
        self.calls = 0

    def list_bucket_names(self) -> list[str]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.bucket_names)


@pytest.fixture
def fake_lister_factory():
    return FakeBucketLister


# ---------- Minimal, realistic dummy events ---------- #
@pytest.fixture
def api_gateway_event() -> dict:
    """A trimmed-down API Gateway proxy event; the handler only logs it."""
    return {
        "resource": "/buckets",
        "path": "/buckets",
        "httpMethod": "GET",
        "headers": {"Accept": "application/json"},
        "queryStringParameters": None,
        "requestContext": {"requestId": str(uuid.uuid4()), "stage": "test"},
        "body": None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def lambda_context():
    """A *very* small stand-in for the LambdaContext object."""
    return types.SimpleNamespace(
        function_name="bucket-lister",
        function_version="$LATEST",
        memory_limit_in_mb=128,
        aws_request_id="req-" + uuid.uuid4().hex,
        invoked_function_arn="arn:aws:lambda:eu-west-1:000000000000:function:bucket-lister",
        get_remaining_time_in_millis=lambda: 30000,
    )
