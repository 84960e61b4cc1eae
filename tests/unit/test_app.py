# tests/unit/test_app.py

import json
from unittest.mock import MagicMock, patch

import pytest

from bucket_lister import app
from bucket_lister.clients import S3BucketLister
from bucket_lister.exceptions import BucketListingError


@pytest.fixture(autouse=True)
def clear_lister_cache():
    app.get_bucket_lister.cache_clear()
    yield
    app.get_bucket_lister.cache_clear()


def test_handler_success(monkeypatch, fake_lister_factory, api_gateway_event, lambda_context):
    lister = fake_lister_factory(["logs-bucket", "assets-bucket"])
    monkeypatch.setattr(app, "get_bucket_lister", lambda: lister)

    response = app.handler(api_gateway_event, lambda_context)

    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == {
        "message": "Successfully retrieved buckets",
        "buckets": ["logs-bucket", "assets-bucket"],
    }


def test_handler_failure_returns_500(monkeypatch, fake_lister_factory, lambda_context):
    lister = fake_lister_factory(error=BucketListingError("Access Denied"))
    monkeypatch.setattr(app, "get_bucket_lister", lambda: lister)

    response = app.handler({"any": "event"}, lambda_context)

    assert response == {
        "statusCode": 500,
        "body": '{"message":"Error listing buckets: Access Denied"}',
    }


def test_handler_emits_metrics(monkeypatch, fake_lister_factory, lambda_context, capsys):
    """Powertools flushes EMF metrics to stdout at the end of the invocation."""
    monkeypatch.setattr(app, "get_bucket_lister", lambda: fake_lister_factory(["a"]))

    app.handler({}, lambda_context)

    output = capsys.readouterr().out
    assert "BucketsListed" in output


def test_get_bucket_lister_is_created_once():
    with patch("bucket_lister.app.boto3.client", return_value=MagicMock()) as mock_client:
        first = app.get_bucket_lister()
        second = app.get_bucket_lister()

    assert isinstance(first, S3BucketLister)
    assert first is second
    mock_client.assert_called_once_with("s3")
