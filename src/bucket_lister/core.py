# src/bucket_lister/core.py

"""
Core business logic for the Bucket Lister service.

Everything in this module is independent of the Lambda runtime: the bucket
lister, the logger and (optionally) the metrics sink are all injected, so the
handler can be exercised directly in unit tests.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, Union

from aws_lambda_powertools.metrics import MetricUnit

from .exceptions import get_error_context, get_error_message
from .schemas import ErrorBody, HandlerResponse, SuccessBody

if TYPE_CHECKING:
    from aws_lambda_powertools import Metrics

    from .clients import BucketLister


class LogSink(Protocol):
    def info(self, msg: object, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: object, *args: Any, **kwargs: Any) -> None: ...


# --- Result type ---


@dataclass(frozen=True)
class ListingSuccess:
    bucket_names: list[str]


@dataclass(frozen=True)
class ListingFailure:
    message: str
    error_context: dict[str, Any] = field(default_factory=dict)


ListingResult = Union[ListingSuccess, ListingFailure]


def list_buckets(lister: BucketLister) -> ListingResult:
    """
    Runs the remote listing and folds every outcome into a ListingResult.
    Errors are not differentiated by kind; any exception becomes a failure.
    """
    try:
        bucket_names = list(lister.list_bucket_names())
    except Exception as e:
        return ListingFailure(
            message=get_error_message(e), error_context=get_error_context(e)
        )
    return ListingSuccess(bucket_names=bucket_names)


def build_response(result: ListingResult) -> HandlerResponse:
    """Maps a ListingResult onto the statusCode/body envelope."""
    if isinstance(result, ListingSuccess):
        body = SuccessBody(buckets=result.bucket_names)
        return {"statusCode": 200, "body": body.model_dump_json()}

    body = ErrorBody.from_error_message(result.message)
    return {"statusCode": 500, "body": body.model_dump_json()}


def handle(
    event: Any,
    lister: BucketLister,
    logger: LogSink,
    metrics: Metrics | None = None,
) -> HandlerResponse:
    """
    Lists the buckets visible to the current identity and returns them in a
    JSON response envelope.

    The event is only logged. A failed listing, or an event that cannot be
    serialized for that log line, is logged and returned as a 500 response;
    nothing raised along the way escapes this function.
    """
    try:
        event_text = json.dumps(event, indent=2, default=str)
    except (TypeError, ValueError) as e:
        result: ListingResult = ListingFailure(
            message=get_error_message(e), error_context=get_error_context(e)
        )
    else:
        logger.info(f"Received event: {event_text}")
        result = list_buckets(lister)

    if isinstance(result, ListingFailure):
        logger.error(
            f"Error listing buckets: {result.message}",
            extra={"error": result.error_context},
        )
        if metrics is not None:
            metrics.add_metric(name="ListBucketsErrors", unit=MetricUnit.Count, value=1)
    elif metrics is not None:
        metrics.add_metric(
            name="BucketsListed",
            unit=MetricUnit.Count,
            value=len(result.bucket_names),
        )

    return build_response(result)
