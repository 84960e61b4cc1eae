# In src/bucket_lister/schemas.py

from typing import TypedDict

from pydantic import BaseModel, Field

SUCCESS_MESSAGE = "Successfully retrieved buckets"
ERROR_MESSAGE_PREFIX = "Error listing buckets: "

# --- Static Type Hinting (for mypy and IDEs) ---


class HandlerResponse(TypedDict):
    """
    The API-Gateway-style envelope returned by the Lambda handler.
    `body` is always a JSON-encoded string.
    """

    statusCode: int
    body: str


# --- Runtime Validation (using Pydantic) ---


class S3BucketModel(BaseModel):
    name: str = Field(..., min_length=1, alias="Name")


class ListBucketsOutput(BaseModel):
    """
    Pydantic model for the parts of the S3 ListBuckets response we rely on.
    Bucket order is preserved exactly as returned by the service.
    """

    buckets: list[S3BucketModel] = Field(default_factory=list, alias="Buckets")

    @property
    def bucket_names(self) -> list[str]:
        return [bucket.name for bucket in self.buckets]


# --- Response bodies ---


class SuccessBody(BaseModel):
    message: str = SUCCESS_MESSAGE
    buckets: list[str]


class ErrorBody(BaseModel):
    message: str

    @classmethod
    def from_error_message(cls, error_message: str) -> "ErrorBody":
        return cls(message=f"{ERROR_MESSAGE_PREFIX}{error_message}")
