# tests/unit/test_exceptions.py

from bucket_lister.exceptions import (
    BucketListerError,
    BucketListingError,
    ConfigurationError,
    get_error_context,
    get_error_message,
)


class TestBucketListerError:
    """Test the base BucketListerError class."""

    def test_basic_initialization(self):
        error = BucketListerError("Test message")
        assert str(error) == "Test message"
        assert error.message == "Test message"
        assert error.error_code == "BucketListerError"
        assert error.context == {}

    def test_context_is_copied(self):
        context = {"key": "value"}
        error = BucketListerError("Test message", context=context)
        context["key"] = "changed"
        assert error.context == {"key": "value"}

    def test_to_dict(self):
        error = BucketListerError(
            "Test message",
            error_code="TEST_CODE",
            context={"key": "value"},
        )
        assert error.to_dict() == {
            "error_type": "BucketListerError",
            "error_code": "TEST_CODE",
            "message": "Test message",
            "context": {"key": "value"},
        }


class TestBucketListingError:
    def test_default_error_code(self):
        error = BucketListingError("Access Denied")
        assert isinstance(error, BucketListerError)
        assert error.message == "Access Denied"
        assert error.error_code == "LIST_BUCKETS_FAILED"

    def test_custom_error_code(self):
        error = BucketListingError("boom", error_code="S3_CONNECTION_ERROR")
        assert error.error_code == "S3_CONNECTION_ERROR"


class TestConfigurationError:
    def test_error_code(self):
        error = ConfigurationError("bad value")
        assert error.error_code == "CONFIGURATION_ERROR"
        assert error.message == "bad value"


class TestUtilityFunctions:
    def test_get_error_message_for_custom_error(self):
        assert get_error_message(BucketListingError("Access Denied")) == "Access Denied"

    def test_get_error_message_for_standard_error(self):
        assert get_error_message(ValueError("nope")) == "nope"

    def test_get_error_context_for_custom_error(self):
        error = BucketListingError("Access Denied", context={"aws_error_code": "AccessDenied"})
        context = get_error_context(error)
        assert context["error_type"] == "BucketListingError"
        assert context["error_code"] == "LIST_BUCKETS_FAILED"
        assert context["context"] == {"aws_error_code": "AccessDenied"}

    def test_get_error_context_for_standard_error(self):
        assert get_error_context(ValueError("Standard error")) == {
            "error_type": "ValueError",
            "message": "Standard error",
        }
