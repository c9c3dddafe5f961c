"""Unit tests for custom exception hierarchy"""
import logging
import pytest
from datetime import datetime

from garden.exceptions import (
    ConfigurationError,
    GardenError,
    RecordNotFoundError,
    StorageError,
    ValidationError,
)


class TestGardenError:
    """Test base exception class"""

    def test_basic_exception(self):
        """Test basic exception creation"""
        error = GardenError("Test error")
        assert error.message == "Test error"
        assert error.user_message == "Something went wrong. Please try again."
        assert isinstance(error.timestamp, datetime)
        assert error.context == {}

    def test_exception_with_context(self):
        """Test exception with full context"""
        error = GardenError(
            message="Failed to write profile",
            operation="save_profile",
            context={"key": "scg-state-v2"},
            user_message="Could not save your garden"
        )
        assert error.operation == "save_profile"
        assert error.context["key"] == "scg-state-v2"
        assert error.user_message == "Could not save your garden"

    def test_exception_with_cause(self):
        """Test exception wrapping another exception"""
        original_error = OSError("disk full")
        error = GardenError(message="Write failed", cause=original_error)
        assert error.cause is original_error

    def test_to_dict(self):
        """Test exception serialization"""
        error = GardenError(message="Test error", operation="load")
        error_dict = error.to_dict()
        assert error_dict["error"] == "GardenError"
        assert error_dict["message"] == "Test error"
        assert error_dict["operation"] == "load"
        assert "timestamp" in error_dict

    def test_logged_on_creation(self, caplog):
        """Test errors log themselves when created"""
        with caplog.at_level(logging.ERROR, logger="garden.exceptions"):
            GardenError("Something broke", operation="tick")

        assert "GardenError: Something broke" in caplog.text


class TestValidationError:
    """Test validation error"""

    def test_validation_error(self):
        """Test validation error with field"""
        error = ValidationError("Unknown mood", field="mood", value="grumpy")
        assert error.field == "mood"
        assert error.value == "grumpy"
        assert error.user_message == "Invalid mood: Unknown mood"
        assert error.context == {"field": "mood", "value": "grumpy"}

    def test_validation_error_without_field(self):
        error = ValidationError("Bad input")
        assert error.user_message == "Bad input"

    def test_is_garden_error(self):
        assert isinstance(ValidationError("x"), GardenError)


class TestStorageErrors:
    """Test storage-related errors"""

    def test_storage_error(self):
        error = StorageError("Failed to write", key="scg-state-v2", operation="set")
        assert error.key == "scg-state-v2"
        assert error.operation == "set"
        assert "disk space" in error.user_message

    def test_record_not_found(self):
        error = RecordNotFoundError("No such task", record_type="Task", record_id="meditate")
        assert error.record_id == "meditate"
        assert error.user_message == "Task not found."

    def test_record_not_found_default_type(self):
        assert RecordNotFoundError("missing").user_message == "Record not found."


class TestConfigurationError:
    def test_configuration_error(self):
        error = ConfigurationError("Unknown timezone", config_key="GARDEN_TIMEZONE")
        assert error.config_key == "GARDEN_TIMEZONE"
        assert error.user_message == "The garden is not properly configured."

    def test_can_be_raised_and_caught_as_base(self):
        with pytest.raises(GardenError):
            raise ConfigurationError("bad", config_key="LOG_LEVEL")
