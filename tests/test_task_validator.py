"""Unit tests for the task payload validator."""

import pytest

from app.services.task_validator import TaskValidator, format_validation_errors


class TestValidateCreate:
    """Rules applied when a task is created."""

    def test_title_only_applies_defaults(self):
        result = TaskValidator.validate_create({"title": "Write report"})

        assert result["valid"] is True
        assert result["data"] == {
            "title": "Write report",
            "description": None,
            "status": "pending",
        }

    def test_missing_title_is_rejected(self):
        result = TaskValidator.validate_create({"description": "Missing title"})

        assert result["valid"] is False
        assert result["errors"] == {"title": ["The title field is required."]}

    @pytest.mark.parametrize("title", ["", "   "])
    def test_blank_title_is_rejected(self, title):
        result = TaskValidator.validate_create({"title": title})

        assert result["errors"]["title"] == ["The title field is required."]

    def test_title_boundaries(self):
        assert TaskValidator.validate_create({"title": "a"})["valid"] is True
        assert TaskValidator.validate_create({"title": "a" * 255})["valid"] is True

        result = TaskValidator.validate_create({"title": "a" * 256})
        assert result["errors"] == {
            "title": ["The title field must not be greater than 255 characters."]
        }

    def test_title_is_trimmed(self):
        result = TaskValidator.validate_create({"title": "  Padded  "})

        assert result["data"]["title"] == "Padded"

    def test_non_string_title_is_rejected(self):
        result = TaskValidator.validate_create({"title": 42})

        assert result["errors"] == {"title": ["The title field must be a string."]}

    @pytest.mark.parametrize("status", ["pending", "in_progress", "completed"])
    def test_known_statuses_are_accepted(self, status):
        result = TaskValidator.validate_create({"title": "Task", "status": status})

        assert result["valid"] is True
        assert result["data"]["status"] == status

    @pytest.mark.parametrize("status", ["invalid_status", "PENDING", "done", 3])
    def test_unknown_statuses_are_rejected(self, status):
        result = TaskValidator.validate_create({"title": "Task", "status": status})

        assert result["errors"] == {"status": ["The selected status is invalid."]}

    def test_empty_description_is_kept_distinct_from_null(self):
        result = TaskValidator.validate_create({"title": "Task", "description": ""})

        assert result["data"]["description"] == ""

    def test_unknown_fields_are_dropped(self):
        result = TaskValidator.validate_create({"title": "Task", "id": 99, "owner": "x"})

        assert set(result["data"]) == {"title", "description", "status"}

    def test_errors_are_reported_for_every_field(self):
        result = TaskValidator.validate_create({"status": "nope", "description": 5})

        assert set(result["errors"]) == {"title", "status", "description"}
        assert result["errors"]["description"] == ["The description field must be a string."]

    @pytest.mark.parametrize("payload", [None, [], "title", 7])
    def test_non_object_body_is_rejected(self, payload):
        result = TaskValidator.validate_create(payload)

        assert result["valid"] is False
        assert list(result["errors"]) == ["body"]


class TestValidateUpdate:
    """Rules applied to partial updates."""

    def test_empty_payload_changes_nothing(self):
        result = TaskValidator.validate_update({})

        assert result["valid"] is True
        assert result["data"] == {}

    def test_only_supplied_fields_are_returned(self):
        result = TaskValidator.validate_update({"title": "Only title"})

        assert result["data"] == {"title": "Only title"}

    def test_explicit_empty_title_is_rejected(self):
        result = TaskValidator.validate_update({"title": ""})

        assert result["errors"] == {"title": ["The title field is required."]}

    def test_explicit_null_title_is_rejected(self):
        result = TaskValidator.validate_update({"title": None})

        assert result["errors"] == {"title": ["The title field is required."]}

    def test_long_title_is_rejected(self):
        result = TaskValidator.validate_update({"title": "b" * 256})

        assert "title" in result["errors"]

    def test_invalid_status_is_rejected(self):
        result = TaskValidator.validate_update({"status": "invalid_status"})

        assert result["errors"] == {"status": ["The selected status is invalid."]}

    def test_null_status_is_rejected(self):
        result = TaskValidator.validate_update({"status": None})

        assert "status" in result["errors"]

    def test_null_description_clears_it(self):
        result = TaskValidator.validate_update({"description": None})

        assert result["valid"] is True
        assert result["data"] == {"description": None}


class TestFormatValidationErrors:
    """Grouping of raw pydantic errors."""

    def test_request_body_location_is_unwrapped(self):
        errors = [{"type": "missing", "loc": ("body", "title"), "msg": "Field required"}]

        assert format_validation_errors(errors) == {"title": ["The title field is required."]}

    def test_body_level_errors_keep_body_key(self):
        errors = [{"type": "json_invalid", "loc": ("body", 3), "msg": "JSON decode error"}]

        assert format_validation_errors(errors) == {"body": ["The request body must be valid JSON."]}

    def test_duplicate_reasons_are_collapsed(self):
        errors = [
            {"type": "enum", "loc": ("status",), "msg": "bad"},
            {"type": "enum", "loc": ("status",), "msg": "bad"},
        ]

        assert format_validation_errors(errors) == {"status": ["The selected status is invalid."]}
