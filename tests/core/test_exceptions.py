"""
Tests for the GridFilter exception hierarchy.
"""

import pytest

from gridfilter.core.exceptions import (
    ConfigurationError, DescriptorError, ErrorCode, ErrorContext, GridFilterError,
    InvalidFieldError, MalformedDescriptorError, RecoverySuggestion,
    UnknownDescriptorKindError, config_error, invalid_field_error,
    malformed_descriptor_error, unknown_kind_error
)


class TestGridFilterError:
    """Test the base error."""

    def test_defaults(self):
        error = GridFilterError("Something broke")

        assert str(error) == "Something broke"
        assert error.error_code == ErrorCode.UNKNOWN_ERROR
        assert error.suggestions == []
        assert len(error.context.correlation_id) == 8

    def test_keeps_given_correlation_id(self):
        error = GridFilterError("x", context=ErrorContext(correlation_id="abc"))

        assert error.context.correlation_id == "abc"

    def test_suggestions_sorted_by_priority(self):
        error = GridFilterError("x")
        error.add_suggestion(RecoverySuggestion(action="Later", description="", priority=3))
        error.add_suggestion(RecoverySuggestion(action="First", description="", priority=1))

        assert [s.action for s in error.suggestions] == ["First", "Later"]

    def test_user_message(self):
        error = GridFilterError("Bad filter", error_code=ErrorCode.DESCRIPTOR_MALFORMED)
        error.add_suggestion(RecoverySuggestion(action="Fix it", description="Change the descriptor"))

        message = error.get_user_message()

        assert message.startswith("Error: Bad filter")
        assert "Error Code: 1001" in message
        assert "1. Fix it" in message

    def test_debug_info(self):
        cause = KeyError("rate")
        error = GridFilterError("x", cause=cause)

        info = error.get_debug_info()

        assert info["error_type"] == "GridFilterError"
        assert info["cause"] == {"type": "KeyError", "message": "'rate'"}
        assert info["context"]["correlation_id"] == error.context.correlation_id


class TestErrorSubclasses:
    """Test specialised errors and convenience constructors."""

    def test_hierarchy(self):
        assert issubclass(MalformedDescriptorError, DescriptorError)
        assert issubclass(UnknownDescriptorKindError, DescriptorError)
        assert issubclass(DescriptorError, GridFilterError)
        assert issubclass(InvalidFieldError, GridFilterError)
        assert issubclass(ConfigurationError, GridFilterError)

    def test_malformed_descriptor(self):
        error = malformed_descriptor_error("bad", index=4, descriptor={"kind": "range"},
                                           error_code=ErrorCode.DESCRIPTOR_MISSING_BOUND)

        assert error.context.descriptor_index == 4
        assert error.context.user_context["descriptor"] == {"kind": "range"}
        assert error.suggestions[0].action == "Supply both range bounds"

    def test_unknown_kind(self):
        error = unknown_kind_error("like", index=0)

        assert error.message == "Unknown descriptor kind 'like'"
        assert error.kind == "like"
        assert error.error_code == ErrorCode.DESCRIPTOR_UNKNOWN_KIND
        assert error.suggestions

    def test_invalid_field(self):
        error = invalid_field_error("no such field", field="director", available_fields=["name"])

        assert error.field_name == "director"
        assert error.context.field_name == "director"
        assert error.error_code == ErrorCode.FIELD_NOT_FOUND
        assert "Available fields: name" in error.get_user_message()

    def test_invalid_field_without_suggestions(self):
        error = invalid_field_error("not numeric", field="name", error_code=ErrorCode.FIELD_NOT_NUMERIC)

        assert error.suggestions == []

    def test_config_error(self):
        error = config_error("bad value", key="filters.strict_kinds")

        assert error.context.user_context["config_key"] == "filters.strict_kinds"
        assert error.context.operation == "load_config"

    def test_errors_can_be_raised_and_caught_as_base(self):
        with pytest.raises(GridFilterError):
            raise unknown_kind_error("x")
