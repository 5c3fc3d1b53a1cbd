"""Tests for the deregex exception hierarchy."""

import pytest

from deregex.exceptions import (
    CoercionError,
    DeRegexError,
    DeserializationError,
    MissingFieldError,
    NoMatchError,
    PatternError,
    UnsupportedTargetError,
)


class TestExceptionHierarchy:
    """All exceptions inherit from DeRegexError."""

    @pytest.mark.parametrize(
        "exc",
        [
            PatternError("bad", pattern="("),
            NoMatchError(pattern="a", text="b"),
            DeserializationError("invalid"),
            MissingFieldError("height"),
            CoercionError("height", "6a0"),
            UnsupportedTargetError("int"),
        ],
    )
    def test_inherits_from_deregex_error(self, exc):
        with pytest.raises(DeRegexError):
            raise exc

    def test_field_errors_are_deserialization_errors(self):
        assert issubclass(MissingFieldError, DeserializationError)
        assert issubclass(CoercionError, DeserializationError)

    def test_categories_do_not_overlap(self):
        assert not issubclass(NoMatchError, DeserializationError)
        assert not issubclass(PatternError, NoMatchError)
        assert not issubclass(MissingFieldError, CoercionError)


class TestBackwardCompatibility:
    """Exceptions are also catchable by stdlib types."""

    def test_pattern_error_is_value_error(self):
        with pytest.raises(ValueError):
            raise PatternError("bad", pattern="(")

    def test_no_match_error_is_value_error(self):
        with pytest.raises(ValueError):
            raise NoMatchError(pattern="a", text="b")

    def test_deserialization_error_is_value_error(self):
        with pytest.raises(ValueError):
            raise CoercionError("v", "x")

    def test_unsupported_target_error_is_type_error(self):
        with pytest.raises(TypeError):
            raise UnsupportedTargetError("int")


class TestExceptionMessages:
    def test_no_match_message(self):
        assert str(NoMatchError(pattern="a", text="b")) == "String doesn't match pattern"

    def test_missing_field_message(self):
        err = MissingFieldError("height")
        assert err.field == "height"
        assert str(err) == "Missing field 'height'"

    def test_coercion_message(self):
        err = CoercionError("height", "6a0")
        assert str(err) == "Unable to convert value for group height: 6a0"
        assert err.reason is None

    def test_coercion_message_with_reason(self):
        err = CoercionError("height", "6a0", "expected a decimal integer")
        assert str(err).endswith("(expected a decimal integer)")

    def test_pattern_error_keeps_position(self):
        err = PatternError("missing )", pattern="(a", position=0)
        assert err.position == 0
        assert str(err) == "missing )"

    def test_deregex_error_is_exception(self):
        assert issubclass(DeRegexError, Exception)
        assert not issubclass(DeRegexError, (ValueError, TypeError))
