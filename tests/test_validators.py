"""Tests for the built-in validators."""

import re

import pytest

from modelkit.model import Model
from modelkit.validation.core.base import BaseValidator
from modelkit.validation.core.exceptions import ValidationConfigError
from modelkit.validation.validators import (
    AcceptanceValidator,
    CheckValidator,
    ConfirmationValidator,
    FormatValidator,
    LengthValidator,
    PresenceValidator,
    RangeValidator,
)


class Day:
    """Legacy date-like value that compares through its own methods."""

    def __init__(self, ordinal):
        self.ordinal = ordinal

    def is_before(self, other):
        return self.ordinal < other.ordinal

    def is_after(self, other):
        return self.ordinal > other.ordinal


class TestBaseValidator:
    """Test the common validator contract."""

    def test_run_on_base_raises(self, subject):
        """Test calling run on the base class is a programmer error."""
        with pytest.raises(NotImplementedError):
            BaseValidator("name").run(subject)

    def test_attribute_and_options_are_read_only(self):
        """Test attribute and options cannot be reassigned or mutated."""
        validator = PresenceValidator("name", {"message": "needed"})

        with pytest.raises(AttributeError):
            validator.attribute = "other"
        with pytest.raises(TypeError):
            validator.options["message"] = "changed"

    def test_options_are_copied(self):
        """Test later changes to the caller's dict do not leak in."""
        options = {"message": "needed"}
        validator = PresenceValidator("name", options)
        options["message"] = "changed"

        assert validator.options["message"] == "needed"

    def test_runs_without_condition(self):
        """Test run always executes when no 'if' is given."""
        model = Model(name="")
        PresenceValidator("name").validate(model)

        assert model.errors == {"name": ["can't be empty"]}

    def test_callable_condition_receives_subject(self):
        """Test a callable condition is called with the subject."""
        seen = []
        validator = PresenceValidator("name", {"if": lambda s: seen.append(s) or True})
        model = Model(name=None)

        validator.validate(model)

        assert seen == [model]
        assert "name" in model.errors

    def test_method_name_condition(self):
        """Test a string condition names a method on the subject."""

        class Listing(Model):
            def is_published(self):
                return self.get("published") is True

        validator = PresenceValidator("title", {"if": "is_published"})

        draft = Listing(published=False)
        validator.validate(draft)
        assert draft.errors == {}

        live = Listing(published=True)
        validator.validate(live)
        assert live.errors == {"title": ["can't be empty"]}

    def test_condition_must_be_exactly_true(self):
        """Test truthy values other than True skip the check."""
        model = Model(name="")
        for result in (1, "yes", [1], False, None):
            PresenceValidator("name", {"if": lambda s, r=result: r}).validate(model)

        assert model.errors == {}

    def test_invalid_condition_type(self):
        """Test a non-callable, non-string condition is rejected."""
        with pytest.raises(ValidationConfigError):
            PresenceValidator("name", {"if": 42})

    def test_message_override(self):
        """Test the message option replaces the default message."""
        model = Model()
        PresenceValidator("name", {"message": "is required"}).run(model)

        assert model.errors == {"name": ["is required"]}


class TestPresenceValidator:
    """Test PresenceValidator."""

    @pytest.mark.parametrize("value", ["", None, [], {}, ()])
    def test_blank_values_add_one_error(self, value):
        """Test None and zero-length values each add exactly one error."""
        model = Model(name=value)
        PresenceValidator("name").run(model)

        assert model.errors == {"name": ["can't be empty"]}

    def test_missing_attribute_adds_one_error(self, subject):
        """Test an attribute that was never set counts as blank."""
        PresenceValidator("name").run(subject)

        assert subject.errors == {"name": ["can't be empty"]}

    @pytest.mark.parametrize("value", ["x", "  ", 0, False, ["a"]])
    def test_present_values_pass(self, value):
        """Test non-empty values add no error."""
        model = Model(name=value)
        PresenceValidator("name").run(model)

        assert model.errors == {}


class TestFormatValidator:
    """Test FormatValidator."""

    def test_mismatch_adds_error(self):
        """Test a value not matching the pattern is invalid."""
        model = Model(sku="abc")
        FormatValidator("sku", {"with": r"^[A-Z]{3}-\d{4}$"}).run(model)

        assert model.errors == {"sku": ["is invalid"]}

    def test_match_passes(self):
        """Test a matching value passes."""
        model = Model(sku="ABC-1234")
        FormatValidator("sku", {"with": r"^[A-Z]{3}-\d{4}$"}).run(model)

        assert model.errors == {}

    def test_non_string_values_are_stringified(self):
        """Test numbers are matched through their string form."""
        model = Model(zip=12345)
        FormatValidator("zip", {"with": r"^\d{5}$"}).run(model)

        assert model.errors == {}

    def test_blank_value_is_skipped(self, subject):
        """Test absent values are left to presence."""
        FormatValidator("sku", {"with": r"^\d+$"}).run(subject)

        assert subject.errors == {}

    def test_compiled_pattern_and_flags(self):
        """Test compiled patterns and string flags are both accepted."""
        model = Model(code="abc")
        FormatValidator("code", {"with": re.compile("^ABC$", re.IGNORECASE)}).run(model)
        FormatValidator("code", {"with": "^ABC$", "flags": re.IGNORECASE}).run(model)

        assert model.errors == {}

    def test_missing_pattern_is_config_error(self):
        """Test the pattern is required."""
        with pytest.raises(ValidationConfigError, match="requires a 'with' pattern"):
            FormatValidator("sku", {})

    def test_bad_pattern_is_config_error(self):
        """Test an uncompilable pattern is rejected at declaration."""
        with pytest.raises(ValidationConfigError, match="Invalid regex"):
            FormatValidator("sku", {"with": "(unclosed"})


class TestRangeValidator:
    """Test RangeValidator."""

    @pytest.mark.parametrize("value", [4, 11])
    def test_out_of_range_adds_one_error(self, value):
        """Test values outside min/max each add exactly one error."""
        model = Model(quantity=value)
        RangeValidator("quantity", {"min": 5, "max": 10}).run(model)

        assert len(model.errors["quantity"]) == 1

    @pytest.mark.parametrize("value", range(5, 11))
    def test_in_range_passes(self, value):
        """Test 5 through 10 pass."""
        model = Model(quantity=value)
        RangeValidator("quantity", {"min": 5, "max": 10}).run(model)

        assert model.errors == {}

    def test_missing_attribute_passes(self, subject):
        """Test omitting the attribute adds no error."""
        RangeValidator("quantity", {"min": 5, "max": 10}).run(subject)

        assert subject.errors == {}

    def test_messages_name_the_bound(self):
        """Test default messages interpolate the violated bound."""
        low = Model(quantity=4)
        high = Model(quantity=11)
        validator = RangeValidator("quantity", {"min": 5, "max": 10})

        validator.run(low)
        validator.run(high)

        assert low.errors == {"quantity": ["must be greater than or equal to 5"]}
        assert high.errors == {"quantity": ["must be less than or equal to 10"]}

    def test_callable_bounds_are_evaluated_per_run(self):
        """Test bounds given as callables read the subject at validation time."""
        validator = RangeValidator("ends_on", {"min": lambda s: s.get("starts_on")})
        model = Model(starts_on=10, ends_on=8)

        validator.run(model)
        assert model.errors == {"ends_on": ["must be greater than or equal to 10"]}

        model.errors = {}
        model.set("starts_on", 5)
        validator.run(model)
        assert model.errors == {}

    def test_numeric_strings_are_coerced(self):
        """Test form input like '7' is compared as a number."""
        ok = Model(quantity="7")
        bad = Model(quantity="12.5")
        validator = RangeValidator("quantity", {"min": 5, "max": 10})

        validator.run(ok)
        validator.run(bad)

        assert ok.errors == {}
        assert bad.errors == {"quantity": ["must be less than or equal to 10"]}

    def test_non_numeric_string(self):
        """Test a non-numeric string with numeric bounds is not a number."""
        model = Model(quantity="lots")
        RangeValidator("quantity", {"min": 5}).run(model)

        assert model.errors == {"quantity": ["is not a number"]}

    def test_incomparable_value(self):
        """Test values that cannot be compared report not a number."""
        model = Model(quantity=object())
        RangeValidator("quantity", {"max": 5}).run(model)

        assert model.errors == {"quantity": ["is not a number"]}

    def test_legacy_comparable_values(self):
        """Test values with is_before/is_after compare through those methods."""
        validator = RangeValidator("due", {"min": Day(5), "max": Day(10)})

        early = Model(due=Day(4))
        late = Model(due=Day(11))
        on_time = Model(due=Day(7))
        for model in (early, late, on_time):
            validator.run(model)

        assert len(early.errors["due"]) == 1
        assert len(late.errors["due"]) == 1
        assert on_time.errors == {}


class TestAcceptanceValidator:
    """Test AcceptanceValidator."""

    def test_default_accepts_one(self):
        """Test '1' is the default accepted value."""
        model = Model(terms="1")
        AcceptanceValidator("terms").run(model)

        assert model.errors == {}

    @pytest.mark.parametrize("value", ["0", None, "", True])
    def test_other_values_fail(self, value):
        """Test anything else must be accepted."""
        model = Model(terms=value)
        AcceptanceValidator("terms").run(model)

        assert model.errors == {"terms": ["must be accepted"]}

    def test_custom_accept_value(self):
        """Test a configured accepted value."""
        model = Model(terms=True)
        AcceptanceValidator("terms", {"accept": True}).run(model)

        assert model.errors == {}


class TestLengthValidator:
    """Test LengthValidator."""

    def test_too_long(self):
        """Test exceeding the maximum."""
        model = Model(name="abcdef")
        LengthValidator("name", {"maximum": 5}).run(model)

        assert model.errors == {"name": ["is too long (maximum is 5 characters)"]}

    def test_too_short(self):
        """Test falling below the minimum."""
        model = Model(name="ab")
        LengthValidator("name", {"minimum": 3}).run(model)

        assert model.errors == {"name": ["is too short (minimum is 3 characters)"]}

    def test_wrong_length(self):
        """Test an exact length."""
        model = Model(pin="123")
        LengthValidator("pin", {"is": 4}).run(model)

        assert model.errors == {"pin": ["is the wrong length (should be 4 characters)"]}

    def test_each_bound_reports_separately(self):
        """Test violated bounds produce distinct messages."""
        model = Model(pin="123456")
        LengthValidator("pin", {"maximum": 5, "is": 4}).run(model)

        assert model.errors["pin"] == [
            "is too long (maximum is 5 characters)",
            "is the wrong length (should be 4 characters)",
        ]

    def test_within_bounds(self):
        """Test a value inside the bounds passes."""
        model = Model(name="abcd")
        LengthValidator("name", {"minimum": 2, "maximum": 5}).run(model)

        assert model.errors == {}

    def test_absent_value_is_not_exempt(self, subject):
        """Test a missing value is measured as empty, unlike format or range."""
        LengthValidator("name", {"minimum": 1}).run(subject)

        assert subject.errors == {"name": ["is too short (minimum is 1 characters)"]}

    def test_absent_value_passes_maximum(self, subject):
        """Test a missing value satisfies a maximum."""
        LengthValidator("name", {"maximum": 3}).run(subject)

        assert subject.errors == {}

    def test_per_key_message_override(self):
        """Test <key>_message overrides a single default message."""
        model = Model(name="abcdef")
        LengthValidator("name", {"maximum": 5, "too_long_message": "max {count}"}).run(model)

        assert model.errors == {"name": ["max 5"]}


class TestConfirmationValidator:
    """Test ConfirmationValidator."""

    def test_error_is_keyed_by_confirmation_attribute(self):
        """Test the mismatch is reported on the confirmation field."""
        model = Model(password="x", password_confirmation="y")
        ConfirmationValidator("password").run(model)

        assert "password" not in model.errors
        assert model.errors == {"password_confirmation": ["doesn't match Password"]}

    def test_matching_values_pass(self):
        """Test equal values pass."""
        model = Model(password="x", password_confirmation="x")
        ConfirmationValidator("password").run(model)

        assert model.errors == {}

    def test_blank_value_is_skipped(self):
        """Test nothing to confirm when the source is blank."""
        model = Model(password="", password_confirmation="y")
        ConfirmationValidator("password").run(model)

        assert model.errors == {}

    def test_custom_confirmation_attribute(self):
        """Test a configured companion attribute."""
        model = Model(email="a@example.com", email_again="b@example.com")
        ConfirmationValidator("email", {"confirmation_attribute": "email_again"}).run(model)

        assert model.errors == {"email_again": ["doesn't match Email"]}


class TestCheckValidator:
    """Test CheckValidator with synchronous callables."""

    def test_falsy_result_adds_error(self):
        """Test a failing check records the message."""
        model = Model(handle="root")
        result = CheckValidator("handle", {"with": lambda value, s: value != "root"}).run(model)

        assert result is None
        assert model.errors == {"handle": ["is invalid"]}

    def test_truthy_result_passes(self):
        """Test a passing check records nothing."""
        model = Model(handle="ann")
        CheckValidator("handle", {"with": lambda value, s: True}).run(model)

        assert model.errors == {}

    def test_requires_callable(self):
        """Test the check must be callable."""
        with pytest.raises(ValidationConfigError, match="requires a callable"):
            CheckValidator("handle", {"with": "not callable"})
