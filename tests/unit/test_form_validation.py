import pytest

from user_desk.app.domain.models.user_record import FormData
from user_desk.app.ui.forms import INVALID_EMAIL_MESSAGE, validate_user_form

VALID = FormData(first_name="Ada", last_name="Lovelace", email="ada@example.com", department="R&D")


@pytest.mark.parametrize(
    ("field", "message"),
    [
        ("first_name", "First Name is required."),
        ("last_name", "Last Name is required."),
        ("email", "Email is required."),
        ("department", "Department is required."),
    ],
)
@pytest.mark.parametrize("blank", ["", "   ", "\t"])
def test_blank_required_field_is_named(field: str, message: str, blank: str) -> None:
    result = validate_user_form(VALID.with_fields(**{field: blank}))

    assert result.is_valid is False
    assert result.field_errors == {field: message}
    assert result.message == message


def test_rules_short_circuit_in_fixed_order() -> None:
    result = validate_user_form(FormData(first_name="", last_name="", email="bad", department=""))

    assert result.first_invalid_field == "first_name"
    assert len(result.field_errors) == 1


def test_email_shape_checked_after_required_fields() -> None:
    result = validate_user_form(VALID.with_fields(email="bad", department=" "))

    assert result.message == "Department is required."


@pytest.mark.parametrize("email", ["ada.example.com", "ada@example", "@example.com", "ada@.com", "ada@ example.com"])
def test_malformed_email_rejected(email: str) -> None:
    result = validate_user_form(VALID.with_fields(email=email))

    assert result.field_errors == {"email": INVALID_EMAIL_MESSAGE}


@pytest.mark.parametrize("email", ["ada@example.com", "a@b.co", "first.last@sub.domain.org"])
def test_well_formed_email_accepted(email: str) -> None:
    assert validate_user_form(VALID.with_fields(email=email)).is_valid is True
