"""Tests for the employee payload validation rules."""

import pytest

from employee_api.exceptions import EmployeeValidationError, ErrorCode
from employee_api.models.dto.employee import EmployeeCreate, EmployeeUpdate
from employee_api.services.employee_validation import (
    normalize_phone,
    validate_create,
    validate_update,
)

VALID_CREATE = {
    "firstName": "John",
    "lastName": "Doe",
    "email": "john@test.com",
    "position": "Developer",
    "department": "Engineering",
    "salary": 75000,
    "hireDate": "2023-01-01T00:00:00.000Z",
}


def create_body(**overrides) -> EmployeeCreate:
    return EmployeeCreate.model_validate({**VALID_CREATE, **overrides})


class TestCreateValidation:
    """Rules applied to a create payload."""

    def test_valid_payload_is_normalized(self) -> None:
        values = validate_create(
            create_body(
                firstName="  John  ",
                lastName="  Doe  ",
                email="  JOHN@TEST.COM  ",
                position="  Developer  ",
                department="  Engineering  ",
            )
        )

        assert values == {
            "first_name": "John",
            "last_name": "Doe",
            "email": "john@test.com",
            "position": "Developer",
            "department": "Engineering",
            "salary": 75000.0,
            "hire_date": "2023-01-01T00:00:00.000Z",
            "phone": None,
        }

    def test_snake_case_keys_are_accepted(self) -> None:
        body = EmployeeCreate(
            first_name="Ada",
            last_name="Lovelace",
            email="ada@example.org",
            position="Analyst",
            department="Finance",
            salary=1,
            hire_date="1843-07-10T00:00:00.000Z",
        )
        assert validate_create(body)["first_name"] == "Ada"

    @pytest.mark.parametrize(
        ("field", "code"),
        [
            ("firstName", ErrorCode.MISSING_FIRST_NAME),
            ("lastName", ErrorCode.MISSING_LAST_NAME),
            ("email", ErrorCode.MISSING_EMAIL),
            ("position", ErrorCode.MISSING_POSITION),
            ("department", ErrorCode.MISSING_DEPARTMENT),
            ("salary", ErrorCode.MISSING_SALARY),
            ("hireDate", ErrorCode.MISSING_HIRE_DATE),
        ],
    )
    def test_missing_required_field(self, field: str, code: ErrorCode) -> None:
        payload = {k: v for k, v in VALID_CREATE.items() if k != field}

        with pytest.raises(EmployeeValidationError) as exc_info:
            validate_create(EmployeeCreate.model_validate(payload))

        assert exc_info.value.code == code

    @pytest.mark.parametrize(
        ("field", "code"),
        [
            ("firstName", ErrorCode.MISSING_FIRST_NAME),
            ("lastName", ErrorCode.MISSING_LAST_NAME),
            ("email", ErrorCode.MISSING_EMAIL),
            ("position", ErrorCode.MISSING_POSITION),
            ("department", ErrorCode.MISSING_DEPARTMENT),
            ("hireDate", ErrorCode.MISSING_HIRE_DATE),
        ],
    )
    def test_whitespace_only_counts_as_missing(self, field: str, code: ErrorCode) -> None:
        with pytest.raises(EmployeeValidationError) as exc_info:
            validate_create(create_body(**{field: "   "}))

        assert exc_info.value.code == code

    def test_first_violated_rule_is_reported(self) -> None:
        # Both last name and salary are wrong; last name is checked first
        with pytest.raises(EmployeeValidationError) as exc_info:
            validate_create(create_body(lastName="", salary=-5))

        assert exc_info.value.code == ErrorCode.MISSING_LAST_NAME

    def test_email_format_checked_before_position(self) -> None:
        with pytest.raises(EmployeeValidationError) as exc_info:
            validate_create(create_body(email="not-an-email", position=""))

        assert exc_info.value.code == ErrorCode.INVALID_EMAIL_FORMAT

    @pytest.mark.parametrize(
        "email",
        [
            "user@example.com",
            "test.email@domain.co.uk",
            "user+tag@example.org",
            "user123@test-domain.com",
        ],
    )
    def test_valid_email_shapes(self, email: str) -> None:
        assert validate_create(create_body(email=email))["email"] == email

    @pytest.mark.parametrize(
        "email",
        ["invalid-email", "@domain.com", "user@", "user@domain", "a b@c.de"],
    )
    def test_invalid_email_shapes(self, email: str) -> None:
        with pytest.raises(EmployeeValidationError) as exc_info:
            validate_create(create_body(email=email))

        assert exc_info.value.code == ErrorCode.INVALID_EMAIL_FORMAT

    @pytest.mark.parametrize("salary", [0, -1, -1000, "75000", "not-a-number", True, [1]])
    def test_invalid_salary(self, salary) -> None:
        with pytest.raises(EmployeeValidationError) as exc_info:
            validate_create(create_body(salary=salary))

        assert exc_info.value.code == ErrorCode.INVALID_SALARY

    @pytest.mark.parametrize("salary", [1, 0.5, 999999, 123456.78])
    def test_positive_salary_accepted(self, salary) -> None:
        assert validate_create(create_body(salary=salary))["salary"] == float(salary)

    def test_huge_integer_salary_rejected(self) -> None:
        with pytest.raises(EmployeeValidationError) as exc_info:
            validate_create(create_body(salary=10**400))

        assert exc_info.value.code == ErrorCode.INVALID_SALARY

    @pytest.mark.parametrize(
        "hire_date",
        ["2023-01-01", "01/01/2023", "not-a-date", "2023-01-01T00:00:00Z", "2023-01-01 00:00:00.000Z"],
    )
    def test_invalid_hire_date_format(self, hire_date: str) -> None:
        with pytest.raises(EmployeeValidationError) as exc_info:
            validate_create(create_body(hireDate=hire_date))

        assert exc_info.value.code == ErrorCode.INVALID_HIRE_DATE_FORMAT

    @pytest.mark.parametrize(
        "hire_date", ["2023-01-01T00:00:00.000Z", "2023-12-31T23:59:59.999Z"]
    )
    def test_valid_hire_date(self, hire_date: str) -> None:
        assert validate_create(create_body(hireDate=hire_date))["hire_date"] == hire_date

    def test_department_is_not_restricted_to_suggestions(self) -> None:
        values = validate_create(create_body(department="Research & Development"))
        assert values["department"] == "Research & Development"

    def test_phone_is_trimmed(self) -> None:
        assert validate_create(create_body(phone="  +1-555-0123  "))["phone"] == "+1-555-0123"


class TestUpdateValidation:
    """Rules applied to a partial update payload."""

    def test_empty_body_yields_no_changes(self) -> None:
        assert validate_update(EmployeeUpdate.model_validate({})) == {}

    def test_only_supplied_fields_are_returned(self) -> None:
        changes = validate_update(EmployeeUpdate.model_validate({"salary": 90000}))
        assert changes == {"salary": 90000.0}

    @pytest.mark.parametrize(
        ("field", "code"),
        [
            ("firstName", ErrorCode.INVALID_FIRST_NAME),
            ("lastName", ErrorCode.INVALID_LAST_NAME),
            ("email", ErrorCode.INVALID_EMAIL),
            ("position", ErrorCode.INVALID_POSITION),
            ("department", ErrorCode.INVALID_DEPARTMENT),
        ],
    )
    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_supplied_text_cannot_be_blank(self, field: str, code: ErrorCode, value) -> None:
        with pytest.raises(EmployeeValidationError) as exc_info:
            validate_update(EmployeeUpdate.model_validate({field: value}))

        assert exc_info.value.code == code

    def test_email_is_lowercased_and_checked(self) -> None:
        changes = validate_update(EmployeeUpdate.model_validate({"email": " New@Mail.COM "}))
        assert changes == {"email": "new@mail.com"}

        with pytest.raises(EmployeeValidationError) as exc_info:
            validate_update(EmployeeUpdate.model_validate({"email": "nope"}))
        assert exc_info.value.code == ErrorCode.INVALID_EMAIL_FORMAT

    @pytest.mark.parametrize("salary", [-10, 0, None, "100"])
    def test_invalid_salary(self, salary) -> None:
        with pytest.raises(EmployeeValidationError) as exc_info:
            validate_update(EmployeeUpdate.model_validate({"salary": salary}))

        assert exc_info.value.code == ErrorCode.INVALID_SALARY

    @pytest.mark.parametrize("hire_date", ["", None, "2023-01-01"])
    def test_invalid_hire_date(self, hire_date) -> None:
        with pytest.raises(EmployeeValidationError) as exc_info:
            validate_update(EmployeeUpdate.model_validate({"hireDate": hire_date}))

        assert exc_info.value.code == ErrorCode.INVALID_HIRE_DATE_FORMAT

    def test_rules_checked_in_field_order(self) -> None:
        with pytest.raises(EmployeeValidationError) as exc_info:
            validate_update(EmployeeUpdate.model_validate({"salary": -1, "firstName": ""}))

        assert exc_info.value.code == ErrorCode.INVALID_FIRST_NAME

    @pytest.mark.parametrize("phone", ["", "   ", None])
    def test_blank_phone_clears_value(self, phone) -> None:
        changes = validate_update(EmployeeUpdate.model_validate({"phone": phone}))
        assert changes == {"phone": None}


class TestPhoneNormalization:
    """Phone has no format; blank values become None everywhere."""

    @pytest.mark.parametrize("phone", [None, "", "  "])
    def test_blank_phone(self, phone) -> None:
        assert normalize_phone(phone) is None

    def test_phone_kept_as_given(self) -> None:
        assert normalize_phone("(555) 010-9999 ext. 4") == "(555) 010-9999 ext. 4"
