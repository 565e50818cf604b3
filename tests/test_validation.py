"""Field rules, id parsing and pagination coercion — no database."""
import pytest

from funcionarios.core.exceptions import InvalidIdError
from funcionarios.validation import (
    NAME_TOO_SHORT,
    ROLE_TOO_SHORT,
    SALARY_INVALID,
    coerce_page_params,
    parse_id,
    parse_salary,
    validate_employee,
)

pytestmark = pytest.mark.unit


def test_valid_employee_has_no_violations():
    assert validate_employee("João Silva", "Developer", 5000.5) == []


def test_boundary_lengths_are_accepted():
    assert validate_employee("Ana", "TI", 0) == []


def test_name_is_checked_after_trimming():
    assert validate_employee("  Jo  ", "Developer", 100) == [NAME_TOO_SHORT]


def test_role_is_checked_after_trimming():
    assert validate_employee("Maria", " D ", 100) == [ROLE_TOO_SHORT]


def test_all_violations_are_collected():
    violations = validate_employee("", None, -1)
    assert violations == [NAME_TOO_SHORT, ROLE_TOO_SHORT, SALARY_INVALID]


def test_name_and_salary_violations_together():
    assert validate_employee("", "Developer", -1) == [NAME_TOO_SHORT, SALARY_INVALID]


@pytest.mark.parametrize("salary", [None, "abc", "", -0.01, float("nan"), float("inf"), True, [100], 10**400, "1e400"])
def test_invalid_salaries(salary):
    assert validate_employee("Maria", "Developer", salary) == [SALARY_INVALID]


@pytest.mark.parametrize("salary, expected", [(100, 100.0), ("2500.75", 2500.75), (" 42 ", 42.0), (0.0, 0.0)])
def test_parse_salary_accepts_numbers_and_numeric_strings(salary, expected):
    assert parse_salary(salary) == expected


def test_non_string_name_is_a_violation():
    assert validate_employee(12345, "Developer", 10) == [NAME_TOO_SHORT]


@pytest.mark.parametrize("value, expected", [("1", 1), (" 42 ", 42), (7, 7), ("-3", -3)])
def test_parse_id(value, expected):
    assert parse_id(value) == expected


@pytest.mark.parametrize("value", ["abc", "1.5", "", "1e3", None, True, "99999999999999999999999", 2**63, "9" * 5000])
def test_parse_id_rejects_non_integers(value):
    with pytest.raises(InvalidIdError):
        parse_id(value)


def test_page_params_defaults():
    assert coerce_page_params(None, None) == (1, 10)


def test_page_params_from_strings():
    assert coerce_page_params("2", "25") == (2, 25)


def test_page_params_clamp_non_positive_values():
    assert coerce_page_params("0", "-5") == (1, 10)
    assert coerce_page_params(-3, 0) == (1, 10)


def test_page_params_non_numeric_fall_back_to_defaults():
    assert coerce_page_params("x", "y", default_limit=20) == (1, 20)


def test_page_params_limit_is_capped():
    assert coerce_page_params(1, 5000, max_limit=100) == (1, 100)


def test_parse_id_accepts_int64_bounds():
    assert parse_id(str(2**63 - 1)) == 2**63 - 1
    assert parse_id(-(2**63)) == -(2**63)


def test_page_params_huge_page_keeps_offset_in_int64():
    page, limit = coerce_page_params("99999999999999999999999", "10")
    assert limit == 10
    assert (page - 1) * limit <= 2**63 - 1
    assert page > 1
