# funcionarios/validation.py
import math
import re
from typing import Any, Optional, Tuple

from funcionarios.core.exceptions import InvalidIdError

NAME_MIN_LENGTH = 3
ROLE_MIN_LENGTH = 2

NAME_TOO_SHORT = f"Nome deve ter pelo menos {NAME_MIN_LENGTH} caracteres"
ROLE_TOO_SHORT = f"Cargo deve ter pelo menos {ROLE_MIN_LENGTH} caracteres"
SALARY_INVALID = "Salário deve ser um número não negativo"

# faixa do INTEGER/BIGINT com sinal no banco
DB_INT_MIN = -(2**63)
DB_INT_MAX = 2**63 - 1

_INT_RE = re.compile(r"^[+-]?\d+$")


def _trimmed_length(value: Any) -> int:
    if not isinstance(value, str):
        return 0
    return len(value.strip())


def parse_salary(value: Any) -> Optional[float]:
    """Devolve o salário como float, ou None se não for um número finito."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def validate_employee(name: Any, role: Any, salary: Any) -> list[str]:
    violations: list[str] = []
    if _trimmed_length(name) < NAME_MIN_LENGTH:
        violations.append(NAME_TOO_SHORT)
    if _trimmed_length(role) < ROLE_MIN_LENGTH:
        violations.append(ROLE_TOO_SHORT)
    parsed = parse_salary(salary)
    if parsed is None or parsed < 0:
        violations.append(SALARY_INVALID)
    return violations


def parse_id(value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidIdError(value)
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _INT_RE.match(value.strip()):
        try:
            number = int(value.strip())
        except ValueError:
            # mais dígitos do que int() aceita
            raise InvalidIdError(value)
    else:
        raise InvalidIdError(value)
    if not DB_INT_MIN <= number <= DB_INT_MAX:
        raise InvalidIdError(value)
    return number


def _to_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def coerce_page_params(page: Any, limit: Any, default_limit: int = 10, max_limit: int = 100) -> Tuple[int, int]:
    """
    Valores não numéricos caem no padrão; page < 1 vira 1; limit < 1 vira o
    padrão e limit acima de max_limit é truncado. page é limitada para que
    o offset caiba num inteiro do banco.
    """
    resolved_page = _to_int(page)
    if resolved_page is None or resolved_page < 1:
        resolved_page = 1
    resolved_limit = _to_int(limit)
    if resolved_limit is None or resolved_limit < 1:
        resolved_limit = default_limit
    resolved_limit = min(resolved_limit, max_limit)
    max_page = DB_INT_MAX // resolved_limit + 1
    return min(resolved_page, max_page), resolved_limit
