# funcionarios/service.py
import logging
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from funcionarios.core.exceptions import NotFoundError, StoreError, ValidationError
from funcionarios.models import Employee
from funcionarios.schemas import DeleteResult, Employee as EmployeeOut, EmployeePage, Pagination
from funcionarios.validation import coerce_page_params, parse_id, parse_salary, validate_employee

logger = logging.getLogger("funcionarios.service")

RESOURCE = "Funcionário"


class EmployeeService:
    """CRUD sobre uma Session; falhas do banco viram StoreError, sem retry."""

    def __init__(self, db: Session, default_limit: int = 10, max_limit: int = 100):
        self.db = db
        self.default_limit = default_limit
        self.max_limit = max_limit

    def _store_error(self, action: str, exc: SQLAlchemyError) -> StoreError:
        self.db.rollback()
        logger.error("store_error", exc_info=exc, extra={"action": action})
        return StoreError(f"Erro ao {action} funcionário", details={"cause": str(exc)})

    def _fetch(self, employee_id: int) -> Employee | None:
        return self.db.execute(
            select(Employee)
            .where(Employee.id == employee_id)
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()

    def create(self, name: Any, role: Any, salary: Any) -> EmployeeOut:
        violations = validate_employee(name, role, salary)
        if violations:
            raise ValidationError(violations)
        emp = Employee(name=name.strip(), role=role.strip(), salary=parse_salary(salary))
        try:
            self.db.add(emp)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._store_error("cadastrar", exc) from exc
        logger.info("employee_created", extra={"employee_id": emp.id})
        return EmployeeOut.model_validate(emp)

    def list(self, page: Any = 1, limit: Any = None) -> EmployeePage:
        page, limit = coerce_page_params(
            page, limit, default_limit=self.default_limit, max_limit=self.max_limit
        )
        offset = (page - 1) * limit
        try:
            rows = self.db.execute(
                select(Employee).order_by(Employee.id).limit(limit).offset(offset)
            ).scalars().all()
            total = self.db.execute(select(func.count()).select_from(Employee)).scalar_one()
        except SQLAlchemyError as exc:
            raise self._store_error("buscar", exc) from exc
        return EmployeePage(
            data=[EmployeeOut.model_validate(r) for r in rows],
            pagination=Pagination(page=page, limit=limit, total=total),
        )

    def get(self, employee_id: Any) -> EmployeeOut:
        emp_id = parse_id(employee_id)
        try:
            emp = self._fetch(emp_id)
        except SQLAlchemyError as exc:
            raise self._store_error("buscar", exc) from exc
        if emp is None:
            raise NotFoundError(RESOURCE, emp_id)
        return EmployeeOut.model_validate(emp)

    def update(self, employee_id: Any, name: Any, role: Any, salary: Any) -> EmployeeOut:
        emp_id = parse_id(employee_id)
        violations = validate_employee(name, role, salary)
        if violations:
            raise ValidationError(violations)
        try:
            result = self.db.execute(
                update(Employee)
                .where(Employee.id == emp_id)
                .values(name=name.strip(), role=role.strip(), salary=parse_salary(salary))
            )
            if result.rowcount == 0:
                self.db.rollback()
                raise NotFoundError(RESOURCE, emp_id)
            self.db.commit()
            emp = self._fetch(emp_id)
        except SQLAlchemyError as exc:
            raise self._store_error("atualizar", exc) from exc
        if emp is None:
            # removido entre a escrita e a releitura
            raise NotFoundError(RESOURCE, emp_id)
        logger.info("employee_updated", extra={"employee_id": emp_id})
        return EmployeeOut.model_validate(emp)

    def delete(self, employee_id: Any) -> DeleteResult:
        emp_id = parse_id(employee_id)
        try:
            result = self.db.execute(delete(Employee).where(Employee.id == emp_id))
            if result.rowcount == 0:
                self.db.rollback()
                raise NotFoundError(RESOURCE, emp_id)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._store_error("remover", exc) from exc
        logger.info("employee_deleted", extra={"employee_id": emp_id})
        return DeleteResult(success=True, message="Funcionário removido com sucesso", id=emp_id)
