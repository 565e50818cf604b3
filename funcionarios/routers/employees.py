# funcionarios/routers/employees.py
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from funcionarios.core.config import Settings, get_settings
from funcionarios.db import get_db
from funcionarios.schemas import DeleteResult, Employee, EmployeeIn, EmployeePage, ErrorResponse
from funcionarios.service import EmployeeService

router = APIRouter(prefix="/funcionarios", tags=["Funcionarios"])

ERRORS_400 = {400: {"model": ErrorResponse, "description": "Dados ou ID inválidos"}}
ERRORS_404 = {404: {"model": ErrorResponse, "description": "Funcionário não encontrado"}}
ERRORS_500 = {500: {"model": ErrorResponse, "description": "Erro no banco de dados"}}

def get_employee_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> EmployeeService:
    return EmployeeService(db, default_limit=settings.PAGE_LIMIT_DEFAULT, max_limit=settings.PAGE_LIMIT_MAX)

@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED,
             summary="Cadastra um novo funcionário", responses={**ERRORS_400, **ERRORS_500})
def create_employee(body: EmployeeIn, service: EmployeeService = Depends(get_employee_service)):
    return service.create(body.name, body.role, body.salary)

@router.get("", response_model=EmployeePage, summary="Lista funcionários com paginação",
            responses=ERRORS_500)
def list_employees(
    page: str | None = Query(None, description="Página (1-indexada)"),
    limit: str | None = Query(None, description="Itens por página"),
    service: EmployeeService = Depends(get_employee_service),
):
    # page/limit chegam como texto; a coerção (e o clamp) fica no serviço
    return service.list(page=page, limit=limit)

@router.get("/{employee_id}", response_model=Employee, summary="Busca um funcionário por ID",
            responses={**ERRORS_400, **ERRORS_404, **ERRORS_500})
def get_employee(employee_id: str, service: EmployeeService = Depends(get_employee_service)):
    return service.get(employee_id)

@router.put("/{employee_id}", response_model=Employee, summary="Atualiza um funcionário",
            responses={**ERRORS_400, **ERRORS_404, **ERRORS_500})
def update_employee(
    employee_id: str,
    body: EmployeeIn,
    service: EmployeeService = Depends(get_employee_service),
):
    return service.update(employee_id, body.name, body.role, body.salary)

@router.delete("/{employee_id}", response_model=DeleteResult, summary="Remove um funcionário",
               responses={**ERRORS_400, **ERRORS_404, **ERRORS_500})
def delete_employee(employee_id: str, service: EmployeeService = Depends(get_employee_service)):
    return service.delete(employee_id)
