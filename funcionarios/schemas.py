from typing import Any
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

class EmployeeIn(BaseModel):
    """
    Corpo de POST/PUT. Campos sem restrição de tipo: as regras (tamanho mínimo,
    salário >= 0) ficam em funcionarios.validation e todas as violações voltam
    juntas num único 400.
    Aceita também as chaves originais nome/cargo/salario.
    """
    name: Any = Field(None, validation_alias=AliasChoices("name", "nome"))
    role: Any = Field(None, validation_alias=AliasChoices("role", "cargo"))
    salary: Any = Field(None, validation_alias=AliasChoices("salary", "salario"))

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "João Silva", "role": "Developer", "salary": 5000.5}}
    )

class Employee(BaseModel):
    id: int
    name: str
    role: str
    salary: float

    model_config = ConfigDict(from_attributes=True)

class Pagination(BaseModel):
    page: int
    limit: int
    total: int

class EmployeePage(BaseModel):
    data: list[Employee]
    pagination: Pagination

class DeleteResult(BaseModel):
    success: bool = True
    message: str
    id: int

class ErrorResponse(BaseModel):
    error: str
    message: str
    errors: list[str] | None = None
    details: dict[str, Any] | str | None = None
