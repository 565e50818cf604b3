# funcionarios/core/exceptions.py
from typing import Any, Dict, List, Optional


class AppError(Exception):
    """Erro base da aplicação; o handler HTTP usa status_code e message."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    def __init__(self, violations: List[str]):
        self.violations = list(violations)
        super().__init__("Dados de funcionário inválidos", status_code=400)


class InvalidIdError(AppError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__("ID deve ser um número", status_code=400, details={"id": str(value)})


class NotFoundError(AppError):
    def __init__(self, resource: str, identifier: Optional[Any] = None):
        self.resource = resource
        self.identifier = identifier
        message = f"{resource} não encontrado"
        if identifier is not None:
            message += f": {identifier}"
        super().__init__(message, status_code=404, details={"resource": resource, "identifier": identifier})


class StoreError(AppError):
    def __init__(self, message: str = "Erro ao acessar o banco de dados", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)
