from sqlalchemy import String, Integer, Double
from sqlalchemy.orm import Mapped, mapped_column
from funcionarios.db import Base

class Employee(Base):
    # nomes de coluna do schema original: id, nome, cargo, salario
    __tablename__ = "funcionarios"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("nome", String(100), nullable=False)
    role: Mapped[str] = mapped_column("cargo", String(100), nullable=False)
    salary: Mapped[float] = mapped_column("salario", Double, nullable=False)

    def __repr__(self) -> str:
        return f"Employee(id={self.id!r}, name={self.name!r}, role={self.role!r}, salary={self.salary!r})"
