from dataclasses import dataclass, field
from typing import List, Optional

from dialectforge.constants import DataKind, ParameterKind, ProcedureType


@dataclass
class DataTypeInfo:
    """A named (possibly user-defined) data type as reported by metadata."""
    name: str
    precision: Optional[int] = None
    scale: Optional[int] = None
    max_length: int = 0

    def to_dict(self):
        return {
            "name": self.name,
            "precision": self.precision,
            "scale": self.scale,
            "max_length": self.max_length
        }


@dataclass
class ColumnTypeInfo:
    type_name: str
    data_kind: DataKind = DataKind.OTHER
    max_length: int = 0
    precision: Optional[int] = None
    scale: Optional[int] = None
    user_type: Optional[DataTypeInfo] = None # Matching UDT, if the type is one

    def __repr__(self):
        return f"ColumnTypeInfo(type='{self.type_name}', kind={self.data_kind.value})"

    def to_dict(self):
        return {
            "type_name": self.type_name,
            "data_kind": self.data_kind.value,
            "max_length": self.max_length,
            "precision": self.precision,
            "scale": self.scale,
            "user_type": self.user_type.to_dict() if self.user_type else None
        }


@dataclass
class ProcedureParameter:
    name: str
    kind: ParameterKind = ParameterKind.IN
    type_name: str = ""

    def to_dict(self):
        return {
            "name": self.name,
            "kind": self.kind.value,
            "type_name": self.type_name
        }


@dataclass
class ProcedureCallSpec:
    """
    Everything needed to synthesize one routine call.

    Built by the caller for a single call site and consumed once.
    """
    name: str
    procedure_type: ProcedureType = ProcedureType.PROCEDURE
    parameters: List[ProcedureParameter] = field(default_factory=list)
    schema: Optional[str] = None
    catalog: Optional[str] = None

    @property
    def is_function(self) -> bool:
        return self.procedure_type == ProcedureType.FUNCTION

    def to_dict(self):
        return {
            "name": self.name,
            "procedure_type": self.procedure_type.value,
            "parameters": [p.to_dict() for p in self.parameters],
            "schema": self.schema,
            "catalog": self.catalog
        }
