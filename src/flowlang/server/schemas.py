"""Pydantic schemas used by the FastAPI server."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..formula import FormulaVariable, FormularyField


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EvaluateRequest(CamelModel):
    code: str
    language: Optional[str] = None


class EvaluateResponse(CamelModel):
    type: str
    value: Any = None
    representation: str
    is_error: bool = False


class FieldSchema(CamelModel):
    uuid: str
    label: str

    def to_field(self) -> FormularyField:
        return FormularyField(uuid=self.uuid, label=self.label)


class VariableSchema(CamelModel):
    uuid: str
    variable_uuid: str = Field(..., alias="variableUUID")
    order: int

    def to_variable(self) -> FormulaVariable:
        return FormulaVariable(uuid=self.uuid, variable_uuid=self.variable_uuid, order=self.order)


class AutocompleteRequest(CamelModel):
    source: str
    cursor: Optional[int] = Field(default=None, ge=0)
    language: Optional[str] = None
    fields: List[FieldSchema] = Field(default_factory=list)


class FormulaRequest(CamelModel):
    formula: str = Field(..., description="User facing formula, with {{label}} variables")
    variables: List[VariableSchema] = Field(default_factory=list)
    fields: List[FieldSchema] = Field(default_factory=list)
    values: Dict[str, Any] = Field(default_factory=dict, description="Field uuid to field value")
    language: Optional[str] = None
    evaluate: bool = True


class UnresolvedSchema(CamelModel):
    order: int
    label: str
    reason: str


class FormulaResponse(CamelModel):
    formula: str
    user_facing_formula: str
    variables: List[VariableSchema]
    unresolved: List[UnresolvedSchema] = Field(default_factory=list)
    result: Optional[EvaluateResponse] = None


__all__ = [
    "AutocompleteRequest",
    "EvaluateRequest",
    "EvaluateResponse",
    "FieldSchema",
    "FormulaRequest",
    "FormulaResponse",
    "UnresolvedSchema",
    "VariableSchema",
]
