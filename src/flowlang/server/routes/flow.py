"""Flow evaluation, documentation, autocomplete and formula routes."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter

from ...autocomplete import Autocompleter
from ...formula import FormulaAutocomplete, bind_variables, substitute_values, to_user_facing
from ...runtime.objects import FlowError, FlowObject
from ...service import FlowServiceCache
from ..schemas import (
    AutocompleteRequest,
    EvaluateRequest,
    EvaluateResponse,
    FormulaRequest,
    FormulaResponse,
    UnresolvedSchema,
    VariableSchema,
)


def serialize_result(result: FlowObject) -> EvaluateResponse:
    return EvaluateResponse(
        type=result.type,
        value=result.to_json(),
        representation=result._string_()._representation_(),
        is_error=isinstance(result, FlowError),
    )


def build_flow_router(services: FlowServiceCache) -> APIRouter:
    router = APIRouter(prefix="/api/flow")

    @router.get("/documentation")
    async def api_documentation(language: Optional[str] = None) -> Dict[str, Any]:
        service = await services.get(language)
        return {
            "language": service.language,
            "modules": [module.to_dict() for module in service.documentation()],
        }

    @router.post("/evaluate", response_model=EvaluateResponse)
    async def api_evaluate(payload: EvaluateRequest) -> EvaluateResponse:
        service = await services.get(payload.language)
        return serialize_result(await service.evaluate(payload.code))

    @router.post("/autocomplete")
    async def api_autocomplete(payload: AutocompleteRequest) -> Dict[str, Any]:
        service = await services.get(payload.language)
        if payload.fields:
            fields = [item.to_field() for item in payload.fields]
            completer = Autocompleter(
                service.registry,
                service.context,
                custom_options=FormulaAutocomplete(fields, service.language),
            )
        else:
            completer = service.autocompleter()
        return completer.complete(payload.source, payload.cursor).to_dict()

    @router.post("/formula", response_model=FormulaResponse)
    async def api_formula(payload: FormulaRequest) -> FormulaResponse:
        service = await services.get(payload.language)
        fields = [item.to_field() for item in payload.fields]
        variables = [item.to_variable() for item in payload.variables]
        binding = bind_variables(payload.formula, variables, fields)
        result = None
        if payload.evaluate:
            code = substitute_values(binding.formula, binding.variables, payload.values, service.context)
            result = serialize_result(await service.evaluate(code))
        return FormulaResponse(
            formula=binding.formula,
            user_facing_formula=to_user_facing(binding.formula, binding.variables, fields),
            variables=[
                VariableSchema(uuid=item.uuid, variable_uuid=item.variable_uuid, order=item.order)
                for item in binding.variables
            ],
            unresolved=[
                UnresolvedSchema(order=item.order, label=item.label, reason=item.reason) for item in binding.unresolved
            ],
            result=result,
        )

    return router


__all__ = ["build_flow_router", "serialize_result"]
