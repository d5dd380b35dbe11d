"""
Variables in formula fields.

Users write ``{{Field label}}`` in a formula. The stored ("backend") formula
replaces every occurrence with an empty ``{{}}`` placeholder and keeps an
ordered list of :class:`FormulaVariable` bindings next to it; placeholder
``n`` belongs to the binding with ``order == n``. Labels are resolved again
on every edit, since fields can be renamed between two edits.
"""

from __future__ import annotations

import itertools
import logging
import re
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from .autocomplete import AutocompleteOption
from .context import FlowContext
from .runtime.datetimes import format_datetime
from .strings import strings

log = logging.getLogger(__name__)

VARIABLE_IN_FORMULA_REGEX = re.compile(r"\{\{([^{}]*)\}\}")
PLACEHOLDER = "{{}}"

MISSING = "missing"
AMBIGUOUS = "ambiguous"


@dataclass
class FormulaVariable:
    uuid: str
    variable_uuid: str
    order: int

    def to_dict(self) -> Dict[str, Any]:
        return {"uuid": self.uuid, "variableUUID": self.variable_uuid, "order": self.order}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FormulaVariable":
        return cls(
            uuid=str(data.get("uuid") or uuid.uuid4()),
            variable_uuid=str(data.get("variableUUID") or data.get("variable_uuid") or ""),
            order=int(data.get("order", 0)),
        )


@dataclass
class FormularyField:
    uuid: str
    label: str


@dataclass
class UnresolvedVariable:
    order: int
    label: str
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {"order": self.order, "label": self.label, "reason": self.reason}


@dataclass
class FormulaBinding:
    formula: str
    variables: List[FormulaVariable] = field(default_factory=list)
    unresolved: List[UnresolvedVariable] = field(default_factory=list)

    @property
    def resolved(self) -> bool:
        return not self.unresolved

    def to_dict(self) -> Dict[str, Any]:
        return {
            "formula": self.formula,
            "variables": [variable.to_dict() for variable in self.variables],
            "unresolved": [item.to_dict() for item in self.unresolved],
        }


def variable_labels(formula: str) -> List[str]:
    return [match.group(1).strip() for match in VARIABLE_IN_FORMULA_REGEX.finditer(formula)]


def to_backend(formula: str) -> str:
    return VARIABLE_IN_FORMULA_REGEX.sub(PLACEHOLDER, formula)


def _by_order(variables: Iterable[FormulaVariable]) -> Dict[int, FormulaVariable]:
    return {variable.order: variable for variable in variables}


def to_user_facing(backend: str, variables: Sequence[FormulaVariable], fields: Sequence[FormularyField]) -> str:
    """Put current field labels back into the stored formula; deleted fields stay ``{{}}``."""
    fields_by_uuid = {item.uuid: item for item in fields}
    bindings = _by_order(variables)
    counter = itertools.count()

    def label_for(match: re.Match) -> str:
        variable = bindings.get(next(counter))
        target = fields_by_uuid.get(variable.variable_uuid) if variable else None
        if target is None:
            return PLACEHOLDER
        return "{{" + target.label + "}}"

    return VARIABLE_IN_FORMULA_REGEX.sub(label_for, backend)


def bind_variables(
    formula: str,
    variables: Sequence[FormulaVariable],
    fields: Sequence[FormularyField],
) -> FormulaBinding:
    """
    Rebuild the bindings of a user facing formula.

    A previous binding is kept while its field still carries the label typed
    at that position; otherwise the label is looked up again. Labels matching
    no field, or several fields, are returned as unresolved instead of
    picking one.
    """
    fields_by_uuid = {item.uuid: item for item in fields}
    previous = _by_order(variables)
    bound: List[FormulaVariable] = []
    unresolved: List[UnresolvedVariable] = []
    for order, label in enumerate(variable_labels(formula)):
        existing = previous.get(order)
        current = fields_by_uuid.get(existing.variable_uuid) if existing else None
        if existing is not None and current is not None and current.label == label:
            bound.append(FormulaVariable(uuid=existing.uuid, variable_uuid=existing.variable_uuid, order=order))
            continue
        candidates = [item for item in fields if item.label == label]
        if len(candidates) == 1:
            bound.append(FormulaVariable(uuid=str(uuid.uuid4()), variable_uuid=candidates[0].uuid, order=order))
        else:
            reason = MISSING if not candidates else AMBIGUOUS
            log.debug("Formula variable %r at position %d is %s", label, order, reason)
            unresolved.append(UnresolvedVariable(order=order, label=label, reason=reason))
    return FormulaBinding(formula=to_backend(formula), variables=bound, unresolved=unresolved)


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n").replace("\t", "\\t")
    return f'"{escaped}"'


def flow_literal(value: Any, context: FlowContext) -> str:
    """Flow source text for a host value."""
    if value is None:
        return context.keyword("None")
    if isinstance(value, bool):
        return context.keyword("True" if value else "False")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value).replace(".", context.decimal_point_separator)
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, datetime):
        return f"~{context.date_character}[{format_datetime(value, context)}]"
    if isinstance(value, date):
        return flow_literal(datetime(value.year, value.month, value.day), context)
    separator = f"{context.positional_argument_separator} "
    if isinstance(value, Mapping):
        items = separator.join(f"{flow_literal(key, context)}: {flow_literal(item, context)}" for key, item in value.items())
        return "{" + items + "}"
    if isinstance(value, (list, tuple)):
        return "[" + separator.join(flow_literal(item, context) for item in value) + "]"
    return _quote(str(value))


def substitute_values(
    backend: str,
    variables: Sequence[FormulaVariable],
    values: Mapping[str, Any],
    context: FlowContext,
) -> str:
    """
    Replace placeholders with literals ready for evaluation.

    ``values`` maps field uuids to host values. Placeholders without a
    binding or a value are left untouched, so evaluating the result reports
    them as not substituted.
    """
    bindings = _by_order(variables)
    counter = itertools.count()

    def literal_for(match: re.Match) -> str:
        variable = bindings.get(next(counter))
        if variable is None or variable.variable_uuid not in values:
            return match.group(0)
        return flow_literal(values[variable.variable_uuid], context)

    return VARIABLE_IN_FORMULA_REGEX.sub(literal_for, backend)


class FormulaAutocomplete:
    """Custom autocomplete options offering the form's fields as ``{{label}}``."""

    def __init__(self, fields: Sequence[FormularyField], language: str = "en-US") -> None:
        self.fields = list(fields)
        self.language = language

    def __call__(self, name: str, attribute_name: str = "", element_at: int = 0) -> List[AutocompleteOption]:
        typed = name
        if typed.startswith("{{"):
            typed = typed[2:]
        if typed.endswith("}}"):
            typed = typed[:-2]
        typed = typed.strip()
        to_substitute: Optional[Dict[str, int]] = None
        if name:
            to_substitute = {"from": element_at, "to": element_at + len(name)}
        description = strings("formula.variable.description", self.language)
        return [
            AutocompleteOption(
                label="{{" + item.label + "}}",
                autocomplete_text="{{" + item.label + "}}",
                description=description,
                type="custom",
                raw_name=item.label,
                to_substitute=dict(to_substitute) if to_substitute else None,
            )
            for item in self.fields
            if item.label.startswith(typed)
        ]
