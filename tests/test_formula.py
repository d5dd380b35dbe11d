from datetime import date, datetime

from flowlang.formula import (
    AMBIGUOUS,
    MISSING,
    FormulaAutocomplete,
    FormulaVariable,
    FormularyField,
    bind_variables,
    flow_literal,
    substitute_values,
    to_backend,
    to_user_facing,
    variable_labels,
)

FIELDS = [
    FormularyField("field-price", "Price"),
    FormularyField("field-quantity", "Quantity"),
    FormularyField("field-discount", "Discount"),
]


def test_labels_and_backend_placeholders():
    formula = "{{Price}} * {{ Quantity }} - {{Discount}}"
    assert variable_labels(formula) == ["Price", "Quantity", "Discount"]
    assert to_backend(formula) == "{{}} * {{}} - {{}}"


def test_round_trip_between_user_facing_and_backend():
    formula = "{{Price}} * {{Quantity}} + {{Price}}"
    binding = bind_variables(formula, [], FIELDS)
    assert binding.resolved
    assert binding.formula == "{{}} * {{}} + {{}}"
    assert [(v.order, v.variable_uuid) for v in binding.variables] == [
        (0, "field-price"),
        (1, "field-quantity"),
        (2, "field-price"),
    ]
    assert to_user_facing(binding.formula, binding.variables, FIELDS) == formula


def test_renamed_field_shows_new_label():
    binding = bind_variables("{{Price}} * 2", [], FIELDS)
    renamed = [FormularyField("field-price", "Unit price")] + FIELDS[1:]
    assert to_user_facing(binding.formula, binding.variables, renamed) == "{{Unit price}} * 2"


def test_existing_bindings_keep_their_uuid():
    first = bind_variables("{{Price}} + {{Quantity}}", [], FIELDS)
    second = bind_variables("{{Price}} + {{Quantity}}", first.variables, FIELDS)
    assert [v.uuid for v in second.variables] == [v.uuid for v in first.variables]


def test_editing_a_label_rebinds_that_position():
    first = bind_variables("{{Price}} + {{Quantity}}", [], FIELDS)
    second = bind_variables("{{Price}} + {{Discount}}", first.variables, FIELDS)
    assert second.variables[0].uuid == first.variables[0].uuid
    assert second.variables[1].variable_uuid == "field-discount"
    assert second.variables[1].uuid != first.variables[1].uuid


def test_unknown_and_ambiguous_labels_are_reported():
    fields = FIELDS + [FormularyField("field-price-2", "Price")]
    binding = bind_variables("{{Price}} + {{Tax}}", [], fields)
    assert not binding.resolved
    assert [(item.order, item.label, item.reason) for item in binding.unresolved] == [
        (0, "Price", AMBIGUOUS),
        (1, "Tax", MISSING),
    ]
    assert binding.variables == []


def test_deleted_field_leaves_empty_placeholder():
    binding = bind_variables("{{Price}} + {{Quantity}}", [], FIELDS)
    remaining = [field for field in FIELDS if field.uuid != "field-quantity"]
    assert to_user_facing(binding.formula, binding.variables, remaining) == "{{Price}} + {{}}"


def test_variable_dict_round_trip_uses_wire_names():
    variable = FormulaVariable(uuid="v1", variable_uuid="field-price", order=0)
    data = variable.to_dict()
    assert data == {"uuid": "v1", "variableUUID": "field-price", "order": 0}
    assert FormulaVariable.from_dict(data) == variable


def test_flow_literals(en_context, pt_context):
    assert flow_literal(None, en_context) == "None"
    assert flow_literal(True, pt_context) == "Verdadeiro"
    assert flow_literal(1.5, pt_context) == "1,5"
    assert flow_literal('say "hi"\n', en_context) == '"say \\"hi\\"\\n"'
    assert flow_literal(date(2024, 1, 31), pt_context) == "~D[31/01/2024]"
    assert flow_literal(datetime(2024, 1, 31, 8, 30), en_context) == "~D[2024-01-31 08:30:00.000]"
    assert flow_literal({"a": [1, 2]}, pt_context) == '{"a": [1; 2]}'


def test_substituted_formula_evaluates(service):
    binding = bind_variables("{{Price}} * {{Quantity}} - {{Discount}}", [], FIELDS)
    values = {"field-price": 2.5, "field-quantity": 4, "field-discount": 1}
    code = substitute_values(binding.formula, binding.variables, values, service.context)
    assert code == "2.5 * 4 - 1"
    assert service.evaluate_sync(code).value == 9.0


def test_substituted_text_and_dates_evaluate(pt_service):
    fields = [FormularyField("f-name", "Nome"), FormularyField("f-date", "Data")]
    binding = bind_variables("String.upper({{Nome}}) + ' ' + String.to_string(Datetime.year({{Data}}))", [], fields)
    values = {"f-name": "ada", "f-date": date(2024, 5, 1)}
    code = substitute_values(binding.formula, binding.variables, values, pt_service.context)
    assert pt_service.evaluate_sync(code).value == "ADA 2024"


def test_missing_values_stay_as_placeholders(service):
    binding = bind_variables("{{Price}} * 2", [], FIELDS)
    code = substitute_values(binding.formula, binding.variables, {}, service.context)
    assert code == "{{}} * 2"
    result = service.evaluate_sync(code)
    assert result.error_type == "NameError"


def test_formula_autocomplete_filters_fields():
    complete = FormulaAutocomplete(FIELDS, "pt-BR")
    options = complete("{{Pr", "", 3)
    assert [option.label for option in options] == ["{{Price}}"]
    assert options[0].to_substitute == {"from": 3, "to": 7}
    assert options[0].description.startswith("Esta é uma váriavel")
    assert len(complete("")) == 3
    assert all(option.to_substitute is None for option in complete(""))
