import pytest

from flowlang.runtime.callables import FlowCallable
from flowlang.runtime.objects import FlowError


def test_list_module(run):
    assert run("List.is_list([1])") is True
    assert run("List.create_range(0, 10, 3)") == [0, 3, 6, 9]
    assert run("List.create_range(3, 0, -1)") == [3, 2, 1]
    assert run("List.length([1, 2, 3])") == 3
    assert run("values = [1]\nList.append(values, 2)\nvalues") == [1, 2]
    assert run("List.filter([1, 2, 3, 4], function (n): n % 2 == 0)") == [2, 4]
    assert run("List.map([1, 2, 3], function (n): n * 2)") == [2, 4, 6]
    assert run("List.join(['a', 1, True], '-')") == "a-1-True"


def test_list_for_each_calls_the_function(run):
    source = "seen = []\nList.for_each([1, 2], function (n): List.append(seen, n * 10))\nseen"
    assert run(source) == [10, 20]


def test_range_with_zero_step(service):
    result = service.evaluate_sync("List.create_range(0, 10, 0)")
    assert result.error_type == "ValueError"


def test_wrong_argument_type_names_the_parameter(service):
    result = service.evaluate_sync("List.length('abc')")
    assert result.error_type == "TypeError"
    assert result.message == "'list' should be a list."


def test_dict_module(run):
    assert run("Dict.is_dict({})") is True
    assert run("Dict.length({'a': 1, 'b': 2})") == 2
    assert run("Dict.keys({'a': 1, 'b': 2})") == ["a", "b"]
    assert run("Dict.values({'a': 1, 'b': 2})") == [1, 2]
    assert run("Dict.items({'a': 1})") == [["a", 1]]
    assert run("Dict.delete({'a': 1, 'b': 2}, 'a')") == {"b": 2}


def test_dict_delete_missing_key(service):
    assert service.evaluate_sync("Dict.delete({}, 'a')").error_type == "KeyError"


def test_string_module(run):
    assert run("String.is_string('a')") is True
    assert run("String.to_string(10)") == "10"
    assert run("String.length('hello')") == 5
    assert run("String.extract('hello', 1, 3)") == "ell"
    assert run("String.extract('hello', 2)") == "llo"
    assert run("String.slice('hello', 1)") == "ello"
    assert run("String.slice('hello', end=2)") == "he"
    assert run("String.split('a,b,c', ',')") == ["a", "b", "c"]
    assert run("String.split('a b  c')") == ["a", "b", "c"]
    assert run("String.upper('abc')") == "ABC"
    assert run("String.lower('ABC')") == "abc"


def test_string_format(run, service):
    assert run("String.format('{} + {} = {}', [1, 2, 3])") == "1 + 2 = 3"
    assert run("String.format('Hello {name}', {'name': 'Ada'})") == "Hello Ada"
    assert service.evaluate_sync("String.format('Hello {name}', {})").error_type == "KeyError"


def test_number_modules(run):
    assert run("Boolean.is_boolean(False)") is True
    assert run("Integer.is_integer(1)") is True
    assert run("Integer.is_integer(True)") is False
    assert run("Integer.from_string(' 42 ')") == 42
    assert run("Integer.to_string(42)") == "42"
    assert run("Float.is_float(1.0)") is True
    assert run("Float.from_string('2.5')") == 2.5
    assert run("Float.ceil(1.2)") == 2
    assert run("Float.floor(1.8)") == 1
    assert run("Float.round(1.2345, 2)") == 1.23
    assert run("Number.is_number(1.5)") is True
    assert run("Number.round(2.5)") == 2.0
    assert run("Number.to_string(1.5)") == "1.5"


def test_invalid_numbers(service):
    assert service.evaluate_sync("Integer.from_string('1.5')").error_type == "ValueError"
    assert service.evaluate_sync("Float.from_string('abc')").error_type == "ValueError"


def test_error_module(run, service):
    result = service.evaluate_sync("Error.new('ValueError', 'bad')")
    assert isinstance(result, FlowError)
    assert run("Error.is_error(Error.new('ValueError'))") is True
    assert run("Error.type(Error.new('ValueError', 'bad'))") == "ValueError"
    assert run("Error.message(Error.new('ValueError', 'bad'))") == "bad"
    raised = service.evaluate_sync("raise Error.new('PermissionError', 'denied')")
    assert (raised.error_type, raised.message) == ("PermissionError", "denied")


def test_function_module(run):
    assert run("Function.is_function(function (x): x)") is True
    assert run("Function.is_function(List.map)") is True
    assert run("function add(a, b) do\n  a + b\nend\nFunction.name(add)") == "add"
    assert run("function add(a, b) do\n  a + b\nend\nFunction.parameters(add)") == ["a", "b"]
    assert run("renamed = Function.rename(function (x): x, 'identity')\nFunction.name(renamed)") == "identity"
    assert run("Function.name(List.map)") == "List.map"


def test_datetime_module(run):
    assert run("Datetime.is_datetime(~D[2024-01-01])") is True
    assert run("Datetime.year(Datetime.new(2024, 2, 29))") == 2024
    assert run("Datetime.to_iso_string(Datetime.new(2024, 2, 29, 10, 30))") == "2024-02-29T10:30:00+00:00"
    assert run("Datetime.day(Datetime.from_iso_string('2024-03-01T00:00:00Z'))") == 1
    assert run("Datetime.to_iso_string(Datetime.add(~D[2024-01-31], months=1))") == "2024-02-29T00:00:00+00:00"
    assert run("Datetime.hour(Datetime.add(~D[2024-01-01], days=1, hours=5))") == 5


def test_datetime_difference_reports_totals(run):
    source = "diff = Datetime.difference(~D[2024-03-01 12:00], ~D[2024-01-01])\n[diff.months, diff.days, diff.hours]"
    assert run(source) == [2, 60, 60 * 24 + 12]


def test_invalid_datetime(service):
    assert service.evaluate_sync("Datetime.new(2023, 2, 29)").error_type == "ValueError"
    assert service.evaluate_sync("~D[2024-13-01]").error_type == "ValueError"


@pytest.mark.parametrize(
    "code",
    [
        "String.upper(1)",
        "Dict.keys([])",
        "Float.ceil('1')",
        "Datetime.year('2024')",
        "Error.type('x')",
        "Function.name(1)",
    ],
)
def test_type_checks(service, code):
    assert service.evaluate_sync(code).error_type == "TypeError"


def test_unknown_method(service):
    result = service.evaluate_sync("List.shuffle([1])")
    assert result.error_type == "AttributeError"


def test_callables_must_support_renaming(en_context):
    with pytest.raises(TypeError):
        FlowCallable(en_context, "anonymous")
