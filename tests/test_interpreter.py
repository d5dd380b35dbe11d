import asyncio

from flowlang.config import FlowConfig
from flowlang.runtime.objects import FlowError
from flowlang.service import FlowService


def test_arithmetic_keeps_integers_integral(run):
    assert run("1 + 2 * 3") == 7
    assert run("6 / 2") == 3
    assert run("7 / 2") == 3.5
    assert run("2 ^ 10") == 1024
    assert run("7 % 3") == 1
    assert run("-(2 + 3)") == -5


def test_float_results(service):
    result = service.evaluate_sync("1.5 + 1")
    assert result.type == "float"
    assert result.value == 2.5


def test_comparisons_and_boolean_logic(run):
    assert run("1 < 2 and 2 <= 2") is True
    assert run("1 > 2 or 'a' == 'a'") is True
    assert run("not True") is False
    assert run("1 is not 2") is True
    assert run("None or 'fallback'") == "fallback"
    assert run("0 and explode()") == 0


def test_membership(run):
    assert run("2 in [1, 2, 3]") is True
    assert run("'b' in 'abc'") is True
    assert run("'x' in {'x': 1}") is True
    assert run("4 in [1, 2, 3]") is False


def test_string_and_list_operations(run):
    assert run("'ab' + 'cd'") == "abcd"
    assert run("'ab' * 3") == "ababab"
    assert run("[1] + [2]") == [1, 2]
    assert run("[0] * 3") == [0, 0, 0]
    assert run("'hello'[-1]") == "o"


def test_variables_and_last_statement_value(run):
    assert run("a = 2\nb <- a * 5\nb + 1") == 11


def test_list_and_dict_mutation(run):
    assert run("values = [1, 2, 3]\nvalues[0] = 10\nvalues") == [10, 2, 3]
    assert run("data = {'a': 1}\ndata['b'] = 2\ndata") == {"a": 1, "b": 2}


def test_if_else_chain(run):
    source = "x = 5\nif x > 10 do\n  'big'\nelse if x > 3 do\n  'medium'\nelse do\n  'small'\nend"
    assert run(source) == "medium"
    assert run("if False do\n  1\nend") is None


def test_functions_defaults_and_keywords(run):
    source = "function greet(name, greeting='Hello') do\n  return greeting + ', ' + name\nend\ngreet(greeting='Hi', name='Ada')"
    assert run(source) == "Hi, Ada"


def test_closures_capture_the_defining_scope(run):
    source = (
        "function counter() do\n"
        "  count = 0\n"
        "  function increment() do\n"
        "    count = count + 1\n"
        "    return count\n"
        "  end\n"
        "  return increment\n"
        "end\n"
        "tick = counter()\n"
        "tick()\n"
        "tick()"
    )
    assert run(source) == 2


def test_recursion(run):
    source = "function fact(n) do\n  if n <= 1 do\n    return 1\n  end\n  return n * fact(n - 1)\nend\nfact(10)"
    assert run(source) == 3628800


def test_anonymous_function_takes_assigned_name(service):
    result = service.evaluate_sync("double = function (x): x * 2\ndouble")
    assert result.name == "double"
    assert service.evaluate_sync("double = function (x): x * 2\ndouble(21)").value == 42


def test_return_at_top_level_stops_the_program(run):
    assert run("return 1\n2") == 1


def test_try_catches_and_binds_error(run):
    source = "try do\n  1 / 0\notherwise (error) do\n  error.type\nend"
    assert run(source) == "ZeroDivisionError"


def test_try_without_handler_returns_none(run):
    assert run("try do\n  1 / 0\nend") is None


def test_raise_with_type_and_message(service):
    result = service.evaluate_sync("raise 'ValueError': 'bad input'")
    assert isinstance(result, FlowError)
    assert result.error_type == "ValueError"
    assert result.message == "bad input"


def test_raise_without_type_is_generic(service):
    result = service.evaluate_sync("raise 'oops'")
    assert result.error_type == "Error"
    assert result.message == "oops"


def test_reraise_caught_error(service):
    source = "try do\n  {}['missing']\notherwise (error) do\n  raise error\nend"
    result = service.evaluate_sync(source)
    assert result.error_type == "KeyError"


def test_uncaught_errors_are_returned(service):
    assert service.evaluate_sync("1 / 0").error_type == "ZeroDivisionError"
    assert service.evaluate_sync("[1][5]").error_type == "IndexError"
    assert service.evaluate_sync("'a' + 1").error_type == "TypeError"
    assert service.evaluate_sync("None.attribute").error_type == "AttributeError"
    assert service.evaluate_sync("Missing.method()").error_type == "NameError"


def test_undefined_name_suggests_close_match(service):
    result = service.evaluate_sync("total = 1\ntotl + 1")
    assert result.error_type == "NameError"
    assert "'totl' was not defined." in result.message
    assert "'total'" in result.message


def test_not_substituted_variable(service):
    result = service.evaluate_sync("{{Amount}} * 2")
    assert result.error_type == "NameError"
    assert "{{Amount}}" in result.message


def test_syntax_errors_are_returned(service):
    result = service.evaluate_sync("1 +")
    assert result.error_type == "SyntaxError"
    assert service.evaluate_sync("a = $").error_type == "SyntaxError"


def test_infinite_recursion_overflows_the_stack(service):
    result = service.evaluate_sync("function loop(n) do\n  return loop(n + 1)\nend\nloop(0)")
    assert result.error_type == "MemoryOverflowError"


def test_call_stack_limit_is_configurable(transport):
    service = FlowService.create("en-US", FlowConfig(max_call_stack_size=5), http_client=transport)
    source = "function depth(n) do\n  if n == 0 do\n    return 0\n  end\n  return depth(n - 1)\nend\n"
    assert service.evaluate_sync(source + "depth(3)").value == 0
    assert service.evaluate_sync(source + "depth(10)").error_type == "MemoryOverflowError"


def test_wrong_arguments(service):
    assert service.evaluate_sync("function f(a) do\n  a\nend\nf()").error_type == "TypeError"
    assert service.evaluate_sync("function f(a) do\n  a\nend\nf(1, 2)").error_type == "TypeError"
    assert service.evaluate_sync("function f(a) do\n  a\nend\nf(b=1)").error_type == "TypeError"


def test_datetime_literals_compare(run):
    assert run("~D[2024-01-01] < ~D[2024-01-02 08:00]") is True
    assert run("~D[2024-01-31].month") == 1


def test_each_evaluation_has_a_fresh_scope(service):
    service.evaluate_sync("leaked = 1")
    assert service.evaluate_sync("leaked").error_type == "NameError"


def test_representation(service):
    assert service.evaluate_sync("'text'", representation=True) == '"text"'
    assert service.evaluate_sync("[1, 2.5, None]", representation=True) == "[1, 2.5, None]"


def test_number_overflow_is_a_value_error(service):
    for source in ("2.0 ^ 10000", "(10 ^ 400) / 3", "10 ^ 400 * 1.5"):
        result = service.evaluate_sync(source)
        assert isinstance(result, FlowError)
        assert result.error_type == "ValueError"
    assert service.evaluate_sync("2.0 ^ 10000").message == "'float ^ integer' is too large to be represented."


def test_number_overflow_can_be_caught(run):
    assert run("try do\n  2.0 ^ 10000\notherwise (error) do\n  error.type\nend") == "ValueError"


def test_number_overflow_through_async_evaluate(service):
    assert asyncio.run(service.evaluate("(10 ^ 400) / 3")).error_type == "ValueError"


COUNT_DOWN = "function count(n) do\n  if n == 0 do\n    0\n  else do\n    count(n - 1) + 1\n  end\nend\n"


def test_recursion_reaches_the_call_stack_limit(service):
    assert service.evaluate_sync(COUNT_DOWN + "count(98)").value == 98
    assert service.evaluate_sync(COUNT_DOWN + "count(99)").error_type == "MemoryOverflowError"


def test_larger_call_stack_limit_is_usable(transport):
    service = FlowService.create("en-US", FlowConfig(max_call_stack_size=400), http_client=transport)
    assert service.evaluate_sync(COUNT_DOWN + "count(399)").value == 399


def test_deep_recursion_inside_callbacks(service):
    source = COUNT_DOWN + "List.map([90, 95], function (n): count(n))"
    assert service.evaluate_sync(source).value == [90, 95]
