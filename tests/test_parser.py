import pytest

from flowlang import ast_nodes as ast
from flowlang.errors import ParseError
from flowlang.parser import parse_source


def single(source, context):
    program = parse_source(source, context)
    assert len(program.body.statements) == 1
    return program.body.statements[0]


def test_parse_precedence(en_context):
    expr = single("1 + 2 * 3 ^ 2", en_context)
    assert isinstance(expr, ast.BinaryOp) and expr.op == "+"
    assert expr.right.op == "*"
    assert expr.right.right.op == "^"


def test_power_is_right_associative(en_context):
    expr = single("2 ^ 3 ^ 2", en_context)
    assert expr.op == "^"
    assert isinstance(expr.left, ast.Literal)
    assert expr.right.op == "^"


def test_is_and_is_not_map_to_equality(en_context):
    expr = single("a is b or a is not c", en_context)
    assert isinstance(expr, ast.BooleanOp) and expr.op == "or"
    assert expr.left.op == "=="
    assert expr.right.op == "!="


def test_not_and_in(en_context):
    expr = single("not 1 in [1, 2]", en_context)
    assert isinstance(expr, ast.UnaryOp) and expr.op == "not"
    assert expr.operand.op == "in"
    assert isinstance(expr.operand.right, ast.ListLiteral)


def test_call_with_keyword_arguments(en_context):
    expr = single("HTTP.get('https://example.com', headers={'a': 1})", en_context)
    assert isinstance(expr, ast.Call)
    assert expr.module_name == "HTTP"
    assert expr.method_name == "get"
    assert len(expr.args) == 1
    assert isinstance(expr.kwargs["headers"], ast.DictLiteral)


def test_repeated_keyword_argument_is_rejected(en_context):
    with pytest.raises(ParseError):
        parse_source("f(a=1, a=2)", en_context)


def test_subscript_and_attribute_assignment(en_context):
    program = parse_source("values[0] = 1\nresponse.status = 2", en_context)
    first, second = program.body.statements
    assert isinstance(first.target, ast.Subscript)
    assert isinstance(second.target, ast.Attribute)


def test_invalid_assignment_target(en_context):
    with pytest.raises(ParseError):
        parse_source("1 + 1 = 2", en_context)


def test_if_else_if_chain(en_context):
    source = "if a do\n  1\nelse if b do\n  2\nelse do\n  3\nend"
    expr = single(source, en_context)
    assert isinstance(expr, ast.If)
    assert isinstance(expr.else_branch, ast.If)
    assert isinstance(expr.else_branch.else_branch, ast.Block)


def test_function_definition_and_lambda(en_context):
    program = parse_source("function add(a, b=2) do\n  return a + b\nend\ndouble = function (x): x * 2", en_context)
    definition, assignment = program.body.statements
    assert definition.name == "add"
    assert [p.name for p in definition.params] == ["a", "b"]
    assert definition.params[1].default is not None
    assert isinstance(assignment.value, ast.FunctionDef)
    assert assignment.value.is_lambda
    assert isinstance(assignment.value.body, ast.Block)


def test_parameter_without_default_after_default(en_context):
    with pytest.raises(ParseError):
        parse_source("function f(a=1, b) do\nend", en_context)


def test_duplicate_parameter(en_context):
    with pytest.raises(ParseError):
        parse_source("function f(a, a) do\nend", en_context)


def test_try_otherwise_and_raise(en_context):
    source = "try do\n  raise 'ValueError': 'bad'\notherwise (error) do\n  error\nend"
    expr = single(source, en_context)
    assert isinstance(expr, ast.TryCatch)
    assert expr.error_name == "error"
    raised = expr.body.statements[0]
    assert isinstance(raised, ast.Raise)
    assert raised.error_type.value == "ValueError"


def test_datetime_and_interpolation_literals(en_context):
    program = parse_source("~D[2024-01-31]\n{{Amount}}", en_context)
    literal, variable = program.body.statements
    assert literal.kind == "datetime"
    assert isinstance(variable, ast.VariableInterpolation)
    assert variable.raw_name == "Amount"


def test_statements_need_new_lines(en_context):
    with pytest.raises(ParseError) as excinfo:
        parse_source("a = 1 b = 2", en_context)
    assert excinfo.value.expected == "new line"


def test_unclosed_block_reports_expected_end(en_context):
    with pytest.raises(ParseError) as excinfo:
        parse_source("if a do\n  1\n", en_context)
    assert excinfo.value.found == "end of input"


def test_pt_br_program(pt_context):
    source = "função dobro(x) faça\n  retornar x * 2\nfim\nse dobro(1,5) > 2 faça\n  Verdadeiro\nsenão faça\n  Falso\nfim"
    program = parse_source(source, pt_context)
    function, condition = program.body.statements
    assert function.name == "dobro"
    assert isinstance(condition, ast.If)
    call = condition.condition.left
    assert call.args[0].value == 1.5
