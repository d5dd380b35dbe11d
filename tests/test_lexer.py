import pytest

from flowlang.errors import LexError
from flowlang.lexer import tokenize


def kinds(tokens):
    return [token.type for token in tokens]


def test_lexer_numbers_strings_and_operators(en_context):
    tokens = tokenize('total = 1 + 2.5 * "x"', en_context)
    assert kinds(tokens) == ["IDENT", "ASSIGN", "INTEGER", "OP", "FLOAT", "OP", "STRING", "EOF"]
    assert tokens[4].value == "2.5"
    assert tokens[6].value == "x"


def test_lexer_two_char_operators_and_arrow_assign(en_context):
    tokens = tokenize("a <- 1 <= 2 != 3", en_context)
    assert [(t.type, t.value) for t in tokens[:-1]] == [
        ("IDENT", "a"),
        ("ASSIGN", "<-"),
        ("INTEGER", "1"),
        ("OP", "<="),
        ("INTEGER", "2"),
        ("OP", "!="),
        ("INTEGER", "3"),
    ]


def test_lexer_string_escapes(en_context):
    tokens = tokenize(r'"line\nnext \"quoted\" tab\t"', en_context)
    assert tokens[0].value == 'line\nnext "quoted" tab\t'


def test_lexer_keywords_are_concepts(en_context):
    tokens = tokenize("if x is not None do", en_context)
    assert [(t.type, t.value) for t in tokens[:-1]] == [
        ("KEYWORD", "if"),
        ("IDENT", "x"),
        ("KEYWORD", "is not"),
        ("KEYWORD", "None"),
        ("KEYWORD", "do"),
    ]


def test_lexer_pt_br_keywords_decimal_and_separator(pt_context):
    tokens = tokenize("se x não é Vazio faça f(1,5; 2)", pt_context)
    values = [(t.type, t.value) for t in tokens[:-1]]
    assert values[:5] == [
        ("KEYWORD", "if"),
        ("IDENT", "x"),
        ("KEYWORD", "is not"),
        ("KEYWORD", "None"),
        ("KEYWORD", "do"),
    ]
    assert ("FLOAT", "1.5") in values
    assert ("SEPARATOR", ";") in values


def test_lexer_datetime_and_interpolation(en_context):
    tokens = tokenize("~D[2024-02-29 10:30] + {{ Due date }}", en_context)
    assert tokens[0].type == "DATETIME"
    assert tokens[0].value == "2024-02-29 10:30"
    assert tokens[2].type == "INTERPOLATION"
    assert tokens[2].value == "Due date"


def test_lexer_comments_and_newlines(en_context):
    tokens = tokenize("a = 1 # comment\nb = 2", en_context)
    assert kinds(tokens) == ["IDENT", "ASSIGN", "INTEGER", "NEWLINE", "IDENT", "ASSIGN", "INTEGER", "EOF"]


def test_lexer_tracks_positions(en_context):
    tokens = tokenize("a\n  bb", en_context)
    bb = tokens[2]
    assert (bb.line, bb.column, bb.offset, bb.end) == (2, 3, 4, 6)


def test_lexer_unknown_character_raises(en_context):
    with pytest.raises(LexError) as excinfo:
        tokenize("a = $", en_context)
    assert excinfo.value.unexpected_char == "$"
    assert excinfo.value.column == 5


def test_lexer_unterminated_string_raises(en_context):
    with pytest.raises(LexError):
        tokenize('"open', en_context)


def test_tolerant_lexer_marks_incomplete_tokens(en_context):
    tokens = tokenize('x = "open', en_context, tolerant=True)
    assert tokens[2].type == "STRING"
    assert tokens[2].incomplete is True
    tokens = tokenize("a $ b", en_context, tolerant=True)
    assert "ERROR" in kinds(tokens)


def test_tolerant_lexer_partial_interpolation(en_context):
    tokens = tokenize("{{Nam", en_context, tolerant=True)
    assert tokens[0].type == "INTERPOLATION"
    assert tokens[0].value == "Nam"
    assert tokens[0].incomplete is True
