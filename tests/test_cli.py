import json
from pathlib import Path

import pytest

from flowlang.cli import main


def write_program(tmp_path: Path, text: str) -> Path:
    program_file = tmp_path / "program.flow"
    program_file.write_text(text, encoding="utf-8")
    return program_file


def test_cli_eval_prints_representation(capsys):
    assert main(["eval", "1 + 2"]) == 0
    assert capsys.readouterr().out.strip() == "3"


def test_cli_eval_json(capsys):
    main(["eval", "[1, 'a']", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data == {"type": "list", "value": [1, "a"]}


def test_cli_eval_error_exit_code(capsys):
    assert main(["eval", "1 / 0"]) == 1
    assert "ZeroDivisionError" in capsys.readouterr().out


def test_cli_language_option(capsys):
    main(["--language", "pt-BR", "eval", "1,5 + 1"])
    assert capsys.readouterr().out.strip() == "2,5"


def test_cli_run_file(tmp_path, capsys):
    program_file = write_program(tmp_path, "function double(x) do\n  return x * 2\nend\ndouble(21)\n")
    assert main(["run", str(program_file)]) == 0
    assert capsys.readouterr().out.strip() == "42"


def test_cli_tokens(tmp_path, capsys):
    program_file = write_program(tmp_path, "a = 1")
    main(["tokens", str(program_file)])
    out = capsys.readouterr().out
    assert "IDENT" in out
    assert "EOF" in out


def test_cli_parse_outputs_ast(tmp_path, capsys):
    program_file = write_program(tmp_path, "total = 1 + 2")
    assert main(["parse", str(program_file)]) == 0
    data = json.loads(capsys.readouterr().out)
    statement = data["body"]["statements"][0]
    assert statement["target"]["name"] == "total"
    assert statement["value"]["op"] == "+"


def test_cli_parse_error(tmp_path, capsys):
    program_file = write_program(tmp_path, "1 +")
    assert main(["parse", str(program_file)]) == 1
    assert "Expected" in capsys.readouterr().err


def test_cli_docs(capsys):
    main(["docs", "HTTP"])
    data = json.loads(capsys.readouterr().out)
    assert data[0]["name"] == "HTTP"
    assert "get" in data[0]["methods"]


def test_cli_docs_unknown_module(capsys):
    assert main(["docs", "Nope"]) == 1


def test_cli_complete(capsys):
    main(["complete", "List.ma"])
    data = json.loads(capsys.readouterr().out)
    assert [option["label"] for option in data["options"]] == ["map"]


def test_cli_serve_dry_run(capsys):
    main(["serve", "--dry-run"])
    captured = capsys.readouterr().out
    assert '"status": "ready"' in captured


def test_cli_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert "Flow" in capsys.readouterr().out
