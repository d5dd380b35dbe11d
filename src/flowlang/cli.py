"""
Command-line interface for Flow (``flowlang``).
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from .config import load_config
from .context import FlowContext
from .errors import LexError, ParseError
from .lexer import tokenize
from .observability import configure_logging
from .parser import parse_source
from .runtime.objects import FlowError
from .service import FlowService
from .version import __version__


def build_cli_parser() -> argparse.ArgumentParser:
    cli = argparse.ArgumentParser(prog="flowlang", description="Flow expression language")
    cli.add_argument(
        "--version",
        action="version",
        version=f"Flow {__version__} (Python {sys.version.split()[0]})",
    )
    cli.add_argument("--language", "-l", default=None, help="Language of keywords and messages (en-US, pt-BR)")
    cli.add_argument("--log-level", default=None, help="Logging level, defaults to FLOW_LOG_LEVEL")
    sub = cli.add_subparsers(dest="command", required=True)

    eval_cmd = sub.add_parser("eval", help="Evaluate Flow code given on the command line")
    eval_cmd.add_argument("code")
    eval_cmd.add_argument("--json", action="store_true", help="Print type and value as JSON")

    run_cmd = sub.add_parser("run", help="Evaluate a Flow file")
    run_cmd.add_argument("file", type=Path)
    run_cmd.add_argument("--json", action="store_true", help="Print type and value as JSON")

    tokens_cmd = sub.add_parser("tokens", help="Show the tokens of a Flow file")
    tokens_cmd.add_argument("file", type=Path)

    parse_cmd = sub.add_parser("parse", help="Parse a Flow file and show the AST")
    parse_cmd.add_argument("file", type=Path)

    docs_cmd = sub.add_parser("docs", help="Show builtin module documentation")
    docs_cmd.add_argument("module", nargs="?", default=None)

    complete_cmd = sub.add_parser("complete", help="Autocomplete options for a piece of code")
    complete_cmd.add_argument("source")
    complete_cmd.add_argument("--cursor", type=int, default=None)

    serve_cmd = sub.add_parser("serve", help="Start the Flow HTTP API")
    serve_cmd.add_argument("--host", default="127.0.0.1")
    serve_cmd.add_argument("--port", type=int, default=8000)
    serve_cmd.add_argument("--dry-run", action="store_true", help="Build the app without starting the server")
    return cli


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def _evaluate(service: FlowService, code: str, as_json: bool) -> int:
    result = service.evaluate_sync(code)
    if as_json:
        _print_json({"type": result.type, "value": result.to_json()})
    else:
        print(result._string_()._representation_())
    return 1 if isinstance(result, FlowError) else 0


def main(argv: Optional[list[str]] = None) -> int:
    cli = build_cli_parser()
    args = cli.parse_args(argv)
    config = load_config()
    configure_logging(args.log_level or config.log_level)
    language = args.language or config.language

    if args.command in ("eval", "run"):
        code = args.code if args.command == "eval" else args.file.read_text(encoding="utf-8")
        service = FlowService.create(language, config)
        return _evaluate(service, code, args.json)

    if args.command == "tokens":
        context = FlowContext.for_language(language, modules=())
        try:
            tokens = tokenize(args.file.read_text(encoding="utf-8"), context)
        except LexError as exc:
            print(str(exc), file=sys.stderr)
            return 1
        for token in tokens:
            print(f"{token.line}:{token.column}\t{token.type}\t{token.value!r}")
        return 0

    if args.command == "parse":
        context = FlowContext.for_language(language, modules=())
        try:
            program = parse_source(args.file.read_text(encoding="utf-8"), context)
        except (LexError, ParseError) as exc:
            print(str(exc), file=sys.stderr)
            return 1
        _print_json(asdict(program))
        return 0

    if args.command == "docs":
        service = FlowService.create(language, config)
        modules = service.documentation()
        if args.module:
            modules = [module for module in modules if module.name == args.module]
            if not modules:
                print(f"Unknown module {args.module!r}", file=sys.stderr)
                return 1
        _print_json([module.to_dict() for module in modules])
        return 0

    if args.command == "complete":
        service = FlowService.create(language, config)
        _print_json(service.autocompleter().complete(args.source, args.cursor).to_dict())
        return 0

    if args.command == "serve":
        from .server import create_app

        app = create_app(config)
        if args.dry_run:
            _print_json({"status": "ready", "host": args.host, "port": args.port})
            return 0
        import uvicorn

        uvicorn.run(app, host=args.host, port=args.port)
        return 0

    cli.error(f"Unknown command {args.command!r}")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
