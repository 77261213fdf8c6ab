"""CLI entry point for the configuration language translator."""
from __future__ import annotations
import sys
import argparse
import traceback

from . import __version__
from .parser import TranslationError
from .translator import Translator


# ── Built-in self check: (source, expected JSON) ──
_SELF_TEST_CASES = [
    (
        "port = 0x1A",
        '{\n  "port": 26\n}',
    ),
    (
        "ports = #( 0x01 0x02 0x03 )",
        '{\n  "ports": [1, 2, 3]\n}',
    ),
    (
        "global MAX_SIZE = 0x100\nsize = ?[MAX_SIZE]",
        '{\n  "size": 256\n}',
    ),
    (
        "config = { timeout = 0x1E enabled = true }",
        '{\n  "config": {\n    "enabled": true,\n    "timeout": 30\n  }\n}',
    ),
    (
        'global PORT = 0x50\nserver = { port = ?[PORT] hosts = #( "host1" "host2" ) }',
        '{\n  "server": {\n    "hosts": ["host1", "host2"],\n    "port": 80\n  }\n}',
    ),
    (
        'app = { database = { host = "localhost" port = 0x2276 } }',
        '{\n  "app": {\n    "database": {\n      "host": "localhost",\n'
        '      "port": 8822\n    }\n  }\n}',
    ),
    (
        'settings = { numbers = #( 0x01 0x02 ) strings = #( "a" "b" ) flag = true }',
        '{\n  "settings": {\n    "flag": true,\n    "numbers": [1, 2],\n'
        '    "strings": ["a", "b"]\n  }\n}',
    ),
    (
        "global WIDTH = 0x500\nglobal HEIGHT = 0x300\n"
        "dimensions = { width = ?[WIDTH] height = ?[HEIGHT] }",
        '{\n  "dimensions": {\n    "height": 768,\n    "width": 1280\n  }\n}',
    ),
]


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cfgtrans",
        description="Translate configuration language source into JSON",
    )
    parser.add_argument("--input", metavar="INPUT_FILE", help="Source file to translate")
    parser.add_argument("--output", metavar="OUTPUT_FILE", help="Where to write the JSON")
    parser.add_argument("--test", action="store_true", help="Run the built-in self check")
    parser.add_argument("--strict", action="store_true",
                        help="Reject a second bare top-level object instead of overwriting")
    parser.add_argument("--escape-strings", action="store_true",
                        help="JSON-escape quotes, backslashes and control characters in strings")
    parser.add_argument("--version", action="version", version=f"cfgtrans {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    flags = {
        "strict": args.strict,
        "escape_strings": args.escape_strings,
    }

    if args.test:
        return run_self_test(flags)

    if not args.input or not args.output:
        print(parser.format_usage().rstrip(), file=sys.stderr)
        print("[cfgtrans] Error: both --input and --output are required (or use --test)",
              file=sys.stderr)
        return 1

    return run_file(args.input, args.output, flags)


def run_file(input_path: str, output_path: str, flags: dict) -> int:
    """Translate one file. Nothing is written unless translation succeeds."""
    try:
        with open(input_path, "r", encoding="utf-8", newline="") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"[cfgtrans] Error: cannot read input file {input_path}: {e}", file=sys.stderr)
        return 1

    try:
        rendered = Translator(flags).run(source)
    except TranslationError as e:
        print(f"[cfgtrans] Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"[cfgtrans] Internal Error: {e}", file=sys.stderr)
        traceback.print_exc()
        return 2

    try:
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(rendered)
    except OSError as e:
        print(f"[cfgtrans] Error: cannot write output file {output_path}: {e}", file=sys.stderr)
        return 1

    print(f"[cfgtrans] Translated {input_path} to {output_path}")
    return 0


def run_self_test(flags: dict | None = None) -> int:
    """Translate the bundled samples and compare against the expected JSON."""
    print("[cfgtrans] Running self check...")
    translator = Translator(flags)
    failures = 0
    for number, (source, expected) in enumerate(_SELF_TEST_CASES, start=1):
        try:
            rendered = translator.run(source)
        except TranslationError as e:
            print(f"Test {number} failed: {e}")
            failures += 1
            continue
        if rendered != expected:
            print(f"Test {number} failed: got {rendered!r}, expected {expected!r}")
            failures += 1
            continue
        print(f"Test {number} passed: {rendered}")

    total = len(_SELF_TEST_CASES)
    print(f"[cfgtrans] Self check finished: {total - failures}/{total} passed.")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
