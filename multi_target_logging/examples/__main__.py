"""CLI entry point for running package examples."""

from __future__ import annotations

import argparse
import importlib
from collections.abc import Sequence

from multi_target_logging.examples.registry import ExampleEntry, discover_examples, resolve_target


def _run_entry(entry: ExampleEntry) -> tuple[bool, str]:
    """Import and execute discovered module `main` function."""
    try:
        module = importlib.import_module(entry.module)
        module.main()
    except Exception as exc:
        return False, f"{type(exc).__name__}: {exc}"
    return True, "ok"


def _handle_list() -> int:
    entries = discover_examples()
    if not entries:
        print("No runnable examples found.")
        return 0
    current_group = None
    for entry in entries:
        if entry.group != current_group:
            current_group = entry.group
            print(f"[{current_group}]")
        print(f"  {entry.ref} - {entry.title}")
    return 0


def _handle_run(target: str) -> int:
    selected = resolve_target(discover_examples(), target)
    if not selected:
        print(f"No examples matched target '{target}'.")
        return 1

    failed = 0
    for entry in selected:
        print(f"[RUN ] {entry.ref}")
        ok, message = _run_entry(entry)
        if ok:
            print(f"[ OK ] {entry.ref}")
        else:
            failed += 1
            print(f"[FAIL] {entry.ref}: {message}")

    if len(selected) > 1:
        print(f"Summary: passed={len(selected) - failed}, failed={failed}, total={len(selected)}")
    return 0 if failed == 0 else 1


def main(argv: Sequence[str] | None = None) -> int:
    """Parse CLI arguments and dispatch examples commands."""
    parser = argparse.ArgumentParser(
        prog="python -m multi_target_logging.examples",
        description="Discover and run packaged examples",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="List discovered examples")
    parser_run = subparsers.add_parser("run", help="Run one, grouped, or all examples")
    parser_run.add_argument("target", help="Target ref: all | <group>/all | <group>/<example_name>")

    args = parser.parse_args(argv)
    if args.command == "list":
        return _handle_list()
    return _handle_run(args.target)


if __name__ == "__main__":
    raise SystemExit(main())
