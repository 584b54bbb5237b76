"""Discovery and selection helpers for runnable examples."""

from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ExampleEntry:
    """Single runnable example discovered under `multi_target_logging/examples`."""

    ref: str
    group: str
    module: str
    path: Path
    title: str


def _is_example(path: Path) -> bool:
    if path.name.startswith("_") or "__pycache__" in path.parts:
        return False
    try:
        module_ast = ast.parse(path.read_text(encoding="utf-8"))
    except (OSError, SyntaxError, UnicodeDecodeError):
        return False
    return any(isinstance(node, ast.FunctionDef) and node.name == "main" for node in module_ast.body)


def _title(path: Path) -> str:
    """First docstring line, or the file stem."""
    docstring = ast.get_docstring(ast.parse(path.read_text(encoding="utf-8")))
    if docstring and docstring.strip():
        return docstring.strip().splitlines()[0]
    return path.stem


def discover_examples(root: Path | None = None) -> list[ExampleEntry]:
    """Find every module below ``root`` that defines a top-level ``main``."""
    root_path = (root if root is not None else Path(__file__).resolve().parent).resolve()
    entries = []
    for path in root_path.rglob("*.py"):
        if not _is_example(path):
            continue
        rel = path.relative_to(root_path).with_suffix("")
        entries.append(
            ExampleEntry(
                ref="/".join(rel.parts),
                group="/".join(rel.parent.parts) or ".",
                module="multi_target_logging.examples." + ".".join(rel.parts),
                path=path,
                title=_title(path),
            )
        )
    return sorted(entries, key=lambda entry: (entry.group, entry.ref))


def resolve_target(entries: list[ExampleEntry], target: str) -> list[ExampleEntry]:
    """Resolve ``all``, ``<group>/all`` or an exact ref into selected entries."""
    normalized = target.strip().replace("\\", "/").strip("/")
    if not normalized:
        return []
    if normalized == "all":
        return list(entries)
    if normalized.endswith("/all"):
        group = normalized[: -len("/all")]
        return [entry for entry in entries if entry.group == group or entry.group.startswith(f"{group}/")]
    return [entry for entry in entries if entry.ref == normalized]
