"""Tests for examples discovery and target resolution."""

from pathlib import Path

from multi_target_logging.examples.registry import discover_examples, resolve_target


def _write(path: Path, content: str) -> None:
    """Create file content for discovery tests."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_discovery_skips_private_and_mainless_modules(tmp_path: Path) -> None:
    _write(tmp_path / "routing" / "01_basic.py", '"""Basic routing."""\n\ndef main() -> None:\n    return None\n')
    _write(tmp_path / "routing" / "_helper.py", "def main() -> None:\n    return None\n")
    _write(tmp_path / "routing" / "helper.py", "def other() -> None:\n    return None\n")
    _write(tmp_path / "routing" / "broken.py", "def main(:\n")

    entries = discover_examples(tmp_path)

    assert [entry.ref for entry in entries] == ["routing/01_basic"]
    assert entries[0].group == "routing"
    assert entries[0].module == "multi_target_logging.examples.routing.01_basic"
    assert entries[0].title == "Basic routing."


def test_title_falls_back_to_stem(tmp_path: Path) -> None:
    _write(tmp_path / "plain.py", "def main() -> None:\n    return None\n")

    [entry] = discover_examples(tmp_path)

    assert entry.title == "plain"
    assert entry.group == "."


def test_resolve_target(tmp_path: Path) -> None:
    _write(tmp_path / "routing" / "01_a.py", "def main() -> None:\n    return None\n")
    _write(tmp_path / "routing" / "02_b.py", "def main() -> None:\n    return None\n")
    _write(tmp_path / "other" / "01_c.py", "def main() -> None:\n    return None\n")
    entries = discover_examples(tmp_path)

    assert len(resolve_target(entries, "all")) == 3
    assert [e.ref for e in resolve_target(entries, "routing/all")] == ["routing/01_a", "routing/02_b"]
    assert [e.ref for e in resolve_target(entries, "other/01_c")] == ["other/01_c"]
    assert resolve_target(entries, "missing") == []
    assert resolve_target(entries, "  ") == []


def test_packaged_examples_are_discovered() -> None:
    refs = [entry.ref for entry in discover_examples()]

    assert refs == ["routing/01_level_routing", "routing/02_shared_sink"]
