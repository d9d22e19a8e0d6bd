from __future__ import annotations

from pathlib import Path

from ._utils import elist_root, matches_prefix, parse_imports


def test_relative_import_is_resolved_against_package() -> None:
    modules = {item.module for item in parse_imports(elist_root() / "core" / "config.py")}
    assert "elist.core.chain" in modules


def test_parent_relative_imports_are_resolved(tmp_path: Path) -> None:
    core = tmp_path / "core"
    core.mkdir()
    path = core / "sample.py"
    path.write_text(
        "from ..output import console\nfrom .. import cli\nfrom . import chain\n",
        encoding="utf-8",
    )

    modules = [item.module for item in parse_imports(path, root=tmp_path)]

    assert modules == ["elist.output", "elist.cli", "elist.core.chain"]
    assert any(matches_prefix(m, "elist.output") for m in modules)
