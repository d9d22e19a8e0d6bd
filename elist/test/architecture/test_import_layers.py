from __future__ import annotations

from ._utils import elist_root, iter_python_files, matches_prefix, parse_imports


def test_core_does_not_import_output_or_cli() -> None:
    root = elist_root()
    forbidden = ("elist.output", "elist.cli", "rich", "typer")

    offenders: list[str] = []
    for file_path in iter_python_files(root / "core"):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if any(matches_prefix(item.module, prefix) for prefix in forbidden):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "core -> presentation dependency violations:\n" + "\n".join(offenders)


def test_output_does_not_import_cli() -> None:
    root = elist_root()

    offenders: list[str] = []
    for file_path in iter_python_files(root / "output"):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "elist.cli"):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "output -> cli dependency violations:\n" + "\n".join(offenders)
