from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ImportRef:
    module: str
    line: int


def elist_root() -> Path:
    return Path(__file__).resolve().parents[2]


def iter_python_files(base: Path) -> list[Path]:
    root = elist_root()
    files: list[Path] = []
    for path in sorted(base.rglob("*.py")):
        rel = path.relative_to(root)
        if any(part.startswith(".") or part == "__pycache__" for part in rel.parts):
            continue
        if rel.parts and rel.parts[0] == "test":
            continue
        files.append(path)
    return files


def _resolve_relative(path: Path, root: Path, level: int, module: str | None) -> str:
    package = ["elist", *path.resolve().relative_to(root.resolve()).parent.parts]
    base = package[: len(package) - (level - 1)]
    if module:
        base = [*base, module]
    return ".".join(base)


def parse_imports(path: Path, root: Path | None = None) -> list[ImportRef]:
    """Collect imports, including lazy ones inside functions.

    Relative imports are resolved to absolute module names, taking root as
    the directory of the elist package.
    """
    root = root or elist_root()
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    imports: list[ImportRef] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.append(ImportRef(module=alias.name, line=node.lineno))
            continue

        if isinstance(node, ast.ImportFrom):
            if not node.level:
                if node.module is not None:
                    imports.append(ImportRef(module=node.module, line=node.lineno))
                continue

            base = _resolve_relative(path, root, node.level, node.module)
            if node.module is None:
                # from .. import output
                for alias in node.names:
                    imports.append(ImportRef(module=f"{base}.{alias.name}", line=node.lineno))
            else:
                imports.append(ImportRef(module=base, line=node.lineno))

    return imports


def matches_prefix(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")
