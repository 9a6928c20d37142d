"""Static import boundary guard for the kernel's layers."""

from __future__ import annotations

import argparse
import ast
from dataclasses import dataclass
from pathlib import Path

PACKAGE = "itinerary_kernel"
KNOWN_LAYERS = {"application", "config", "domain", "infrastructure", "validators"}
FORBIDDEN_IMPORTS = {
    ("domain", "application"): "domain layer must not import application layer",
    ("domain", "config"): "domain layer must not import config layer",
    ("domain", "infrastructure"): "domain layer must not import infrastructure layer",
    ("domain", "validators"): "domain layer must not import validators layer",
    ("validators", "application"): "validators must not import application layer",
    ("validators", "infrastructure"): "validators must not log; only the application layer does",
    ("infrastructure", "application"): "infrastructure layer must not import application layer",
}


@dataclass(frozen=True)
class ImportRecord:
    source_file: Path
    source_module: str
    source_layer: str | None
    target_module: str
    target_layer: str | None
    lineno: int


def _module_from_path(path: Path, root: Path) -> str:
    parts = [PACKAGE, *path.relative_to(root).with_suffix("").parts]
    if parts[-1] == "__init__":
        parts = parts[:-1]
    return ".".join(parts)


def _layer_from_module(module_name: str) -> str | None:
    parts = module_name.split(".")
    if len(parts) < 2 or parts[0] != PACKAGE:
        return None
    return parts[1] if parts[1] in KNOWN_LAYERS else None


def _resolve_relative(current_module: str, is_package_module: bool, level: int, module: str | None) -> str | None:
    package_parts = current_module.split(".")
    if not is_package_module:
        package_parts = package_parts[:-1]
    trim = level - 1
    if trim > len(package_parts):
        return None
    base_parts = package_parts[: len(package_parts) - trim]
    if module:
        base_parts.extend(module.split("."))
    return ".".join(base_parts)


def _target_modules(node: ast.stmt, current_module: str, is_package_module: bool) -> list[str]:
    if isinstance(node, ast.Import):
        return [alias.name for alias in node.names]
    if not isinstance(node, ast.ImportFrom):
        return []
    if node.level == 0:
        return [node.module] if node.module else []

    base = _resolve_relative(current_module, is_package_module, node.level, node.module)
    if not base:
        return []
    if node.module:
        return [base]
    return [f"{base}.{alias.name}" for alias in node.names if alias.name != "*"]


def collect_import_records(root: str | Path = PACKAGE) -> list[ImportRecord]:
    root_path = Path(root)
    records: list[ImportRecord] = []

    for path in sorted(root_path.rglob("*.py")):
        if "__pycache__" in path.parts:
            continue
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        source_module = _module_from_path(path, root_path)
        is_package_module = path.name == "__init__.py"

        for node in ast.walk(tree):
            if not isinstance(node, (ast.Import, ast.ImportFrom)):
                continue
            for target in _target_modules(node, source_module, is_package_module):
                if not target.startswith(f"{PACKAGE}."):
                    continue
                records.append(
                    ImportRecord(
                        source_file=path,
                        source_module=source_module,
                        source_layer=_layer_from_module(source_module),
                        target_module=target,
                        target_layer=_layer_from_module(target),
                        lineno=getattr(node, "lineno", 1),
                    )
                )

    return records


def check_import_boundaries(root: str | Path = PACKAGE) -> list[str]:
    violations: list[str] = []
    for rec in collect_import_records(root):
        rule = FORBIDDEN_IMPORTS.get((rec.source_layer, rec.target_layer))
        if not rule:
            continue
        violations.append(
            f"{rec.source_file.as_posix()}:{rec.lineno} "
            f"{rec.source_module} -> {rec.target_module}: {rule}"
        )
    return sorted(set(violations))


def main() -> int:
    parser = argparse.ArgumentParser(description="Check kernel import boundaries")
    parser.add_argument("--root", default=PACKAGE, help="Package directory to scan")
    args = parser.parse_args()

    violations = check_import_boundaries(args.root)
    if violations:
        print("Import boundary violations:")
        for line in violations:
            print(f"- {line}")
        return 1

    print("Import boundary check passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
