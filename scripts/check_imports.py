#!/usr/bin/env python3
"""Check hexagonal architecture import boundaries for the airlock package.

Layering rules:
- domain/: Cycle logic, NO imports from other airlock layers
- application/: Orchestration, may import from domain/ and config/
- infrastructure/: Adapters, may import from domain/, application/ and config/
- config/: Settings, imports nothing from other airlock layers

Usage:
    python scripts/check_imports.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import ast
import sys
from pathlib import Path

PACKAGE_NAME = "airlock"

# What each layer CAN import from (same-layer imports are always allowed)
ALLOWED_IMPORTS: dict[str, set[str]] = {
    "domain": set(),
    "application": {"domain", "config"},
    "infrastructure": {"domain", "application", "config"},
    "config": set(),
}


def get_import_modules(node: ast.Import | ast.ImportFrom) -> list[str]:
    """Extract every absolute module name from an import statement."""
    if isinstance(node, ast.ImportFrom):
        if node.level or node.module is None:
            return []
        return [node.module]
    return [alias.name for alias in node.names]


def get_file_layer(py_file: Path, package_dir: Path) -> str | None:
    """Return the layer a file belongs to, or None for top-level modules."""
    try:
        parts = py_file.relative_to(package_dir).parts
    except ValueError:
        return None
    if len(parts) < 2:
        return None
    return parts[0] if parts[0] in ALLOWED_IMPORTS else None


def check_import(module: str, file_layer: str) -> str | None:
    """Return a violation message if importing ``module`` breaks the rules."""
    module_parts = module.split(".")
    if module_parts[0] != PACKAGE_NAME or len(module_parts) < 2:
        return None

    target_layer = module_parts[1]
    if target_layer not in ALLOWED_IMPORTS or target_layer == file_layer:
        return None
    if target_layer not in ALLOWED_IMPORTS[file_layer]:
        return f"{file_layer} layer cannot import from {target_layer}"
    return None


def check_file_imports(py_file: Path, package_dir: Path) -> list[tuple[str, int, str]]:
    """Check a single file for import boundary violations.

    Args:
        py_file: Path to the Python file to check
        package_dir: Path to the airlock package directory

    Returns:
        List of (file_path, line_number, violation_message) tuples
    """
    file_layer = get_file_layer(py_file, package_dir)
    if file_layer is None:
        return []

    try:
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: Could not parse {py_file}: {e}", file=sys.stderr)
        return []

    violations: list[tuple[str, int, str]] = []
    for node in ast.walk(tree):
        if isinstance(node, (ast.Import, ast.ImportFrom)):
            for module in get_import_modules(node):
                message = check_import(module, file_layer)
                if message:
                    violations.append((str(py_file), node.lineno, message))
    return violations


def check_import_boundaries(package_dir: Path) -> list[tuple[str, int, str]]:
    """Check every Python file under the package for violations."""
    if not package_dir.exists():
        print(f"Error: Package directory '{package_dir}' does not exist", file=sys.stderr)
        return []

    violations: list[tuple[str, int, str]] = []
    for py_file in sorted(package_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, package_dir))
    return violations


def main() -> int:
    if len(sys.argv) > 1:
        package_dir = Path(sys.argv[1])
    else:
        package_dir = Path(__file__).parent.parent / PACKAGE_NAME

    violations = check_import_boundaries(package_dir)
    if not violations:
        print("No import boundary violations found.")
        return 0

    print("Import boundary violations found:\n")
    for file_path, line_no, message in violations:
        print(f"  {file_path}:{line_no}: {message}")
    print(f"\nTotal: {len(violations)} violation(s)")
    return 1


if __name__ == "__main__":
    sys.exit(main())
