from __future__ import annotations

import ast
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]


def _line_count(path: Path) -> int:
    return len(path.read_text(encoding="utf-8", errors="ignore").splitlines())


def _python_files(root: Path):
    for path in root.rglob("*.py"):
        if "dist" in path.parts:
            continue
        yield path


def _imported_modules(path: Path):
    tree = ast.parse(path.read_text(encoding="utf-8", errors="ignore"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name
        elif isinstance(node, ast.ImportFrom):
            yield node.module or ""


def _violations(root: Path, forbidden: tuple[str, ...]) -> list[tuple[str, str]]:
    found = []
    for path in _python_files(root):
        for name in _imported_modules(path):
            if any(name == prefix or name.startswith(prefix + ".") for prefix in forbidden):
                found.append((str(path.relative_to(ROOT)), name))
    return found


def test_no_python_module_exceeds_hard_line_limit():
    offenders = []
    for path in _python_files(ROOT):
        lines = _line_count(path)
        if lines > 1200:
            offenders.append((str(path.relative_to(ROOT)), lines))
    assert not offenders, f"Modules exceed hard 1200-line limit: {offenders}"


def test_core_layer_does_not_import_infra_layer():
    violations = _violations(ROOT / "core", ("infra", "main"))
    assert not violations, f"Core layer imports infra layer: {violations}"


def test_finance_calculators_stay_free_of_persistence():
    finance = ROOT / "core" / "services" / "finance"
    violations = []
    for name in ("occurrences.py", "windows.py", "buckets.py", "helpers.py", "analytics.py", "models.py"):
        for module in _imported_modules(finance / name):
            if module == "sqlalchemy" or module.startswith("sqlalchemy."):
                violations.append((name, module))
    assert not violations, f"Pure finance modules import SQLAlchemy: {violations}"


def test_infra_repositories_module_is_facade_only():
    repo_path = ROOT / "infra" / "db" / "repositories.py"
    text = repo_path.read_text(encoding="utf-8", errors="ignore")

    assert "from infra.db.ledger import" in text
    assert "from infra.db.obligation import" in text
    assert "class SqlAlchemy" not in text
