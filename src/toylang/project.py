"""Project scaffolding for `toylang new`."""

from __future__ import annotations

from pathlib import Path

_TOYLANG_TOML_TEMPLATE = """\
[package]
name = "{name}"
version = "0.1.0"

[check]
extensions = [".toy"]
color = true
"""

_MAIN_TOY_TEMPLATE = """\
// Computes n! iteratively.
function factorial(n) {
  var result = 1;
  while (n != 1) {
    result = result * n;
    n = n - 1;
  }
  return result;
}
"""

_GITIGNORE = """\
__pycache__/
"""


def scaffold(name: str, parent: Path | None = None) -> Path:
    """Create a new toylang project directory. Returns the project path."""
    base = parent or Path.cwd()
    project_dir = base / name

    if project_dir.exists():
        raise FileExistsError(f"directory '{name}' already exists")

    src_dir = project_dir / "src"
    src_dir.mkdir(parents=True)

    (project_dir / "toylang.toml").write_text(_TOYLANG_TOML_TEMPLATE.format(name=name))
    (src_dir / "main.toy").write_text(_MAIN_TOY_TEMPLATE)
    (project_dir / ".gitignore").write_text(_GITIGNORE)

    return project_dir
