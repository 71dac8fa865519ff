"""Top-level package for the Advent of Code 2022 solvers.

Provides subpackages:
- aoc_toolkit.common – input resolution, error chains, top-K accumulator, runner
- aoc_toolkit.calorie_counting – day 1, blank-line separated calorie groups
- aoc_toolkit.rock_paper_scissors – day 2, strategy guide scoring
- aoc_toolkit.cli – dispatcher that lists and runs the solvers
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text(encoding="utf-8")
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("aoc_toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
