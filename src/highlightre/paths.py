"""Manages the discovery and provision of fixed paths for the HighlightRe application."""
# src/highlightre/paths.py

from collections.abc import Iterable
from pathlib import Path
from typing import Final

SUITE_SUFFIXES: Final[tuple[str, ...]] = (".yaml", ".yml")
STATE_SUBDIR: Final[Path] = Path(".highlightre")
STARTER_SUITE_NAME: Final[str] = "highlightre.yaml"


def discover_suite_files(targets: Iterable[str | Path]) -> list[Path]:
    """
    Expand files and directories into the list of suite files to load.

    Directories contribute their YAML files in sorted order; files are used as given.

    Raises:
        FileNotFoundError: If a target does not exist.

    """
    found: list[Path] = []
    for target in targets:
        path = Path(target)
        if path.is_dir():
            found.extend(sorted(p for p in path.iterdir() if p.is_file() and p.suffix in SUITE_SUFFIXES))
        elif path.is_file():
            found.append(path)
        else:
            msg = f"Suite path does not exist: {path}"
            raise FileNotFoundError(msg)
    return found


def get_log_dir(root_path: Path) -> Path:
    """Return the path to the log directory."""
    return root_path / STATE_SUBDIR / "logs"


def get_report_dir(root_path: Path) -> Path:
    """Return the path to the default report directory."""
    return root_path / STATE_SUBDIR / "reports"


def ensure_dir_exists(path: Path) -> None:
    """Ensure a directory exists, creating it if necessary."""
    path.mkdir(parents=True, exist_ok=True)
