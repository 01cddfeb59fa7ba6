"""
Scans a workspace: a depth-first listing of its entries and the contents of
well-known manifest files at its root.
Ignore patterns are opt-in; by default every entry is listed.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Common vendored/build directories (gitignore-style), used with --skip-common
DEFAULT_IGNORE = [
    "node_modules",
    ".git",
    "__pycache__",
    "*.pyc",
    ".venv",
    "venv",
    "dist",
    "build",
    "*.egg-info",
    ".next",
    ".nuxt",
    "coverage",
    ".pytest_cache",
    ".mypy_cache",
    "target",
]

# Manifest/config files read from the workspace root, in prompt order
KEY_FILES = [
    "package.json",
    "requirements.txt",
    "pom.xml",
    "build.gradle",
    "Dockerfile",
    "README.md",
    "docker-compose.yml",
    ".gitignore",
    "tsconfig.json",
    "webpack.config.js",
]


def _matches_ignore(relative_path: str, ignore_patterns: list[str]) -> bool:
    parts = relative_path.replace("\\", "/").split("/")
    for pattern in ignore_patterns:
        if not pattern.strip():
            continue
        if pattern.startswith("*."):
            # extension match
            if parts[-1].endswith(pattern[1:]):
                return True
        elif pattern in parts or relative_path == pattern:
            return True
    return False


def get_directory_structure(
    root: str | Path,
    ignore_patterns: list[str] | None = None,
) -> str:
    """
    Walk the tree depth-first. A directory is listed as `name/` followed by
    its contents, a file as `name`; one entry per line, siblings sorted.
    """
    root = Path(root).resolve()
    if not root.is_dir():
        raise NotADirectoryError(str(root))
    ignore = ignore_patterns or []
    lines: list[str] = []

    def walk(directory: Path) -> None:
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except PermissionError:
            logger.warning("Skipping unreadable directory %s", directory)
            return
        for path in entries:
            rel = path.relative_to(root).as_posix()
            if ignore and _matches_ignore(rel, ignore):
                continue
            if path.is_dir():
                lines.append(f"{path.name}/")
                # symlinked directories are listed, not followed
                if not path.is_symlink():
                    walk(path)
            else:
                lines.append(path.name)

    walk(root)
    return "".join(line + "\n" for line in lines)


def identify_key_files(root: str | Path) -> dict[str, str]:
    """Read the allow-listed key files that exist at the workspace root."""
    root = Path(root)
    key_files: dict[str, str] = {}
    for name in KEY_FILES:
        path = root / name
        if path.is_file():
            key_files[name] = path.read_text(encoding="utf-8", errors="replace")
    logger.debug("Key files found: %s", list(key_files))
    return key_files
