"""
Core logic for deps-docs package.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import pathspec

from . import report

# Exceptions
class DepsDocsError(Exception): ...
class ManifestError(DepsDocsError): ...
class OutputError(DepsDocsError): ...

# Defaults & helpers
MANIFEST_NAME = "package.json"
MODULES_DIR = "node_modules"
README_NAME = "README.md"
DEFAULT_OUTDIR = "./docs-deps"

# Matched against lower-cased entry names, so LICENSE, Licence.txt etc. all hit.
LICENSE_PATTERNS: List[str] = ["licen[cs]e*"]
LICENSE_SPEC = pathspec.GitIgnoreSpec.from_lines(LICENSE_PATTERNS)


@dataclass
class Manifest:
    """Dependency sections of a ``package.json``; only the names matter."""
    dependencies: Dict[str, str] = field(default_factory=dict)
    dev_dependencies: Dict[str, str] = field(default_factory=dict)

    def package_names(self) -> List[str]:
        # dict keeps manifest order and collapses names listed in both sections
        merged = {**self.dependencies, **self.dev_dependencies}
        return list(merged)


@dataclass
class ExtractSummary:
    copied: int
    skipped: int
    out_dir: Path


# Manifest reader
def _section(data: dict, key: str, path: Path) -> Dict[str, str]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ManifestError(f"'{key}' in '{path}' must be an object")
    return value


def load_manifest(root: Path) -> Manifest:
    path = root / MANIFEST_NAME
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError:
        raise ManifestError(f"Manifest '{path}' does not exist")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Could not read manifest '{path}': {e}")
    except json.JSONDecodeError as e:
        raise ManifestError(f"Could not parse manifest '{path}': {e}")

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest '{path}' must contain a JSON object")
    return Manifest(
        dependencies=_section(data, "dependencies", path),
        dev_dependencies=_section(data, "devDependencies", path),
    )


# Dependency file extractor
def find_license_files(package_dir: Path) -> List[str]:
    """
    Return the names of license-like entries directly inside *package_dir*.

    A directory that cannot be listed simply has no license files.
    """
    try:
        names = [p.name for p in package_dir.iterdir()]
    except OSError:
        return []
    return sorted(n for n in names if LICENSE_SPEC.match_file(n.lower()))


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False


def _copy_file(src: Path, dest: Path) -> None:
    dest.write_bytes(src.read_bytes())


def process_dependency(
    name: str,
    out_root: Path,
    verbose: bool = False,
    root: Optional[Path] = None,
) -> int:
    """Copy README.md and license files of *name* into ``out_root/name``.

    Returns the number of files copied. Per-file failures are reported and
    skipped; they never propagate.
    """
    root = Path.cwd() if root is None else root
    package_dir = root / MODULES_DIR / name
    out_dir = out_root / name
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        report.error(f"Could not create output directory for {name}: {e}")
        return 0

    copied = 0

    readme = package_dir / README_NAME
    if _exists(readme):
        try:
            _copy_file(readme, out_dir / README_NAME)
        except OSError as e:
            report.failed(README_NAME, name, e)
        else:
            copied += 1
            if verbose:
                report.copied(README_NAME, name)

    for license_name in find_license_files(package_dir):
        try:
            _copy_file(package_dir / license_name, out_dir / license_name)
        except OSError as e:
            report.failed(license_name, name, e)
            continue
        copied += 1
        if verbose:
            report.copied(license_name, name)

    if copied == 0 and verbose:
        report.nothing_found(name)
    return copied


# Orchestrator
def extract_dependency_docs(
    root: Path,
    outdir: Path = Path(DEFAULT_OUTDIR),
    verbose: bool = False,
) -> Optional[ExtractSummary]:
    manifest = load_manifest(root)
    names = manifest.package_names()
    if not names:
        if verbose:
            report.info(f"No dependencies found in {MANIFEST_NAME}")
        return None

    out_root = Path(os.path.normpath((root / outdir).absolute()))
    try:
        out_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"Could not create output directory '{out_root}': {e}")

    copied = skipped = 0
    for name in names:
        if process_dependency(name, out_root, verbose=verbose, root=root) > 0:
            copied += 1
        else:
            skipped += 1

    report.summary(copied, skipped, out_root)
    return ExtractSummary(copied=copied, skipped=skipped, out_dir=out_root)
