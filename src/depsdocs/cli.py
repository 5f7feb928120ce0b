"""
CLI entrypoint for deps-docs package.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from colorama import colorama_text

from . import __version__, report
from .core import DEFAULT_OUTDIR, DepsDocsError, extract_dependency_docs

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="deps-docs",
        description="Copy README and LICENSE files of package.json dependencies "
        "into a local directory.",
    )
    p.add_argument(
        "-o",
        "--outdir",
        type=Path,
        default=Path(DEFAULT_OUTDIR),
        help=f"Output directory (default: {DEFAULT_OUTDIR})",
    )
    p.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Project root holding package.json and node_modules (default: .)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> None:
    # wraps stdout/stderr for the run; escape codes are stripped when not a tty
    with colorama_text():
        _run(argv)

def _run(argv: Optional[List[str]]) -> None:
    try:
        ns = _parse_args(argv)
        root = ns.root.absolute()
        try:
            extract_dependency_docs(root, outdir=ns.outdir, verbose=ns.verbose)
        except DepsDocsError as e:
            report.fatal(f"Error extracting dependency documents: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        report.fatal("\nCancelled.")
        sys.exit(1)
    except Exception as e:
        report.fatal(f"Unexpected error: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
