"""Command-line interface for inspecting .gro structures."""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from tqdm import tqdm

from ...core.domain.exceptions import GroDecodeError
from ...core.services.structure_service import StructureService
from ...infrastructure.repositories.structure_repository import StructureRepository

GRO_EXTENSION = ".gro"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging."""
    handlers: List[logging.Handler] = [
        logging.StreamHandler() if verbose else logging.NullHandler()
    ]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.INFO if verbose else logging.ERROR,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(description="Inspect GROMACS .gro structures")
    parser.add_argument(
        "paths",
        nargs="+",
        help="Structure files, or directories containing .gro files",
    )
    parser.add_argument(
        "--center",
        action="store_true",
        help="Center each structure on the average atom position",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show detailed output"
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser


def collect_targets(paths: List[str]) -> Iterator[Tuple[StructureRepository, str]]:
    """Yield a repository and structure ID for every requested structure."""
    for path in paths:
        path = Path(path)
        if path.is_dir():
            repository = StructureRepository(str(path), GRO_EXTENSION, cache=False)
            for file_name in sorted(os.listdir(path)):
                if file_name.endswith(GRO_EXTENSION):
                    yield repository, file_name[: -len(GRO_EXTENSION)]
        else:
            repository = StructureRepository(
                str(path.parent), path.suffix, cache=False
            )
            yield repository, path.stem


def inspect(paths: List[str], center: bool = False, out=None) -> int:
    """
    Load and summarize structures.

    Args:
        paths: Structure files or directories
        center: Whether to center each structure after loading
        out: Stream receiving the summaries (stdout by default)

    Returns:
        Exit code, 1 if any structure failed to load
    """
    out = out or sys.stdout
    targets = list(collect_targets(paths))
    failed = 0

    for repository, id in tqdm(
        targets, desc="Loading structures", disable=len(targets) <= 1
    ):
        service = StructureService(repository)
        file_path = repository.path_for(id)
        try:
            structure = service.load(id)
        except (GroDecodeError, OSError, ValueError) as e:
            logging.error(f"Failed to load {file_path}: {str(e)}")
            print(f"{file_path}: {e}", file=sys.stderr)
            failed += 1
            continue

        for line in service.summarize(structure).lines():
            print(line, file=out)

        if center:
            print("Centering the structure...", file=out)
            centered = service.centered(structure)
            print(
                "        centered: [{:.3f}, {:.3f}, {:.3f}]".format(
                    *(float(v) for v in centered.center())
                ),
                file=out,
            )

    if failed:
        logging.error(f"{failed} of {len(targets)} structures failed to load")
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the structure inspection CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)
    return inspect(args.paths, center=args.center)


if __name__ == "__main__":
    sys.exit(main())
