"""Command-line interface for growing a surface patch."""

import argparse
import logging
import sys
from typing import List, Optional

from ...core.domain.exceptions import SurfPatchError
from ...core.domain.models.patch_parameters import (
    DEFAULT_MIN_ACCESS,
    DEFAULT_RADIUS,
    DEFAULT_REPRESENTATIVE_ATOM,
    DEFAULT_RING_TOLERANCE,
    DEFAULT_TOLERANCE,
    PatchParameters,
)
from ...core.services.patch_service import PatchService
from ...core.utils.centroid import DEFAULT_NEIGHBOURS
from ...infrastructure.repositories.structure_repository import (
    FORMATS,
    StructureRepository,
)

logger = logging.getLogger(__name__)

DESCRIPTION = """\
Build a patch of surface residues around a surface atom.

The input structure must carry solvent accessibility in the B-value column
and van der Waals radii in the occupancy column (for example as produced by
converting NACCESS output). Starting from the given residue and atom, the patch
grows over all surface atoms within the radius that touch the central atom or
atoms already in the patch. Residues whose solvent vector points away from the
central residue's are left out.

Residues are specified as [c]num[i] with a one-letter chain c, or as
chain.num[i] for chains of any length (e.g. A23, 23B, AB.105).
"""


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="makepatch",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("resspec", help="Residue at the centre of the patch")
    parser.add_argument("atomname", help="Atom of that residue to grow from")
    parser.add_argument(
        "infile", nargs="?", help="Input PDB or mmCIF file (default: stdin)"
    )
    parser.add_argument(
        "outfile", nargs="?", help="Output file (default: stdout)"
    )
    parser.add_argument(
        "-r",
        "--radius",
        type=float,
        default=DEFAULT_RADIUS,
        help="Radius for considering atoms (default: %(default).2f)",
    )
    parser.add_argument(
        "-t",
        "--tolerance",
        type=float,
        default=None,
        help="Tolerance on atom radii to consider them as touching "
        f"(default: {DEFAULT_TOLERANCE:.2f}, {DEFAULT_RING_TOLERANCE:.2f} with -c)",
    )
    parser.add_argument(
        "-m",
        "--min-access",
        type=float,
        default=DEFAULT_MIN_ACCESS,
        help="Minimum accessibility for an atom to be on the surface "
        "(default: %(default).2f)",
    )
    parser.add_argument(
        "-c",
        "--ring-only",
        action="store_true",
        help="Only the ring of residues contacting the central one",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print a summary of all residues in the patch",
    )
    parser.add_argument(
        "--no-solvent-vector",
        action="store_true",
        help="Skip the solvent vector orientation test",
    )
    parser.add_argument(
        "--representative-atom",
        default=DEFAULT_REPRESENTATIVE_ATOM,
        help="Atom representing each residue in the orientation test "
        "(default: %(default)s)",
    )
    parser.add_argument(
        "--neighbours",
        type=int,
        default=DEFAULT_NEIGHBOURS,
        help="Neighbouring residues averaged for each solvent vector "
        "(default: %(default)s)",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Structure file format (default: from the file suffix, else pdb)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Report progress on stderr"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Report every growth step on stderr"
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    return parser


def setup_logging(
    verbose: bool = False, debug: bool = False, log_file: Optional[str] = None
) -> None:
    """Configure logging."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def run(args: argparse.Namespace) -> None:
    """Read, process and write one structure."""
    parameters = PatchParameters(
        radius=args.radius,
        tolerance=args.tolerance,
        min_access=args.min_access,
        ring_only=args.ring_only,
        solvent_vector=not args.no_solvent_vector,
        representative_atom=args.representative_atom,
        neighbours=args.neighbours,
    )
    repository = StructureRepository()
    service = PatchService(parameters, show_progress=args.verbose or args.debug)

    file_format = args.format or repository.detect_format(args.infile)
    if args.infile:
        structure = repository.get(args.infile, file_format)
    else:
        structure = repository.get(sys.stdin, file_format)

    result = service.make_patch(structure, args.resspec, args.atomname)

    if args.outfile:
        repository.save(structure, args.outfile, file_format)
    else:
        repository.save(structure, sys.stdout, file_format)
        sys.stdout.flush()

    if args.summary:
        print(result.summary_line())


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the makepatch CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.debug, args.log_file)

    try:
        run(args)
    except SurfPatchError as error:
        logger.error("makepatch: (Error) %s", error)
        sys.exit(1)


if __name__ == "__main__":
    main()
