"""CLI argument parser for verifile."""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from verifile.core.verification.algorithms import Algorithm


class CLIParser:
    """Command-line argument parser for verifile."""

    def __init__(self, default_algorithm: Algorithm) -> None:
        """Initialize the parser.

        Args:
            default_algorithm: Algorithm used when --algorithm is omitted

        """
        self.default_algorithm = default_algorithm

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments."""
        parser = self.build()
        return parser.parse_args(argv)

    def build(self) -> argparse.ArgumentParser:
        """Create the configured ArgumentParser."""
        parser = argparse.ArgumentParser(
            prog="verifile",
            description="verifile - verify files against checksums",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Compute a BLAKE3 digest and record it
  %(prog)s verify ubuntu.iso

  # Compare against a pasted hash
  %(prog)s verify ubuntu.iso -a SHA-256 --hash 3f1c...e9

  # Compare against a checksum file
  %(prog)s verify ubuntu.iso -a SHA-256 --hash-file SHA256SUMS

  # Show past verifications
  %(prog)s history --limit 10
            """,
        )
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show version information and exit",
        )

        subparsers = parser.add_subparsers(dest="command")
        self._add_verify_command(subparsers)
        self._add_history_command(subparsers)
        subparsers.add_parser(
            "algorithms", help="List supported digest algorithms"
        )
        return parser

    def _add_verify_command(self, subparsers) -> None:
        verify_parser = subparsers.add_parser(
            "verify", help="Compute a file digest and compare it"
        )
        verify_parser.add_argument("file", help="File to verify")
        verify_parser.add_argument(
            "-a",
            "--algorithm",
            type=_algorithm_type,
            default=self.default_algorithm,
            metavar="ALGO",
            help=(
                "Digest algorithm: "
                + ", ".join(a.display_name for a in Algorithm.all())
                + f" (default: {self.default_algorithm.display_name})"
            ),
        )
        reference = verify_parser.add_mutually_exclusive_group()
        reference.add_argument(
            "--hash",
            dest="reference",
            metavar="HASH",
            help="Expected digest",
        )
        reference.add_argument(
            "--hash-file",
            dest="hash_file",
            metavar="PATH",
            help="Checksum file to read the expected digest from",
        )

    def _add_history_command(self, subparsers) -> None:
        history_parser = subparsers.add_parser(
            "history", help="Show past verifications, newest first"
        )
        history_parser.add_argument(
            "-n",
            "--limit",
            type=int,
            default=None,
            help="Show at most this many records",
        )


def _algorithm_type(value: str) -> Algorithm:
    try:
        return Algorithm.from_name(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
