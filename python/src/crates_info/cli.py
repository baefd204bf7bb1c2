"""
crates CLI

Command-line entry point: reads the arguments, looks up the crate and prints the result.

Usage:
    crates <id> [--latest, --stable, --homepage, --repo, --doc]
"""

import asyncio
import sys

from .client import CratesClient, CratesInfoError, RegistryError
from .config import Settings, configure_logging
from .formatter import render_field, render_not_found, render_report
from .models import CrateField, LookupRequest

USAGE = "Invalid arguments! Usage: crates <id>"
EXTENDED_USAGE = "Invalid arguments! Usage: crates <id> [--latest, --stable, --homepage, --repo, --doc]"

FLAGS = {
    "--latest": CrateField.LATEST,
    "--stable": CrateField.STABLE,
    "--homepage": CrateField.HOMEPAGE,
    "--repo": CrateField.REPOSITORY,
    "--doc": CrateField.DOCUMENTATION,
}


class UsageError(CratesInfoError):
    """The command line contained an unrecognized flag."""


def parse_args(argv: list[str]) -> LookupRequest:
    """
    Interpret the command-line arguments, program name excluded.

    Args:
        argv: Positional crate id followed by an optional selector flag

    Returns:
        LookupRequest, with crate_id None when no id was given

    Raises:
        UsageError: If the second argument is not a known flag
    """
    crate_id = argv[0] if argv else None
    field = None
    if len(argv) > 1:
        field = FLAGS.get(argv[1])
        if field is None:
            raise UsageError(f"Unrecognized argument: {argv[1]}")
    return LookupRequest(crate_id=crate_id, field=field)


async def run(request: LookupRequest, client: CratesClient) -> str:
    """Perform the lookup and return the text to print."""
    info = await client.get_crate(request.crate_id)
    if info is None:
        return render_not_found(request.crate_id)
    if request.field is not None:
        return render_field(info, request.field)
    return render_report(info)


def main(argv: list[str] | None = None, client: CratesClient | None = None) -> int:
    """Run the tool and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        request = parse_args(argv)
    except UsageError:
        print(EXTENDED_USAGE)
        return 1

    if request.crate_id is None:
        print(USAGE)
        return 0

    if client is None:
        settings = Settings()
        configure_logging(settings)
        client = CratesClient(settings)

    try:
        output = asyncio.run(run(request, client))
    except RegistryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


def entrypoint() -> None:
    sys.exit(main())
