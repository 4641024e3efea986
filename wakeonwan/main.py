"""wakeonwan command-line entry point."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from wakeonwan import __version__
from wakeonwan.config import Settings, get_settings
from wakeonwan.exceptions import InvalidMacAddress, WakeOnWanError
from wakeonwan.schemas.packet import DispatchResult, DispatchStatus, DispatchSummary, MacAddress
from wakeonwan.services.resolver import extract_host, resolve_destination
from wakeonwan.services.sender import send_magic_packets
from wakeonwan.utils.mac import parse_mac

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1  # some MAC was invalid or could not be sent
EXIT_FATAL = 2  # nothing was sent


def _port(value: str) -> int:
    try:
        port = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range (0-65535): {port}")
    return port


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wakeonwan",
        description="Send Wake-On-LAN packets over a network.",
    )
    parser.add_argument(
        "-i", "--uri",
        default=settings.uri,
        help="Destination uri (default: %(default)s)",
    )
    parser.add_argument(
        "-p", "--port",
        type=_port,
        default=settings.port,
        help="Destination port (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "-D", "--dry-run",
        action="store_true",
        help="Do not actually send the packet (dry-run)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("mac", nargs="+", help="MAC address(es) to wake.")
    return parser


def _setup_logging(settings: Settings, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING),
        format=settings.log_format,
        datefmt=settings.log_datefmt,
    )


def parse_macs(values: Sequence[str], summary: DispatchSummary) -> list[MacAddress]:
    """Parse every MAC string, recording rejects on the summary and skipping them."""
    macs = []
    for value in values:
        try:
            macs.append(parse_mac(value))
        except InvalidMacAddress as e:
            logger.error("%s", e)
            summary.rejected.append(value)
    return macs


def report_dry_run(result: DispatchResult) -> None:
    dest = result.destination
    print(
        f"[dry-run] magic packet for {result.mac} -> {dest.address} port {dest.port} "
        f"({len(result.payload)} bytes)"
    )


def run(args: argparse.Namespace) -> DispatchSummary:
    """Parse, resolve and dispatch. Raises WakeOnWanError on fatal errors."""
    summary = DispatchSummary()
    macs = parse_macs(args.mac, summary)
    if not macs:
        raise WakeOnWanError("No valid MAC address given")

    host = extract_host(args.uri)
    logger.debug("Resolved uri %s to hostname %s", args.uri, host)

    destination = resolve_destination(host, args.port)
    logger.debug("Resolved hostname %s to ip %s", host, destination.address)

    summary.results.extend(send_magic_packets(destination, macs, dry_run=args.dry_run))

    for result in summary.results:
        logger.info("Sending magic packet to %s at %s", result.mac, destination)
        if result.status is DispatchStatus.REPORTED:
            report_dry_run(result)
        elif result.status is DispatchStatus.SEND_FAILED:
            logger.error("Can't send magic packet to %s on %s, %s", result.mac, destination, result.error.reason)

    return summary


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    _setup_logging(settings, args.verbose)

    try:
        summary = run(args)
    except WakeOnWanError as e:
        logger.error("%s", e)
        return EXIT_FATAL

    logger.info(
        "%d of %d magic packet(s) %s",
        summary.succeeded,
        len(summary.results) + len(summary.rejected),
        "reported" if args.dry_run else "sent",
    )
    return EXIT_OK if summary.ok else EXIT_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
