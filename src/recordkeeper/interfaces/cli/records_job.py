"""Records verification job.

Verifies hash integrity of archived records, disposes of expired ones and
reports archive statistics. Run manually or from cron:

    recordkeeper-records --verify
    recordkeeper-records --dispose
    recordkeeper-records --stats
"""

import argparse
import asyncio
import logging
import sys
from typing import TextIO

from recordkeeper.application.dto.disposal_dto import DisposalReport
from recordkeeper.application.dto.stats_dto import RecordStats
from recordkeeper.application.dto.verification_dto import (
    RecordOutcome,
    VerificationHistoryItem,
    VerificationReport,
)
from recordkeeper.config import get_settings
from recordkeeper.domain.exceptions import RecordKeeperError
from recordkeeper.infrastructure.clock import SystemClock
from recordkeeper.infrastructure.persistence.postgres.connection import create_pool
from recordkeeper.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from recordkeeper.infrastructure.storage.filesystem_store import FileSystemContentStore
from recordkeeper.main import RecordServices, build_record_services, configure_logging

logger = logging.getLogger(__name__)

_EXAMPLES = """\
examples:
  # Verify all records
  recordkeeper-records --verify

  # Schedule with cron (daily at 2 AM)
  0 2 * * * recordkeeper-records --verify
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recordkeeper-records",
        description="Records verification job",
        epilog=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        exit_on_error=False,
    )
    parser.add_argument("--verify", action="store_true", help="Verify all record hashes")
    parser.add_argument("--dispose", action="store_true", help="Dispose expired records")
    parser.add_argument("--stats", action="store_true", help="Show archive statistics")
    parser.add_argument("--actor", help="Actor recorded in the audit trail (default: system)")
    parser.add_argument("-h", "--help", action="store_true", help="Show this help")
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace | None:
    """Parse job arguments. None when they are not understood."""
    try:
        args, unknown = build_parser().parse_known_args(argv)
    except argparse.ArgumentError:
        return None
    if unknown:
        return None
    return args


async def run_job(
    args: argparse.Namespace,
    services: RecordServices,
    actor: str,
    out: TextIO = sys.stdout,
) -> int:
    """Run the selected command and return the process exit code."""
    try:
        if args.verify:
            print("Starting record verification...\n", file=out)
            report = await services.verify_all.execute(actor)
            print_verification(report, out)
            return 0 if report.success else 1
        if args.dispose:
            print("Starting disposal of expired records...\n", file=out)
            disposal = await services.dispose_expired.execute(actor)
            print_disposal(disposal, out)
            return 0
        if args.stats:
            stats = await services.get_stats.execute()
            history = await services.get_history.execute()
            print_stats(stats, history, out)
            return 0
    except RecordKeeperError as e:
        logger.exception("Records job failed")
        print(f"\nJob failed: {e}", file=sys.stderr)
        return 1
    raise ValueError("No command selected")


def print_verification(report: VerificationReport, out: TextIO) -> None:
    print("Verification completed:\n", file=out)
    print(f"   Total records: {report.total}", file=out)
    print(f"   Verified: {report.verified}", file=out)
    print(f"   Failed: {report.failed}", file=out)
    print(f"   Errors: {report.errors}", file=out)

    if report.failed_records:
        print("\nWARNING: Some records failed verification (potential tampering)", file=out)
        print("\nFailed records:", file=out)
        _print_outcomes(report.failed_records, out)
    if report.error_records:
        print("\nWARNING: Some records encountered errors during verification", file=out)
        print("\nError records:", file=out)
        _print_outcomes(report.error_records, out)


def print_disposal(report: DisposalReport, out: TextIO) -> None:
    print(f"Disposed {report.count} expired records", file=out)
    if report.disposed:
        print("\nDisposed records:", file=out)
        for record in report.disposed:
            print(f"   - {record.record_number}: {record.filename}", file=out)
    if report.skipped:
        print("\nSkipped records:", file=out)
        for skipped in report.skipped:
            print(
                f"   - {skipped.record_number}: {skipped.filename} ({skipped.reason})",
                file=out,
            )


def print_stats(
    stats: RecordStats, history: list[VerificationHistoryItem], out: TextIO
) -> None:
    print("Record Archive Statistics\n", file=out)
    print(f"Total Active Records: {stats.total}\n", file=out)
    print("By Category:", file=out)
    for category, count in stats.by_category.items():
        print(f"   {category}: {count}", file=out)
    print("\nBy Verification Status:", file=out)
    for status, count in stats.by_status.items():
        print(f"   {status}: {count}", file=out)
    print(f"\nRecords with Legal Hold: {stats.with_legal_hold}", file=out)
    print(f"Expired (Ready for Disposal): {stats.expired}", file=out)

    if history:
        print("\nRecent Verifications:", file=out)
        for item in history:
            mark = "OK  " if item.verification.matched else "FAIL"
            print(
                f"   {mark} {item.record_number} - "
                f"{item.verification.verified_at.isoformat(timespec='seconds')}",
                file=out,
            )


def _print_outcomes(outcomes: list[RecordOutcome], out: TextIO) -> None:
    for o in outcomes:
        line = f"   - {o.record_number}: {o.filename}"
        if o.error:
            line += f" ({o.error})"
        print(line, file=out)


async def _run_with_store(args: argparse.Namespace, actor: str) -> int:
    settings = get_settings()
    pool = create_pool(
        settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )
    async with pool:
        services = build_record_services(
            unit_of_work_factory=create_uow_factory(pool),
            content_store=FileSystemContentStore(settings.archive_dir),
            clock=SystemClock(),
            settings=settings,
        )
        return await run_job(args, services, actor)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parse_args(argv)

    if not argv or "-h" in argv or "--help" in argv:
        parser.print_help()
        return 0
    if args is None or not (args.verify or args.dispose or args.stats):
        print("Unknown command\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    settings = get_settings()
    configure_logging(settings.log_level)
    actor = args.actor or settings.default_actor
    try:
        return asyncio.run(_run_with_store(args, actor))
    except RecordKeeperError as e:
        logger.exception("Records job failed")
        print(f"\nJob failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
