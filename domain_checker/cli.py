"""Domain Checker CLI - check whether domain names are registered via DNS."""

import argparse
import asyncio
import logging
import sys
from contextlib import ExitStack

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeRemainingColumn
from rich.text import Text

from domain_checker import __version__
from domain_checker.coordinator import DEFAULT_CONCURRENCY, probe_all
from domain_checker.errors import EmptyInputError
from domain_checker.exporter import export_report, is_supported_output, render_json
from domain_checker.prober import DomainStatus
from domain_checker.report import CheckReport, build_report, filter_unregistered_only, sort_statuses
from domain_checker.sources import collect_domains

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

REGISTERED_STYLES = {
    True: "red",
    False: "bold green",
}


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    logging.getLogger("dns").setLevel(logging.WARNING)


def _create_progress(label: str, *, output_console: Console) -> Progress:
    """Create a standardized progress bar for long-running checks."""
    return Progress(
        TextColumn(f"[bold blue]{label}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeRemainingColumn(),
        console=output_console,
    )


def _render_status(status: DomainStatus) -> Text:
    text = Text()
    text.append("Domain: ")
    text.append(status.domain, style="bold")
    text.append("\nRegistered: ")
    text.append(str(status.registered).lower(), style=REGISTERED_STYLES[status.registered])
    if status.nameservers:
        text.append("\nNameservers:")
        for ns in status.nameservers:
            text.append(f"\n  - {ns}")
    if status.addresses:
        text.append("\nIP Addresses:")
        for ip in status.addresses:
            text.append(f"\n  - {ip}")
    if status.error:
        text.append("\nError: ")
        text.append(status.error, style="yellow")
    return text


def display_report(report: CheckReport, output_console: Console | None = None) -> None:
    """Display a report as per-domain sections followed by a summary line.

    Args:
        report: The report to show. Domains are sorted for display only.
        output_console: Optional Console for output (used in testing).
    """
    out = output_console or console
    for status in sort_statuses(report.domains):
        out.print()
        out.print(_render_status(status))

    summary = Text()
    summary.append(f"Total: {report.summary.total_checked}", style="bold")
    summary.append(" | ")
    summary.append(f"Registered: {report.summary.registered_count}", style="red")
    summary.append(" | ")
    summary.append(f"Unregistered: {report.summary.unregistered_count}", style="bold green")
    summary.append(" | ")
    summary.append(f"Errors: {report.summary.error_count}", style="yellow")
    out.print()
    out.print(summary)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="domain-checker",
        description="Check if domain names are registered using DNS lookups.",
    )
    parser.add_argument("domains", nargs="*", metavar="DOMAIN", help="Domain names to check")
    parser.add_argument(
        "-f",
        "--file",
        dest="files",
        action="append",
        default=[],
        metavar="FILE",
        help="Read domain names from FILE, one per line ('-' for stdin). Can be repeated.",
    )
    parser.add_argument(
        "-c",
        "--concurrent",
        type=_positive_int,
        default=DEFAULT_CONCURRENCY,
        help=f"Maximum number of concurrent checks (default: {DEFAULT_CONCURRENCY})",
    )
    parser.add_argument("-j", "--json", action="store_true", help="Output as JSON")
    parser.add_argument(
        "-u",
        "--unregistered-only",
        action="store_true",
        help="Only show unregistered domains (summary still covers every domain)",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Export the report to a file (supports .json, .jsonl and .csv)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print the report to stdout",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"domain-checker {__version__}")
    return parser


def _read_input(args: argparse.Namespace) -> list[str]:
    """Gather domains from arguments, files and piped stdin."""
    files = list(args.files)
    if not args.domains and not files and not sys.stdin.isatty():
        files = ["-"]

    with ExitStack() as stack:
        streams = [
            sys.stdin if name == "-" else stack.enter_context(open(name, encoding="utf-8"))
            for name in files
        ]
        return collect_domains(args.domains, streams)


def run_checks(domains: list[str], concurrency: int, show_progress: bool) -> list[DomainStatus]:
    """Probe all domains, optionally drawing a progress bar on stderr."""
    if not show_progress:
        return asyncio.run(probe_all(domains, concurrency))

    with _create_progress("Checking domains", output_console=err_console) as progress:
        task = progress.add_task("dns", total=len(domains))

        def on_result(status: DomainStatus) -> None:
            progress.advance(task)

        return asyncio.run(probe_all(domains, concurrency, on_result=on_result))


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.output and not is_supported_output(args.output):
        parser.error(f"unsupported --output format '{args.output}', use .json, .jsonl or .csv")
    setup_logging(args.verbose)

    try:
        domains = _read_input(args)
    except EmptyInputError:
        err_console.print("[red]Error:[/red] no domains to check. Pass names as arguments, with --file, or on stdin.")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        return 1

    try:
        show_progress = not (args.json or args.quiet) and err_console.is_terminal
        statuses = run_checks(domains, args.concurrent, show_progress)
    except KeyboardInterrupt:
        err_console.print("\nInterrupted by user")
        return 130

    report = filter_unregistered_only(build_report(statuses), args.unregistered_only)
    logger.debug(
        "checked %d domains: %d registered, %d errors",
        report.summary.total_checked,
        report.summary.registered_count,
        report.summary.error_count,
    )

    if not args.quiet:
        if args.json:
            print(render_json(report))
        else:
            display_report(report)

    if args.output:
        try:
            export_report(report, args.output)
        except (ValueError, OSError) as e:
            err_console.print(f"[red]Error:[/red] {e}")
            return 1
        err_console.print(f"Results exported to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
