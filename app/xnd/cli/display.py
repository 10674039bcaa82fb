"""Shared Rich display functions for install outcomes.

The installer only records outcomes; these functions turn them into
console output, one line per outcome as the run progresses plus a
closing summary.
"""

from xnd.models.outcome import InstallOutcome, InstallReport, InstallStage
from xnd.utils.formatting import console, print_error, print_info, print_success, print_warning

STAGE_LABELS: dict[InstallStage, str] = {
    InstallStage.LOAD: "Error reading",
    InstallStage.RESOLVE: "Error installing",
    InstallStage.PERSIST: "Error installing",
    InstallStage.SAVE: "Error saving",
}


def format_spec(name: str, version: str | None) -> str:
    """Format name@version with Rich markup."""
    if version is None:
        return f"[package]{name}[/package]"
    return f"[package]{name}[/package][muted]@[/muted][version]{version}[/version]"


def print_outcome(outcome: InstallOutcome, quiet: bool = False) -> None:
    """Print a single outcome.

    Failures and warnings are always shown; successes are suppressed
    when quiet.

    Args:
        outcome: Outcome to print.
        quiet: Suppress success lines.
    """
    if outcome.is_failure:
        label = STAGE_LABELS.get(outcome.stage, "Error installing") if outcome.stage else "Error"
        print_error(f"{label} {outcome.package}: {outcome.message or 'Unknown error'}")
    elif outcome.is_warning:
        print_warning(f"{outcome.package}: {outcome.message}")
    elif not quiet:
        line = f"[success]+[/success] {format_spec(outcome.package, outcome.version)}"
        if outcome.message:
            line += f" [muted]({outcome.message})[/muted]"
        console.print(line)


def print_report_summary(report: InstallReport) -> None:
    """Print the closing summary of an install run.

    An empty manifest-mode run prints its note instead of counts.

    Args:
        report: Finished install report.
    """
    if report.is_empty:
        print_info(report.note or "Nothing to install.")
        return

    success_count = len(report.succeeded)
    fail_count = len(report.failed)

    if fail_count == 0:
        print_success(f"Successfully installed {success_count} package(s).")
    else:
        console.print(
            f"\n[success]{success_count} installed[/success], [error]{fail_count} failed[/error]"
        )
