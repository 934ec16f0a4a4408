"""
Render maintenance summaries as console lines.

Pure functions: they return lists of strings and never print, so scripts
decide where output goes and tests can assert on it directly.
"""

from services.budget_service import BudgetChange, MigrationSummary
from services.cleanup_service import CleanupSummary
from utils.formatting import format_budget, format_count, rule

DRY_RUN_BANNER = "DRY RUN: no changes written"


def render_cleanup_summary(summary: CleanupSummary, *, verbose: bool = False) -> list[str]:
    lines: list[str] = []
    if summary.dry_run:
        lines.append(DRY_RUN_BANNER)

    if summary.clears_collections:
        verb = "would be removed" if summary.dry_run else "removed"
        lines.append(f"Loans: {summary.loans_removed} {verb}")
        lines.append(f"Matches: {summary.matches_removed} {verb}")

    if summary.managers_found == 0:
        lines.append("No managers found in database")
    else:
        lines.append(f"Found {format_count(summary.managers_found, 'manager')}")
        if verbose:
            for manager in summary.updated:
                lines.append(
                    f"  - Reset {manager.display_name} (Budget: {format_budget(manager.budget)} preserved)"
                )
        for failure in summary.failures:
            lines.append(f"  ! Failed {failure.manager_id} ({failure.name}): {failure.error}")

    lines.append("")
    lines.append("Summary:")
    if summary.clears_collections:
        lines.append(f"  Loans cleared: {'yes' if summary.loans_cleared else 'no'}")
        lines.append(f"  Matches cleared: {'yes' if summary.matches_cleared else 'no'}")
    lines.append(f"  Reset fields: {', '.join(summary.reset_fields)}")
    lines.append(f"  Managers reset: {summary.updated_count}")
    lines.append(f"  Managers failed: {summary.failed_count}")
    lines.append("  Budgets preserved")
    return lines


def render_budget_change(change: BudgetChange, *, dry_run: bool = False) -> list[str]:
    prefix = "Would update" if dry_run else "Updated"
    return [
        f"{prefix} {change.name} ({change.manager_id})",
        f"  Old budget: {format_budget(change.old_budget)}",
        f"  Added: {format_budget(change.delta)}",
        f"  New budget: {format_budget(change.new_budget)}",
    ]


def render_migration_summary(summary: MigrationSummary, *, verbose: bool = True) -> list[str]:
    lines: list[str] = []
    if summary.dry_run:
        lines.append(DRY_RUN_BANNER)
    if summary.target_budget is not None:
        lines.append(f"Target budget: {format_budget(summary.target_budget)}")
    if summary.amount_added is not None:
        lines.append(f"Amount added: {format_budget(summary.amount_added)}")

    if summary.managers_found == 0:
        lines.append("No managers found in database.")
    elif verbose:
        for change in summary.updates:
            lines.extend(render_budget_change(change, dry_run=summary.dry_run))
        for skip in summary.skipped:
            lines.append(f"Skipped {skip.name} (already has {format_budget(skip.budget)})")

    for failure in summary.failures:
        lines.append(f"Failed {failure.name} ({failure.manager_id}): {failure.error}")

    lines.append(rule())
    lines.append("Migration complete!" if not summary.dry_run else "Dry run complete")
    lines.append(f"Updated: {format_count(summary.updated_count, 'manager')}")
    lines.append(f"Skipped: {format_count(summary.skipped_count, 'manager')}")
    lines.append(f"Failed: {format_count(summary.failed_count, 'manager')}")
    lines.append(rule())
    return lines
