"""Rich output formatting for CLI."""

from datetime import datetime, timezone

import humanize
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models import Branch, BranchType
from ._common import first_body_line, format_upstream, short_sha

console = Console()


class PrettyOutput:
    def print_branches(self, branches: list[Branch]) -> None:
        if not branches:
            console.print("No branches found")
            return

        table = Table()
        table.add_column("Name", style="bold")
        table.add_column("Upstream")
        table.add_column("Commit", style="yellow")
        table.add_column("Summary")
        table.add_column("Author")
        table.add_column("Authored")

        for b in branches:
            table.add_row(
                _format_name(b),
                escape(format_upstream(b)),
                short_sha(b),
                escape(b.tip.summary),
                escape(b.tip.author.name),
                format_relative_time(b.tip.author.date),
            )
        console.print(table)

    def print_current_branch(self, branch: Branch | None) -> None:
        if branch is None:
            console.print("No current branch")
            return

        upstream = escape(format_upstream(branch)) or "[dim]none[/dim]"
        parents = ", ".join(sha[:7] for sha in branch.tip.parent_shas) or "none"
        content = f"""[bold]Upstream:[/bold] {upstream}
[bold]Commit:[/bold] {branch.tip.sha}
[bold]Summary:[/bold] {escape(branch.tip.summary)}
[bold]Author:[/bold] {escape(str(branch.tip.author))}
[bold]Authored:[/bold] {format_relative_time(branch.tip.author.date)}
[bold]Parents:[/bold] {parents}"""
        if body := first_body_line(branch):
            content += f"\n[bold]Body:[/bold] {escape(body)}"

        console.print(
            Panel(
                content,
                title=f"[bold]{escape(branch.name)}[/bold]",
                border_style="green",
            )
        )


def format_relative_time(dt: datetime) -> str:
    # humanize compares against naive local time
    delta = datetime.now(timezone.utc) - dt.astimezone(timezone.utc)
    return humanize.naturaltime(delta)


def _format_name(branch: Branch) -> str:
    if branch.type == BranchType.remote:
        return f"[cyan]{escape(branch.name)}[/cyan]"
    return escape(branch.name)
