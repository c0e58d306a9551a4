"""Markdown output formatting for coding agents."""

from datetime import datetime

from tabulate import tabulate

from ..models import Branch
from ._common import first_body_line, format_upstream, short_sha


class MarkdownOutput:
    def print_branches(self, branches: list[Branch]) -> None:
        if not branches:
            print("No branches found")
            return

        rows = [
            [
                b.name,
                b.type,
                format_upstream(b),
                short_sha(b),
                b.tip.summary,
                b.tip.author.name,
                _timestamp(b.tip.author.date),
            ]
            for b in branches
        ]
        print(
            tabulate(
                rows,
                headers=[
                    "Name",
                    "Type",
                    "Upstream",
                    "Commit",
                    "Summary",
                    "Author",
                    "Date",
                ],
                tablefmt="github",
            )
        )

    def print_current_branch(self, branch: Branch | None) -> None:
        if branch is None:
            print("No current branch")
            return

        print(f"## {branch.name}")
        print(f"- **Type:** {branch.type}")
        print(f"- **Upstream:** {format_upstream(branch) or 'none'}")
        print(f"- **Commit:** {branch.tip.sha}")
        print(f"- **Summary:** {branch.tip.summary}")
        if body := first_body_line(branch):
            print(f"- **Body:** {body}")
        print(f"- **Author:** {branch.tip.author}")
        print(f"- **Date:** {_timestamp(branch.tip.author.date)}")
        print(f"- **Parents:** {', '.join(branch.tip.parent_shas) or 'none'}")


def _timestamp(dt: datetime) -> str:
    return dt.isoformat()
