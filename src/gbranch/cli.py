import contextlib
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Annotated

import cyclopts
from rich.console import Console
from rich.markup import escape
from rich.traceback import install as install_rich_traceback

from . import config, flags, git, output, records, service

error_console = Console(stderr=True)
install_rich_traceback(console=error_console)

app = cyclopts.App(
    name="gbranch",
    help="List and manage the branches of a git repository",
    error_console=error_console,
)

app.register_install_completion_command()


@app.default
@app.command(name="list", alias=["ls"])
async def branches_list(
    *,
    branch_filter: Annotated[
        service.BranchFilter,
        cyclopts.Parameter(
            name=["--type", "-t"],
            help="Which branches to show",
        ),
    ] = service.BranchFilter.all,
    common_flags: flags.CommonFlags = flags.CommonFlags(),
) -> None:
    """Show branches, most recently committed first"""
    _setup_logging(common_flags.log_level)
    branch_service = _get_branch_service(common_flags)
    with _handle_errors():
        branches = await branch_service.get_branches(branch_filter)
    out = output.get_output(common_flags.output_format)
    out.print_branches(branches)


@app.command(name="current")
async def branches_current(
    *,
    common_flags: flags.CommonFlags = flags.CommonFlags(),
) -> None:
    """Show the checked out branch"""
    _setup_logging(common_flags.log_level)
    branch_service = _get_branch_service(common_flags)
    with _handle_errors():
        branch = await branch_service.get_current_branch()
    out = output.get_output(common_flags.output_format)
    out.print_current_branch(branch)


@app.command(name="create")
async def branches_create(
    name: Annotated[str, cyclopts.Parameter(help="The new branch name")],
    *,
    start_point: Annotated[
        str | None,
        cyclopts.Parameter(
            name=["--start-point", "-s"],
            help="Commit or branch to start the branch from. Defaults to HEAD",
        ),
    ] = None,
    checkout: Annotated[
        bool,
        cyclopts.Parameter(
            name=["--checkout", "-c"],
            help="Check out the branch after creating it",
            negative=(),
        ),
    ] = False,
    common_flags: flags.CommonFlags = flags.CommonFlags(),
) -> None:
    """Create a branch"""
    _setup_logging(common_flags.log_level)
    branch_service = _get_branch_service(common_flags)
    with _handle_errors():
        await branch_service.create_branch(name, start_point, checkout)
    Console().print(f"[green]Created branch[/green] {escape(name)}")


@app.command(name="rename", alias=["mv"])
async def branches_rename(
    name: Annotated[str, cyclopts.Parameter(help="The branch to rename")],
    new_name: Annotated[str, cyclopts.Parameter(help="The new branch name")],
    *,
    force: Annotated[
        bool,
        cyclopts.Parameter(
            name=["--force", "-f"],
            help="Rename even if a branch called NEW_NAME exists",
            negative=(),
        ),
    ] = False,
    common_flags: flags.CommonFlags = flags.CommonFlags(),
) -> None:
    """Rename a branch"""
    _setup_logging(common_flags.log_level)
    branch_service = _get_branch_service(common_flags)
    with _handle_errors():
        await branch_service.rename_branch(name, new_name, force)
    Console().print(f"[green]Renamed branch[/green] {escape(name)} to {escape(new_name)}")


@app.command(name="delete", alias=["rm"])
async def branches_delete(
    name: Annotated[str, cyclopts.Parameter(help="The branch to delete")],
    *,
    force: Annotated[
        bool,
        cyclopts.Parameter(
            name=["--force", "-f"],
            help="Delete even if the branch is not fully merged",
            negative=(),
        ),
    ] = False,
    remote: Annotated[
        bool,
        cyclopts.Parameter(
            name=["--remote", "-r"],
            help="Also delete the branch's upstream on its remote",
            negative=(),
        ),
    ] = False,
    common_flags: flags.CommonFlags = flags.CommonFlags(),
) -> None:
    """Delete a branch"""
    _setup_logging(common_flags.log_level)
    branch_service = _get_branch_service(common_flags)
    with _handle_errors():
        await branch_service.delete_branch(name, force, remote)
    Console().print(f"[green]Deleted branch[/green] {escape(name)}")


@contextlib.contextmanager
def _handle_errors() -> Iterator[None]:
    """Report expected failures without a traceback."""
    try:
        yield
    except (git.GitError, records.DecodeError, service.AppError) as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


def _setup_logging(log_level: str) -> None:
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s [%(name)s] %(message)s",
    )


def _get_branch_service(common_flags: flags.CommonFlags) -> service.BranchService:
    try:
        app_config = config.get_app_config(
            git=common_flags.git, reverse_order=common_flags.reverse_order
        )
    except config.ConfigError as e:
        error_console.print(f"[red]Config error:[/red] {escape(str(e))}")
        sys.exit(1)
    repository_path = common_flags.repo_path or Path.cwd()
    runner = git.SubprocessGitRunner(app_config.git)
    return service.BranchService(repository_path, runner, app_config.reverse_order)


def main() -> None:
    app()
