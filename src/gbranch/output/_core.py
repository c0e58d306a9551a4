import enum
from typing import Protocol

from ..models import Branch


class OutputFormat(enum.StrEnum):
    pretty = "pretty"
    markdown = "markdown"
    json = "json"


class Output(Protocol):
    def print_branches(self, branches: list[Branch]) -> None: ...

    def print_current_branch(self, branch: Branch | None) -> None: ...


def get_output(output_format: OutputFormat) -> Output:
    match output_format:
        case OutputFormat.pretty:
            from ._pretty import PrettyOutput

            return PrettyOutput()
        case OutputFormat.markdown:
            from ._markdown import MarkdownOutput

            return MarkdownOutput()
        case OutputFormat.json:
            from ._json import JsonOutput

            return JsonOutput()
