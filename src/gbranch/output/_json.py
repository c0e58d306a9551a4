import json

from ..models import Branch


class JsonOutput:
    def print_branches(self, branches: list[Branch]) -> None:
        data = [b.model_dump(mode="json") for b in branches]
        print(json.dumps(data, indent=2))

    def print_current_branch(self, branch: Branch | None) -> None:
        data = branch.model_dump(mode="json") if branch else None
        print(json.dumps(data, indent=2))
