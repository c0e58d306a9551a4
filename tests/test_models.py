import pytest

from tests.conftest import make_branch


class TestBranchUpstream:
    @pytest.mark.parametrize(
        "upstream, remote, upstream_without_remote",
        [
            ("origin/main", "origin", "main"),
            ("origin/feature/x", "origin", "feature/x"),
            ("main", None, None),
            (None, None, None),
        ],
    )
    def test_remote_parts(self, upstream, remote, upstream_without_remote):
        branch = make_branch(upstream=upstream)

        assert branch.remote == remote
        assert branch.upstream_without_remote == upstream_without_remote
