import pytest

from gbranch.git import GitError
from gbranch.head import (
    HeadState,
    UnexpectedExitCodeError,
    classify_head_exit_code,
    strip_heads_prefix,
)


class TestClassifyHeadExitCode:
    @pytest.mark.parametrize(
        "exit_code, state",
        [
            (0, HeadState.branch),
            (1, HeadState.no_branch),
            (128, HeadState.unborn),
        ],
    )
    def test_known_exit_codes(self, exit_code, state):
        assert classify_head_exit_code(exit_code) == state

    @pytest.mark.parametrize("exit_code", [2, 127, 129, -9])
    def test_unexpected_exit_code(self, exit_code):
        with pytest.raises(UnexpectedExitCodeError) as exc_info:
            classify_head_exit_code(exit_code)

        assert isinstance(exc_info.value, GitError)
        assert exc_info.value.exit_code == exit_code


class TestStripHeadsPrefix:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("heads/foo", "foo"),
            ("foo", "foo"),
            ("feature/heads/foo", "feature/heads/foo"),
            ("heads/heads/foo", "heads/foo"),
        ],
    )
    def test_strip(self, name, expected):
        assert strip_heads_prefix(name) == expected
