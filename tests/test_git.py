import subprocess
import sys

from statusline.git import NO_GIT_BRANCH, get_git_branch
from statusline.process import run_command

from conftest import requires_git

INVALID_UTF8_SCRIPT = "import sys; sys.stdout.buffer.write(b'feature-\\xff\\n')"


def fake_git(output):
    def runner(args, **kwargs):
        return output
    return runner


def test_branch_is_trimmed():
    assert get_git_branch("/repo", runner=fake_git("feature/login\n")) == "feature/login"


def test_runs_git_in_cwd():
    calls = []

    def runner(args, **kwargs):
        calls.append((args, kwargs))
        return "main\n"

    get_git_branch("/repo", runner=runner)

    assert calls == [(["git", "-C", "/repo", "branch", "--show-current"], {"errors": "strict"})]


def test_git_unavailable():
    assert get_git_branch("/repo", runner=fake_git(None)) == NO_GIT_BRANCH


def test_empty_output():
    assert get_git_branch("/repo", runner=fake_git("  \n")) == NO_GIT_BRANCH


def test_nul_in_cwd():
    assert get_git_branch("/re\x00po") == NO_GIT_BRANCH


def test_undecodable_branch_name():
    def runner(args, **kwargs):
        return run_command([sys.executable, "-c", INVALID_UTF8_SCRIPT], **kwargs)

    assert get_git_branch("/repo", runner=runner) == NO_GIT_BRANCH


class TestRunCommand:
    def test_replaces_undecodable_output_by_default(self):
        assert run_command([sys.executable, "-c", INVALID_UTF8_SCRIPT]) == "feature-\ufffd\n"

    def test_strict_undecodable_output(self):
        assert run_command([sys.executable, "-c", INVALID_UTF8_SCRIPT], errors="strict") is None

    def test_missing_program(self):
        assert run_command(["definitely-not-a-program"]) is None

    def test_nul_in_argument(self):
        assert run_command([sys.executable, "-c", "pass", "a\x00b"]) is None

    def test_surrogate_in_argument(self):
        assert run_command([sys.executable, "-c", "pass", "a\ud800b"]) is None


@requires_git
def test_outside_repository(tmp_path):
    assert get_git_branch(str(tmp_path / "missing")) == NO_GIT_BRANCH


@requires_git
def test_real_repository(tmp_path):
    subprocess.run(["git", "init", "-q", str(tmp_path)], check=True)
    subprocess.run(["git", "-C", str(tmp_path), "checkout", "-q", "-b", "statusline-test"], check=True)

    assert get_git_branch(str(tmp_path)) == "statusline-test"
