"""Look up the current git branch."""

from .process import run_command

NO_GIT_BRANCH = "no-git"


def get_git_branch(cwd: str, runner=run_command) -> str:
    """Get the branch checked out in cwd.

    Returns:
        Branch name, or NO_GIT_BRANCH outside a repository, on a
        detached HEAD, if git is unavailable, or if its output is
        not valid UTF-8.
    """
    output = runner(["git", "-C", cwd, "branch", "--show-current"], errors="strict")
    branch = (output or "").strip()
    return branch or NO_GIT_BRANCH
