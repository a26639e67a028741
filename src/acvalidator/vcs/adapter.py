"""GitAdapter - Reads branches and diffs from a local git checkout."""

from __future__ import annotations

import re
import subprocess
from pathlib import Path

from acvalidator.logging import get_logger, truncate_output
from acvalidator.vcs.exceptions import InvalidRefError

logger = get_logger("vcs")

# Conventional default branch names, in priority order
DEFAULT_BRANCH_CANDIDATES = ("develop", "main", "master")

# Snapshot and JSON files are left out of diffs unless the caller says otherwise
DEFAULT_EXCLUDE_PATTERNS = ("**/*.snap", "**/*.json")

_REMOTE_HEAD_RE = re.compile(r"HEAD branch: (.+)")


class GitAdapter:
    """Thin wrapper around the git CLI for a project directory.

    Every operation takes the project path and shells out once per git
    command. Expected failures (missing path, non-zero exit, git missing,
    timeout) are logged and mapped to ``None`` or an empty list; nothing
    is raised past this class.
    """

    def __init__(self, timeout: float | None = None) -> None:
        """Initialize the adapter.

        Args:
            timeout: Optional timeout in seconds for each git command.
                     None means no timeout.
        """
        self.timeout = timeout

    def _run_git(self, project_path: str | Path, *args: str) -> str:
        """Run a git command in the project directory.

        Args:
            project_path: Working directory for git
            *args: Git command arguments

        Returns:
            Command stdout

        Raises:
            subprocess.CalledProcessError: If command fails
            subprocess.TimeoutExpired: If command exceeds the timeout
            OSError: If git cannot be executed
        """
        result = subprocess.run(
            ["git", *args],
            cwd=project_path,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            timeout=self.timeout,
        )
        return result.stdout

    @staticmethod
    def _exists(project_path: str | Path | None) -> bool:
        return bool(project_path) and Path(project_path).exists()

    def list_branches(self, project_path: str | Path) -> list[str]:
        """List local branch names.

        Args:
            project_path: Path to the git repository

        Returns:
            Branch names in git's order, or an empty list on failure
        """
        if not self._exists(project_path):
            logger.debug("Project path %s does not exist", project_path)
            return []
        try:
            output = self._run_git(project_path, "branch")
        except (subprocess.SubprocessError, OSError) as e:
            logger.error("Failed to list branches in %s: %s", project_path, _describe(e))
            return []

        branches = []
        for line in output.split("\n"):
            name = line.strip()
            if not name:
                continue
            if name.startswith("* "):
                name = name[2:]
            branches.append(name)
        logger.debug("Found %d branch(es) in %s", len(branches), project_path)
        return branches

    def current_branch(self, project_path: str | Path) -> str | None:
        """Get the checked-out branch name.

        Returns:
            Branch name, or None on failure
        """
        if not self._exists(project_path):
            return None
        try:
            output = self._run_git(project_path, "branch", "--show-current")
        except (subprocess.SubprocessError, OSError) as e:
            logger.error("Failed to get current branch in %s: %s", project_path, _describe(e))
            return None
        return output.strip()

    def default_branch(self, project_path: str | Path) -> str | None:
        """Guess the branch work is usually merged into.

        Tries ``develop``, ``main`` and ``master`` in that order, then the
        remote's advertised HEAD branch, then the first local branch.

        Returns:
            Branch name, or None if the repository has no branches
        """
        if not self._exists(project_path):
            return None

        branches = self.list_branches(project_path)
        for candidate in DEFAULT_BRANCH_CANDIDATES:
            if candidate in branches:
                return candidate

        remote_head = self.remote_head_branch(project_path)
        if remote_head:
            return remote_head

        return branches[0] if branches else None

    def remote_head_branch(self, project_path: str | Path) -> str | None:
        """Read the default branch advertised by ``origin``."""
        try:
            output = self._run_git(project_path, "remote", "show", "origin")
        except (subprocess.SubprocessError, OSError) as e:
            logger.debug("Could not read remote HEAD in %s: %s", project_path, _describe(e))
            return None
        match = _REMOTE_HEAD_RE.search(output)
        if match and match.group(1).strip():
            return match.group(1).strip()
        return None

    def diff(
        self,
        project_path: str | Path,
        from_branch: str,
        to_branch: str,
        exclude_patterns: list[str] | tuple[str, ...] | None = None,
    ) -> str | None:
        """Compute the diff of ``to_branch`` against its merge base with ``from_branch``.

        Args:
            project_path: Path to the git repository
            from_branch: Base branch
            to_branch: Working branch
            exclude_patterns: Pathspec globs to leave out of the diff
                              (default: snapshot and JSON files)

        Returns:
            Unified diff text (empty when the branches do not differ),
            or None on failure
        """
        if not self._exists(project_path):
            return None
        if exclude_patterns is None:
            exclude_patterns = DEFAULT_EXCLUDE_PATTERNS

        try:
            revision_range = f"{_check_ref(from_branch)}...{_check_ref(to_branch)}"
        except InvalidRefError as e:
            logger.error("Refusing to diff in %s: %s", project_path, e)
            return None

        pathspecs = [f":(glob,exclude){pattern}" for pattern in exclude_patterns]
        logger.info("Computing diff %s in %s", revision_range, project_path)
        try:
            output = self._run_git(project_path, "diff", revision_range, "--", *pathspecs)
        except (subprocess.SubprocessError, OSError) as e:
            logger.error("Failed to compute diff %s: %s", revision_range, _describe(e))
            return None

        logger.debug("Diff (%d chars): %s", len(output), truncate_output(output, 500))
        return output

    @staticmethod
    def project_name(project_path: str | None) -> str | None:
        """Derive a display name from the final path segment."""
        if not project_path:
            return None
        parts = re.split(r"[/\\]", project_path.rstrip("/\\"))
        return parts[-1] or None


def _check_ref(ref: str | None) -> str:
    if not ref:
        raise InvalidRefError("branch name is empty")
    if ref.startswith("-"):
        raise InvalidRefError(f"branch name '{ref}' looks like an option")
    return ref


def _describe(error: BaseException) -> str:
    """Short description of a git failure, preferring stderr."""
    stderr = getattr(error, "stderr", None)
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    if stderr:
        return str(stderr).strip()
    return str(error)
