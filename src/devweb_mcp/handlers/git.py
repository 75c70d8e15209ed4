"""Branch comparison handlers: diff summary and PR prompt assembly.

Both handlers gather the same :class:`GitSummary`. The current branch
and the changed-file list are required, so their failures propagate.
The commit log and diff text are optional extras; a failure there is
logged and the section is left out.
"""

from __future__ import annotations

import asyncio

from devweb_mcp.errors import DevwebError, ExternalCommandError
from devweb_mcp.fsquery import read_text
from devweb_mcp.logging_config import get_logger
from devweb_mcp.server.config import PR_TEMPLATE_PATH
from devweb_mcp.server.models import GitSummary
from devweb_mcp.server.state import ProjectContext

logger = get_logger("handlers.git")

DEFAULT_BASE_BRANCH = "main"

DEFAULT_PR_TEMPLATE = """\
## Summary
<!-- What does this PR change, and why? -->

## Changes
<!-- Bullet list of the notable changes -->

## Testing
<!-- How were these changes verified? -->

## Related Tickets
<!-- Ticket or issue references -->
"""


async def gather_summary(
    ctx: ProjectContext,
    base_branch: str = DEFAULT_BASE_BRANCH,
    include_commits: bool = True,
    include_diff: bool = False,
) -> GitSummary:
    """Query git for the comparison between HEAD and ``base_branch``.

    Raises:
        ExternalCommandError: branch name or changed files unavailable
    """
    vcs = ctx.vcs
    branch = await vcs.current_branch()
    changed = await vcs.changed_files(base_branch)

    commits: list[str] | None = None
    if include_commits:
        try:
            commits = await vcs.commit_log(base_branch)
        except ExternalCommandError as e:
            logger.warning(
                "commit log unavailable", base=base_branch, error=str(e)
            )

    diff: str | None = None
    truncated = False
    if include_diff:
        try:
            diff = await vcs.diff_text(base_branch)
        except ExternalCommandError as e:
            logger.warning("diff unavailable", base=base_branch, error=str(e))
        else:
            if len(diff) > ctx.max_diff_chars:
                diff = diff[: ctx.max_diff_chars]
                truncated = True

    return GitSummary(
        branch=branch,
        base_branch=base_branch,
        changed_files=changed,
        commits=commits,
        diff=diff,
        diff_truncated=truncated,
    )


def _diff_block(summary: GitSummary) -> str:
    diff = (summary.diff or "").rstrip("\n")
    marker = "\n... (diff truncated)" if summary.diff_truncated else ""
    return f"```diff\n{diff}{marker}\n```"


def format_git_diff(summary: GitSummary) -> str:
    parts = [
        "# Git Diff Summary",
        "",
        f"Current Branch: {summary.branch}",
        f"Base Branch: {summary.base_branch}",
        f"Files Changed: {len(summary.changed_files)}",
    ]
    if summary.changed_files:
        parts += ["", "## Changed Files"]
        parts += [f"- {f}" for f in summary.changed_files]
    if summary.commits:
        parts += ["", f"## Commits ({len(summary.commits)})"]
        parts += [f"- {c}" for c in summary.commits]
    if summary.diff is not None:
        parts += ["", "## Diff", _diff_block(summary)]
    return "\n".join(parts)


async def get_git_diff(
    ctx: ProjectContext,
    base_branch: str = DEFAULT_BASE_BRANCH,
    include_commits: bool = True,
    include_diff: bool = False,
) -> str:
    summary = await gather_summary(
        ctx, base_branch, include_commits, include_diff
    )
    return format_git_diff(summary)


def load_pr_template(ctx: ProjectContext) -> str:
    """Read the project's PR template, or the built-in one if unreadable."""
    try:
        template = read_text(ctx.root, str(PR_TEMPLATE_PATH))
    except (DevwebError, UnicodeDecodeError) as e:
        logger.debug("using default pr template", reason=str(e))
        return DEFAULT_PR_TEMPLATE
    if not template.strip():
        return DEFAULT_PR_TEMPLATE
    return template


def build_pr_prompt(
    summary: GitSummary,
    template: str,
    ticket: str | None = None,
) -> str:
    """Assemble the PR-description prompt.

    The result is meant to be handed to a model by the host; nothing
    here calls one.
    """
    parts = [
        "You are writing the description for a GitHub pull request.",
        "",
        f"Branch: `{summary.branch}` -> `{summary.base_branch}`",
    ]
    if ticket:
        parts.append(
            f"Ticket: {ticket} (reference this ticket in the description)"
        )
    parts += [
        "",
        "Fill in the PR template below using only what the commits, "
        "changed files and diff support. Be concise, explain why the "
        "change was made as well as what changed, and keep the template's "
        "headings. Return only the finished Markdown description.",
        "",
        "## PR Template",
        template.rstrip("\n"),
    ]
    if summary.commits:
        parts += ["", "## Commits"]
        parts += [f"- {c}" for c in summary.commits]
    parts += ["", f"## Changed Files ({len(summary.changed_files)})"]
    if summary.changed_files:
        parts += [f"- {f}" for f in summary.changed_files]
    else:
        parts.append("(no changed files)")
    if summary.diff is not None:
        parts += ["", "## Diff", _diff_block(summary)]
    return "\n".join(parts)


async def get_pr_ai_prompt(
    ctx: ProjectContext,
    base_branch: str = DEFAULT_BASE_BRANCH,
    ticket: str | None = None,
) -> str:
    summary = await gather_summary(
        ctx, base_branch, include_commits=True, include_diff=True
    )
    template = await asyncio.to_thread(load_pr_template, ctx)
    return build_pr_prompt(summary, template, ticket)
