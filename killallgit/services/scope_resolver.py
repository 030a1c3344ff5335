"""Scope resolution for branch patterns."""

from typing import Sequence, Tuple

from killallgit.models.scope import LOCAL, RemoteScope, Scope
from killallgit.utils.logging import get_logger

logger = get_logger(__name__)


def resolve_scope(pattern: str, configured_remotes: Sequence[str]) -> Tuple[Scope, str]:
    """
    Decide whether a pattern targets local branches or a configured remote.

    Remotes are tried in the order given; the first ``"<remote>/"`` prefix
    found at the start of the pattern wins and is stripped. With no match the
    pattern is local and returned unchanged.

    Args:
        pattern: Pattern as typed by the user, e.g. "origin/feat/.*"
        configured_remotes: Remote names in the order git reports them

    Returns:
        Tuple of (scope, core pattern)
    """
    for remote in configured_remotes:
        prefix = f"{remote}/"
        if pattern.startswith(prefix):
            core = pattern[len(prefix):]
            logger.debug(f"Pattern '{pattern}' targets remote {remote} with '{core}'")
            return RemoteScope(remote), core

    logger.debug(f"Pattern '{pattern}' targets local branches")
    return LOCAL, pattern
