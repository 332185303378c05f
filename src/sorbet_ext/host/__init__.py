"""Host-side collaborators: the worktree capability and entry point dispatch."""

from .dispatch import Outcome, invoke
from .worktree import LocalWorktree, Worktree

__all__ = ["LocalWorktree", "Outcome", "Worktree", "invoke"]
