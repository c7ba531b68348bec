"""Command vocabulary shared by input translation and the typing behaviour."""

from .core import NULL_ACTION, ActionKind, UserAction

__all__ = ["ActionKind", "UserAction", "NULL_ACTION"]
