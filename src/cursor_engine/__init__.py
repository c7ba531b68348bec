"""UI-agnostic single-line text input engine."""

__all__ = [
    "actions",
    "adapters",
    "behaviour",
    "cursor",
    "keymaps",
    "runtime",
    "widgets",
]

__version__ = "0.1.0"
