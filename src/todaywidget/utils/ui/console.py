"""Rich console shared by the widget preview and command messages."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get the shared console.

    Emoji shortcodes are left alone so ``:tada:`` in a store path or error
    message prints as typed.
    """
    return Console(highlight=highlight, emoji=False)
