"""Protocol repository (can implement later for other storage than SQL)"""

from typing import Protocol

from src.core.models import BoardOptions


class OptionsRepository(Protocol):
    """Persistence of the default diagram options"""

    def get_defaults(self) -> BoardOptions:
        """Stored defaults, or the configured ones if nothing was stored yet."""
        ...

    def save_defaults(self, options: BoardOptions) -> BoardOptions:
        """Replace the stored defaults and return what got stored."""
        ...
