"""Abstract whole-table backend interface."""

from abc import ABC, abstractmethod


class Backend(ABC):
    """Persistence backend operating on the full encoded table.

    There are no partial reads or writes: ``read`` returns everything
    that was last stored and ``write`` replaces it. Encoding is handled
    at a higher layer (see ``content_types``). Methods are blocking;
    ``Live`` runs them in a worker thread.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location used in errors and logs."""

    @abstractmethod
    def read(self) -> str | None:
        """Return the stored text, or None if nothing was stored yet."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Replace the stored text."""
