"""File-based query storage adapter."""

from pathlib import Path


class FileQueryStore:
    """
    Keeps the last view's query string in a file.

    Implements QueryStore protocol, so `meetfinder list` can reopen the
    previous view.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def set_query(self, query: str) -> None:
        """Overwrite the stored query."""
        self.path.write_text(query)

    def get_query(self) -> str | None:
        """Read the stored query. Returns None if not found."""
        if not self.path.exists():
            return None
        return self.path.read_text().strip()

    def clear(self) -> None:
        """Forget the stored query."""
        if self.path.exists():
            self.path.unlink()
