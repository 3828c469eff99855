"""
Filesystem abstraction layer for testable corpus loading.

Provides Protocol-based dependency injection enabling isolated unit testing
of corpus file reads without actual filesystem I/O.

Usage:
    ```python
    # Production use
    fs = DefaultFilesystemAdapter()
    text = fs.read_text(Path('docs/daisyui.txt'))

    # Testing use
    mock_fs = MockFilesystemAdapter()
    mock_fs.files[Path('corpus.txt')] = '### Button\\n...'
    ```
"""

from pathlib import Path
from typing import Protocol


class FilesystemAdapter(Protocol):
    """Protocol defining filesystem operations for dependency injection.

    Implementations must provide all methods with matching signatures.
    Use Protocol for structural typing (duck typing with type safety).
    """

    def exists(self, path: Path) -> bool:
        """Check if file or directory exists at path.

        Lets the corpus loader report a missing corpus file with a clear
        message before attempting to read it.

        Args:
            path: Path to check for existence.

        Returns:
            True if path exists, False otherwise.

        Raises:
            No exceptions - returns False for inaccessible paths.

        Example:
            >>> if fs.exists(Path('corpus.txt')):
            ...     text = fs.read_text(Path('corpus.txt'))
        """
        ...

    def is_file(self, path: Path) -> bool:
        """Check if path exists and is a regular file.

        Args:
            path: Path to check.

        Returns:
            True for regular files, False for directories or missing paths.

        Raises:
            No exceptions.
        """
        ...

    def read_text(self, path: Path) -> str:
        """Read file content as UTF-8 text.

        Loads a documentation corpus for parsing at server startup.

        Args:
            path: Path to text file. Must be valid UTF-8.

        Returns:
            File content as string.

        Raises:
            FileNotFoundError: If path does not exist.
            UnicodeDecodeError: If file is not valid UTF-8.

        Example:
            >>> content = fs.read_text(Path('corpus.txt'))
        """
        ...

    def resolve(self, path: Path) -> Path:
        """Resolve path to absolute canonical path.

        Args:
            path: Path to resolve (relative or absolute).

        Returns:
            Absolute canonical Path with symlinks resolved.

        Raises:
            No exceptions - returns path even if target missing.
        """
        ...


class DefaultFilesystemAdapter:  # pragma: no cover
    """Production filesystem adapter using pathlib.

    Thin wrapper over real file operations implementing FilesystemAdapter.
    """

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(DefaultFilesystemAdapter())
            'DefaultFilesystemAdapter()'
        """
        return "DefaultFilesystemAdapter()"

    def exists(self, path: Path) -> bool:
        """Check path existence via pathlib."""
        return path.exists()

    def is_file(self, path: Path) -> bool:
        """Check for a regular file via pathlib."""
        return path.is_file()

    def read_text(self, path: Path) -> str:
        """Read UTF-8 text via pathlib."""
        return path.read_text(encoding="utf-8")

    def resolve(self, path: Path) -> Path:
        """Resolve path via pathlib."""
        return path.resolve()
