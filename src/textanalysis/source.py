"""Loading source text from disk."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class SourceUnavailableError(Exception):
    """Raised when the source text cannot be located or read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read source text '{path}': {reason}")


def read_source(path: Path, encoding: str = "utf-8") -> str:
    """Read the full text of a source file.

    An empty file is valid and returns "".

    Args:
        path: Path to the text file.
        encoding: Text encoding of the file. Defaults to UTF-8.

    Returns:
        The file contents.

    Raises:
        SourceUnavailableError: If the file is missing, is not a regular file,
            cannot be opened, or cannot be decoded.
    """
    try:
        text = path.read_text(encoding=encoding)
    except FileNotFoundError as e:
        raise SourceUnavailableError(path, "file not found") from e
    except IsADirectoryError as e:
        raise SourceUnavailableError(path, "is a directory") from e
    except UnicodeDecodeError as e:
        raise SourceUnavailableError(path, f"not valid {encoding} text") from e
    except OSError as e:
        raise SourceUnavailableError(path, e.strerror or str(e)) from e

    logger.debug("Read %d characters from %s", len(text), path)
    return text
