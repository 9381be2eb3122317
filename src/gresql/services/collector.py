import glob
from pathlib import Path

from loguru import logger

from gresql.core.errors import UnreadableFile
from gresql.core.models import SourceFile


class FileCollector:
    """Expands path arguments into SQL files and reads them."""

    def __init__(self, extensions: list[str] | None = None, encoding: str = "utf-8-sig") -> None:
        self.extensions = [ext.lower() for ext in (extensions or [".sql"])]
        self.encoding = encoding

    def collect(self, targets: list[str]) -> list[Path]:
        """Resolves files, directories and glob patterns, keeping first-seen order.

        Files are taken as given; directories are searched recursively for the
        configured extensions; missing arguments containing wildcards are globbed.
        """
        paths: dict[Path, None] = {}
        for target in targets:
            path = Path(target)
            if path.is_file():
                paths.setdefault(path, None)
            elif path.is_dir():
                for found in sorted(path.rglob("*")):
                    if found.is_file() and found.suffix.lower() in self.extensions:
                        paths.setdefault(found, None)
            elif any(char in target for char in "*?["):
                matches = [Path(m) for m in sorted(glob.glob(target, recursive=True))]
                if not matches:
                    logger.warning("No files match pattern: {}", target)
                for match in matches:
                    if match.is_file():
                        paths.setdefault(match, None)
            else:
                logger.warning("File not found: {}", target)

        logger.debug("Collected {} file(s) from {} argument(s)", len(paths), len(targets))
        return list(paths)

    def read(self, path: Path) -> SourceFile:
        """Reads one file. Raises UnreadableFile on I/O or decoding errors."""
        try:
            content = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise UnreadableFile(str(path), str(e)) from e
        return SourceFile(path=str(path), content=content)
