import fnmatch
import os
from pathlib import Path
from typing import Iterator, List, Optional

from gcspublish.logging_config import get_logger
from gcspublish.objects.source_file import LocalFileContents, SourceFile

logger = get_logger(__name__)


class SourceFileScanner(object):
    """Walks a build output directory and produces SourceFiles for it."""

    def __init__(
        self,
        source_dir: Path,
        match_pattern: str = "*",
        exclude_pattern: Optional[str] = None,
    ) -> None:
        self.source_dir = Path(source_dir).resolve()
        self.match_pattern = match_pattern
        self.exclude_pattern = exclude_pattern

    @property
    def base(self) -> str:
        return str(self.source_dir) + os.sep

    def find_files(self) -> List[Path]:
        matches = []

        for root, dirnames, filenames in os.walk(self.source_dir):
            dirnames.sort()
            for filename in sorted(filenames):
                relative = os.path.relpath(os.path.join(root, filename), self.source_dir)
                relative = relative.replace(os.sep, "/")
                if not self._matches(filename, relative, self.match_pattern):
                    continue
                if self.exclude_pattern and self._matches(
                    filename, relative, self.exclude_pattern
                ):
                    continue
                matches.append(Path(root) / filename)

        logger.debug(f"Found {len(matches)} files in {self.source_dir}")
        return matches

    @staticmethod
    def _matches(filename: str, relative: str, pattern: str) -> bool:
        # patterns with a separator match the relative path, others the name
        if "/" in pattern:
            return fnmatch.fnmatch(relative, pattern)
        return fnmatch.fnmatch(filename, pattern)

    def source_files(self) -> Iterator[SourceFile]:
        """Yield one SourceFile per matched file; content is read at upload time."""
        for file_path in self.find_files():
            yield SourceFile(
                path=str(file_path),
                base=self.base,
                contents=LocalFileContents(file_path),
            )
