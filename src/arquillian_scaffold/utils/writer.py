"""Source file writing utilities."""

import difflib
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from arquillian_scaffold.exceptions import FileOperationError

logger = logging.getLogger(__name__)


@dataclass
class WriteResult:
    path: Path
    changed: bool
    action: str  # 'create' | 'replace' | 'noop'
    diff: Optional[str] = None


class SourceFileWriter:
    """Write generated sources below a source root."""

    def __init__(self, root_dir: Union[str, Path]):
        self.root_dir = Path(root_dir).resolve()

    def resolve(self, relative_path: Union[str, Path]) -> Path:
        return self.root_dir / relative_path

    def write(self, relative_path: Union[str, Path], content: str, *, dry_run: bool = False) -> WriteResult:
        """Write ``content`` to ``relative_path`` atomically.

        - Skips the write when the file already holds the same text
        - With dry_run, only reports a unified diff of what would change
        """
        full_path = self.resolve(relative_path)

        existing_text = ''
        if full_path.exists():
            try:
                existing_text = full_path.read_text(encoding='utf-8')
            except OSError as e:
                raise FileOperationError(
                    f"Cannot read existing source {full_path}: {e}",
                    filepath=str(full_path),
                    suggestion="Check file permissions.",
                ) from e

        changed = existing_text != content
        action = ("replace" if existing_text else "create") if changed else "noop"

        if dry_run:
            diff_text = "".join(
                difflib.unified_diff(
                    existing_text.splitlines(keepends=True),
                    content.splitlines(keepends=True),
                    fromfile=str(relative_path),
                    tofile=str(relative_path),
                )
            )
            logger.info(f"[dry-run] {'Would write' if changed else 'No changes for'} {relative_path}")
            return WriteResult(path=full_path, changed=changed, action=action, diff=diff_text)

        if not changed:
            logger.info(f"No changes for {relative_path}")
            return WriteResult(path=full_path, changed=False, action=action)

        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile('w', delete=False, dir=str(full_path.parent), prefix='.tmp_',
                                             suffix=full_path.suffix, encoding='utf-8') as tmp:
                tmp.write(content)
                tmp_path = tmp.name
            os.replace(tmp_path, full_path)
        except OSError as e:
            logger.error(f"Failed to write {relative_path} atomically: {e}")
            raise FileOperationError(
                f"Failed to write {full_path}: {e}",
                filepath=str(full_path),
                suggestion="Check that the source directory is writable.",
            ) from e

        logger.info(f"Written source file: {relative_path} ({len(content):,} characters)")
        return WriteResult(path=full_path, changed=True, action=action)
