"""
Output committers.

A committer takes the artifacts of one generation run and writes them, or
only reports what it would write when running dry. Files that already
exist are reported as conflicts and left alone unless forced. Every
artifact is handled independently: a conflict never rolls back artifacts
already written in the same run.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..logging_config import get_logger
from .schema import GeneratedArtifact

logger = get_logger(__name__)


class CommitError(Exception):
    """Exception raised when an artifact cannot be written."""

    pass


class CommitAction(Enum):
    """What happened (or would happen) to one artifact."""

    CREATED = "created"
    OVERWRITTEN = "overwritten"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class CommitEntry:
    path: str
    action: CommitAction


@dataclass
class CommitReport:
    """Outcome of a commit, in artifact order."""

    entries: List[CommitEntry] = field(default_factory=list)
    dry_run: bool = False

    def add(self, path: str, action: CommitAction):
        self.entries.append(CommitEntry(path, action))

    def paths(self, action: CommitAction) -> List[str]:
        return [entry.path for entry in self.entries if entry.action == action]

    @property
    def created(self) -> List[str]:
        return self.paths(CommitAction.CREATED)

    @property
    def overwritten(self) -> List[str]:
        return self.paths(CommitAction.OVERWRITTEN)

    @property
    def conflicts(self) -> List[str]:
        return self.paths(CommitAction.CONFLICT)

    @property
    def success(self) -> bool:
        """True when no artifact was blocked by a conflict."""
        return not self.conflicts


class OutputCommitter(ABC):
    """Writes artifacts somewhere; concrete classes decide where."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if ``path`` is already occupied."""
        pass

    @abstractmethod
    def write(self, path: str, content: str):
        """Store ``content`` at ``path``, creating parents as needed."""
        pass

    def commit(
        self,
        artifacts: Iterable[GeneratedArtifact],
        dry_run: bool = False,
        force: bool = False,
    ) -> CommitReport:
        """
        Commit artifacts in order.

        Args:
            artifacts: Files to write
            dry_run: Report only, write nothing
            force: Overwrite existing files instead of reporting conflicts

        Returns:
            Per-artifact report

        Raises:
            CommitError: If writing a file fails
        """
        report = CommitReport(dry_run=dry_run)

        for artifact in artifacts:
            if self.exists(artifact.path):
                if not force:
                    logger.warning("File already exists: %s", artifact.path)
                    report.add(artifact.path, CommitAction.CONFLICT)
                    continue
                action = CommitAction.OVERWRITTEN
            else:
                action = CommitAction.CREATED

            if not dry_run:
                self.write(artifact.path, artifact.content)
            logger.info(
                "%s%s %s", "[dry-run] " if dry_run else "", action.value, artifact.path
            )
            report.add(artifact.path, action)

        return report


class FileSystemCommitter(OutputCommitter):
    """Writes artifacts below a root directory on disk."""

    def __init__(self, root: Union[str, Path] = "."):
        self.root = Path(root)

    def _target(self, path: str) -> Path:
        return self.root / path

    def exists(self, path: str) -> bool:
        return self._target(path).exists()

    def write(self, path: str, content: str):
        target = self._target(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            raise CommitError(f"Failed to write {target}: {e}") from e


class MemoryCommitter(OutputCommitter):
    """Keeps artifacts in a dictionary; used for previews and tests."""

    def __init__(self, files: Optional[Dict[str, str]] = None):
        self.files: Dict[str, str] = dict(files or {})

    def exists(self, path: str) -> bool:
        return path in self.files

    def write(self, path: str, content: str):
        self.files[path] = content
