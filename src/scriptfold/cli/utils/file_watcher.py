"""File watching utilities for scriptfold CLI."""

from __future__ import annotations

import queue
import time
from pathlib import Path
from typing import Protocol

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from scriptfold.config import ScriptFoldSettings, get_logger
from scriptfold.exceptions import ScriptFoldError
from scriptfold.parser import ScriptDocument, ScriptOutline

logger = get_logger(__name__)


class OutlineCallback(Protocol):
    """Protocol for re-parse status callbacks."""

    def __call__(
        self,
        status: str,
        path: Path,
        outline: ScriptOutline | None = None,
        error: str | None = None,
    ) -> None:
        """Report a re-parse.

        Args:
            status: Status type (parsed, error)
            path: File that was re-parsed
            outline: New outline when status is "parsed"
            error: Error message when status is "error"
        """
        ...


class FountainFileHandler(FileSystemEventHandler):
    """Queue Fountain file changes and re-parse them on the caller's thread.

    watchdog delivers events on its observer thread; they are only queued
    there. ``process_pending`` drains the queue and runs each re-parse, so
    parsing happens wherever the watch loop runs.
    """

    def __init__(
        self,
        settings: ScriptFoldSettings,
        callback: OutlineCallback | None = None,
        max_queue_size: int = 100,
    ) -> None:
        """Initialize the handler.

        Args:
            settings: scriptfold settings
            callback: Callback for re-parse results
            max_queue_size: Maximum queue size for pending events
        """
        self.settings = settings
        self.callback = callback
        self.documents: dict[Path, ScriptDocument] = {}
        self.last_processed: dict[Path, float] = {}
        # Paths waiting for their debounce window to pass, with their due time
        self.deferred: dict[Path, float] = {}
        self.event_queue: queue.Queue[Path] = queue.Queue(maxsize=max_queue_size)

    def is_screenplay(self, path: Path) -> bool:
        """Check if ``path`` has one of the configured Fountain extensions."""
        return path.suffix.lower() in self.settings.fountain_extensions

    def due_time(self, path: Path) -> float:
        """Return the monotonic time at which ``path`` may be re-parsed."""
        last_time = self.last_processed.get(path.resolve())
        if last_time is None:
            return 0.0
        return last_time + self.settings.watch_debounce_seconds

    def should_process(self, path: Path) -> bool:
        """Check if a file can be re-parsed right now.

        Args:
            path: File path to check

        Returns:
            True if the file is a screenplay outside its debounce window
        """
        return self.is_screenplay(path) and time.monotonic() >= self.due_time(path)

    def on_modified(self, event: FileSystemEvent) -> None:
        """Handle file modification events."""
        self._handle_event(event)

    def on_created(self, event: FileSystemEvent) -> None:
        """Handle file creation events."""
        self._handle_event(event)

    def _handle_event(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return

        src_path = event.src_path
        if isinstance(src_path, bytes):
            src_path = src_path.decode()
        path = Path(src_path)
        if self.is_screenplay(path):
            self.queue_file(path)

    def queue_file(self, path: Path) -> None:
        """Queue a file for re-parsing.

        Args:
            path: Path to queue
        """
        try:
            self.event_queue.put_nowait(path.resolve())
        except queue.Full:
            logger.warning("Event queue is full, dropping event", path=str(path))

    def parse_existing(self, root: Path, recursive: bool = True) -> int:
        """Parse every screenplay file below ``root`` right away.

        Returns:
            Number of files found
        """
        pattern = "**/*" if recursive else "*"
        count = 0
        for path in sorted(root.glob(pattern)):
            if path.is_file() and self.is_screenplay(path):
                self.process_file(path)
                count += 1
        return count

    def process_pending(self, timeout: float = 0.5) -> int:
        """Re-parse queued files whose debounce window has passed.

        Waits up to ``timeout`` seconds for the first event, or less when a
        deferred file becomes due sooner, then drains whatever else is
        queued. A file changed again inside its debounce window is deferred,
        not dropped, and is re-parsed once the window ends, so the last save
        always wins. Duplicate paths are parsed once.

        Returns:
            Number of files re-parsed
        """
        wait = timeout
        if self.deferred:
            next_due = min(self.deferred.values()) - time.monotonic()
            wait = max(0.0, min(timeout, next_due))

        batch: list[Path] = []
        try:
            batch.append(self.event_queue.get(timeout=wait))
        except queue.Empty:
            if not self.deferred:
                return 0
        while True:
            try:
                batch.append(self.event_queue.get_nowait())
            except queue.Empty:
                break

        for path in dict.fromkeys(batch):
            self.deferred[path] = self.due_time(path)

        now = time.monotonic()
        ready = [path for path, due in self.deferred.items() if due <= now]
        for path in ready:
            del self.deferred[path]
            self.process_file(path)
        return len(ready)

    def process_file(self, path: Path) -> ScriptOutline | None:
        """Re-parse one file and report the result through the callback.

        Args:
            path: Path to the Fountain file

        Returns:
            The new outline, or None if the file could not be parsed
        """
        path = path.resolve()
        try:
            document = self.documents.get(path)
            if document is None:
                document = ScriptDocument.from_file(
                    path, drop_empty_regions=self.settings.drop_empty_regions
                )
                self.documents[path] = document
                outline = document.outline
            else:
                outline = document.reload()
        except (ScriptFoldError, OSError, UnicodeDecodeError) as e:
            self._report_error(path, e)
            return None
        finally:
            self.last_processed[path] = time.monotonic()

        logger.info(
            "Re-parsed screenplay",
            path=str(path),
            line_count=outline.line_count,
            regions=len(outline.regions),
        )
        if self.callback:
            self.callback("parsed", path, outline=outline)
        return outline

    def _report_error(self, path: Path, error: Exception) -> None:
        logger.error("Failed to re-parse screenplay", path=str(path), error=str(error))
        self.documents.pop(path, None)
        if self.callback:
            self.callback("error", path, error=str(error))
