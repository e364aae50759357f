"""Run log for git-rename-branch with hybrid format.

Logs are written in hybrid format:
    YYYY-MM-DD HH:MM:SS LEVEL [command] Human message | {"json": "data"}

This provides both human readability (left side) and machine parseability (right side).
Only written when a log_dir is configured.
"""
import json
from pathlib import Path
from datetime import datetime
from typing import Dict, Any


class RunLogger:
    """Logger for rename runs with hybrid format output.

    Logs are written to monthly files: rename-branch-YYYY-MM.log
    """

    def __init__(self, log_dir: Path):
        """Initialize logger with log directory.

        Args:
            log_dir: Directory for log files, created if missing
        """
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

    def _get_log_file(self) -> Path:
        """Get current month's log file path."""
        month_str = datetime.now().strftime("%Y-%m")
        return self.log_dir / f"rename-branch-{month_str}.log"

    def _format_log_line(
        self,
        level: str,
        command: str,
        message: str,
        data: Dict[str, Any]
    ) -> str:
        """Format log line in hybrid format.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR)
            command: Step or phase name (run, rename, push, delete)
            message: Human-readable message
            data: Structured data as dict

        Returns:
            Formatted log line with newline
        """
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        # Pad level to 5 characters for alignment
        level_padded = level.ljust(5)

        json_str = json.dumps(data, ensure_ascii=False)
        return f"{timestamp} {level_padded} [{command}] {message} | {json_str}\n"

    def log_event(
        self,
        command: str,
        message: str,
        data: Dict[str, Any],
        level: str = "INFO"
    ) -> None:
        """Append one event to the current month's log file."""
        log_line = self._format_log_line(level, command, message, data)

        with open(self._get_log_file(), "a") as f:
            f.write(log_line)

    def log_run_start(self, data: Dict[str, Any]) -> None:
        """Log start of a rename run.

        Args:
            data: Parsed options and current ref
        """
        message = "Starting rename"
        target = data.get("target_name", "")
        if target:
            message = f"Starting rename: {data.get('current_ref', '?')} -> {target}"

        self.log_event("run", message, data, level="INFO")

    def log_step(self, step: str, argv: list[str], returncode: int) -> None:
        """Log the outcome of one git step.

        Args:
            step: Step name
            argv: Command that was run
            returncode: git's exit code
        """
        if returncode == 0:
            self.log_event(step, "Step succeeded", {"argv": argv, "returncode": 0})
        else:
            self.log_event(
                step,
                f"Step failed (exit {returncode})",
                {"argv": argv, "returncode": returncode},
                level="ERROR",
            )

    def log_error(self, command: str, message: str, data: Dict[str, Any]) -> None:
        """Log error event.

        Args:
            command: Phase name
            message: Error message
            data: Error details
        """
        reason = data.get("reason", "")
        full_message = f"{message}: {reason}" if reason else message
        self.log_event(command, full_message, data, level="ERROR")
