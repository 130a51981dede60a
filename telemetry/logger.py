from __future__ import annotations

import json
import os
import threading
from typing import Any, Dict, Optional, TextIO

from mars_rover.command import Command
from mars_rover.rover import Rover


class TelemetryLogger:
    """Structured JSONL logger for rover runs.

    Thread-safe, append-only logging of dict records, one JSON object per line.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        self._lock = threading.Lock()
        self._fp: Optional[TextIO] = open(self.path, "a", encoding="utf-8")

    def log_record(self, record: Dict[str, Any]) -> None:
        """Append a single record to the JSONL file."""
        if self._fp is None:
            return
        line = json.dumps(record, separators=(",", ":"))
        with self._lock:
            self._fp.write(line + "\n")
            self._fp.flush()

    def log_step(self, step: int, command: Command, succeeded: bool, rover: Rover) -> None:
        """Record one applied command and the rover state after it.

        Signature matches Rover.execute_commands' ``on_step`` callback.
        """
        record: Dict[str, Any] = {"step": step, "command": command.letter, "succeeded": succeeded}
        record.update(rover.to_dict())
        self.log_record(record)

    def log_summary(self, rover: Rover, commands_received: int, commands_applied: int) -> None:
        record: Dict[str, Any] = {
            "event": "summary",
            "received": commands_received,
            "applied": commands_applied,
        }
        record.update(rover.to_dict())
        self.log_record(record)

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def __enter__(self) -> "TelemetryLogger":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
