"""Structured JSONL audit log of schedule mutations."""

from __future__ import annotations

import hashlib
import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any


class AuditLogger:
    """Writes one JSON line per create/edit outcome."""

    def __init__(self, log_path: Path) -> None:
        self.log_path = log_path
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger("gantt.audit")

    @staticmethod
    def _hash_fields(fields: dict[str, Any]) -> str:
        payload = json.dumps(fields, sort_keys=True, default=str).encode("utf-8")
        return hashlib.sha256(payload).hexdigest()

    def log(
        self,
        action: str,
        task: str,
        fields: dict[str, Any],
        outcome: str,
        reason: str = "",
    ) -> dict[str, Any]:
        """Append one JSONL audit event and return it."""
        event = {
            "timestamp": datetime.now(UTC).isoformat(),
            "action": action,
            "task": task,
            "fields_hash": self._hash_fields(fields),
            "outcome": outcome,
            "reason": reason,
        }
        line = json.dumps(event, ensure_ascii=True)
        with self.log_path.open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")
        self.logger.info(line)
        return event

    def read_events(self) -> list[dict[str, Any]]:
        """Load all recorded events, oldest first."""
        if not self.log_path.exists():
            return []
        with self.log_path.open("r", encoding="utf-8") as fh:
            return [json.loads(line) for line in fh if line.strip()]
