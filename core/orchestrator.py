"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.event_bus import EventBus
from core.policy_runtime import ensure_runtime_dirs, load_effective_config
from core.schedule_engine import ScheduleEngine
from governance.audit_logger import AuditLogger


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    engine: ScheduleEngine
    event_bus: EventBus
    audit_logger: AuditLogger | None


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None, config_path: Path | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()
        self.config_path = config_path

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root, self.config_path)
        paths = ensure_runtime_dirs(self.root, config)

        audit_path = paths["audit_log_path"]
        audit_logger = AuditLogger(audit_path) if audit_path is not None else None
        event_bus = EventBus()
        engine = ScheduleEngine(
            capacity=int(config["schedule"]["capacity"]),
            event_bus=event_bus,
            audit_logger=audit_logger,
        )
        return RuntimeBundle(
            config=config,
            engine=engine,
            event_bus=event_bus,
            audit_logger=audit_logger,
        )
