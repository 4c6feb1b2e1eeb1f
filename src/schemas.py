from typing import List, Optional
from pydantic import BaseModel

from core.models.fault_mode import FaultMode
from core.models.log_entry import LogCategory, LogEntry
from core.services.monitor_controller import MonitorSnapshot


class AppHealthOK(BaseModel):
    status: str
    app: str


class LogEntryModel(BaseModel):
    timestamp: float
    message: str
    category: LogCategory

    @classmethod
    def from_entry(cls, entry: LogEntry) -> "LogEntryModel":
        return cls(timestamp=entry.timestamp, message=entry.message, category=entry.category)


class LogList(BaseModel):
    list: List[LogEntryModel]


class Snapshot(BaseModel):
    level: float
    gas: int
    relay_on: bool
    buzzer_on: bool
    alert_active: bool
    threshold_exceeded: bool
    manual_mode: bool
    manual_relay: bool
    fault: FaultMode
    log: List[LogEntryModel]

    @classmethod
    def from_snapshot(cls, snap: MonitorSnapshot) -> "Snapshot":
        return cls(
            level=snap.level,
            gas=snap.gas,
            relay_on=snap.relay_on,
            buzzer_on=snap.buzzer_on,
            alert_active=snap.alert_active,
            threshold_exceeded=snap.threshold_exceeded,
            manual_mode=snap.manual_mode,
            manual_relay=snap.manual_relay,
            fault=snap.fault,
            log=[LogEntryModel.from_entry(e) for e in snap.log],
        )


class LevelHistory(BaseModel):
    list: List[float]


class TelemetryPayload(BaseModel):
    level: float
    gas: int
    alert: Optional[str] = None


class FaultRequest(BaseModel):
    mode: FaultMode


class ManualModeRequest(BaseModel):
    enabled: bool


class ManualRelayRequest(BaseModel):
    on: bool
