from fastapi import APIRouter, Depends

from core.service_manager import get_controller
from core.services.monitor_controller import MonitorController
from schemas import (
    FaultRequest,
    LevelHistory,
    ManualModeRequest,
    ManualRelayRequest,
    Snapshot,
    TelemetryPayload,
)

router = APIRouter(prefix="/monitor", tags=["monitor"])


@router.get("/snapshot", response_model=Snapshot)
async def get_snapshot(controller: MonitorController = Depends(get_controller)) -> Snapshot:
    """
    Get the full current state: reading, actuators, alert flag, override,
    active fault and the event log (oldest entry first).
    """
    return Snapshot.from_snapshot(controller.snapshot())


@router.put("/fault", status_code=204)
async def set_fault(request: FaultRequest, controller: MonitorController = Depends(get_controller)) -> None:
    """
    Inject or clear a simulated fault.

    - **overflow**: level drifts upward until it crosses the level limit.
    - **gas_leak**: gas drifts upward until it crosses the gas limit.
    - **none**: back to the bounded baseline simulation.

    Re-sending the active mode changes nothing and logs nothing.
    """
    controller.set_fault(request.mode)


@router.put("/manual", status_code=204)
async def set_manual_mode(request: ManualModeRequest,
                          controller: MonitorController = Depends(get_controller)) -> None:
    """
    Enable or disable the manual override.
    While enabled, the relay follows the manual choice, the buzzer stays off
    and no alert is reported.
    """
    controller.set_manual_mode(request.enabled)


@router.put("/manual/relay", status_code=204)
async def set_manual_relay(request: ManualRelayRequest,
                           controller: MonitorController = Depends(get_controller)) -> None:
    """
    Set the manual relay (pump) choice.
    The choice is remembered while manual mode is off and applied when it is enabled.
    """
    controller.set_manual_relay(request.on)


@router.post("/tick", response_model=Snapshot)
async def tick(controller: MonitorController = Depends(get_controller)) -> Snapshot:
    """Advance the simulation by one tick and return the resulting state."""
    return Snapshot.from_snapshot(controller.tick())


@router.get("/history", response_model=LevelHistory)
async def get_level_history(controller: MonitorController = Depends(get_controller)) -> LevelHistory:
    """Levels from the most recent ticks, oldest first."""
    return LevelHistory(list=controller.level_history())


@router.get("/payload", response_model=TelemetryPayload)
async def get_payload(controller: MonitorController = Depends(get_controller)) -> TelemetryPayload:
    """Live telemetry payload; `alert` is set only while an alert is active."""
    return TelemetryPayload(**controller.telemetry())
