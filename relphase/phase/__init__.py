"""Release workflow phase detection."""

from .detect import decide, detect_workflow_phase, detect_workflow_phase_sync
from .model import (
    EventContext,
    PhaseDetectionResult,
    PullRequestInfo,
    WorkflowPhase,
)

__all__ = [
    "EventContext",
    "PhaseDetectionResult",
    "PullRequestInfo",
    "WorkflowPhase",
    "decide",
    "detect_workflow_phase",
    "detect_workflow_phase_sync",
]
