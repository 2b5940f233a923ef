"""The email notify workflow node and its host-facing models."""

from email_notify.node.gate import SuspendGate
from email_notify.node.models import (
    Action,
    ActionType,
    GateState,
    Outcome,
    SharedStateKeys,
    TreeContext,
    WorkflowState,
)
from email_notify.node.node import EmailNotifyNode
from email_notify.node.recipient import resolve_recipient

__all__ = [
    "Action",
    "ActionType",
    "EmailNotifyNode",
    "GateState",
    "Outcome",
    "SharedStateKeys",
    "SuspendGate",
    "TreeContext",
    "WorkflowState",
    "resolve_recipient",
]
