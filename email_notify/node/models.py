"""Models exchanged between the node and its host."""

from collections.abc import Callable, Mapping, MutableMapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from uuid import uuid4

# Host-owned key/value store shared by every step of one workflow run
WorkflowState = MutableMapping[str, Any]


class SharedStateKeys:
    """Well-known WorkflowState keys."""

    USERNAME = "username"
    REALM = "realm"
    EMAIL = "email"
    ERROR_MESSAGE = "errorMessage"
    RESUME_URI = "resumeURI"


class Outcome(str, Enum):
    """Named branches the node can direct the host to.

    - NEXT: single outcome used by the 'continue' failure policy
    - SUCCESS / FAILURE: used by the 'outcome' failure policy
    """

    NEXT = "next"
    SUCCESS = "success"
    FAILURE = "failure"


class GateState(str, Enum):
    """Suspend/resume gate states.

    INITIAL -> DONE when suspension is disabled,
    INITIAL -> SUSPENDED, then SUSPENDED -> RESUMED -> DONE on a later
    invocation when it is enabled.
    """

    INITIAL = "initial"
    SUSPENDED = "suspended"
    RESUMED = "resumed"
    DONE = "done"


class ActionType(str, Enum):
    """Kind of directive returned to the host."""

    OUTCOME = "outcome"
    SUSPEND = "suspend"


def default_resume_uri() -> str:
    """Opaque resume token used when the host supplies no minting callback."""
    return f"urn:uuid:{uuid4()}"


@dataclass
class TreeContext:
    """One invocation of the node, as delivered by the host.

    Attributes:
        shared_state: The workflow run's shared state
        has_resumed_from_suspend: True when this call resumes a suspended step
        resume_payload: Data the host delivered with the resume signal
        mint_resume_uri: Host callback producing the URI that resumes this run
    """

    shared_state: WorkflowState
    has_resumed_from_suspend: bool = False
    resume_payload: Mapping[str, Any] | None = None
    mint_resume_uri: Callable[[], str] = field(default=default_resume_uri)


@dataclass(frozen=True)
class Action:
    """Directive returned to the host after processing.

    `transitions` lists the gate states this invocation went through, so
    `transitions[-1]` is the state the gate is left in.
    """

    type: ActionType
    transitions: tuple[GateState, ...]
    outcome: Outcome | None = None
    message: str | None = None
    resume_uri: str | None = None

    @property
    def gate_state(self) -> GateState:
        """State the gate ends in."""
        return self.transitions[-1]

    @property
    def suspended(self) -> bool:
        """True when the host must halt the workflow."""
        return self.type is ActionType.SUSPEND

    @classmethod
    def go_to(
        cls,
        outcome: Outcome,
        message: str | None = None,
        transitions: tuple[GateState, ...] = (GateState.INITIAL, GateState.DONE),
    ) -> "Action":
        """Continue the workflow along a named outcome."""
        return cls(
            type=ActionType.OUTCOME,
            transitions=transitions,
            outcome=outcome,
            message=message,
        )

    @classmethod
    def suspend(cls, message: str, resume_uri: str) -> "Action":
        """Halt the workflow until the host resumes it via resume_uri."""
        return cls(
            type=ActionType.SUSPEND,
            transitions=(GateState.INITIAL, GateState.SUSPENDED),
            message=message,
            resume_uri=resume_uri,
        )
