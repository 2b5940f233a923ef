"""Suspend/resume gate.

Suspending is split into explicit phases so each can be driven on its
own:

1. prepare: mint the resume URI and store it in the workflow state
2. execute: the caller sends the mail (templates may use {{resumeURI}})
3. emit: build the suspend directive from the send result

A later invocation flagged as a resume goes through resume() and never
touches the resolver or the dispatcher.
"""

import structlog

from email_notify.config.models.node import NodeConfig
from email_notify.exceptions import MailError
from email_notify.node.models import (
    Action,
    GateState,
    Outcome,
    SharedStateKeys,
    TreeContext,
)
from email_notify.observability.logging import get_logger


def completion_outcome(config: NodeConfig) -> Outcome:
    """Outcome taken when the node finishes without error."""
    return Outcome.SUCCESS if config.failure_policy == "outcome" else Outcome.NEXT


class SuspendGate:
    """Drives the SUSPENDED and RESUMED transitions for one node."""

    def __init__(
        self,
        config: NodeConfig,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._config = config
        self._logger = logger or get_logger(__name__)

    def prepare(self, context: TreeContext) -> str:
        """Mint the resume URI and record it in the workflow state."""
        resume_uri = context.mint_resume_uri()
        context.shared_state[SharedStateKeys.RESUME_URI] = resume_uri
        self._logger.debug("suspend_prepared")
        return resume_uri

    def emit(
        self,
        context: TreeContext,
        resume_uri: str,
        error: MailError | None = None,
    ) -> Action:
        """Build the suspend directive shown to the user while halted."""
        if error is None:
            if self._config.failure_policy == "outcome":
                context.shared_state.pop(SharedStateKeys.ERROR_MESSAGE, None)
            self._logger.info("workflow_suspended")
            return Action.suspend(self._config.suspend_message, resume_uri)

        if self._config.failure_policy == "outcome":
            context.shared_state[SharedStateKeys.ERROR_MESSAGE] = error.message
        self._logger.warning("workflow_suspended_after_send_failure")
        return Action.suspend(self._config.suspend_error_message, resume_uri)

    def resume(self, context: TreeContext) -> Action:
        """Complete a resumed invocation: SUSPENDED -> RESUMED -> DONE.

        Under the 'outcome' policy a send that failed while suspending left
        errorMessage in the state, and the resumed step goes to FAILURE.
        """
        transitions = (GateState.SUSPENDED, GateState.RESUMED, GateState.DONE)
        error_message = context.shared_state.get(SharedStateKeys.ERROR_MESSAGE)

        if self._config.failure_policy == "outcome" and error_message:
            self._logger.warning("workflow_resumed_after_send_failure")
            return Action.go_to(Outcome.FAILURE, message=error_message, transitions=transitions)

        self._logger.info(
            "workflow_resumed",
            has_payload=bool(context.resume_payload),
        )
        return Action.go_to(completion_outcome(self._config), transitions=transitions)
