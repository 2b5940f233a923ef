"""Email notify node.

Resolves a recipient, renders the subject and message templates against
the workflow state, sends the mail, and either completes or suspends the
workflow until the host resumes it.
"""

import structlog

from email_notify.config.models.node import NodeConfig
from email_notify.config.settings import Settings
from email_notify.exceptions import MailError
from email_notify.identity.store import IdentityStore
from email_notify.mail.dispatcher import MailDispatcher
from email_notify.mail.transport import MailTransport
from email_notify.mail.transports.smtp import SmtpTransport
from email_notify.node.gate import SuspendGate, completion_outcome
from email_notify.node.models import (
    Action,
    Outcome,
    SharedStateKeys,
    TreeContext,
    WorkflowState,
)
from email_notify.node.recipient import resolve_recipient
from email_notify.observability.logging import get_logger
from email_notify.rendering.template import render_template, template_variables


class EmailNotifyNode:
    """Workflow node that sends an email to the current user.

    Failure handling follows `config.failure_policy`:
    - "continue": send failures are logged and the workflow goes to NEXT
    - "outcome": send failures store errorMessage and go to FAILURE,
      successful sends go to SUCCESS. With suspension on, a failed send
      still suspends, and the resumed step then goes to FAILURE
    """

    NODE_TYPE = "EmailNotifyNode"

    def __init__(
        self,
        config: NodeConfig,
        identity_store: IdentityStore,
        transport: MailTransport,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.config = config
        self._identity_store = identity_store
        self._logger = (logger or get_logger(__name__)).bind(node=self.NODE_TYPE)
        self._dispatcher = MailDispatcher(transport, logger=self._logger)
        self._gate = SuspendGate(config, logger=self._logger)
        self._logger.debug("node_configured", config=config.log_safe())

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        identity_store: IdentityStore,
        transport: MailTransport | None = None,
    ) -> "EmailNotifyNode":
        """Build a node from loaded settings, defaulting to the SMTP transport."""
        return cls(
            config=settings.node,
            identity_store=identity_store,
            transport=transport or SmtpTransport(settings.transport),
            logger=get_logger(__name__).bind(app=settings.app_name),
        )

    @staticmethod
    def outcomes(config: NodeConfig) -> list[Outcome]:
        """Outcomes a node with this configuration can take."""
        if config.failure_policy == "outcome":
            return [Outcome.SUCCESS, Outcome.FAILURE]
        return [Outcome.NEXT]

    def process(self, context: TreeContext) -> Action:
        """Run one invocation of the node.

        Args:
            context: Invocation delivered by the host

        Returns:
            The directive the host must follow
        """
        if context.has_resumed_from_suspend:
            return self._gate.resume(context)

        if self.config.suspend_enabled:
            return self._process_suspending(context)

        try:
            self._send(context.shared_state, render=True)
        except MailError as e:
            return self._failed(context.shared_state, e)

        return Action.go_to(completion_outcome(self.config))

    def _process_suspending(self, context: TreeContext) -> Action:
        resume_uri = self._gate.prepare(context)
        try:
            self._send(context.shared_state, render=self.config.render_on_suspend)
        except MailError as e:
            return self._gate.emit(context, resume_uri, error=e)
        return self._gate.emit(context, resume_uri)

    def _send(self, state: WorkflowState, render: bool) -> None:
        recipient = resolve_recipient(state, self._identity_store, self.config, self._logger)

        subject, message = self.config.subject, self.config.message
        if render:
            subject = render_template(state, subject)
            message = render_template(state, message)
            self._logger.debug(
                "templates_rendered",
                variables=template_variables(self.config.subject)
                + template_variables(self.config.message),
            )

        self._dispatcher.send_mail(
            self.config.from_address,
            recipient,
            subject,
            message,
            self.config,
        )

    def _failed(self, state: WorkflowState, error: MailError) -> Action:
        if self.config.failure_policy == "outcome":
            state[SharedStateKeys.ERROR_MESSAGE] = error.message
            return Action.go_to(Outcome.FAILURE, message=error.message)

        self._logger.warning("mail_failure_ignored")
        return Action.go_to(Outcome.NEXT)
