"""Recipient resolution.

An `email` entry already in the workflow state always wins. Otherwise the
configured attribute is read from the user's identity. Every failure on
the identity path degrades to an empty recipient and is only logged.
"""

import structlog

from email_notify.config.models.node import NodeConfig
from email_notify.exceptions import IdentityLookupError
from email_notify.identity.store import IdentityStore
from email_notify.node.models import SharedStateKeys, WorkflowState
from email_notify.observability.logging import get_logger

DEFAULT_REALM = "/"


def resolve_recipient(
    state: WorkflowState,
    identity_store: IdentityStore,
    config: NodeConfig,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> str:
    """Determine the destination address for this invocation.

    Args:
        state: Workflow state (read only)
        identity_store: Host identity repository
        config: Node configuration naming the mail attribute
        logger: Logger to report diagnostics to

    Returns:
        The recipient address, or "" when none could be found
    """
    log = logger or get_logger(__name__)

    email = state.get(SharedStateKeys.EMAIL)
    if email is not None:
        log.debug("recipient_from_state")
        return email if isinstance(email, str) else str(email)

    username = state.get(SharedStateKeys.USERNAME)
    realm = state.get(SharedStateKeys.REALM) or DEFAULT_REALM
    log = log.bind(attribute=config.attribute, realm=realm)

    if not username:
        log.warning("recipient_username_missing")
        return ""

    try:
        identity = identity_store.get_identity(username, realm)
        values = identity.get_attribute(config.attribute) if identity is not None else None
    except IdentityLookupError as e:
        log.error("recipient_lookup_failed", error=e.message, error_type=type(e).__name__)
        return ""
    except Exception as e:
        # Host stores may raise driver or network errors of their own
        log.error("recipient_lookup_failed", error=str(e), error_type=type(e).__name__)
        return ""

    if not values:
        log.warning("recipient_attribute_missing", identity_found=identity is not None)
        return ""

    log.debug("recipient_from_identity")
    return values[0]
