"""Email notify node: sends a templated email during an authentication workflow.

Usage:
    from email_notify import EmailNotifyNode, TreeContext
    from email_notify.config import get_settings

    node = EmailNotifyNode.from_settings(get_settings(), identity_store)
    action = node.process(TreeContext(shared_state=state))
"""

from email_notify.node import Action, EmailNotifyNode, Outcome, TreeContext
from email_notify.plugin import EmailNotifyNodePlugin

__version__ = EmailNotifyNodePlugin.PLUGIN_VERSION

__all__ = ["Action", "EmailNotifyNode", "EmailNotifyNodePlugin", "Outcome", "TreeContext"]
