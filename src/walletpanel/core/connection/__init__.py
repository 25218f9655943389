"""Connection-state reconciliation and the panel controller."""

from walletpanel.core.connection.controller import WalletPanelController
from walletpanel.core.connection.reconciler import apply_actions, reconcile

__all__ = ["WalletPanelController", "apply_actions", "reconcile"]
