"""Connection-state reconciliation.

Compares what the panel shows with what the wallet bridge reports and
describes the updates needed to bring them in line. Nothing here touches
a UI; the controller applies the returned actions.
"""

from collections.abc import Iterable

import structlog

from walletpanel.models.connection import (
    STATUS_CONNECTED,
    STATUS_DISCONNECTED,
    ConnectionSnapshot,
    DisplayAction,
    DisplayActionKind,
    DisplayState,
    request_balance_refresh,
    set_controls_enabled,
    show_address,
    show_balance,
    show_network,
    show_status,
)

log = structlog.get_logger(__name__)

# DisplayState field updated by each label action
_FIELD_BY_KIND: dict[DisplayActionKind, str] = {
    DisplayActionKind.SHOW_STATUS: "status",
    DisplayActionKind.SHOW_ADDRESS: "address",
    DisplayActionKind.SHOW_BALANCE: "balance",
    DisplayActionKind.SHOW_NETWORK: "network",
    DisplayActionKind.SET_CONTROLS_ENABLED: "controls_enabled",
}


def reconcile(truth: ConnectionSnapshot, displayed: DisplayState) -> list[DisplayAction]:
    """Return the display actions that make ``displayed`` match ``truth``.

    A connect transition shows status, address and network, enables the
    controls and requests one balance refresh. A disconnect transition
    clears every label and disables the controls. When the two already
    agree no actions are returned, so repeated calls with an unchanged
    snapshot are no-ops.

    Args:
        truth: Latest snapshot from the wallet bridge.
        displayed: What the panel currently shows.

    Returns:
        Ordered list of actions, possibly empty.
    """
    if truth.connected and not displayed.shows_connected:
        log.debug("reconcile_connect_transition", network=truth.network_name)
        return [
            show_status(STATUS_CONNECTED),
            show_address(truth.address),
            show_network(truth.network_name),
            set_controls_enabled(True),
            request_balance_refresh(),
        ]

    if not truth.connected and displayed.shows_connected:
        log.debug("reconcile_disconnect_transition")
        return [
            show_status(STATUS_DISCONNECTED),
            show_address(""),
            show_balance(""),
            show_network(""),
            set_controls_enabled(False),
        ]

    return []


def apply_actions(displayed: DisplayState, actions: Iterable[DisplayAction]) -> DisplayState:
    """Return a new DisplayState with ``actions`` applied in order.

    REQUEST_BALANCE_REFRESH carries no label change and is skipped.
    """
    updates: dict[str, str | bool | None] = {}
    for action in actions:
        field_name = _FIELD_BY_KIND.get(action.kind)
        if field_name is not None:
            updates[field_name] = action.value

    if not updates:
        return displayed
    return displayed.model_copy(update=updates)
