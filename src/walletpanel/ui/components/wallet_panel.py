"""Wallet panel component.

Displays:
- Connection status ("Connected to MetaMask")
- Account address
- Balance with refresh
- Network name

Button callbacks go through a WalletPanelController kept in ``gr.State``, one
per browser session; this module only renders its DisplayState.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import gradio as gr
import structlog

from walletpanel.config.settings import get_settings
from walletpanel.core.connection.controller import WalletPanelController
from walletpanel.models.connection import DisplayState

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PanelView:
    """Label text and button interactivity for one render."""

    status: str
    address: str
    balance: str
    network: str
    balance_enabled: bool
    disconnect_enabled: bool


def format_status_label(state: DisplayState, wallet_name: str) -> str:
    """Format status line, naming the wallet once connected."""
    if state.shows_connected:
        return f"Connected to {wallet_name}"
    return state.status


def format_network_label(network: str) -> str:
    """Format network line, empty when no network is shown."""
    return f"Network: {network}" if network else ""


def format_balance_label(balance: str) -> str:
    """Format balance line, empty when no balance is shown."""
    return f"Balance: {balance}" if balance else ""


def render_panel(state: DisplayState, wallet_name: str) -> PanelView:
    """Turn a DisplayState into the panel's label text."""
    return PanelView(
        status=format_status_label(state, wallet_name),
        address=state.address,
        balance=format_balance_label(state.balance),
        network=format_network_label(state.network),
        balance_enabled=state.controls_enabled,
        disconnect_enabled=state.controls_enabled,
    )


def create_wallet_panel(new_controller: Callable[[], WalletPanelController]) -> None:
    """Create the wallet panel UI inside the current Blocks context.

    Args:
        new_controller: Called once per session to build that session's controller.
    """
    wallet_name = get_settings().wallet_name

    gr.Markdown(f"## {wallet_name} Wallet")

    initial = render_panel(DisplayState(), wallet_name)
    session = gr.State(new_controller)

    with gr.Row():
        with gr.Column(scale=2):
            status_display = gr.Markdown(initial.status)
            address_display = gr.Textbox(
                label="Wallet Address",
                value=initial.address,
                interactive=False,
                max_lines=1,
            )
            network_display = gr.Markdown(initial.network)

        with gr.Column(scale=2):
            balance_display = gr.Markdown(initial.balance)

    with gr.Row():
        connect_btn = gr.Button("Connect", variant="primary", size="sm")
        disconnect_btn = gr.Button(
            "Disconnect", size="sm", interactive=initial.disconnect_enabled
        )
        balance_btn = gr.Button(
            "Get Balance", size="sm", interactive=initial.balance_enabled
        )

    outputs = [
        status_display,
        address_display,
        balance_display,
        network_display,
        disconnect_btn,
        balance_btn,
    ]
    session_outputs = [*outputs, session]

    def _outputs(controller: WalletPanelController) -> tuple[Any, ...]:
        view = render_panel(controller.state, wallet_name)
        return (
            view.status,
            view.address,
            view.balance,
            view.network,
            gr.update(interactive=view.disconnect_enabled),
            gr.update(interactive=view.balance_enabled),
            controller,
        )

    async def do_connect(controller: WalletPanelController) -> tuple[Any, ...]:
        """Handle Connect click."""
        log.debug("wallet_panel_connect_clicked")
        await controller.connect()
        return _outputs(controller)

    async def do_disconnect(controller: WalletPanelController) -> tuple[Any, ...]:
        """Handle Disconnect click."""
        log.debug("wallet_panel_disconnect_clicked")
        await controller.disconnect()
        return _outputs(controller)

    async def do_refresh_balance(controller: WalletPanelController) -> tuple[Any, ...]:
        """Handle Get Balance click."""
        log.debug("wallet_panel_balance_clicked")
        await controller.refresh_balance()
        return _outputs(controller)

    # Wire up events
    connect_btn.click(fn=do_connect, inputs=[session], outputs=session_outputs)
    disconnect_btn.click(fn=do_disconnect, inputs=[session], outputs=session_outputs)
    balance_btn.click(fn=do_refresh_balance, inputs=[session], outputs=session_outputs)
