"""Main Gradio application.

Creates the WalletPanel page with a single wallet panel. Each browser
session gets its own controller and bridge, so one visitor's connection
never shows up in another's panel.
"""

from collections.abc import Callable

import gradio as gr
import structlog

from walletpanel.config.settings import Settings, get_settings
from walletpanel.core.connection.controller import WalletPanelController
from walletpanel.services.wallet.bridge import WalletBridge
from walletpanel.services.wallet.factory import get_bridge
from walletpanel.ui.components.wallet_panel import create_wallet_panel

log = structlog.get_logger(__name__)


def controller_factory(
    settings: Settings,
    bridge_factory: Callable[[], WalletBridge] | None = None,
) -> Callable[[], WalletPanelController]:
    """Build the callable that creates one controller per session.

    Args:
        settings: Settings shared by every session.
        bridge_factory: Creates a bridge for a new session. Defaults to the
            one selected by settings.
    """

    def new_controller() -> WalletPanelController:
        bridge = bridge_factory() if bridge_factory else get_bridge(settings)
        log.debug("wallet_panel_session_started")
        return WalletPanelController(bridge, settings)

    return new_controller


def create_app(bridge_factory: Callable[[], WalletBridge] | None = None) -> gr.Blocks:
    """Create the WalletPanel Gradio app.

    Args:
        bridge_factory: Creates the wallet bridge for each session. Defaults
            to the one selected by settings.

    Returns:
        Gradio Blocks application.
    """
    settings = get_settings()

    with gr.Blocks(title=settings.app_name) as app:
        create_wallet_panel(controller_factory(settings, bridge_factory))

    log.debug("wallet_panel_app_created", wallet_mode=settings.wallet_mode)
    return app
