"""WalletPanel - Main application entry point."""

from walletpanel.config import get_settings
from walletpanel.config.logging import configure_logging, get_logger
from walletpanel.ui.app import create_app

log = get_logger(__name__)


def main() -> None:
    """Configure logging and serve the Gradio app."""
    configure_logging()
    settings = get_settings()

    log.info(
        "walletpanel_starting",
        version=settings.app_version,
        host=settings.host,
        port=settings.port,
        wallet_mode=settings.wallet_mode,
    )

    app = create_app()
    app.launch(server_name=settings.host, server_port=settings.port)


if __name__ == "__main__":
    main()
