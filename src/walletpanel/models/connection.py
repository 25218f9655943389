"""Connection-state models.

ConnectionSnapshot is what the wallet bridge reports, DisplayState is what
the panel currently shows, and DisplayAction describes one change to it.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

STATUS_CONNECTED = "Connected"
STATUS_DISCONNECTED = "Disconnected"
STATUS_ERROR = "Error"


class ConnectionSnapshot(BaseModel):
    """Source-of-truth connection state captured from the wallet bridge.

    Attributes:
        connected: Whether the wallet is connected.
        address: Connected account address, empty when disconnected.
        network_name: Human-readable network name, e.g. ``Sepolia``.

    Example:
        snapshot = ConnectionSnapshot(
            connected=True,
            address="0x71C7656EC7ab88b098defB751B7401B5f6d8976F",
            network_name="Sepolia",
        )
    """

    model_config = ConfigDict(frozen=True)

    connected: bool = Field(description="Whether the wallet is connected")
    address: str = Field(default="", description="Connected account address")
    network_name: str = Field(default="", description="Network name")

    @classmethod
    def disconnected(cls) -> "ConnectionSnapshot":
        """Snapshot for a wallet that is not connected."""
        return cls(connected=False)


class DisplayState(BaseModel):
    """Labels and control state currently rendered by the panel.

    Instances are replaced, never mutated, as actions are applied.
    """

    model_config = ConfigDict(frozen=True)

    status: str = STATUS_DISCONNECTED
    address: str = ""
    balance: str = ""
    network: str = ""
    controls_enabled: bool = False

    @property
    def shows_connected(self) -> bool:
        """True when the panel currently presents the wallet as connected."""
        return self.status == STATUS_CONNECTED


class DisplayActionKind(str, Enum):
    """Kinds of display updates."""

    SHOW_STATUS = "show_status"
    SHOW_ADDRESS = "show_address"
    SHOW_BALANCE = "show_balance"
    SHOW_NETWORK = "show_network"
    SET_CONTROLS_ENABLED = "set_controls_enabled"
    REQUEST_BALANCE_REFRESH = "request_balance_refresh"  # Intent only, no label change


class DisplayAction(BaseModel):
    """One display update emitted by the reconciler or the controller."""

    model_config = ConfigDict(frozen=True)

    kind: DisplayActionKind
    value: str | bool | None = None


def show_status(text: str) -> DisplayAction:
    return DisplayAction(kind=DisplayActionKind.SHOW_STATUS, value=text)


def show_address(address: str) -> DisplayAction:
    return DisplayAction(kind=DisplayActionKind.SHOW_ADDRESS, value=address)


def show_balance(text: str) -> DisplayAction:
    return DisplayAction(kind=DisplayActionKind.SHOW_BALANCE, value=text)


def show_network(name: str) -> DisplayAction:
    return DisplayAction(kind=DisplayActionKind.SHOW_NETWORK, value=name)


def set_controls_enabled(enabled: bool) -> DisplayAction:
    return DisplayAction(kind=DisplayActionKind.SET_CONTROLS_ENABLED, value=enabled)


def request_balance_refresh() -> DisplayAction:
    return DisplayAction(kind=DisplayActionKind.REQUEST_BALANCE_REFRESH)
