"""Application settings using pydantic-settings."""

import string
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """WalletPanel configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    app_name: str = Field(default="WalletPanel", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level"
    )

    # Server
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=7860, ge=1, le=65535, description="Server port")

    # Display
    wallet_name: str = Field(default="MetaMask", description="Wallet shown in status label")
    currency_symbol: str = Field(
        default="SepoliaETH", description="Unit symbol appended to balances"
    )
    token_decimals: int = Field(
        default=18, ge=0, le=36, description="Decimals of the native token (wei scale)"
    )
    balance_error_message: str = Field(
        default="Error parsing balance",
        description="Balance label shown when the bridge returns malformed hex",
    )

    # Wallet bridge
    wallet_mode: Literal["simulation"] = Field(
        default="simulation", description="Wallet bridge implementation"
    )
    simulated_address: str = Field(
        default="0x71C7656EC7ab88b098defB751B7401B5f6d8976F",
        description="Address reported by the simulated bridge",
    )
    simulated_network_name: str = Field(
        default="Sepolia", description="Network reported by the simulated bridge"
    )
    simulated_balance_hex: str = Field(
        default="0xde0b6b3a7640000",
        description="Raw eth_getBalance result returned by the simulated bridge",
    )

    @field_validator("currency_symbol")
    @classmethod
    def validate_currency_symbol(cls, v: str) -> str:
        """Currency symbol must not be blank."""
        if not v.strip():
            raise ValueError("Currency symbol cannot be blank")
        return v.strip()

    @field_validator("simulated_address")
    @classmethod
    def validate_simulated_address(cls, v: str) -> str:
        """Validate Ethereum address format (0x + 40 hex digits)."""
        if not v.startswith(("0x", "0X")) or len(v) != 42:
            raise ValueError("Simulated address must be 0x followed by 40 hex digits")
        if not all(c in string.hexdigits for c in v[2:]):
            raise ValueError("Simulated address contains non-hex characters")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
