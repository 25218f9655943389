"""Test data factories using factory_boy.

These factories generate realistic test data for WalletPanel models.
"""

from tests.factories.connection import ConnectionSnapshotFactory, DisplayStateFactory

__all__ = [
    "ConnectionSnapshotFactory",
    "DisplayStateFactory",
]
