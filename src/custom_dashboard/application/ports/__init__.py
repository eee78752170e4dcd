"""Application ports - interfaces for external adapters."""

from custom_dashboard.application.ports.token_provider import TokenProvider
from custom_dashboard.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "TokenProvider",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
