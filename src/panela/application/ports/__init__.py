"""Application ports - interfaces for external adapters."""

from panela.application.ports.current_user_provider import CurrentUserProvider
from panela.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "CurrentUserProvider",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
