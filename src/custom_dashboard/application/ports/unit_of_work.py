"""Unit of Work port - transactional boundary."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from custom_dashboard.application.ports.repositories import (
    DashboardRepository,
    RoleRepository,
    TenantRepository,
    UserRepository,
    WidgetRepository,
)


class UnitOfWork(Protocol):
    """Repositories bound to one transaction."""

    tenants: TenantRepository
    dashboards: DashboardRepository
    users: UserRepository
    roles: RoleRepository
    widgets: WidgetRepository

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Opens a unit of work; leaving the block commits, an exception rolls back."""

    def __call__(self) -> AbstractAsyncContextManager[UnitOfWork]: ...
