"""Pytest fixtures for custom dashboard tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest

from custom_dashboard.domain.entities import (
    CustomWidget,
    Dashboard,
    DashboardUser,
    DirectoryUser,
    Role,
    Subtenant,
    Tenant,
    TenantContext,
    WidgetSetting,
)
from custom_dashboard.domain.value_objects import ProfileName


TENANT = TenantContext(tenant_id=1, subtenant_id=10, tenant_code="acme", subtenant_code="emea")
OTHER_TENANT = TenantContext(tenant_id=2, subtenant_id=20, tenant_code="globex", subtenant_code="us")


def make_user(user_id: int, name: str, profile: str | None) -> DirectoryUser:
    return DirectoryUser(
        id=user_id,
        display_name=name,
        profile_name=ProfileName(profile) if profile else None,
    )


# --- Fake repositories ---


class FakeTenantRepository:
    """In-memory tenant repository."""

    def __init__(self) -> None:
        self._tenants: dict[str, Tenant] = {}
        self._subtenants: dict[tuple[int, str], Subtenant] = {}

    async def get_active_tenant(self, code: str) -> Tenant | None:
        tenant = self._tenants.get(code)
        if not tenant or tenant.status != "ACTIVE":
            return None
        return tenant

    async def get_active_subtenant(self, tenant_id: int, code: str) -> Subtenant | None:
        sub = self._subtenants.get((tenant_id, code))
        if not sub or sub.status != "ACTIVE":
            return None
        return sub

    def add_tenant(self, tenant: Tenant) -> None:
        """Helper to add tenant for tests."""
        self._tenants[tenant.code] = tenant

    def add_subtenant(self, subtenant: Subtenant) -> None:
        """Helper to add subtenant for tests."""
        self._subtenants[(subtenant.tenant_id, subtenant.code)] = subtenant


class FakeUserRepository:
    """In-memory directory users, keyed by tenant scope."""

    def __init__(self) -> None:
        self._by_scope: dict[tuple[int, int], list[DirectoryUser]] = {}

    async def list_active(self, tenant: TenantContext) -> list[DirectoryUser]:
        users = self._by_scope.get((tenant.tenant_id, tenant.subtenant_id), [])
        return [u for u in users if u.status == "ACTIVE"]

    def add_users(self, tenant: TenantContext, users: list[DirectoryUser]) -> None:
        self._by_scope.setdefault((tenant.tenant_id, tenant.subtenant_id), []).extend(users)

    def names(self) -> dict[int, tuple[str, str | None]]:
        return {
            u.id: (u.display_name, u.profile_name)
            for users in self._by_scope.values()
            for u in users
        }


class FakeRoleRepository:
    """In-memory roles with members."""

    def __init__(self) -> None:
        self._by_scope: dict[tuple[int, int], list[Role]] = {}

    async def list_with_members(self, tenant: TenantContext) -> list[Role]:
        return list(self._by_scope.get((tenant.tenant_id, tenant.subtenant_id), []))

    def add_roles(self, tenant: TenantContext, roles: list[Role]) -> None:
        self._by_scope.setdefault((tenant.tenant_id, tenant.subtenant_id), []).extend(roles)


class FakeWidgetRepository:
    """In-memory custom widgets."""

    def __init__(self) -> None:
        self._by_scope: dict[tuple[int, int], list[CustomWidget]] = {}

    async def list_custom(self, tenant: TenantContext) -> list[CustomWidget]:
        return list(self._by_scope.get((tenant.tenant_id, tenant.subtenant_id), []))

    def add_widgets(self, tenant: TenantContext, widgets: list[CustomWidget]) -> None:
        self._by_scope.setdefault((tenant.tenant_id, tenant.subtenant_id), []).extend(widgets)


class FakeDashboardRepository:
    """In-memory dashboards with widget and user mappings."""

    def __init__(self, users: FakeUserRepository, widgets: FakeWidgetRepository) -> None:
        self._users = users
        self._widgets = widgets
        self._by_id: dict[int, tuple[TenantContext, Dashboard]] = {}
        self._widget_map: dict[int, list[int]] = {}
        self._user_map: dict[int, list[int]] = {}
        self._next_id = 1

    def _get(self, dashboard_id: int, tenant: TenantContext) -> Dashboard | None:
        entry = self._by_id.get(dashboard_id)
        if not entry:
            return None
        scope, dashboard = entry
        if (scope.tenant_id, scope.subtenant_id) != (tenant.tenant_id, tenant.subtenant_id):
            return None
        return dashboard

    def _snapshot(self, dashboard: Dashboard, tenant: TenantContext) -> Dashboard:
        names = self._users.names()
        widgets = {w.id: w for ws in self._widgets._by_scope.values() for w in ws}
        users = []
        for i, user_id in enumerate(self._user_map.get(dashboard.id, []), start=1):
            name, profile = names.get(user_id, (f"User {user_id}", None))
            users.append(DashboardUser(i, user_id, name, profile))
        return Dashboard(
            id=dashboard.id,
            tenant_id=tenant.tenant_id,
            subtenant_id=tenant.subtenant_id,
            name=dashboard.name,
            description=dashboard.description,
            widget_cfg=list(dashboard.widget_cfg),
            custom_widgets=[
                widgets[w] for w in self._widget_map.get(dashboard.id, []) if w in widgets
            ],
            users=users,
        )

    async def list(self, tenant: TenantContext) -> list[Dashboard]:
        items = [
            self._snapshot(d, tenant)
            for d in (self._get(i, tenant) for i in self._by_id)
            if d
        ]
        return sorted(items, key=lambda d: d.id, reverse=True)

    async def list_for_user(self, user_id: int, tenant: TenantContext) -> list[Dashboard]:
        items = [
            self._snapshot(d, tenant)
            for i, d in ((i, self._get(i, tenant)) for i in self._by_id)
            if d and user_id in self._user_map.get(i, [])
        ]
        return sorted(items, key=lambda d: d.name)

    async def get_by_id(self, dashboard_id: int, tenant: TenantContext) -> Dashboard | None:
        dashboard = self._get(dashboard_id, tenant)
        return self._snapshot(dashboard, tenant) if dashboard else None

    async def exists(self, dashboard_id: int, tenant: TenantContext) -> bool:
        return self._get(dashboard_id, tenant) is not None

    async def create(
        self,
        tenant: TenantContext,
        name: str,
        description: str,
        widget_cfg: list[WidgetSetting],
    ) -> int:
        dashboard_id = self._next_id
        self._next_id += 1
        self._by_id[dashboard_id] = (
            tenant,
            Dashboard(
                id=dashboard_id,
                tenant_id=tenant.tenant_id,
                subtenant_id=tenant.subtenant_id,
                name=name,
                description=description,
                widget_cfg=list(widget_cfg),
            ),
        )
        return dashboard_id

    async def update(
        self,
        dashboard_id: int,
        tenant: TenantContext,
        name: str,
        description: str,
        widget_cfg: list[WidgetSetting],
    ) -> None:
        dashboard = self._get(dashboard_id, tenant)
        if dashboard:
            dashboard.name = name
            dashboard.description = description
            dashboard.widget_cfg = list(widget_cfg)

    async def delete(self, dashboard_ids: list[int], tenant: TenantContext) -> int:
        deleted = 0
        for dashboard_id in dashboard_ids:
            if self._get(dashboard_id, tenant):
                self._by_id.pop(dashboard_id)
                self._widget_map.pop(dashboard_id, None)
                self._user_map.pop(dashboard_id, None)
                deleted += 1
        return deleted

    async def replace_custom_widgets(
        self, dashboard_id: int, tenant: TenantContext, widget_ids: list[int]
    ) -> None:
        self._widget_map[dashboard_id] = list(widget_ids)

    async def list_user_ids(self, dashboard_id: int, tenant: TenantContext) -> list[int]:
        if not self._get(dashboard_id, tenant):
            return []
        return sorted(self._user_map.get(dashboard_id, []))

    async def replace_users(
        self, dashboard_id: int, tenant: TenantContext, user_ids: list[int]
    ) -> None:
        self._user_map[dashboard_id] = list(user_ids)

    async def has_user(self, dashboard_id: int, user_id: int, tenant: TenantContext) -> bool:
        return user_id in self._user_map.get(dashboard_id, [])

    async def add_user(self, dashboard_id: int, user_id: int, tenant: TenantContext) -> None:
        self._user_map.setdefault(dashboard_id, []).append(user_id)

    async def remove_user(self, dashboard_id: int, user_id: int, tenant: TenantContext) -> bool:
        mapped = self._user_map.get(dashboard_id, [])
        if user_id not in mapped:
            return False
        mapped.remove(user_id)
        return True


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.tenants = FakeTenantRepository()
        self.users = FakeUserRepository()
        self.roles = FakeRoleRepository()
        self.widgets = FakeWidgetRepository()
        self.dashboards = FakeDashboardRepository(self.users, self.widgets)
        self.committed = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        pass


def seed_directory(uow: FakeUnitOfWork, tenant: TenantContext = TENANT) -> None:
    """Directory used across tests.

    Profiles: Sales = {1, 2, 3}, Ops = {4, 5}, Finance = {6}.
    Roles: Managers (id 100) = {2, 4}, Auditors (id 101) = {5, 6}.
    """
    uow.users.add_users(
        tenant,
        [
            make_user(1, "Alice", "Sales"),
            make_user(2, "Bob", "Sales"),
            make_user(3, "Carol", "Sales"),
            make_user(4, "Dana", "Ops"),
            make_user(5, "Eve", "Ops"),
            make_user(6, "Frank", "Finance"),
        ],
    )
    uow.roles.add_roles(
        tenant,
        [
            Role(id=100, name="Managers", role_type="Business", members=(2, 4)),
            Role(id=101, name="Auditors", role_type="Compliance", members=(5, 6)),
        ],
    )


# --- Fixtures ---


@pytest.fixture
def tenant() -> TenantContext:
    return TENANT


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork with the sample directory."""
    uow = FakeUnitOfWork()
    seed_directory(uow)
    return uow


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager that yields the same fake UoW."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield fake_uow

    return _factory


@pytest.fixture
def directory_users() -> list[DirectoryUser]:
    return [
        make_user(1, "Alice", "Sales"),
        make_user(2, "Bob", "Sales"),
        make_user(3, "Carol", "Sales"),
        make_user(4, "Dana", "Ops"),
        make_user(5, "Eve", "Ops"),
        make_user(6, "Frank", "Finance"),
    ]


@pytest.fixture
def directory_roles() -> list[Role]:
    return [
        Role(id=100, name="Managers", role_type="Business", members=(2, 4)),
        Role(id=101, name="Auditors", role_type="Compliance", members=(5, 6)),
    ]
