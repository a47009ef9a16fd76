"""
In-memory models for the stub console.

The stub console only needs enough state to authenticate the seeded
accounts and decide what the top bar and license dialog show, so
accounts live in a plain dictionary rather than a database.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Authority(str, Enum):
    """System-level authorities granted to an account."""

    ADMIN = "ROLE_ADMIN"
    ANALYST = "ROLE_ANALYST"
    MODELER = "ROLE_MODELER"
    ALL_USERS = "ALL_USERS"


class ProjectPermission(str, Enum):
    """Per-project permission levels, strongest first."""

    ADMINISTRATION = "ADMINISTRATION"
    MANAGEMENT = "MANAGEMENT"
    OPERATION = "OPERATION"
    QUERY = "QUERY"


@dataclass
class UserAccount:
    """
    A console user.

    Attributes:
        username: Login name, compared case-sensitively.
        password: Plain-text password (stub only).
        authorities: System authorities held by the user.
        projects: Project name -> permission held on that project.
    """

    username: str
    password: str = field(repr=False)
    authorities: list[Authority] = field(default_factory=lambda: [Authority.ALL_USERS])
    projects: dict[str, ProjectPermission] = field(default_factory=dict)

    @property
    def is_system_admin(self) -> bool:
        return Authority.ADMIN in self.authorities

    def is_project_admin(self, project: str) -> bool:
        """Return True when the user administers the given project."""
        return self.projects.get(project) == ProjectPermission.ADMINISTRATION

    def to_dict(self) -> dict[str, Any]:
        """Serialize the account without its password."""
        return {
            "username": self.username,
            "authorities": [{"authority": a.value} for a in self.authorities],
            "projects": {name: perm.value for name, perm in self.projects.items()},
        }


@dataclass(frozen=True)
class LicenseInfo:
    """What the license dialog shows after login."""

    show_notice: bool = True
    title: str = "License Notice"
    message: str = "Your license will expire in 30 days. Please contact the administrator."


class AccountStore:
    """Username-keyed collection of accounts."""

    def __init__(self, accounts: list[UserAccount] | None = None):
        self._accounts: dict[str, UserAccount] = {}
        for account in accounts or []:
            self.add(account)

    def add(self, account: UserAccount) -> None:
        if account.username in self._accounts:
            raise ValueError(f"Account '{account.username}' already exists")
        self._accounts[account.username] = account

    def get(self, username: str) -> UserAccount | None:
        return self._accounts.get(username)

    def authenticate(self, username: str, password: str) -> UserAccount | None:
        """
        Check a username/password pair.

        Args:
            username: Login name (exact match).
            password: Password to compare.

        Returns:
            The matching account, or None when the pair is invalid.
        """
        account = self._accounts.get(username)
        if account is None or account.password != password:
            return None
        return account

    def __len__(self) -> int:
        return len(self._accounts)


# Accounts every stub console starts with
SYSTEM_ADMIN_USERNAME = "ADMIN"
SYSTEM_ADMIN_PASSWORD = "KYLIN"
PROJECT_ADMIN_USERNAME = "project_admin"
PROJECT_ADMIN_PASSWORD = "ProjectAdmin@2024"


def seed_accounts(project: str) -> AccountStore:
    """
    Build the account store a fresh stub console starts with.

    Args:
        project: Name of the project the project administrator manages.

    Returns:
        Store holding a system admin and a project administrator.
    """
    return AccountStore([
        UserAccount(
            username=SYSTEM_ADMIN_USERNAME,
            password=SYSTEM_ADMIN_PASSWORD,
            authorities=[Authority.ADMIN, Authority.ALL_USERS],
        ),
        UserAccount(
            username=PROJECT_ADMIN_USERNAME,
            password=PROJECT_ADMIN_PASSWORD,
            projects={project: ProjectPermission.ADMINISTRATION},
        ),
    ])
