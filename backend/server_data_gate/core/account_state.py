"""Account State — immutable per-account bundles and the multi-account store.

Invariants:
    - Every subtree is independently optional/empty: auth may be None, users may be (),
      realm.self_user_id may be None, regardless of the other subtrees
    - GlobalState has a single active marker, so at most one bundle is active
    - All dataclasses are frozen; users is a tuple (snapshot, never mutated)

Design Decisions:
    - One explicit field per subtree instead of a nested dict: each torn combination
      is constructible directly in tests
    - other_subtrees kept opaque: the gate never reads it
"""

from dataclasses import dataclass, field
from typing import Any

from server_data_gate.core.domain_types import AccountIdentity, UserId


@dataclass(frozen=True)
class Auth:
    """Credentials of a logged-in account. Present only while logged in."""
    realm_url: str
    email: str
    api_key: str


@dataclass(frozen=True)
class User:
    """One user record from the server's user registry."""
    user_id: UserId
    full_name: str = ""
    email: str = ""


@dataclass(frozen=True)
class RealmState:
    """Realm/session metadata. self_user_id is reset and set independently of users."""
    self_user_id: UserId | None = None
    realm_url: str | None = None
    realm_name: str | None = None


@dataclass(frozen=True)
class PerAccountState:
    """State bundle for one account."""

    auth: Auth | None = None

    # Ordered as received from the server
    users: tuple[User, ...] = ()

    realm: RealmState = field(default_factory=RealmState)

    # Subtrees the gate does not inspect (messages, narrows, ...)
    other_subtrees: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GlobalState:
    """Whole store: every account's bundle plus the active-account marker."""

    accounts: dict[AccountIdentity, PerAccountState] = field(default_factory=dict)
    active_account: AccountIdentity | None = None

    @property
    def account_count(self) -> int:
        return len(self.accounts)
