"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int; never compare bare ints against user records in gate logic
    - AccountIdentity is frozen and hashable (dict key of GlobalState.accounts)
    - Every gate condition and every external account event is an Enum member

Design Decisions:
    - NewType for ids: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (API responses)
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


@dataclass(frozen=True)
class AccountIdentity:
    """Which account a bundle belongs to: realm URL + login email."""
    realm_url: str
    email: str

    def __str__(self) -> str:
        return f"{self.email}@{self.realm_url}"


# ─── Enums ───────────────────────────────────────────────────────

class AccountEvent(str, Enum):
    """External transitions that write the auth/users/realm subtrees."""
    LOGIN_SUCCESS = "login_success"
    LOGOUT = "logout"
    ACCOUNT_SWITCH = "account_switch"
    ACCOUNT_REMOVE = "account_remove"
    REGISTER_COMPLETE = "register_complete"


class ServerDataCheck(str, Enum):
    """Named gate conditions, in evaluation order after active-account lookup."""
    NO_ACTIVE_ACCOUNT = "no_active_account"
    AUTH_MISSING = "auth_missing"
    USERS_EMPTY = "users_empty"
    SELF_USER_ID_MISSING = "self_user_id_missing"
    SELF_USER_UNKNOWN = "self_user_unknown"


@dataclass(frozen=True)
class ConditionLifecycle:
    """Which external events clear a failing condition and which create it."""
    resolved_by: tuple[AccountEvent, ...]
    created_by: tuple[AccountEvent, ...]


# Assumed transition rules of the external account/users/realm reducers.
# SELF_USER_UNKNOWN is never created after rehydrate; only a torn restore yields it.
CONDITION_LIFECYCLE: dict[ServerDataCheck, ConditionLifecycle] = {
    ServerDataCheck.NO_ACTIVE_ACCOUNT: ConditionLifecycle(
        resolved_by=(AccountEvent.LOGIN_SUCCESS,),
        created_by=(AccountEvent.ACCOUNT_REMOVE,),
    ),
    ServerDataCheck.AUTH_MISSING: ConditionLifecycle(
        resolved_by=(AccountEvent.LOGIN_SUCCESS,),
        created_by=(
            AccountEvent.ACCOUNT_REMOVE,
            AccountEvent.LOGOUT,
            AccountEvent.ACCOUNT_SWITCH,
        ),
    ),
    ServerDataCheck.USERS_EMPTY: ConditionLifecycle(
        resolved_by=(AccountEvent.REGISTER_COMPLETE,),
        created_by=(
            AccountEvent.LOGIN_SUCCESS,
            AccountEvent.LOGOUT,
            AccountEvent.ACCOUNT_SWITCH,
        ),
    ),
    ServerDataCheck.SELF_USER_ID_MISSING: ConditionLifecycle(
        resolved_by=(AccountEvent.REGISTER_COMPLETE,),
        created_by=(
            AccountEvent.LOGIN_SUCCESS,
            AccountEvent.LOGOUT,
            AccountEvent.ACCOUNT_SWITCH,
        ),
    ),
    ServerDataCheck.SELF_USER_UNKNOWN: ConditionLifecycle(
        resolved_by=(AccountEvent.REGISTER_COMPLETE,),
        created_by=(),
    ),
}
