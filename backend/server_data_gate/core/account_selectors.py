"""Account Selectors — pure accessors over GlobalState and PerAccountState.

Invariants:
    - No selector raises for a well-formed state: absence is returned as None / empty
    - try_get_active_account_state returns None when there are no accounts,
      when the active marker is unset, or when it names an account with no bundle
"""

from server_data_gate.core.account_state import (
    Auth, GlobalState, PerAccountState, User,
)
from server_data_gate.core.domain_types import UserId


def try_get_active_account_state(global_state: GlobalState) -> PerAccountState | None:
    """Bundle of the active account, or None if no account is active."""
    if global_state.active_account is None:
        return None
    return global_state.accounts.get(global_state.active_account)


def try_get_auth(state: PerAccountState) -> Auth | None:
    """Auth of this account, or None if it is logged out."""
    return state.auth


def get_users(state: PerAccountState) -> tuple[User, ...]:
    return state.users


def get_users_by_id(state: PerAccountState) -> dict[UserId, User]:
    """Lookup from user id to record. Later duplicates win."""
    return {user.user_id: user for user in state.users}


def get_own_user_id(state: PerAccountState) -> UserId | None:
    return state.realm.self_user_id
