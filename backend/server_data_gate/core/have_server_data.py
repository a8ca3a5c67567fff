"""Server-Data Gate — is the data in this store consistent enough to show the main UI?

On rehydrate some subtrees can hold server data while others don't, reflecting
different points in time from the previous run: an account switch clears server
data, and if the process dies right after, the clearing may have reached some
subtrees but not others. These checks catch exactly that torn state.

Invariants:
    - All functions are PURE: no IO, no logging, no mutation, never raise on a
      well-formed state
    - check_* return a failure dict on violation, None on success
    - diagnose_server_data chains the checks in fixed order, first failure wins
    - get_have_server_data(state) is exactly `diagnose_server_data(state) is None`
    - The global gate returns False for "no active account" without delegating
    - get_have_server_data(None) raises MissingAccountStateError (never False)

Scope:
    - Only auth, users and realm.self_user_id are compared. Other server subtrees
      reset to a valid empty state, and messages/narrows referencing unknown users
      are not cross-checked. The initial fetch after showing the main UI replaces
      them anyway.

Design Decisions:
    - Return dicts (not exceptions) for check failures, same shape as other gate
      results, so callers can report which condition tripped
    - Lifecycle events attached to each failure come from CONDITION_LIFECYCLE
"""

from server_data_gate.core.account_selectors import (
    get_own_user_id,
    get_users,
    get_users_by_id,
    try_get_active_account_state,
    try_get_auth,
)
from server_data_gate.core.account_state import GlobalState, PerAccountState
from server_data_gate.core.domain_types import CONDITION_LIFECYCLE, ServerDataCheck
from server_data_gate.core.errors import MissingAccountStateError


def _failure(check: ServerDataCheck, message: str) -> dict:
    lifecycle = CONDITION_LIFECYCLE[check]
    return {
        "status": "invalid",
        "error_code": check.value,
        "message": message,
        "resolved_by": [e.value for e in lifecycle.resolved_by],
        "created_by": [e.value for e in lifecycle.created_by],
    }


def check_auth(state: PerAccountState) -> dict | None:
    """Rule 1: server data only exists while the account is logged in."""
    if not try_get_auth(state):
        return _failure(
            ServerDataCheck.AUTH_MISSING,
            "Account is not logged in; any server data present is stale.",
        )
    return None


def check_users_nonempty(state: PerAccountState) -> dict | None:
    """Rule 2: valid server data knows at least the self user."""
    if len(get_users(state)) == 0:
        return _failure(
            ServerDataCheck.USERS_EMPTY,
            "User registry is empty; expected at least the self user.",
        )
    return None


def check_self_user_id(state: PerAccountState) -> dict | None:
    """Rule 3: realm must carry the self user's id."""
    if get_own_user_id(state) is None:
        return _failure(
            ServerDataCheck.SELF_USER_ID_MISSING,
            "Realm state has no self user id.",
        )
    return None


def check_self_user_known(state: PerAccountState) -> dict | None:
    """Rule 4: the self user named by realm is among the known users."""
    own_user_id = get_own_user_id(state)
    if get_users_by_id(state).get(own_user_id) is None:
        return _failure(
            ServerDataCheck.SELF_USER_UNKNOWN,
            f"Self user id {own_user_id} is not in the user registry.",
        )
    return None


def diagnose_server_data(state: PerAccountState) -> dict | None:
    """Chain all per-account checks. Returns first failure or None."""
    if state is None:
        raise MissingAccountStateError()
    return (
        check_auth(state)
        or check_users_nonempty(state)
        or check_self_user_id(state)
        or check_self_user_known(state)
    )


def diagnose_active_account(global_state: GlobalState) -> dict | None:
    """Active-account lookup, then the per-account chain."""
    state = try_get_active_account_state(global_state)
    if state is None:
        return _failure(
            ServerDataCheck.NO_ACTIVE_ACCOUNT,
            "No active account; any server data present cannot be valid.",
        )
    return diagnose_server_data(state)


def get_have_server_data(state: PerAccountState) -> bool:
    """Whether this account's bundle has trustworthy server data.

    Raises MissingAccountStateError if state is None.
    """
    return diagnose_server_data(state) is None


def get_have_server_data_global(global_state: GlobalState) -> bool:
    """Whether the active account has trustworthy server data.

    False when no account is active; otherwise exactly get_have_server_data.
    """
    state = try_get_active_account_state(global_state)
    if state is None:
        return False
    return get_have_server_data(state)
