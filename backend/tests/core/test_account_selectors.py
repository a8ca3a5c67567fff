"""Account Selectors — tests for pure accessors over the store.

Tests cover:
    - active-account resolution: no accounts, unset marker, dangling marker, found
    - auth / users / own user id accessors return absence without raising
    - users_by_id lookup has defined-or-absent semantics
"""

from server_data_gate.core.account_selectors import (
    get_own_user_id,
    get_users,
    get_users_by_id,
    try_get_active_account_state,
    try_get_auth,
)
from server_data_gate.core.account_state import (
    Auth, GlobalState, PerAccountState, RealmState, User,
)
from server_data_gate.core.domain_types import AccountIdentity, UserId

ALICE = AccountIdentity(realm_url="https://chat.example.com", email="alice@example.com")
BOB = AccountIdentity(realm_url="https://chat.example.com", email="bob@example.com")


def test_no_accounts_resolves_to_none():
    assert try_get_active_account_state(GlobalState()) is None


def test_unset_marker_resolves_to_none():
    global_state = GlobalState(accounts={ALICE: PerAccountState()})
    assert try_get_active_account_state(global_state) is None


def test_dangling_marker_resolves_to_none():
    global_state = GlobalState(accounts={ALICE: PerAccountState()}, active_account=BOB)
    assert try_get_active_account_state(global_state) is None


def test_active_marker_resolves_to_its_bundle():
    alice_state = PerAccountState(users=(User(UserId(1)),))
    global_state = GlobalState(
        accounts={ALICE: alice_state, BOB: PerAccountState()},
        active_account=ALICE,
    )
    assert try_get_active_account_state(global_state) is alice_state
    assert global_state.account_count == 2


def test_try_get_auth():
    auth = Auth(realm_url=ALICE.realm_url, email=ALICE.email, api_key="k")
    assert try_get_auth(PerAccountState()) is None
    assert try_get_auth(PerAccountState(auth=auth)) is auth


def test_get_users_preserves_order():
    users = (User(UserId(3)), User(UserId(1)), User(UserId(2)))
    assert get_users(PerAccountState(users=users)) == users


def test_users_by_id_lookup():
    state = PerAccountState(users=(User(UserId(7), "a"), User(UserId(8), "b")))
    by_id = get_users_by_id(state)
    assert by_id.get(UserId(7)).full_name == "a"
    assert by_id.get(UserId(9)) is None
    assert by_id.get(None) is None


def test_own_user_id():
    assert get_own_user_id(PerAccountState()) is None
    state = PerAccountState(realm=RealmState(self_user_id=UserId(4)))
    assert get_own_user_id(state) == 4


def test_identity_str():
    assert str(ALICE) == "alice@example.com@https://chat.example.com"
