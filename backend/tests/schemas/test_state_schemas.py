"""State schema validation — snapshot request bodies at the API boundary.

Invariants:
    - Every subtree of AccountStateSnapshot is optional
    - user ids are strict integers
    - Unknown top-level subtrees are kept
    - AccountCheckRequest requires state; identities require non-empty fields
"""

import pytest
from pydantic import ValidationError

from server_data_gate.schemas.state import (
    AccountCheckRequest,
    AccountIdentitySchema,
    AccountStateSnapshot,
    GlobalStateSnapshot,
    UserSnapshot,
)


def test_empty_account_snapshot_is_valid():
    snapshot = AccountStateSnapshot()
    assert snapshot.auth is None
    assert snapshot.users == []
    assert snapshot.realm is None


def test_user_id_must_be_strict_int():
    with pytest.raises(ValidationError):
        UserSnapshot(user_id="7")
    with pytest.raises(ValidationError):
        UserSnapshot(user_id=True)


def test_self_user_id_may_be_null():
    snapshot = AccountStateSnapshot(realm={"self_user_id": None})
    assert snapshot.realm.self_user_id is None


def test_extra_subtrees_kept_in_dump():
    snapshot = AccountStateSnapshot(narrows={"all": [1]})
    assert snapshot.model_dump()["narrows"] == {"all": [1]}


def test_auth_api_key_defaults_to_empty():
    snapshot = AccountStateSnapshot(auth={"realm_url": "https://r", "email": "a@r"})
    assert snapshot.auth.api_key == ""


def test_account_check_requires_state():
    with pytest.raises(ValidationError):
        AccountCheckRequest()


def test_identity_fields_must_be_non_empty():
    with pytest.raises(ValidationError):
        AccountIdentitySchema(realm_url="", email="a@r")


def test_global_snapshot_defaults():
    snapshot = GlobalStateSnapshot()
    assert snapshot.accounts == []
    assert snapshot.active_account is None
