"""Account State Snapshot — decode/encode rehydrated state to and from JSON-safe dicts.

Invariants:
    - Each subtree key is optional and falls back to its empty state on its own:
      missing auth -> None, missing users -> (), missing realm -> RealmState()
    - An auth entry with an empty api_key decodes to None (logged out)
    - Malformed content raises SnapshotDecodeError naming the offending field
    - *_to_snapshot produces a dict that *_from_snapshot accepts

Design Decisions:
    - Decoding is lenient about absence and strict about shape: absence is what a
      torn rehydrate looks like, a wrong shape is a caller bug
    - Accounts serialized as a list (identity is not a JSON object key)
"""

from typing import Any

from server_data_gate.core.account_state import (
    Auth, GlobalState, PerAccountState, RealmState, User,
)
from server_data_gate.core.domain_types import AccountIdentity, UserId
from server_data_gate.core.errors import SnapshotDecodeError

_GATE_SUBTREES: tuple[str, ...] = ("auth", "users", "realm")


def _require_mapping(value: Any, path: str) -> dict:
    if not isinstance(value, dict):
        raise SnapshotDecodeError("expected an object", path)
    return value


def _require_str(data: dict, key: str, path: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise SnapshotDecodeError(f"'{key}' must be a string", path)
    return value


def _optional_str(data: dict, key: str, path: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise SnapshotDecodeError(f"'{key}' must be a string or null", path)
    return value


def _decode_user_id(value: Any, path: str) -> UserId:
    # bool is an int subclass; a True/False id is always a bug
    if isinstance(value, bool) or not isinstance(value, int):
        raise SnapshotDecodeError("user id must be an integer", path)
    return UserId(value)


def _decode_auth(data: Any, path: str) -> Auth | None:
    if data is None:
        return None
    data = _require_mapping(data, path)
    api_key = data.get("api_key", "")
    if not isinstance(api_key, str):
        raise SnapshotDecodeError("'api_key' must be a string", path)
    if api_key == "":
        return None
    return Auth(
        realm_url=_require_str(data, "realm_url", path),
        email=_require_str(data, "email", path),
        api_key=api_key,
    )


def _decode_users(data: Any, path: str) -> tuple[User, ...]:
    if data is None:
        return ()
    if not isinstance(data, list):
        raise SnapshotDecodeError("expected a list of users", path)
    users = []
    for index, raw in enumerate(data):
        item_path = f"{path}[{index}]"
        raw = _require_mapping(raw, item_path)
        if "user_id" not in raw:
            raise SnapshotDecodeError("user record has no 'user_id'", item_path)
        users.append(User(
            user_id=_decode_user_id(raw["user_id"], f"{item_path}.user_id"),
            full_name=raw.get("full_name") or "",
            email=raw.get("email") or "",
        ))
    return tuple(users)


def _decode_realm(data: Any, path: str) -> RealmState:
    if data is None:
        return RealmState()
    data = _require_mapping(data, path)
    raw_id = data.get("self_user_id")
    return RealmState(
        self_user_id=(
            None if raw_id is None
            else _decode_user_id(raw_id, f"{path}.self_user_id")
        ),
        realm_url=_optional_str(data, "realm_url", path),
        realm_name=_optional_str(data, "realm_name", path),
    )


def _decode_identity(data: Any, path: str) -> AccountIdentity:
    data = _require_mapping(data, path)
    return AccountIdentity(
        realm_url=_require_str(data, "realm_url", path),
        email=_require_str(data, "email", path),
    )


def account_state_from_snapshot(data: dict | None, path: str = "state") -> PerAccountState:
    """Reconstruct PerAccountState from a snapshot dict. Pure, no IO."""
    if data is None:
        return PerAccountState()
    data = _require_mapping(data, path)
    return PerAccountState(
        auth=_decode_auth(data.get("auth"), f"{path}.auth"),
        users=_decode_users(data.get("users"), f"{path}.users"),
        realm=_decode_realm(data.get("realm"), f"{path}.realm"),
        other_subtrees={
            k: v for k, v in data.items() if k not in _GATE_SUBTREES
        },
    )


def global_state_from_snapshot(data: dict | None) -> GlobalState:
    """Reconstruct GlobalState from a snapshot dict. Pure, no IO.

    Shape: {"accounts": [{"identity": {...}, "state": {...}}, ...],
            "active_account": {...} | null}
    """
    if data is None:
        return GlobalState()
    data = _require_mapping(data, "global")
    raw_accounts = data.get("accounts")
    if raw_accounts is None:
        raw_accounts = []
    if not isinstance(raw_accounts, list):
        raise SnapshotDecodeError("expected a list of accounts", "accounts")

    accounts: dict[AccountIdentity, PerAccountState] = {}
    for index, raw in enumerate(raw_accounts):
        path = f"accounts[{index}]"
        raw = _require_mapping(raw, path)
        identity = _decode_identity(raw.get("identity"), f"{path}.identity")
        if identity in accounts:
            raise SnapshotDecodeError(f"duplicate account {identity}", path)
        accounts[identity] = account_state_from_snapshot(
            raw.get("state"), f"{path}.state",
        )

    raw_active = data.get("active_account")
    active = (
        None if raw_active is None
        else _decode_identity(raw_active, "active_account")
    )
    return GlobalState(accounts=accounts, active_account=active)


def _identity_to_snapshot(identity: AccountIdentity) -> dict:
    return {"realm_url": identity.realm_url, "email": identity.email}


def account_state_to_snapshot(state: PerAccountState) -> dict:
    """Serialize PerAccountState to a JSON-safe dict. Pure, no IO."""
    auth = state.auth
    return {
        **state.other_subtrees,
        "auth": None if auth is None else {
            "realm_url": auth.realm_url,
            "email": auth.email,
            "api_key": auth.api_key,
        },
        "users": [
            {"user_id": u.user_id, "full_name": u.full_name, "email": u.email}
            for u in state.users
        ],
        "realm": {
            "self_user_id": state.realm.self_user_id,
            "realm_url": state.realm.realm_url,
            "realm_name": state.realm.realm_name,
        },
    }


def global_state_to_snapshot(global_state: GlobalState) -> dict:
    """Serialize GlobalState to a JSON-safe dict. Pure, no IO."""
    active = global_state.active_account
    return {
        "accounts": [
            {
                "identity": _identity_to_snapshot(identity),
                "state": account_state_to_snapshot(state),
            }
            for identity, state in global_state.accounts.items()
        ],
        "active_account": None if active is None else _identity_to_snapshot(active),
    }
