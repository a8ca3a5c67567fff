"""State Schemas — Pydantic models for state snapshots posted to the gate endpoints.

Invariants:
    - Every subtree is optional: a torn snapshot is a valid request, not a 400
    - user ids are strict integers (no "7" or True coercion)
    - AccountStateSnapshot keeps unknown top-level keys (opaque subtrees)
    - AccountCheckRequest.state is required: no bundle is a contract violation

Design Decisions:
    - Schemas only check shape; core/account_state_snapshot.py builds the domain types
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class AuthSnapshot(BaseModel):
    """Auth subtree. An empty api_key means logged out."""
    realm_url: str
    email: str
    api_key: str = ""


class UserSnapshot(BaseModel):
    user_id: StrictInt
    full_name: str = ""
    email: str = ""


class RealmSnapshot(BaseModel):
    self_user_id: StrictInt | None = None
    realm_url: str | None = None
    realm_name: str | None = None


class AccountStateSnapshot(BaseModel):
    """One account's rehydrated state. Any subtree may be missing."""
    model_config = ConfigDict(extra="allow")

    auth: AuthSnapshot | None = None
    users: list[UserSnapshot] = Field(default_factory=list)
    realm: RealmSnapshot | None = None


class AccountIdentitySchema(BaseModel):
    realm_url: str = Field(min_length=1)
    email: str = Field(min_length=1)


class AccountEntry(BaseModel):
    identity: AccountIdentitySchema
    state: AccountStateSnapshot = Field(default_factory=AccountStateSnapshot)


class GlobalStateSnapshot(BaseModel):
    """Whole store: all accounts plus the active marker (null when unset)."""
    accounts: list[AccountEntry] = Field(default_factory=list)
    active_account: AccountIdentitySchema | None = None


class AccountCheckRequest(BaseModel):
    """Per-account check — state is mandatory."""
    identity: AccountIdentitySchema | None = None
    state: AccountStateSnapshot


class ServerDataResponse(BaseModel):
    """Gate answer; failure fields are null when have_server_data is true."""
    have_server_data: bool
    account: str | None = None
    failed_check: str | None = None
    message: str | None = None
    resolved_by: list[str] = Field(default_factory=list)
    created_by: list[str] = Field(default_factory=list)
