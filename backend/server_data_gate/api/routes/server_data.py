"""Server-Data Routes — expose the global and per-account gates over HTTP.

Invariants:
    - Request bodies validated by Pydantic before reaching the handler
    - Handlers decode the snapshot, call the service, return its report unchanged
    - Nothing is stored: every request is evaluated against its own snapshot
"""

from dataclasses import asdict

from fastapi import APIRouter

from server_data_gate.core.account_state_snapshot import (
    account_state_from_snapshot,
    global_state_from_snapshot,
)
from server_data_gate.core.domain_types import AccountIdentity
from server_data_gate.schemas.state import (
    AccountCheckRequest,
    GlobalStateSnapshot,
    ServerDataResponse,
)
from server_data_gate.services.server_data_check import (
    check_account,
    check_active_account,
)

router = APIRouter(prefix="/api/v1/server-data", tags=["server-data"])


@router.post("/active", response_model=ServerDataResponse)
async def check_active_account_route(body: GlobalStateSnapshot):
    """Whether the active account has trustworthy server data."""
    global_state = global_state_from_snapshot(body.model_dump())
    report = check_active_account(global_state)
    return ServerDataResponse(**asdict(report))


@router.post("/account", response_model=ServerDataResponse)
async def check_account_route(body: AccountCheckRequest):
    """Whether one account's state has trustworthy server data."""
    state = account_state_from_snapshot(body.state.model_dump())
    identity = (
        AccountIdentity(
            realm_url=body.identity.realm_url, email=body.identity.email,
        )
        if body.identity else None
    )
    report = check_account(state, identity)
    return ServerDataResponse(**asdict(report))
