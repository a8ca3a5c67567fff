"""Server-Data Check Service — runs the gate and reports which condition tripped.

Invariants:
    - report.have_server_data always equals the corresponding core gate's answer
    - Never mutates state and never schedules refreshes or navigation
    - INFO log when data is valid, WARNING naming the failed check otherwise
"""

import logging
from dataclasses import dataclass, field

from server_data_gate.core.account_selectors import try_get_active_account_state
from server_data_gate.core.account_state import GlobalState, PerAccountState
from server_data_gate.core.domain_types import AccountIdentity
from server_data_gate.core.have_server_data import (
    diagnose_active_account,
    diagnose_server_data,
)

logger = logging.getLogger(__name__)


@dataclass
class ServerDataReport:
    """Gate answer plus the failing condition, if any."""
    have_server_data: bool
    account: str | None = None
    failed_check: str | None = None
    message: str | None = None
    resolved_by: list[str] = field(default_factory=list)
    created_by: list[str] = field(default_factory=list)


def _build_report(failure: dict | None, account: str | None) -> ServerDataReport:
    if failure is None:
        logger.info(
            "Server data valid",
            extra={"account": account, "have_server_data": True},
        )
        return ServerDataReport(have_server_data=True, account=account)

    logger.warning(
        f"Server data not usable: {failure['message']}",
        extra={
            "account": account,
            "failed_check": failure["error_code"],
            "have_server_data": False,
        },
    )
    return ServerDataReport(
        have_server_data=False,
        account=account,
        failed_check=failure["error_code"],
        message=failure["message"],
        resolved_by=failure["resolved_by"],
        created_by=failure["created_by"],
    )


def check_active_account(global_state: GlobalState) -> ServerDataReport:
    """Global gate with diagnosis."""
    active = global_state.active_account
    has_bundle = try_get_active_account_state(global_state) is not None
    account = str(active) if active is not None and has_bundle else None
    return _build_report(diagnose_active_account(global_state), account)


def check_account(
    state: PerAccountState, identity: AccountIdentity | None = None,
) -> ServerDataReport:
    """Per-account gate with diagnosis. state must not be None."""
    account = str(identity) if identity is not None else None
    return _build_report(diagnose_server_data(state), account)
