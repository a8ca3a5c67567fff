"""Server-Data Check Service — report contents and logging.

Invariants:
    - report.have_server_data equals the core gate's answer
    - Failed reports name the check and its lifecycle events
    - Valid outcomes log at INFO, invalid ones at WARNING with failed_check extra
"""

import logging

import pytest

from server_data_gate.core.account_state import (
    Auth, GlobalState, PerAccountState, RealmState, User,
)
from server_data_gate.core.domain_types import AccountIdentity, UserId
from server_data_gate.core.errors import MissingAccountStateError
from server_data_gate.core.have_server_data import (
    get_have_server_data,
    get_have_server_data_global,
)
from server_data_gate.services.server_data_check import (
    check_account,
    check_active_account,
)

ALICE = AccountIdentity(realm_url="https://chat.example.com", email="alice@example.com")


def _valid_state() -> PerAccountState:
    return PerAccountState(
        auth=Auth(realm_url=ALICE.realm_url, email=ALICE.email, api_key="t"),
        users=(User(UserId(7)),),
        realm=RealmState(self_user_id=UserId(7)),
    )


def test_check_account_valid_report():
    report = check_account(_valid_state(), ALICE)
    assert report.have_server_data is True
    assert report.account == str(ALICE)
    assert report.failed_check is None
    assert report.resolved_by == []


def test_check_account_torn_report():
    state = PerAccountState(
        auth=_valid_state().auth,
        users=(User(UserId(7)),),
        realm=RealmState(self_user_id=UserId(9)),
    )
    report = check_account(state)
    assert report.have_server_data is False
    assert report.account is None
    assert report.failed_check == "self_user_unknown"
    assert report.resolved_by == ["register_complete"]
    assert report.have_server_data == get_have_server_data(state)


def test_check_account_without_bundle_raises():
    with pytest.raises(MissingAccountStateError):
        check_account(None)


def test_check_active_account_without_accounts():
    report = check_active_account(GlobalState())
    assert report.have_server_data is False
    assert report.failed_check == "no_active_account"
    assert report.account is None


def test_check_active_account_names_active_account():
    global_state = GlobalState(accounts={ALICE: _valid_state()}, active_account=ALICE)
    report = check_active_account(global_state)
    assert report.have_server_data is True
    assert report.account == str(ALICE)
    assert report.have_server_data == get_have_server_data_global(global_state)


def test_dangling_marker_reports_no_account():
    other = AccountIdentity(realm_url="https://x", email="x@x")
    report = check_active_account(
        GlobalState(accounts={ALICE: _valid_state()}, active_account=other),
    )
    assert report.failed_check == "no_active_account"
    assert report.account is None


def test_invalid_outcome_logs_warning(caplog):
    with caplog.at_level(logging.INFO, logger="server_data_gate.services.server_data_check"):
        check_account(PerAccountState(), ALICE)
    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.failed_check == "auth_missing"
    assert record.account == str(ALICE)


def test_valid_outcome_logs_info(caplog):
    with caplog.at_level(logging.INFO, logger="server_data_gate.services.server_data_check"):
        check_account(_valid_state(), ALICE)
    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert record.have_server_data is True
