from types import SimpleNamespace

import pytest

from zep_vouching.constants import (
    LOCAL_PACKAGE_NAME,
    ORGANIZATIONS_VALIDATOR,
    TPL_PACKAGE_NAME,
    VOUCHING,
    output_filepath,
)
from zep_vouching.utils import DeploymentError
from zep_vouching.v2_0.save import load_summary
from zep_vouching.v2_1.cli import missing_arguments
from zep_vouching.v2_1.deploy import deploy
from zep_vouching.v2_1.register import register, register_and_transfer
from zep_vouching.v2_1.verify import verify, verify_vouching_has_tpl_attribute

from tests.conftest import ENTRY, NETWORK, OWNER, SOMEONE, FakeContract, FakeReceipt

ENTRY_ID = 7
URI = "uri"
METADATA_HASH = "0x2a"


def _new_vouching(address, init_args):
    token, minimum_stake, appeal_fee, appeals_resolver = init_args
    vouching = FakeContract(
        VOUCHING,
        address,
        token=token,
        minimumStake=minimum_stake,
        appealFee=appeal_fee,
        appealsResolver=appeals_resolver,
        register=FakeReceipt(events=[SimpleNamespace(event_name="Registered", id=ENTRY_ID)]),
        transferOwnership=FakeReceipt(),
    )
    vouching.Registered = "Registered"
    return vouching


@pytest.fixture
def upgraded(deployer, app_2_0, constants_2_1):
    deployer.factories[VOUCHING] = _new_vouching
    vouching = deploy(deployer, constants_2_1)
    return SimpleNamespace(app=app_2_0, vouching=vouching)


def test_deploy_replaces_vouching(deployer, upgraded, network_file, constants_2_1):
    app, vouching = upgraded.app, upgraded.vouching

    assert {VOUCHING: VOUCHING} == deployer.contract_aliases
    assert [{"force": True, "deploy_dependencies": False}] == deployer.pushes

    # the old instance is dropped, the new one is the only vouching proxy
    proxies = network_file.proxies_of(LOCAL_PACKAGE_NAME, VOUCHING)
    assert [vouching.address] == [proxy.address for proxy in proxies]

    _, init_method, init_args = deployer.created[-1]
    assert "initialize" == init_method
    assert [
        app.zep_token.address,
        constants_2_1.VOUCHING_MIN_STAKE,
        constants_2_1.VOUCHING_APPEAL_FEE,
        OWNER,
    ] == init_args

    assert vouching.address in app.can_receive
    assert ("OrganizationsValidator", "issueAttribute", (vouching.address,)) in deployer.transactions

    summary = load_summary(output_filepath(NETWORK))
    assert vouching.address == summary["vouching"]
    assert app.zep_token.address == summary["zepToken"]
    assert app.jurisdiction.address == summary["jurisdiction"]


def test_deploy_requires_zep_token(deployer, network_file, app_2_0, constants_2_1):
    del network_file.proxies[f"{LOCAL_PACKAGE_NAME}/ZEPToken"]
    with pytest.raises(DeploymentError, match="Could not find a ZEPToken instance"):
        deploy(deployer, constants_2_1)
    assert [] == deployer.created


def test_attribute_is_issued_once(deployer, upgraded):
    issued = [t for t in deployer.transactions if t[1] == "issueAttribute"]
    assert 1 == len(issued)
    assert verify_vouching_has_tpl_attribute(upgraded.app.zep_token, upgraded.vouching)


def test_deploy_skips_attribute_already_issued(deployer, app_2_0, constants_2_1, capsys):
    def _vouching_with_attribute(address, init_args):
        app_2_0.can_receive.add(address)
        return _new_vouching(address, init_args)

    deployer.factories[VOUCHING] = _vouching_with_attribute
    vouching = deploy(deployer, constants_2_1)

    assert vouching.address in app_2_0.can_receive
    assert [] == [t for t in deployer.transactions if t[1] == "issueAttribute"]
    assert "Vouching instance already has TPL attribute" in capsys.readouterr().out


def test_deploy_requires_validator(deployer, network_file, app_2_0, constants_2_1):
    del network_file.proxies[f"{TPL_PACKAGE_NAME}/{ORGANIZATIONS_VALIDATOR}"]
    with pytest.raises(DeploymentError, match="Could not find a Validator instance"):
        deploy(deployer, constants_2_1)
    assert [] == deployer.created


def test_deploy_create_failure(deployer, app_2_0, constants_2_1, capsys):
    deployer.create_error = RuntimeError("out of gas")
    with pytest.raises(RuntimeError, match="out of gas"):
        deploy(deployer, constants_2_1)
    error = capsys.readouterr().err
    assert "Could not create Vouching instance by calling initialize()" in error
    assert [] == [t for t in deployer.transactions if t[1] == "issueAttribute"]


def test_verify_upgraded_vouching(network_file, upgraded, constants_2_1, capsys):
    assert verify(network_file, OWNER, constants_2_1)
    assert "Vouching instance was deployed and configured successfully!" in capsys.readouterr().out

    assert not verify(network_file, SOMEONE, constants_2_1)
    assert "Vouching appeals resolver" in capsys.readouterr().err


def test_verify_missing_attribute(network_file, upgraded, constants_2_1, capsys):
    upgraded.app.can_receive.clear()
    assert not verify(network_file, OWNER, constants_2_1)
    assert "does not have TPL attribute" in capsys.readouterr().err


def test_register(deployer, network_file, upgraded, monkeypatch):
    confirmations = []
    monkeypatch.setattr(
        "zep_vouching.v2_1.register._confirm_registration",
        lambda *args: confirmations.append(args),
    )
    amount = 10**21

    entry_id = register(ENTRY, amount, URI, METADATA_HASH, True, deployer, network_file)

    assert ENTRY_ID == entry_id
    assert [(ENTRY, amount, URI, METADATA_HASH)] == confirmations
    approve, registration = deployer.transactions[-2:]
    assert ("ZEPToken", "approve", (upgraded.vouching.address, amount)) == approve
    assert "register" == registration[1]
    assert (ENTRY, amount, URI) == registration[2][:3]
    assert b"\x2a" + b"\x00" * 31 == registration[2][3]


def test_register_below_minimum_stake(deployer, network_file, upgraded, capsys):
    transactions = len(deployer.transactions)
    assert register(ENTRY, 1, URI, METADATA_HASH, False, deployer, network_file) is None
    assert transactions == len(deployer.transactions)
    assert "must be greater than or equal to the minimum stake" in capsys.readouterr().err


def test_register_without_vouching(deployer, network_file, app_2_0):
    # no vouching instance recorded for the network
    del network_file.proxies[f"{LOCAL_PACKAGE_NAME}/{VOUCHING}"]
    with pytest.raises(DeploymentError, match="Could not find Vouching and ZEPToken"):
        register(ENTRY, 10**21, URI, METADATA_HASH, False, deployer, network_file)


def test_register_failure(deployer, network_file, upgraded, capsys):
    deployer.transact_error = RuntimeError("reverted")
    with pytest.raises(RuntimeError):
        register(ENTRY, 10**21, URI, METADATA_HASH, False, deployer, network_file)
    assert "Could not register entry" in capsys.readouterr().err


def test_register_and_transfer(deployer, network_file, upgraded):
    entry_id = register_and_transfer(
        ENTRY, 10**21, URI, METADATA_HASH, False, SOMEONE, deployer, network_file
    )
    assert ENTRY_ID == entry_id
    assert ("Vouching", "transferOwnership", (ENTRY_ID, SOMEONE)) == deployer.transactions[-1]

    transactions = len(deployer.transactions)
    assert (
        register_and_transfer(ENTRY, 1, URI, METADATA_HASH, False, SOMEONE, deployer, network_file)
        is None
    )
    assert transactions == len(deployer.transactions)


def test_missing_arguments():
    assert [] == missing_arguments(ENTRY, 0, URI, METADATA_HASH, OWNER)

    messages = missing_arguments(None, None, "", None, None)
    assert 5 == len(messages)
    assert "--address=<addr>" in messages[0]
    assert "--amount=<amount>" in messages[1]
    assert "--uri=<uri>" in messages[2]
    assert "--hash=<hash>" in messages[3]
    assert "--from=<addr>" in messages[4]
