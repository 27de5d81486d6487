from types import SimpleNamespace

import pytest
from eth_utils import to_checksum_address
from hexbytes import HexBytes

from zep_vouching import log
from zep_vouching.constants import (
    BASIC_JURISDICTION,
    LOCAL_PACKAGE_NAME,
    ORGANIZATIONS_VALIDATOR,
    TPL_PACKAGE_NAME,
    V2_0_PARAMS_FILEPATH,
    V2_1_PARAMS_FILEPATH,
    V2_0_REQUIRED_CONSTANTS,
    V2_1_REQUIRED_CONSTANTS,
    VOUCHING,
    ZEP_TOKEN,
)
from zep_vouching.network_file import NetworkFile, ProxyEntry
from zep_vouching.units import zep
from zep_vouching.utils import load_constants

NETWORK = "test"
TX_HASH = "0x" + "ab" * 32


# Utility functions
def make_address(index: int) -> str:
    return to_checksum_address(f"0x{index:040x}")


OWNER = make_address(0xA11CE)
ENTRY = make_address(0xE17)
SOMEONE = make_address(0x50E)


class FakeMethod:
    """Contract method returning a fixed value (or computing it from its arguments)."""

    def __init__(self, contract, name, result=None, error=None):
        self.contract = contract
        self.name = name
        self.result = result
        self.error = error
        self.calls = []

    def __call__(self, *args, **kwargs):
        self.calls.append(args)
        if self.error:
            raise self.error
        if callable(self.result):
            return self.result(*args)
        return self.result

    def encode_input(self, *args):
        return HexBytes(b"\xca\xfe")

    def __str__(self):
        return self.name


class FakeContract:
    def __init__(self, contract_name, address, **methods):
        self.contract_type = SimpleNamespace(name=contract_name)
        self.address = address
        for method_name, result in methods.items():
            setattr(self, method_name, FakeMethod(self, method_name, result))


class FakeReceipt:
    def __init__(self, events=None, txn_hash=TX_HASH):
        self.events = events or []
        self.txn_hash = txn_hash

    def decode_logs(self, event):
        return [e for e in self.events if e.event_name == event]


class FakeChain:
    """Contract instances by address, looked up through fake contract containers."""

    def __init__(self):
        self.instances = dict()
        self._next_address = 0x1000

    def new_address(self) -> str:
        self._next_address += 1
        return make_address(self._next_address)

    def add(self, contract: FakeContract) -> FakeContract:
        self.instances[contract.address] = contract
        return contract

    def container(self, contract_name, package_name=LOCAL_PACKAGE_NAME):
        return SimpleNamespace(at=lambda address: self.instances[address])


class FakeDeployer:
    """Records what a deployment asks of the framework."""

    def __init__(self, network_file: NetworkFile, chain: FakeChain, owner: str = OWNER):
        self.network_file = network_file
        self.chain = chain
        self.owner = owner
        self.contract_aliases = dict()
        self.pushes = []
        self.created = []
        self.transactions = []
        self.factories = dict()
        self.create_error = None
        self.transact_error = None
        if network_file.app_owner is None:
            network_file.app_owner = owner

    @property
    def network(self):
        return self.network_file.network

    def add(self, contracts):
        self.contract_aliases.update(contracts)

    def push(self, force=False, deploy_dependencies=False):
        self.pushes.append({"force": force, "deploy_dependencies": deploy_dependencies})

    def create(self, package_name, contract_alias, init_method, init_args):
        if self.create_error:
            raise self.create_error
        address = self.chain.new_address()
        factory = self.factories.get(contract_alias, lambda a, args: FakeContract(contract_alias, a))
        instance = self.chain.add(factory(address, init_args))
        self.network_file.add_proxy(
            package_name, contract_alias, ProxyEntry(address=address, implementation=address)
        )
        self.created.append((f"{package_name}/{contract_alias}", init_method, list(init_args)))
        return instance

    def describe_call(self, package_name, contract_alias, method, args):
        return f"{method}() with arguments {args}"

    def transact(self, method, *args):
        if self.transact_error:
            raise self.transact_error
        self.transactions.append((method.contract.contract_type.name, method.name, args))
        return method(*args)


# Fixtures
@pytest.fixture(autouse=True)
def console():
    log.silent(False)
    yield
    log.silent(False)


@pytest.fixture
def constants_2_0():
    return load_constants(V2_0_PARAMS_FILEPATH, required=V2_0_REQUIRED_CONSTANTS)


@pytest.fixture
def constants_2_1():
    return load_constants(V2_1_PARAMS_FILEPATH, required=V2_1_REQUIRED_CONSTANTS)


@pytest.fixture
def network_file(tmp_path):
    return NetworkFile.load(NETWORK, filepath=tmp_path / f"zep.{NETWORK}.json")


@pytest.fixture
def fake_chain(monkeypatch):
    chain = FakeChain()
    monkeypatch.setattr("zep_vouching.v2_0.fetch.get_contract_container", chain.container)
    return chain


@pytest.fixture
def deployer(network_file, fake_chain, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return FakeDeployer(network_file, fake_chain)


def _proxy(network_file, chain, package_name, alias, contract):
    chain.add(contract)
    network_file.add_proxy(
        package_name, alias, ProxyEntry(address=contract.address, implementation=contract.address)
    )
    return contract


@pytest.fixture
def app_2_0(network_file, fake_chain, constants_2_0):
    """A network where the 2.0 app was deployed and configured by OWNER."""
    attribute_id = constants_2_0.ZEPTOKEN_ATTRIBUTE_ID
    can_receive = set()

    jurisdiction = FakeContract(BASIC_JURISDICTION, fake_chain.new_address(), owner=OWNER)
    validator = FakeContract(
        ORGANIZATIONS_VALIDATOR,
        fake_chain.new_address(),
        owner=OWNER,
        getJurisdiction=jurisdiction.address,
        getValidAttributeID=attribute_id,
        getOrganizationInformation=(True, constants_2_0.ZEPPELIN_ORG_MAX_ADDRESSES, "", []),
        issueAttribute=lambda account: can_receive.add(account) or FakeReceipt(),
    )
    jurisdiction.getValidators = FakeMethod(jurisdiction, "getValidators", [validator.address])
    jurisdiction.getAttributeTypeIDs = FakeMethod(
        jurisdiction, "getAttributeTypeIDs", [attribute_id]
    )
    jurisdiction.canIssueAttributeType = FakeMethod(jurisdiction, "canIssueAttributeType", True)

    zep_token = FakeContract(
        ZEP_TOKEN,
        fake_chain.new_address(),
        name=constants_2_0.ZEPTOKEN_NAME,
        symbol=constants_2_0.ZEPTOKEN_SYMBOL,
        decimals=constants_2_0.ZEPTOKEN_DECIMALS,
        totalSupply=zep(constants_2_0.ZEPTOKEN_SUPPLY),
        getRegistry=jurisdiction.address,
        getValidAttributeTypeID=attribute_id,
        canReceive=lambda account: account in can_receive,
        approve=FakeReceipt(),
    )
    vouching = FakeContract(
        "OldVouching",
        fake_chain.new_address(),
        token=zep_token.address,
        minimumStake=constants_2_0.VOUCHING_MIN_STAKE,
    )

    network_file.app_owner = OWNER
    _proxy(network_file, fake_chain, TPL_PACKAGE_NAME, BASIC_JURISDICTION, jurisdiction)
    _proxy(network_file, fake_chain, LOCAL_PACKAGE_NAME, ZEP_TOKEN, zep_token)
    _proxy(network_file, fake_chain, LOCAL_PACKAGE_NAME, VOUCHING, vouching)
    _proxy(network_file, fake_chain, TPL_PACKAGE_NAME, ORGANIZATIONS_VALIDATOR, validator)
    return SimpleNamespace(
        jurisdiction=jurisdiction,
        validator=validator,
        zep_token=zep_token,
        vouching=vouching,
        can_receive=can_receive,
    )
