import typing
from typing import Any, Dict, List, Optional

from ape import chain
from ape.api import AccountAPI, ReceiptAPI
from ape.cli.choices import select_account
from ape.contracts.base import ContractContainer, ContractInstance, ContractTransactionHandler
from ape.utils import EMPTY_BYTES32
from eth_typing import ChecksumAddress
from eth_utils import encode_hex, keccak, to_checksum_address
from ethpm_types import MethodABI
from web3.auto import w3

from zep_vouching import log
from zep_vouching.confirm import _continue
from zep_vouching.constants import (
    DEPENDENCY_CONTRACTS,
    EIP1967_ADMIN_SLOT,
    LOCAL_PACKAGE_NAME,
)
from zep_vouching.network_file import ContractEntry, NetworkFile, ProxyEntry, contract_key
from zep_vouching.networks import get_chain_id, get_network_name, is_local_network
from zep_vouching.utils import (
    DeploymentError,
    call_description,
    check_plugins,
    get_contract_container,
    oz_dependency,
)


def _validate_method_args(
    method_abis: List[MethodABI], args: typing.Sequence[Any]
) -> typing.Dict[str, Any]:
    """Validates the transaction arguments against the function ABI."""
    if len(method_abis) == 0:
        raise ValueError("No method abis provided for validation of args")

    abis_matching_args_length = [abi for abi in method_abis if len(abi.inputs) == len(args)]
    for abi in abis_matching_args_length:
        named_args = {}
        for arg, abi_input in zip(args, abi.inputs):
            if not w3.is_encodable(abi_input.type, arg):
                break
            named_args[abi_input.name] = arg
        else:
            return named_args
    raise ValueError(
        f"Could not find ABI for '{method_abis[0].name}' with {len(args)} arg(s) and given type(s)"
    )


def _bytecode_hash(container: ContractContainer) -> str:
    bytecode = container.contract_type.deployment_bytecode
    if bytecode is None or not bytecode.bytecode:
        return ""
    return encode_hex(keccak(hexstr=bytecode.bytecode))


class Transactor:
    """
    Represents an ape account plus validated/annotated transaction execution.
    """

    def __init__(self, account: typing.Optional[AccountAPI] = None, autosign: bool = False):
        if account is None:
            self._account = select_account()
        else:
            self._account = account
        if autosign:
            log.warn("WARNING: Autosign is enabled. Transactions will be signed automatically.")
        self._autosign = autosign
        # test accounts always sign
        if hasattr(self._account, "set_autosign"):
            self._account.set_autosign(autosign)

    def get_account(self) -> AccountAPI:
        """Returns the transactor account."""
        return self._account

    @property
    def owner(self) -> ChecksumAddress:
        return self._account.address

    def transact(self, method: ContractTransactionHandler, *args) -> ReceiptAPI:
        named_args = _validate_method_args(method_abis=method.abis, args=args)
        base_message = (
            f"\nTransacting {method.contract.contract_type.name}"
            f"[{method.contract.address[:10]}].{method}"
        )
        if named_args:
            pretty_args = "\n\t".join(f"{k}={v}" for k, v in named_args.items())
            message = f"{base_message} with arguments:\n\t{pretty_args}"
        else:
            message = f"{base_message} with no arguments"
        log.base(message)
        if not self._autosign:
            _continue()

        return method(*args, sender=self._account)


class Deployer(Transactor):
    """
    Represents an ape account plus the network file of an upgradeable app:
    pushes logic contracts and creates initialized proxies pointing at them.
    """

    def __init__(
        self,
        network_file: NetworkFile,
        verify: bool = False,
        account: typing.Optional[AccountAPI] = None,
        autosign: bool = False,
    ):
        super().__init__(account, autosign)

        check_plugins(verify)
        self.network_file = network_file
        self.verify = verify
        self.contract_aliases: Dict[str, str] = dict()
        self._validate_chain_id()
        self._set_app_owner()
        self._print_deployment_info()

        if not self._autosign:
            # Confirms the start of the deployment.
            _continue()

    @property
    def network(self) -> str:
        return self.network_file.network

    def _validate_chain_id(self) -> None:
        chain_id = get_chain_id()
        recorded_chain_id = self.network_file.chain_id
        if recorded_chain_id is not None and recorded_chain_id != chain_id:
            if not is_local_network():
                raise ValueError(
                    f"chain_id in network file {self.network_file.file_name} ({recorded_chain_id}) "
                    f"does not match chain_id of current network ({chain_id})."
                )
        self.network_file.chain_id = chain_id

    def _set_app_owner(self) -> None:
        app_owner = self.network_file.app_owner
        if app_owner is None:
            self.network_file.app_owner = self.owner
        elif app_owner.lower() != self.owner.lower():
            log.warn(
                f"WARNING: proxies in {self.network_file.file_name} are administered by "
                f"{app_owner}, not by {self.owner}."
            )

    def _get_kwargs(self) -> typing.Dict[str, Any]:
        """Returns the deployment kwargs."""
        return {"publish": self.verify}

    def add(self, contracts: Dict[str, str]) -> None:
        """Registers local contracts of the app as alias -> contract name."""
        self.contract_aliases.update(contracts)

    def push(self, force: bool = False, deploy_dependencies: bool = False) -> None:
        """
        Deploys the logic contracts of the registered aliases.

        An implementation with unchanged bytecode is reused. Replacing the
        implementation of an alias with a different contract overrides its
        storage layout and is only done when forced.
        """
        for alias, contract_name in self.contract_aliases.items():
            self._push_contract(LOCAL_PACKAGE_NAME, alias, contract_name, force)

        if deploy_dependencies:
            for package_name, contract_names in DEPENDENCY_CONTRACTS.items():
                for contract_name in contract_names:
                    self._push_contract(package_name, contract_name, contract_name, force)

        self.network_file.write()

    def _push_contract(self, package_name: str, alias: str, contract_name: str, force: bool) -> None:
        key = contract_key(package_name, alias)
        container = get_contract_container(contract_name, package_name)
        bytecode_hash = _bytecode_hash(container)

        existing = self.network_file.contract(package_name, alias)
        if existing:
            if existing.name == contract_name and existing.bytecode_hash == bytecode_hash:
                log.warn(f" -  Reusing {key} implementation at {existing.address}")
                return
            if existing.name != contract_name and not force:
                raise DeploymentError(
                    f"Refusing to replace {key} implementation {existing.name} with "
                    f"{contract_name}; push with force to override its storage layout."
                )

        instance = self._deploy_contract(container)
        self.network_file.set_contract(
            package_name,
            alias,
            ContractEntry(
                name=contract_name,
                address=to_checksum_address(instance.address),
                bytecode_hash=bytecode_hash,
            ),
        )
        log.info(f" ✔ {key} implementation ({contract_name}) deployed at {instance.address}")

    def _deploy_contract(self, container: ContractContainer, *args) -> ContractInstance:
        deployer_account = self.get_account()
        return deployer_account.deploy(container, *args, **self._get_kwargs())

    def _implementation(self, package_name: str, contract_alias: str) -> ContractEntry:
        entry = self.network_file.contract(package_name, contract_alias)
        if entry is None:
            raise DeploymentError(
                f"{contract_key(package_name, contract_alias)} has not been pushed "
                f"to network {self.network}"
            )
        return entry

    def create(
        self,
        package_name: str,
        contract_alias: str,
        init_method: str,
        init_args: List[Any],
    ) -> ContractInstance:
        """
        Creates an upgradeable instance of a pushed contract: a transparent
        proxy administered by the deployer, initialized with init_method(init_args).
        """
        implementation_entry = self._implementation(package_name, contract_alias)
        container = get_contract_container(implementation_entry.name, package_name)
        implementation = container.at(implementation_entry.address)
        init_data = getattr(implementation, init_method).encode_input(*init_args)

        proxy_container = oz_dependency().TransparentUpgradeableProxy
        proxy = self._deploy_contract(
            proxy_container, implementation.address, self.owner, init_data
        )

        self.network_file.add_proxy(
            package_name,
            contract_alias,
            ProxyEntry(
                address=to_checksum_address(proxy.address),
                implementation=to_checksum_address(implementation.address),
                admin=self._get_proxy_admin(proxy.address),
            ),
        )
        self.network_file.write()
        return container.at(proxy.address)

    def describe_call(
        self, package_name: str, contract_alias: str, method: str, args: List[Any]
    ) -> str:
        entry = self.network_file.contract(package_name, contract_alias)
        contract_name = entry.name if entry else contract_alias
        container = get_contract_container(contract_name, package_name)
        return call_description(container, method, args)

    @staticmethod
    def _get_proxy_admin(proxy_address: str) -> Optional[ChecksumAddress]:
        admin_slot = chain.provider.get_storage(address=proxy_address, slot=EIP1967_ADMIN_SLOT)
        if admin_slot == EMPTY_BYTES32:
            return None
        return to_checksum_address(admin_slot[-20:])

    def _print_deployment_info(self):
        log.base(
            "\n".join(
                [
                    f"Account: {self.owner}",
                    f"Network file: {self.network_file.file_name}",
                    f"Verify: {self.verify}",
                    f"Network: {get_network_name()}",
                    f"Chain ID: {self.network_file.chain_id}",
                ]
            )
        )
