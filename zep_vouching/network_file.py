import json
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from zep_vouching.constants import STANDARD_JSON_FORMAT, network_filepath
from zep_vouching.utils import _load_json

ContractKey = str  # "<package>/<alias>"


class ContractEntry(NamedTuple):
    """Logic contract pushed to the network under an alias."""

    name: str
    address: ChecksumAddress
    bytecode_hash: str


class ProxyEntry(NamedTuple):
    """Upgradeable instance of an aliased contract."""

    address: ChecksumAddress
    implementation: ChecksumAddress
    admin: Optional[ChecksumAddress] = None


def contract_key(package_name: str, alias: str) -> ContractKey:
    return f"{package_name}/{alias}"


class NetworkFile:
    """
    Bookkeeping of the logic contracts and proxies deployed to a network.

    The file is keyed by "<package>/<alias>" (e.g. "zep-vouching/Vouching"),
    and proxies of the same alias are kept in creation order, so the last one
    is the most recent instance.
    """

    def __init__(
        self,
        filepath: Path,
        network: str,
        chain_id: Optional[int] = None,
        app_owner: Optional[ChecksumAddress] = None,
        contracts: Optional[Dict[ContractKey, ContractEntry]] = None,
        proxies: Optional[Dict[ContractKey, List[ProxyEntry]]] = None,
    ):
        self.filepath = Path(filepath)
        self.network = network
        self.chain_id = chain_id
        self.app_owner = app_owner
        self.contracts = contracts or dict()
        self.proxies = proxies or dict()

    @classmethod
    def load(cls, network: str, filepath: Optional[Path] = None) -> "NetworkFile":
        """Reads the network file; an absent file is an empty network."""
        filepath = Path(filepath or network_filepath(network))
        if not filepath.exists():
            return cls(filepath=filepath, network=network)

        data = _load_json(filepath)
        contracts = {
            key: ContractEntry(
                name=entry["name"],
                address=entry["address"],
                bytecode_hash=entry.get("bytecodeHash", ""),
            )
            for key, entry in data.get("contracts", {}).items()
        }
        proxies = {
            key: [
                ProxyEntry(
                    address=entry["address"],
                    implementation=entry["implementation"],
                    admin=entry.get("admin"),
                )
                for entry in entries
            ]
            for key, entries in data.get("proxies", {}).items()
        }
        chain_id = data.get("chainId")
        return cls(
            filepath=filepath,
            network=network,
            chain_id=int(chain_id) if chain_id is not None else None,
            app_owner=data.get("app", {}).get("owner"),
            contracts=contracts,
            proxies=proxies,
        )

    @property
    def file_name(self) -> str:
        return str(self.filepath)

    def proxies_of(self, package_name: str, alias: str) -> List[ProxyEntry]:
        return list(self.proxies.get(contract_key(package_name, alias), []))

    def add_proxy(self, package_name: str, alias: str, entry: ProxyEntry) -> None:
        self.proxies.setdefault(contract_key(package_name, alias), []).append(entry)

    def remove_proxy(self, package_name: str, alias: str, address: str) -> None:
        key = contract_key(package_name, alias)
        entries = self.proxies.get(key, [])
        remaining = [e for e in entries if e.address.lower() != address.lower()]
        if len(remaining) == len(entries):
            raise ValueError(f"No {key} proxy found at {address} in {self.file_name}")

        if remaining:
            self.proxies[key] = remaining
        else:
            del self.proxies[key]

    def contract(self, package_name: str, alias: str) -> Optional[ContractEntry]:
        return self.contracts.get(contract_key(package_name, alias))

    def set_contract(self, package_name: str, alias: str, entry: ContractEntry) -> None:
        self.contracts[contract_key(package_name, alias)] = entry

    def to_dict(self) -> dict:
        return {
            "chainId": self.chain_id,
            "app": {"owner": self.app_owner},
            "contracts": {
                key: {
                    "name": entry.name,
                    "address": to_checksum_address(entry.address),
                    "bytecodeHash": entry.bytecode_hash,
                }
                for key, entry in sorted(self.contracts.items())
            },
            "proxies": {
                key: [
                    {
                        "address": to_checksum_address(entry.address),
                        "implementation": to_checksum_address(entry.implementation),
                        "admin": entry.admin,
                    }
                    for entry in entries
                ]
                for key, entries in sorted(self.proxies.items())
            },
        }

    def write(self) -> Path:
        """Persists the network file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(self.filepath, "w") as file:
            json.dump(self.to_dict(), file, **STANDARD_JSON_FORMAT)
        return self.filepath
