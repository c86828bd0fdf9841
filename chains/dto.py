from dataclasses import dataclass


@dataclass
class ChainConfig:
    chain_id: int
    name: str
    display_name: str
    symbol: str
    explorer: str
    rpc_url: str
    domain_contract_address: str = ""
