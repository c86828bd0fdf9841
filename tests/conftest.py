from unittest.mock import AsyncMock, MagicMock

import pytest
from eth_account import Account

from chains.dto import ChainConfig
from services.dto import WalletData

MASTER_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"


@pytest.fixture
def chain_config() -> ChainConfig:
    return ChainConfig(
        chain_id=421614,
        name="arbitrum-sepolia",
        display_name="Arbitrum Sepolia",
        symbol="ETH",
        explorer="https://sepolia.arbiscan.io/",
        rpc_url="http://localhost:8545",
        domain_contract_address="0x5FbDB2315678afecb367f032d93F642f64180aa3",
    )


@pytest.fixture
def wallets() -> list[WalletData]:
    result = []
    for _ in range(3):
        acct = Account.create()
        result.append(
            WalletData(private_key="0x" + bytes(acct.key).hex(), address=acct.address)
        )
    return result


@pytest.fixture
def master_client():
    client = MagicMock()
    client.address = Account.from_key(MASTER_KEY).address
    client.transfer_native = AsyncMock(return_value=("0xabc", {"status": 1}))
    return client


class FakeFactory:
    def __init__(self, master=None, domain_client=None):
        self.master = master
        self.domain_client = domain_client
        self.closed = False
        self.domain_keys = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.closed = True

    def create_master_client(self, private_key):
        return self.master

    def create_domain_client(self, private_key=None):
        self.domain_keys.append(private_key)
        return self.domain_client


def make_domain_client(exists: bool = False):
    client = MagicMock()
    client.check_domain_exists = AsyncMock(return_value=exists)
    client.estimate_mint_gas = AsyncMock(return_value=150_000)
    client.get_gas_price = AsyncMock(return_value=10_000_000)
    client.build_mint_transaction = AsyncMock(return_value={"gas": 150_000})
    client.execute_transaction = AsyncMock(return_value=("0xdef", {"status": 1}))
    return client


@pytest.fixture
def domain_client_maker():
    return make_domain_client


@pytest.fixture
def factory_maker():
    return FakeFactory
