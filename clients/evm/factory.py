from web3 import AsyncWeb3
from web3.providers import AsyncHTTPProvider
from chains.dto import ChainConfig
from clients.evm.domain import DomainClient
from clients.evm.wallet import WalletClient


class Web3ClientFactory:
    def __init__(self, chain_config: ChainConfig, w3: AsyncWeb3 | None = None):
        self.chain_config = chain_config
        self._w3 = w3 or AsyncWeb3(AsyncHTTPProvider(chain_config.rpc_url))

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self._w3.provider.disconnect()

    @property
    def w3(self) -> AsyncWeb3:
        return self._w3

    def create_domain_client(self, private_key: str | None = None) -> DomainClient:
        return DomainClient(self.chain_config, self._w3, private_key)

    def create_master_client(self, private_key: str) -> WalletClient:
        return WalletClient.from_key(self.chain_config, private_key, self._w3)
