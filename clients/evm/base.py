from abc import ABC
from web3 import AsyncWeb3
from web3.providers import AsyncHTTPProvider
from chains.dto import ChainConfig


class BaseWeb3Client(ABC):
    DOMAIN_ABI = [
        {
            "inputs": [{"internalType": "string", "name": "name", "type": "string"}],
            "name": "checkDomainExists",
            "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
            "stateMutability": "view",
            "type": "function",
        },
        {
            "inputs": [
                {"internalType": "address", "name": "owner", "type": "address"},
                {"internalType": "string", "name": "name", "type": "string"},
            ],
            "name": "mintDomain",
            "outputs": [],
            "stateMutability": "nonpayable",
            "type": "function",
        },
    ]

    def __init__(self, chain_config: ChainConfig, w3: AsyncWeb3 | None = None):
        self.chain_config = chain_config
        self._w3 = w3 or AsyncWeb3(AsyncHTTPProvider(chain_config.rpc_url))

    @property
    def w3(self) -> AsyncWeb3:
        return self._w3

    def _get_domain_contract(self):
        return self.w3.eth.contract(
            AsyncWeb3.to_checksum_address(self.chain_config.domain_contract_address),
            abi=self.DOMAIN_ABI,
        )

    async def get_gas_fees(self) -> tuple[int, int]:
        latest_block = await self.w3.eth.get_block("latest")
        base_fee = latest_block.get("baseFeePerGas", 0)

        max_priority_fee = await self.w3.eth.max_priority_fee

        max_fee = base_fee + max_priority_fee

        return max_priority_fee, max_fee

    async def get_gas_price(self) -> int:
        return await self.w3.eth.gas_price
