import asyncio
from web3 import AsyncWeb3
from clients.evm.wallet import WalletClient


class DomainClient(WalletClient):
    async def check_domain_exists(self, name: str) -> bool:
        contract = self._get_domain_contract()
        return await contract.functions.checkDomainExists(name).call()

    async def estimate_mint_gas(self, owner: str, name: str) -> int:
        contract = self._get_domain_contract()

        return await contract.functions.mintDomain(
            AsyncWeb3.to_checksum_address(owner),
            name
        ).estimate_gas({"from": self.address})

    async def build_mint_transaction(
        self,
        owner: str,
        name: str,
        gas_limit: int,
        gas_price: int,
    ) -> dict:
        if not self.address:
            raise ValueError("No account set")

        contract = self._get_domain_contract()

        nonce, chain_id = await asyncio.gather(
            self.w3.eth.get_transaction_count(self.address, "pending"),
            self.w3.eth.chain_id,
        )

        tx_params = {
            "from": self.address,
            "nonce": nonce,
            "chainId": chain_id,
            "gas": gas_limit,
            "gasPrice": gas_price,
        }

        tx = await contract.functions.mintDomain(
            AsyncWeb3.to_checksum_address(owner),
            name
        ).build_transaction(tx_params)

        return tx
