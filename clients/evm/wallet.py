import asyncio
from eth_account import Account
from eth_typing import HexStr
from hexbytes import HexBytes
from web3 import AsyncWeb3
from chains.dto import ChainConfig
from clients.evm.base import BaseWeb3Client


class WalletClient(BaseWeb3Client):
    def __init__(
        self,
        chain_config: ChainConfig,
        w3: AsyncWeb3 | None = None,
        private_key: str | None = None,
    ):
        super().__init__(chain_config, w3)
        self._account = None

        if private_key:
            self._account = Account.from_key(private_key)

    @classmethod
    def from_key(
        cls,
        chain_config: ChainConfig,
        private_key: str,
        w3: AsyncWeb3 | None = None,
    ) -> "WalletClient":
        client = cls(chain_config, w3)
        client._account = Account.from_key(private_key)
        return client

    @property
    def address(self) -> str | None:
        return self._account.address if self._account else None

    async def build_native_transfer(self, to: str, value: int) -> dict:
        if not self._account:
            raise ValueError("No account set")

        nonce, chain_id, (max_priority_fee, max_fee) = await asyncio.gather(
            self.w3.eth.get_transaction_count(self.address, "pending"),
            self.w3.eth.chain_id,
            self.get_gas_fees(),
        )

        tx_params = {
            "from": self.address,
            "to": AsyncWeb3.to_checksum_address(to),
            "value": int(value),
            "nonce": nonce,
            "chainId": chain_id,
            "maxFeePerGas": max_fee,
            "maxPriorityFeePerGas": max_priority_fee,
        }

        tx_params["gas"] = await self.w3.eth.estimate_gas(tx_params)

        return tx_params

    def sign_transaction(self, tx_params: dict) -> HexBytes:
        if not self._account:
            raise ValueError("No account set")

        signed_tx = self.w3.eth.account.sign_transaction(
            tx_params,
            self._account.key
        )

        return signed_tx.raw_transaction

    async def send_transaction(self, signed_tx: HexBytes) -> HexStr:
        tx_hash = await self.w3.eth.send_raw_transaction(signed_tx)
        return AsyncWeb3.to_hex(tx_hash)

    async def wait_for_transaction(
        self,
        tx_hash: HexStr,
        timeout: int = 120,
        poll_latency: float = 0.5
    ) -> dict:
        receipt = await self.w3.eth.wait_for_transaction_receipt(
            tx_hash,
            timeout=timeout,
            poll_latency=poll_latency
        )
        return dict(receipt)

    async def execute_transaction(
        self,
        tx_params: dict,
        timeout: int = 120
    ) -> tuple[str, dict]:
        signed_tx = self.sign_transaction(tx_params)
        tx_hash = await self.send_transaction(signed_tx)

        receipt = await self.wait_for_transaction(tx_hash, timeout=timeout)

        return tx_hash, receipt

    async def transfer_native(
        self,
        to: str,
        value: int,
        timeout: int = 120
    ) -> tuple[str, dict]:
        tx_params = await self.build_native_transfer(to, value)
        return await self.execute_transaction(tx_params, timeout=timeout)
