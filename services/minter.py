import logging
import time
from collections.abc import Callable

from clients.evm.dto import MintResult
from clients.evm.factory import Web3ClientFactory
from enums.tx import TxStatus
from services.dto import WalletData

module_logger = logging.getLogger(__name__)


def current_timestamp_ms() -> int:
    return int(time.time() * 1000)


def generate_domain_name(address: str, timestamp_ms: int) -> str:
    return f"wallet-{address[2:6]}-{timestamp_ms}.fam"


class DomainMinter:
    def __init__(
        self,
        factory: Web3ClientFactory,
        clock: Callable[[], int] = current_timestamp_ms,
        tx_timeout: int = 120,
    ):
        self.factory = factory
        self.clock = clock
        self.tx_timeout = tx_timeout

    async def mint_domain(self, wallet: WalletData) -> MintResult:
        domain_name = generate_domain_name(wallet.address, self.clock())
        client = self.factory.create_domain_client(wallet.private_key)

        try:
            if await client.check_domain_exists(domain_name):
                module_logger.info(f"Domain {domain_name} already exists. Skipping...")
                return MintResult(
                    address=wallet.address,
                    domain=domain_name,
                    status=TxStatus.SKIPPED
                )

            gas_limit = await client.estimate_mint_gas(wallet.address, domain_name)
            gas_price = await client.get_gas_price()
            module_logger.info(f"Mint {domain_name}: gas limit {gas_limit}, gas price {gas_price}")

            tx_params = await client.build_mint_transaction(
                wallet.address,
                domain_name,
                gas_limit,
                gas_price
            )
            tx_hash, receipt = await client.execute_transaction(
                tx_params,
                timeout=self.tx_timeout
            )
        except Exception as e:
            module_logger.error(f"Error minting domain for {wallet.address}: {e}")
            return MintResult(
                address=wallet.address,
                domain=domain_name,
                status=TxStatus.FAILED,
                error=str(e)
            )

        if receipt.get("status") == 0:
            module_logger.error(f"Mint of {domain_name} reverted -> {tx_hash}")
            return MintResult(
                address=wallet.address,
                domain=domain_name,
                status=TxStatus.FAILED,
                tx_hash=tx_hash,
                gas_limit=gas_limit,
                gas_price=gas_price,
                error="Transaction reverted"
            )

        module_logger.info(f"Minted domain {domain_name} for wallet {wallet.address} -> {tx_hash}")

        return MintResult(
            address=wallet.address,
            domain=domain_name,
            status=TxStatus.SUCCESS,
            tx_hash=tx_hash,
            gas_limit=gas_limit,
            gas_price=gas_price
        )

    async def mint_domains(self, wallets: list[WalletData]) -> list[MintResult]:
        results = []
        for wallet in wallets:
            results.append(await self.mint_domain(wallet))

        return results
