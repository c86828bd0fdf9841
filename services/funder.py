import logging
from decimal import Decimal

from web3 import AsyncWeb3

from clients.evm.dto import FundingResult
from clients.evm.wallet import WalletClient
from enums.tx import TxStatus
from services.dto import WalletData
from services.pricing import PriceProvider
from utils.utils import compute_transfer_amount, format_amount

module_logger = logging.getLogger(__name__)


class FundingService:
    """Sends the same USD-equivalent amount of ETH from the master wallet to
    each wallet, one confirmed transfer at a time.

    A failed transfer is logged and recorded; it never stops the remaining
    wallets from being funded.
    """

    def __init__(
        self,
        master: WalletClient,
        price_provider: PriceProvider,
        usd_amount: Decimal | int | str,
        tx_timeout: int = 120,
    ):
        self.master = master
        self.price_provider = price_provider
        self.usd_amount = usd_amount
        self.tx_timeout = tx_timeout

    async def get_transfer_amount(self) -> int:
        eth_price = await self.price_provider.get_eth_price()
        return compute_transfer_amount(self.usd_amount, eth_price)

    async def fund_wallet(self, wallet: WalletData, amount_wei: int) -> FundingResult:
        try:
            tx_hash, receipt = await self.master.transfer_native(
                wallet.address,
                amount_wei,
                timeout=self.tx_timeout
            )
        except Exception as e:
            module_logger.error(f"Error transferring ETH to {wallet.address}: {e}")
            return FundingResult(
                address=wallet.address,
                amount_wei=amount_wei,
                status=TxStatus.FAILED,
                error=str(e)
            )

        if receipt.get("status") == 0:
            module_logger.error(f"Transfer to {wallet.address} reverted -> {tx_hash}")
            return FundingResult(
                address=wallet.address,
                amount_wei=amount_wei,
                status=TxStatus.FAILED,
                tx_hash=tx_hash,
                error="Transaction reverted"
            )

        eth_amount = Decimal(AsyncWeb3.from_wei(amount_wei, "ether"))
        module_logger.info(
            f"Transferred {self.usd_amount} USD worth of ETH "
            f"({format_amount(eth_amount)} ETH) to {wallet.address} -> {tx_hash}"
        )

        return FundingResult(
            address=wallet.address,
            amount_wei=amount_wei,
            status=TxStatus.SUCCESS,
            tx_hash=tx_hash
        )

    async def fund_wallets(self, wallets: list[WalletData]) -> list[FundingResult]:
        amount_wei = await self.get_transfer_amount()
        module_logger.info(f"Funding {len(wallets)} wallets with {amount_wei} wei each")

        results = []
        for wallet in wallets:
            results.append(await self.fund_wallet(wallet, amount_wei))

        return results
