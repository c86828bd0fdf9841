import asyncio
import logging
import sys
from collections import Counter

from chains import registery
from clients.evm.factory import Web3ClientFactory
from config import Settings, settings
from services.dto import PipelineReport
from services.funder import FundingService
from services.keystore import create_key_store
from services.minter import DomainMinter
from services.pricing import StaticPriceProvider
from services.wallet import WalletService

module_logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )


def _summary(results) -> str:
    counts = Counter(r.status for r in results)
    return ", ".join(f"{status.emoji} {status.label}: {n}" for status, n in counts.items()) or "nothing to do"


async def run(
    config: Settings,
    factory: Web3ClientFactory | None = None,
) -> PipelineReport:
    chain_config = registery.resolve(
        config.CHAIN_ID,
        rpc_url=config.RPC_URL,
        domain_contract_address=config.DOMAIN_CONTRACT_ADDRESS,
    )
    factory = factory or Web3ClientFactory(chain_config)

    async with factory:
        master = factory.create_master_client(config.MASTER_PRIVATE_KEY)
        module_logger.info(f"Master wallet address: {master.address}")

        key_store = create_key_store(config.WALLETS_DIR, config.WALLET_ENCRYPTION_KEY)
        wallets = WalletService.generate_wallets(config.WALLET_COUNT, key_store)

        funder = FundingService(
            master,
            StaticPriceProvider(config.ETH_PRICE_USD),
            config.ETH_TRANSFER_AMOUNT,
            tx_timeout=config.TX_TIMEOUT,
        )
        funding = await funder.fund_wallets(wallets)
        module_logger.info(f"Funding finished -> {_summary(funding)}")

        minter = DomainMinter(factory, tx_timeout=config.TX_TIMEOUT)
        minting = await minter.mint_domains(wallets)
        module_logger.info(f"Minting finished -> {_summary(minting)}")

    return PipelineReport(wallets=wallets, funding=funding, minting=minting)


def main() -> None:
    setup_logging(settings.LOG_LEVEL)

    try:
        asyncio.run(run(settings))
    except Exception:
        module_logger.exception("Error in main execution")
        sys.exit(1)


if __name__ == "__main__":
    main()
