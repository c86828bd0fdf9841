import os
from decimal import Decimal

from dotenv import load_dotenv

load_dotenv()


class Settings:
    def __init__(self):
        self.CHAIN_ID = int(os.getenv("CHAIN_ID", "42161"))
        self.RPC_URL = os.getenv("ARBITRUM_RPC_URL")

        self.MASTER_PRIVATE_KEY = os.getenv("MASTER_PRIVATE_KEY")
        self.ETH_TRANSFER_AMOUNT = os.getenv("ETH_TRANSFER_AMOUNT")
        self.DOMAIN_CONTRACT_ADDRESS = os.getenv("DOMAIN_CONTRACT_ADDRESS")

        # Simulated ETH price in USD
        self.ETH_PRICE_USD = Decimal(os.getenv("ETH_PRICE_USD", "1800000000"))

        self.WALLET_COUNT = int(os.getenv("WALLET_COUNT", "5"))
        self.WALLETS_DIR = os.getenv("WALLETS_DIR", ".")
        self.WALLET_ENCRYPTION_KEY = os.getenv("WALLET_ENCRYPTION_KEY")

        self.TX_TIMEOUT = int(os.getenv("TX_TIMEOUT", "120"))
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
