import logging

from mnemonic import Mnemonic
from eth_account import Account

from services.dto import WalletData
from services.keystore import KeyStore

module_logger = logging.getLogger(__name__)


class WalletService:
    @staticmethod
    def generate_mnemonic() -> str:
        result = Mnemonic("english")
        return result.generate()

    @staticmethod
    def derive_private_key(mnemonic: str) -> str:
        Account.enable_unaudited_hdwallet_features()

        account = Account.from_mnemonic(mnemonic)

        return "0x" + bytes(account.key).hex()

    @staticmethod
    def get_address(private_key: str) -> str:
        if not private_key.startswith("0x"):
            private_key = f"0x{private_key}"

        account = Account.from_key(private_key)
        return account.address

    @staticmethod
    def create_wallet() -> WalletData:
        mnemonic = WalletService.generate_mnemonic()

        private_key = WalletService.derive_private_key(mnemonic)
        address = WalletService.get_address(private_key)

        return WalletData(private_key=private_key, address=address, mnemonic=mnemonic)

    @staticmethod
    def generate_wallets(count: int, key_store: KeyStore) -> list[WalletData]:
        if count < 0:
            raise ValueError(f"Wallet count must be non-negative, got {count}")

        wallets = []
        for i in range(1, count + 1):
            wallet = WalletService.create_wallet()
            wallets.append(wallet)

            key_store.save(i, wallet)
            module_logger.info(f"Wallet {i} - Address: {wallet.address}")

        return wallets
