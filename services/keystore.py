import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from cryptography.fernet import Fernet

from services.dto import WalletData

module_logger = logging.getLogger(__name__)


class KeyStore(ABC):
    """Persists generated wallets, one JSON file per wallet."""

    FILE_TEMPLATE = "wallet_{index}.json"

    def __init__(self, directory: str | Path = "."):
        self.directory = Path(directory)

    def path_for(self, index: int) -> Path:
        return self.directory / self.FILE_TEMPLATE.format(index=index)

    def save(self, index: int, wallet: WalletData) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)

        path = self.path_for(index)
        path.write_text(json.dumps(self._serialize(wallet)))

        return path

    def load(self, path: str | Path) -> WalletData:
        data = json.loads(Path(path).read_text())
        return self._deserialize(data)

    @abstractmethod
    def _serialize(self, wallet: WalletData) -> dict:
        pass

    @abstractmethod
    def _deserialize(self, data: dict) -> WalletData:
        pass


class PlainFileKeyStore(KeyStore):
    def _serialize(self, wallet: WalletData) -> dict:
        return {
            "address": wallet.address,
            "privateKey": wallet.private_key,
            "mnemonic": wallet.mnemonic,
        }

    def _deserialize(self, data: dict) -> WalletData:
        return WalletData(
            private_key=data["privateKey"],
            address=data["address"],
            mnemonic=data.get("mnemonic"),
        )


class EncryptedFileKeyStore(KeyStore):
    def __init__(self, directory: str | Path, encryption_key: str):
        super().__init__(directory)
        self._cipher = Fernet(encryption_key.encode())

    def _encrypt(self, value: str | None) -> str | None:
        if value is None:
            return None
        return self._cipher.encrypt(value.encode()).decode()

    def _decrypt(self, value: str | None) -> str | None:
        if value is None:
            return None
        return self._cipher.decrypt(value.encode()).decode()

    def _serialize(self, wallet: WalletData) -> dict:
        return {
            "address": wallet.address,
            "privateKey": self._encrypt(wallet.private_key),
            "mnemonic": self._encrypt(wallet.mnemonic),
            "encrypted": True,
        }

    def _deserialize(self, data: dict) -> WalletData:
        return WalletData(
            private_key=self._decrypt(data["privateKey"]),
            address=data["address"],
            mnemonic=self._decrypt(data.get("mnemonic")),
        )


def create_key_store(directory: str | Path, encryption_key: str | None = None) -> KeyStore:
    if encryption_key:
        return EncryptedFileKeyStore(directory, encryption_key)

    module_logger.warning(
        "WALLET_ENCRYPTION_KEY not set, private keys will be written in plaintext"
    )
    return PlainFileKeyStore(directory)
