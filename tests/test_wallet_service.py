import json

import pytest
from eth_account import Account

from services.keystore import PlainFileKeyStore
from services.wallet import WalletService


@pytest.mark.parametrize("count", [0, 1, 2, 5])
def test_generates_exact_count_with_distinct_addresses(tmp_path, count):
    wallets = WalletService.generate_wallets(count, PlainFileKeyStore(tmp_path))

    assert len(wallets) == count
    assert len({w.address for w in wallets}) == count
    assert sorted(p.name for p in tmp_path.iterdir()) == sorted(
        f"wallet_{i}.json" for i in range(1, count + 1)
    )


def test_persisted_files_match_returned_wallets(tmp_path):
    wallets = WalletService.generate_wallets(2, PlainFileKeyStore(tmp_path))

    for i, wallet in enumerate(wallets, start=1):
        data = json.loads((tmp_path / f"wallet_{i}.json").read_text())
        assert data["address"] == wallet.address
        assert data["privateKey"] == wallet.private_key


def test_private_key_controls_address():
    wallet = WalletService.create_wallet()

    assert wallet.private_key.startswith("0x")
    assert Account.from_key(wallet.private_key).address == wallet.address
    assert len(wallet.mnemonic.split()) == 12


def test_get_address_accepts_unprefixed_key():
    key = "4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"

    assert WalletService.get_address(key) == Account.from_key("0x" + key).address


def test_negative_count_rejected(tmp_path):
    with pytest.raises(ValueError):
        WalletService.generate_wallets(-1, PlainFileKeyStore(tmp_path))


def test_write_error_propagates(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    with pytest.raises(OSError):
        WalletService.generate_wallets(1, PlainFileKeyStore(blocker / "keys"))
