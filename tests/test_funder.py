from decimal import Decimal

from enums.tx import TxStatus
from services.funder import FundingService
from services.pricing import StaticPriceProvider


async def test_every_wallet_gets_usd_over_price(master_client, wallets):
    funder = FundingService(master_client, StaticPriceProvider(1800000000), Decimal("5"))

    results = await funder.fund_wallets(wallets)

    assert [r.status for r in results] == [TxStatus.SUCCESS] * len(wallets)
    assert master_client.transfer_native.await_count == len(wallets)
    for call, wallet in zip(master_client.transfer_native.await_args_list, wallets):
        assert call.args == (wallet.address, 2777777778)


async def test_failure_does_not_stop_next_wallet(master_client, wallets):
    master_client.transfer_native.side_effect = [
        RuntimeError("insufficient funds"),
        ("0x01", {"status": 1}),
        ("0x02", {"status": 1}),
    ]
    funder = FundingService(master_client, StaticPriceProvider(1800), 5)

    results = await funder.fund_wallets(wallets)

    assert [r.status for r in results] == [
        TxStatus.FAILED,
        TxStatus.SUCCESS,
        TxStatus.SUCCESS,
    ]
    assert results[0].error == "insufficient funds"
    assert results[1].tx_hash == "0x01"
    assert master_client.transfer_native.await_count == 3


async def test_reverted_transfer_is_failed(master_client, wallets):
    master_client.transfer_native.return_value = ("0xbad", {"status": 0})
    funder = FundingService(master_client, StaticPriceProvider(1800), 5)

    result = await funder.fund_wallet(wallets[0], 1)

    assert result.status is TxStatus.FAILED
    assert result.tx_hash == "0xbad"


async def test_timeout_is_passed_through(master_client, wallets):
    funder = FundingService(master_client, StaticPriceProvider(1800), 5, tx_timeout=7)

    await funder.fund_wallets(wallets[:1])

    assert master_client.transfer_native.await_args.kwargs == {"timeout": 7}


async def test_no_wallets_no_transfers(master_client):
    funder = FundingService(master_client, StaticPriceProvider(1800), 5)

    assert await funder.fund_wallets([]) == []
    master_client.transfer_native.assert_not_awaited()
