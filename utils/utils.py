from decimal import Decimal, ROUND_HALF_UP, localcontext

from web3 import AsyncWeb3

WEI_DECIMALS = Decimal("1e-18")


def compute_transfer_amount(usd_amount: Decimal | int | str, eth_price: Decimal | int | str) -> int:
    """USD amount -> wei at the given ETH price, rounded to 18 decimals."""
    with localcontext() as ctx:
        ctx.prec = 78

        eth_amount = Decimal(usd_amount) / Decimal(eth_price)
        eth_amount = eth_amount.quantize(WEI_DECIMALS, rounding=ROUND_HALF_UP)

        return AsyncWeb3.to_wei(eth_amount, "ether")


def format_amount(value: Decimal) -> str:
    if value == 0:
        return "0"

    if value < Decimal("0.0001"):
        return "<0.0001"

    if value > Decimal("1"):
        return f"{value:.2f}".rstrip("0").rstrip(".")

    return f"{value:.4f}".rstrip("0").rstrip(".")
