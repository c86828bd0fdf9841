from dataclasses import dataclass

from enums.tx import TxStatus


@dataclass
class FundingResult:
    address: str
    amount_wei: int
    status: TxStatus
    tx_hash: str | None = None
    error: str | None = None


@dataclass
class MintResult:
    address: str
    domain: str
    status: TxStatus
    tx_hash: str | None = None
    gas_limit: int | None = None
    gas_price: int | None = None
    error: str | None = None
