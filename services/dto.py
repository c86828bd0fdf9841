from dataclasses import dataclass, field

from clients.evm.dto import FundingResult, MintResult


@dataclass(frozen=True)
class WalletData:
    private_key: str
    address: str
    mnemonic: str | None = None


@dataclass
class PipelineReport:
    wallets: list[WalletData] = field(default_factory=list)
    funding: list[FundingResult] = field(default_factory=list)
    minting: list[MintResult] = field(default_factory=list)
