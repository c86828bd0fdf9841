from chains.dto import ChainConfig


arbitrum = ChainConfig(
    chain_id=42161,
    name="arbitrum",
    display_name="Arbitrum One",
    symbol="ETH",
    explorer="https://arbiscan.io/",
    rpc_url="https://arb1.arbitrum.io/rpc",
)

arbitrum_sepolia = ChainConfig(
    chain_id=421614,
    name="arbitrum-sepolia",
    display_name="Arbitrum Sepolia",
    symbol="ETH",
    explorer="https://sepolia.arbiscan.io/",
    rpc_url="https://sepolia-rollup.arbitrum.io/rpc",
)
