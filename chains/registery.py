from dataclasses import replace

from chains.dto import ChainConfig


class ChainRegistry:
    def __init__(self, chains: list[ChainConfig]):
        self._chains: dict[int, ChainConfig] = {}
        for cfg in chains:
            self._chains[cfg.chain_id] = cfg

    def get(self, chain_id: int) -> ChainConfig | None:
        return self._chains.get(chain_id)

    def resolve(
        self,
        chain_id: int,
        rpc_url: str | None = None,
        domain_contract_address: str | None = None,
    ) -> ChainConfig:
        """Return the registered chain with environment overrides applied.

        Unknown chain ids still get a config when an RPC URL is supplied, so a
        private or forked network can be targeted without a registry entry.
        """
        cfg = self.get(chain_id)

        if cfg is None:
            if not rpc_url:
                raise KeyError(f"Unknown chain id {chain_id} and no RPC URL given")
            cfg = ChainConfig(
                chain_id=chain_id,
                name=f"chain-{chain_id}",
                display_name=f"Chain {chain_id}",
                symbol="ETH",
                explorer="",
                rpc_url=rpc_url,
            )

        overrides = {}
        if rpc_url:
            overrides["rpc_url"] = rpc_url
        if domain_contract_address:
            overrides["domain_contract_address"] = domain_contract_address

        return replace(cfg, **overrides)
