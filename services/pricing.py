from abc import ABC, abstractmethod
from decimal import Decimal


class PriceProvider(ABC):
    @abstractmethod
    async def get_eth_price(self) -> Decimal:
        pass


class StaticPriceProvider(PriceProvider):
    def __init__(self, price: Decimal | int | str):
        self._price = Decimal(price)

    async def get_eth_price(self) -> Decimal:
        return self._price
