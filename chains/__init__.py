from chains.registery import ChainRegistry
from chains.arbitrum import arbitrum, arbitrum_sepolia


registery = ChainRegistry([arbitrum, arbitrum_sepolia])
