"""T-shirt store bounded context: accounts, catalogue, ordering and storefront settings."""
