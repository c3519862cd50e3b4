"""HTTP layer for the store domain. Routers live in their own modules."""
