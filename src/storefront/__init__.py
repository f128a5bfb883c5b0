"""Client side of the Zen Cafe storefront: the cart and an API client."""
