"""Services module: business logic between the routers and the repositories."""
