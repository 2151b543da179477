"""GraphQL (strawberry) integration."""
