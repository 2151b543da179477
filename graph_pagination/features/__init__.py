"""Wire-facing integrations of the pagination core."""
