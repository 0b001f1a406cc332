"""HTTP API layer: routes, schemas and dependencies."""
