"""Generate typed TypeScript GraphQL clients from GraphQL schemas."""

__version__ = "0.1.0"
