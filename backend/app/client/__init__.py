"""Client — GraphQL client and presentation helpers used by the frontend."""
