"""GraphQL API for TubeTalk."""
