"""HTTP API for TubeTalk."""
