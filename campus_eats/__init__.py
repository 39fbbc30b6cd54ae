"""Campus restaurant discovery service."""
