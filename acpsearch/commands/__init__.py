"""ACP command implementations."""
