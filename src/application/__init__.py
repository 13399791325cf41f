"""HTTP application layer for the transaction service."""
