"""Entry-point adapters package."""
