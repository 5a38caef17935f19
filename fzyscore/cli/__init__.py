"""Command line interface for fzyscore."""
