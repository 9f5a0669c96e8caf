"""Command-line interface for helperkit."""
