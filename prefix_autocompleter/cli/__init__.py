from prefix_autocompleter.cli.cli import CLI, main

__all__ = ["CLI", "main"]
