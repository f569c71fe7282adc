from ovaldef.cli.cli import cli

__all__ = ["cli"]
