"""Command line front end for the terminal probes."""

from termprobe.cli.app import create_app

__all__ = ["create_app"]
