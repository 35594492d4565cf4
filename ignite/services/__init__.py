"""Wrappers around external tools."""
from ignite.services.command_runner import CommandRunner

__all__ = ["CommandRunner"]
