"""Nexus upload module exports."""

from .plugin import NexusPlugin

__all__ = ["NexusPlugin"]
