"""Orchestration layer for coordinating a player run."""

from .orchestrator import Orchestrator, build_playlist, format_config_summary

__all__ = ["Orchestrator", "build_playlist", "format_config_summary"]
