"""Rendering of waiting-time snapshots."""

from aedwait.rendering.report import format_report, render_report

__all__ = ["format_report", "render_report"]
