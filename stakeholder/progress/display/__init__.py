"""
Progress Display Components

Contains the terminal backends and the single-line renderer.
"""

from stakeholder.progress.display.terminal import Terminal, RichTerminal
from stakeholder.progress.display.line_renderer import LineRenderer, bar_segments

__all__ = [
    'Terminal',
    'RichTerminal',
    'LineRenderer',
    'bar_segments',
]
