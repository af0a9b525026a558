"""
Core Progress Components

Contains the template model, progress state and the progress bar controller.
"""

from stakeholder.progress.core.template import Color, Field, FieldKind, parse_template
from stakeholder.progress.core.state import ProgressState, format_duration
from stakeholder.progress.core.bar import BarStatus, ProgressBar

__all__ = [
    'Color',
    'Field',
    'FieldKind',
    'parse_template',
    'ProgressState',
    'format_duration',
    'BarStatus',
    'ProgressBar',
]
