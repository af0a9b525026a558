"""
Progress Tracking Module

Template-driven, in-place terminal progress bars. A template such as
"{spinner:.green} [{elapsed_precise}] [{bar:40.cyan/blue}] {pos}/{len} ({eta})"
is parsed into typed fields and redrawn on a single line.
"""

from stakeholder.progress.core import (
    BarStatus,
    Color,
    Field,
    FieldKind,
    ProgressBar,
    ProgressState,
    format_duration,
    parse_template,
)
from stakeholder.progress.display import LineRenderer, RichTerminal, Terminal, bar_segments
from stakeholder.progress.config import (
    ProgressConfig,
    get_config,
    set_config,
    update_config,
)

__all__ = [
    'BarStatus',
    'Color',
    'Field',
    'FieldKind',
    'ProgressBar',
    'ProgressState',
    'format_duration',
    'parse_template',
    'LineRenderer',
    'RichTerminal',
    'Terminal',
    'bar_segments',
    'ProgressConfig',
    'get_config',
    'set_config',
    'update_config',
]
