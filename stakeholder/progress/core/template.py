"""
Progress Template Module

Compiles progress bar template strings into typed display fields.

Template syntax:
    {simple}                       e.g. {pos}, {len}, {eta}, {elapsed_precise}
    {colorful:.color}              e.g. {spinner:.green}
    {field:width.color1/color2}    e.g. {bar:40.cyan/blue}

Everything outside braces is kept as literal text.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from stakeholder.exceptions import InvalidTemplateField

logger = logging.getLogger(__name__)


class Color(Enum):
    """Foreground colors understood by the terminal layer."""
    DEFAULT = "default"
    WHITE = "white"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    CYAN = "cyan"
    RED = "red"
    MAGENTA = "magenta"

    @classmethod
    def from_template(cls, name: str) -> "Color":
        """
        Map a template color token to a Color.

        Only green, yellow, blue and cyan are accepted in templates; any
        other token, including an empty one, gives the default color.
        """
        return _TEMPLATE_COLORS.get(name, cls.DEFAULT)


_TEMPLATE_COLORS = {
    "green": Color.GREEN,
    "yellow": Color.YELLOW,
    "blue": Color.BLUE,
    "cyan": Color.CYAN,
}


class FieldKind(Enum):
    """Kinds of template fields."""
    TEXT = "text"
    SPINNER = "spinner"
    ELAPSED = "elapsed_precise"
    BAR = "bar"
    POS = "pos"
    LEN = "len"
    ETA = "eta"


_FIELD_NAMES = {kind.value: kind for kind in FieldKind if kind is not FieldKind.TEXT}


@dataclass(frozen=True)
class Field:
    """One unit of a parsed template: literal text or a dynamic value slot."""
    kind: FieldKind
    literal: str = ""
    width: Optional[int] = None
    primary_color: Color = Color.DEFAULT
    secondary_color: Color = Color.DEFAULT

    @classmethod
    def text(cls, literal: str) -> "Field":
        return cls(FieldKind.TEXT, literal=literal)


# Parser states inside braces
_NAME, _WIDTH, _COLOR1, _COLOR2 = range(4)


def _build_field(name: str, width: str, color1: str, color2: str) -> Field:
    kind = _FIELD_NAMES.get(name)
    if kind is None:
        raise InvalidTemplateField(name)

    parsed_width = int(width) if width.isascii() and width.isdigit() else None
    if width and parsed_width is None:
        logger.debug(f"Ignoring non-numeric width {width!r} for field {name!r}")

    return Field(
        kind,
        width=parsed_width,
        primary_color=Color.from_template(color1),
        secondary_color=Color.from_template(color2),
    )


def parse_template(template: str) -> Tuple[Field, ...]:
    """
    Parse a template string into an ordered tuple of fields.

    Args:
        template: Template text, e.g. "{spinner:.green} {pos}/{len}"

    Returns:
        Tuple of Field instances in display order

    Raises:
        InvalidTemplateField: If a placeholder names an unknown field
    """
    fields: List[Field] = []
    text: List[str] = []
    in_field = False
    state = _NAME
    tokens = ["", "", "", ""]

    for char in template:
        if char == "{":
            if text:
                fields.append(Field.text("".join(text)))
                text = []
            in_field = True
            state = _NAME
            tokens = ["", "", "", ""]
            continue

        if not in_field:
            text.append(char)
            continue

        if char == "}":
            in_field = False
            fields.append(_build_field(*tokens))
        elif char == ":" and state == _NAME:
            state = _WIDTH
        elif char == "." and state in (_NAME, _WIDTH):
            state = _COLOR1
        elif char == "/" and state != _COLOR2:
            state = _COLOR2
        else:
            tokens[state] += char

    if in_field:
        logger.debug(f"Dropping unterminated field in template {template!r}")

    if text:
        fields.append(Field.text("".join(text)))

    return tuple(fields)
