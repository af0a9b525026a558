import pytest

from stakeholder.exceptions import InvalidTemplateField, TemplateError
from stakeholder.progress import Color, Field, FieldKind, parse_template


BOOT_TEMPLATE = "{spinner:.green} [{elapsed_precise}] [{bar:40.cyan/blue}] {pos}/{len} ({eta})"


def test_parses_full_template_in_order():
    fields = parse_template(BOOT_TEMPLATE)

    assert [f.kind for f in fields] == [
        FieldKind.SPINNER,
        FieldKind.TEXT,
        FieldKind.ELAPSED,
        FieldKind.TEXT,
        FieldKind.BAR,
        FieldKind.TEXT,
        FieldKind.POS,
        FieldKind.TEXT,
        FieldKind.LEN,
        FieldKind.TEXT,
        FieldKind.ETA,
        FieldKind.TEXT,
    ]
    assert fields[1].literal == " ["
    assert fields[3].literal == "] ["
    assert fields[7].literal == "/"
    assert fields[-1].literal == ")"


def test_spinner_color():
    (spinner,) = parse_template("{spinner:.yellow}")
    assert spinner == Field(FieldKind.SPINNER, primary_color=Color.YELLOW)


def test_bar_width_and_colors():
    (bar,) = parse_template("{bar:40.cyan/blue}")
    assert bar.kind is FieldKind.BAR
    assert bar.width == 40
    assert bar.primary_color is Color.CYAN
    assert bar.secondary_color is Color.BLUE


def test_plain_text_only():
    assert parse_template("just text") == (Field.text("just text"),)


def test_empty_template():
    assert parse_template("") == ()


def test_parsing_is_deterministic():
    assert parse_template(BOOT_TEMPLATE) == parse_template(BOOT_TEMPLATE)


def test_unknown_field_name():
    with pytest.raises(InvalidTemplateField) as excinfo:
        parse_template("{unknownfield}")
    assert excinfo.value.name == "unknownfield"
    assert isinstance(excinfo.value, TemplateError)


def test_unknown_field_after_valid_fields():
    with pytest.raises(InvalidTemplateField) as excinfo:
        parse_template("{pos}/{len} {percent}")
    assert excinfo.value.name == "percent"


@pytest.mark.parametrize("width", ["abc", "²", "1²", "٣", "-4"])
def test_non_numeric_width_means_no_width(width):
    (bar,) = parse_template("{bar:%s.green}" % width)
    assert bar.kind is FieldKind.BAR
    assert bar.width is None
    assert bar.primary_color is Color.GREEN


def test_color_without_width():
    (bar,) = parse_template("{bar:.green/cyan}")
    assert bar.width is None
    assert bar.primary_color is Color.GREEN
    assert bar.secondary_color is Color.CYAN


def test_width_without_colors():
    (bar,) = parse_template("{bar:25}")
    assert bar.width == 25
    assert bar.primary_color is Color.DEFAULT
    assert bar.secondary_color is Color.DEFAULT


@pytest.mark.parametrize("token", ["magenta", "red", "", "GREEN"])
def test_unrecognized_colors_fall_back_to_default(token):
    (spinner,) = parse_template("{spinner:.%s}" % token)
    assert spinner.primary_color is Color.DEFAULT


def test_field_state_does_not_leak_between_fields():
    first, _, second = parse_template("{bar:10.green/blue} {bar}")
    assert first.width == 10
    assert second.width is None
    assert second.primary_color is Color.DEFAULT
    assert second.secondary_color is Color.DEFAULT


def test_unterminated_field_is_dropped():
    assert parse_template("{pos} {len") == (
        Field(FieldKind.POS),
        Field.text(" "),
    )
