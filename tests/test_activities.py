import pytest

from stakeholder import activities, display
from stakeholder.progress import Color
from stakeholder.session import DevelopmentType, JargonLevel


@pytest.mark.parametrize("activity, summary", [
    (activities.run_code_analysis, "📊 Analysis Complete:"),
    (activities.run_performance_metrics, "📈 Performance Results:"),
    (activities.run_system_monitoring, "📊 Resource Utilization Summary:"),
    (activities.run_data_processing, "📊 Data Processing Summary:"),
    (activities.run_network_activity, "📊 Network Activity Summary:"),
])
@pytest.mark.parametrize("dev_type", list(DevelopmentType))
def test_activity_prints_summary(make_session, terminal, activity, summary, dev_type):
    session = make_session(dev_type=dev_type, jargon_level=JargonLevel.EXTREME)

    activity(session)

    lines = terminal.plain_lines()
    assert any(line.startswith(summary) for line in lines)
    assert lines[-1] == ""
    assert terminal.cursor_visible
    assert terminal.color is Color.DEFAULT


def test_code_analysis_mentions_framework(make_session, terminal):
    activities.run_code_analysis(make_session(framework="Django"))
    assert terminal.plain_lines()[0] == "🔍 Running Code Analysis on API Components (Django specific)"


def test_low_jargon_omits_jargon_line(make_session, terminal):
    activities.run_code_analysis(make_session(jargon_level=JargonLevel.LOW))

    lines = terminal.plain_lines()
    start = next(i for i, line in enumerate(lines) if line.startswith("📊 Analysis Complete:"))
    # Issues, quality, debt, then the blank line
    assert len(lines) - start == 5


def test_title_uses_color(make_session, terminal):
    activities.run_network_activity(make_session())
    assert terminal.segments[0] == ("🌐 Monitoring API Network Traffic", Color.MAGENTA)


def test_minimal_output_drops_colors(make_session, terminal):
    activities.run_network_activity(make_session(minimal_output=True))
    assert {color for _, color in terminal.segments} == {Color.DEFAULT}


def test_activities_sleep_through_rng(make_session, sleeps):
    activities.run_network_activity(make_session())
    assert sleeps
    assert all(0.1 <= seconds < 0.4 for seconds in sleeps)


def test_bars_leave_no_residue(make_session, terminal):
    activities.run_code_analysis(make_session())
    for line in terminal.plain_lines():
        assert "▰" not in line and "▱" not in line


def test_level_color():
    assert activities.level_color(50, 60, 80) is Color.DEFAULT
    assert activities.level_color(61, 60, 80) is Color.YELLOW
    assert activities.level_color(81, 60, 80) is Color.RED


@pytest.mark.parametrize("status, color", [
    (200, Color.GREEN),
    (204, Color.GREEN),
    (301, Color.YELLOW),
    (404, Color.RED),
    (503, Color.RED),
])
def test_status_color(status, color):
    assert activities.status_color(status) is color


def test_pad_number():
    assert activities.pad_number(5, " ms", 3) == "5 ms  "
    assert activities.pad_number(123, " ms", 3) == "123 ms"


def test_percentile():
    values = [float(v) for v in range(1, 101)]
    assert activities.percentile(values, 0.5) == 51.0
    assert activities.percentile(values, 0.25) == 26.0
    assert activities.percentile(values, 1.0) == 100.0
    assert activities.percentile([7.0], 0.99) == 7.0


def test_boot_sequence(make_session, terminal, sleeps):
    display.show_boot_sequence(make_session(project_name="rocket", framework="Flask"))

    lines = terminal.plain_lines()
    assert "INITIALIZING DEVELOPMENT ENVIRONMENT" in lines
    assert "Project: ROCKET" in lines
    assert "Environment: Backend Development" in lines
    assert "Framework: Flask" in lines
    assert "  Loading configuration files..." in lines
    assert "  Analyzing code dependencies..." in lines
    assert "✅ DEVELOPMENT ENVIRONMENT INITIALIZED" in lines
    assert sleeps[-1] == 0.5
    assert terminal.cursor_visible


def test_boot_header_colored_in_minimal_mode(make_session, terminal):
    display.show_boot_sequence(make_session(minimal_output=True))
    assert ("INITIALIZING DEVELOPMENT ENVIRONMENT", Color.CYAN) in terminal.segments


def test_random_alert(make_session, terminal, sleeps):
    display.show_random_alert(make_session(dev_type=DevelopmentType.SECURITY))

    headline, response, blank = terminal.plain_lines()
    assert headline.startswith("🚨 ")
    assert " ALERT [" in headline
    assert response.startswith("  ↳ AUTOMATED RESPONSE: ")
    assert blank == ""
    assert terminal.segments[0][1] in display.SEVERITY_COLORS.values()
    assert sleeps == [1.0]


def test_team_activity(make_session, terminal, sleeps):
    display.show_team_activity(make_session(dev_type=DevelopmentType.DEVOPS))

    lines = terminal.plain_lines()
    assert lines[0].startswith("👥 TEAM: ")
    assert any(lines[0].split()[2] == member for member in display.TEAM_MEMBERS)
    assert "minutes ago)" in lines[0]
    assert lines[-1] == ""
    assert sleeps == [0.8]
