import re

import pytest

from stakeholder.generators import (
    code_analyzer,
    data_processing,
    jargon,
    metrics,
    network_activity,
    system_monitoring,
)
from stakeholder.rng import Rng
from stakeholder.session import DevelopmentType, JargonLevel

DEV_TYPES = list(DevelopmentType)


@pytest.mark.parametrize("dev_type", DEV_TYPES)
def test_dev_type_generators_return_text(rng, dev_type):
    generated = [
        code_analyzer.generate_filename(rng, dev_type),
        code_analyzer.generate_code_issue(rng, dev_type),
        metrics.generate_performance_metric(rng, dev_type),
        metrics.generate_metric_unit(rng, dev_type),
        metrics.generate_optimization_recommendation(rng, dev_type),
        data_processing.generate_data_operation(rng, dev_type),
        data_processing.generate_data_sub_operation(rng, dev_type),
        data_processing.generate_data_details(rng, dev_type),
        network_activity.generate_endpoint(rng, dev_type),
        network_activity.generate_request_details(rng, dev_type),
    ]
    assert all(isinstance(text, str) and text for text in generated)


@pytest.mark.parametrize("dev_type", DEV_TYPES)
@pytest.mark.parametrize("level", list(JargonLevel))
def test_jargon_for_every_level(rng, dev_type, level):
    for generate in (
        jargon.generate_code_jargon,
        jargon.generate_performance_jargon,
        jargon.generate_data_jargon,
        jargon.generate_network_jargon,
    ):
        assert generate(rng, dev_type, level)


def test_filename_has_directory_and_extension(rng):
    for _ in range(20):
        name = code_analyzer.generate_filename(rng, DevelopmentType.BACKEND)
        assert re.match(r"^[\w./-]+/[\w.-]+\.\w+$", name)


def test_complexity_metric_format(rng):
    metric = code_analyzer.generate_complexity_metric(rng)
    label, value = metric.rsplit(": ", 1)
    assert label
    assert 1 <= int(value) < 30


def test_method_and_status(rng):
    methods = {network_activity.generate_method(rng) for _ in range(200)}
    statuses = {network_activity.generate_status(rng) for _ in range(200)}

    assert methods <= {"GET", "POST", "PUT", "DELETE"}
    assert "GET" in methods
    assert all(isinstance(status, int) and 200 <= status < 600 for status in statuses)


def test_request_details_fill_placeholders(rng):
    for _ in range(50):
        assert "{" not in network_activity.generate_request_details(rng, DevelopmentType.FRONTEND)


def test_system_text(rng):
    assert system_monitoring.generate_system_event(rng)
    assert system_monitoring.generate_system_recommendation(rng)


def test_same_seed_same_text():
    first, second = Rng(seed=11), Rng(seed=11)
    assert [data_processing.generate_data_operation(first, DevelopmentType.DEVOPS) for _ in range(10)] == [
        data_processing.generate_data_operation(second, DevelopmentType.DEVOPS) for _ in range(10)
    ]
