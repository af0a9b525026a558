"""
Simulated Activities

Each activity prints a themed burst of fake work: a title, a progress bar or
a stream of lines with occasional details, and a summary.
"""

import logging
from typing import Callable, Dict, List, Tuple

from stakeholder.generators import (
    code_analyzer,
    data_processing,
    jargon,
    metrics,
    network_activity,
    system_monitoring,
)
from stakeholder.progress import Color
from stakeholder.session.config import DevelopmentType, JargonLevel
from stakeholder.session.context import Session

logger = logging.getLogger(__name__)

D = DevelopmentType

CODE_ANALYSIS_TEMPLATE = "{spinner:.green} [{elapsed_precise}] [{bar:40.cyan/blue}] {pos}/{len} files ({eta})"
PERFORMANCE_TEMPLATE = "{spinner:.yellow} [{elapsed_precise}] [{bar:40.yellow/blue}] {pos}/{len} samples ({eta})"
MONITORING_TEMPLATE = "{spinner:.green} [{elapsed_precise}] [{bar:40.green/blue}] {pos}/{len} seconds"
SUBTASK_TEMPLATE = "     {spinner:.blue} [{elapsed_precise}] [{bar:30.cyan/blue}] {pos}/{len}"

_CODE_ANALYSIS_TITLES = {
    D.BACKEND: "🔍 Running Code Analysis on API Components{framework}",
    D.FRONTEND: "🔍 Analyzing UI Components{framework}",
    D.FULLSTACK: "🔍 Analyzing Full-Stack Integration Points",
    D.DATA_SCIENCE: "🔍 Analyzing Data Pipeline Components",
    D.DEVOPS: "🔍 Analyzing Infrastructure Configuration",
    D.BLOCKCHAIN: "🔍 Analyzing Smart Contract Security",
    D.MACHINE_LEARNING: "🔍 Analyzing Model Prediction Accuracy",
    D.SYSTEMS_PROGRAMMING: "🔍 Analyzing Memory Safety Patterns",
    D.GAME_DEVELOPMENT: "🔍 Analyzing Game Physics Components",
    D.SECURITY: "🔍 Running Security Vulnerability Scan",
}

_PERFORMANCE_TITLES = {
    D.BACKEND: "⚡ Analyzing API Response Time",
    D.FRONTEND: "⚡ Measuring UI Rendering Performance",
    D.FULLSTACK: "⚡ Evaluating End-to-End Performance",
    D.DATA_SCIENCE: "⚡ Benchmarking Data Processing Pipeline",
    D.DEVOPS: "⚡ Evaluating Infrastructure Scalability",
    D.BLOCKCHAIN: "⚡ Measuring Transaction Throughput",
    D.MACHINE_LEARNING: "⚡ Benchmarking Model Training Speed",
    D.SYSTEMS_PROGRAMMING: "⚡ Measuring Memory Allocation Efficiency",
    D.GAME_DEVELOPMENT: "⚡ Analyzing Frame Rate Optimization",
    D.SECURITY: "⚡ Benchmarking Encryption Performance",
}

# Base response time range in ms
_PERFORMANCE_BASE: Dict[DevelopmentType, Tuple[int, int]] = {
    D.BACKEND: (20, 80),
    D.FRONTEND: (5, 30),
    D.DATA_SCIENCE: (100, 500),
    D.BLOCKCHAIN: (200, 800),
    D.MACHINE_LEARNING: (300, 900),
}

_DATA_PROCESSING_TITLES = {
    D.BACKEND: "🔄 Processing API Data Streams",
    D.FRONTEND: "🔄 Processing User Interaction Data",
    D.FULLSTACK: "🔄 Synchronizing Client-Server Data",
    D.DATA_SCIENCE: "🔄 Running Data Transformation Pipeline",
    D.DEVOPS: "🔄 Analyzing System Logs",
    D.BLOCKCHAIN: "🔄 Validating Transaction Blocks",
    D.MACHINE_LEARNING: "🔄 Processing Training Data Batches",
    D.SYSTEMS_PROGRAMMING: "🔄 Optimizing Memory Access Patterns",
    D.GAME_DEVELOPMENT: "🔄 Processing Game Asset Pipeline",
    D.SECURITY: "🔄 Analyzing Security Event Logs",
}

_NETWORK_TITLES = {
    D.BACKEND: "🌐 Monitoring API Network Traffic",
    D.FRONTEND: "🌐 Analyzing Client-Side Network Requests",
    D.FULLSTACK: "🌐 Optimizing Client-Server Communication",
    D.DATA_SCIENCE: "🌐 Synchronizing Distributed Data Nodes",
    D.DEVOPS: "🌐 Monitoring Infrastructure Network",
    D.BLOCKCHAIN: "🌐 Monitoring Blockchain Network",
    D.MACHINE_LEARNING: "🌐 Distributing Model Training",
    D.SYSTEMS_PROGRAMMING: "🌐 Analyzing Network Protocol Efficiency",
    D.GAME_DEVELOPMENT: "🌐 Simulating Multiplayer Network Conditions",
    D.SECURITY: "🌐 Analyzing Network Security Patterns",
}

_METHOD_COLORS = {
    "GET": Color.GREEN,
    "POST": Color.BLUE,
    "PUT": Color.YELLOW,
    "DELETE": Color.RED,
}


def pad_number(number: int, suffix: str, width: int) -> str:
    """Number with suffix, left-aligned in a column for width digits."""
    return f"{number}{suffix}".ljust(width + len(suffix))


def level_color(value: int, warn: int, critical: int) -> Color:
    """Red above critical, yellow above warn, default otherwise."""
    if value > critical:
        return Color.RED
    if value > warn:
        return Color.YELLOW
    return Color.DEFAULT


def status_color(status: int) -> Color:
    if 200 <= status < 300:
        return Color.GREEN
    if 300 <= status < 400:
        return Color.YELLOW
    return Color.RED


def percentile(sorted_values: List[float], fraction: float) -> float:
    """Nearest-rank style percentile of an already sorted list."""
    return sorted_values[min(len(sorted_values) - 1, int(len(sorted_values) * fraction))]


def run_code_analysis(session: Session) -> None:
    config, rng = session.config, session.rng
    files_to_analyze = rng.randint(5, 25)
    total_lines = rng.randint(1000, 10000)
    framework = f" ({config.framework} specific)" if config.framework else ""

    session.echo(_CODE_ANALYSIS_TITLES[config.dev_type].format(framework=framework), Color.BLUE)

    with session.progress_bar(files_to_analyze, CODE_ANALYSIS_TEMPLATE) as bar:
        for i in range(files_to_analyze):
            bar.set_position(i)

            if rng.chance(0.33):
                file_name = code_analyzer.generate_filename(rng, config.dev_type)
                complexity = code_analyzer.generate_complexity_metric(rng)
                if rng.chance(0.25):
                    issue = code_analyzer.generate_code_issue(rng, config.dev_type)
                    bar.write_line(f"  ⚠️ {file_name} - {issue}: {complexity}")
                else:
                    bar.write_line(f"  ✓ {file_name} - {complexity}")

            rng.sleep_ms(100, 300)

    session.echo(f"📊 Analysis Complete: {files_to_analyze} files, {total_lines} lines of code")
    session.echo(f"  - Issues found: {rng.randint(0, 5)}")
    session.echo(f"  - Code quality score: {rng.randint(85, 99)}%")
    session.echo(f"  - Technical debt: {rng.randint(1, 15)}%")

    if config.jargon_level >= JargonLevel.MEDIUM:
        session.echo(f"  - {jargon.generate_code_jargon(rng, config.dev_type, config.jargon_level)}")

    session.echo()


def run_performance_metrics(session: Session) -> None:
    config, rng = session.config, session.rng
    session.echo(_PERFORMANCE_TITLES[config.dev_type], Color.YELLOW)

    iterations = rng.randint(50, 200)
    low, high = _PERFORMANCE_BASE.get(config.dev_type, (10, 100))
    samples: List[float] = []

    with session.progress_bar(iterations, PERFORMANCE_TEMPLATE) as bar:
        for i in range(iterations):
            bar.set_position(i)

            jitter = rng.randint(-5, 5)
            samples.append(max(float(rng.randint(low, high) + jitter), 1.0))

            if i % 10 == 0 and rng.chance(0.33):
                name = metrics.generate_performance_metric(rng, config.dev_type)
                unit = metrics.generate_metric_unit(rng, config.dev_type)
                bar.write_line(f"  📊 {name}: {rng.randint(10, 999)} {unit}")

            rng.sleep_ms(50, 100)

    samples.sort()
    unit = "seconds" if config.dev_type in (D.DATA_SCIENCE, D.MACHINE_LEARNING) else "milliseconds"

    session.echo("📈 Performance Results:")
    session.echo(f"  - Average: {round(sum(samples) / len(samples), 2)} {unit}")
    session.echo(f"  - Median: {round(samples[len(samples) // 2], 2)} {unit}")
    session.echo(f"  - P95: {round(percentile(samples, 0.95), 2)} {unit}")
    session.echo(f"  - P99: {round(percentile(samples, 0.99), 2)} {unit}")
    session.echo(f"💡 Recommendation: {metrics.generate_optimization_recommendation(rng, config.dev_type)}")

    if config.jargon_level >= JargonLevel.MEDIUM:
        session.echo(f"  - {jargon.generate_performance_jargon(rng, config.dev_type, config.jargon_level)}")

    session.echo()


def run_system_monitoring(session: Session) -> None:
    rng = session.rng
    session.echo("🖥️ System Resource Monitoring", Color.GREEN)

    duration = rng.randint(5, 15)
    cpu_base = rng.randint(10, 60)
    memory_base = rng.randint(30, 70)
    network_base = rng.randint(1, 20)
    disk_base = rng.randint(5, 40)

    with session.progress_bar(duration, MONITORING_TEMPLATE) as bar:
        for i in range(duration):
            bar.set_position(i)

            cpu = cpu_base + rng.randint(-5, 10)
            memory = memory_base + rng.randint(-3, 5)
            network = network_base + rng.randint(-1, 3)
            disk = disk_base + rng.randint(-2, 4)
            processes = rng.randint(80, 200)
            cpu_text = f"{cpu}% (!)" if cpu > 60 else f"{cpu}%    "

            # The stats line replaces the bar line; the bar returns on the next tick
            bar.clear_line()
            session.echo("  CPU: ", newline=False)
            session.echo(cpu_text, level_color(cpu, 60, 80), newline=False)
            session.echo("  |  RAM: ", newline=False)
            session.echo(f"{memory}%", level_color(memory, 70, 85), newline=False)
            session.echo(f"  |  Network: {pad_number(network, ' MB/s', 2)}", newline=False)
            session.echo(f"  |  Disk I/O: {pad_number(disk, ' MB/s', 2)}", newline=False)
            session.echo(f"  |  Processes: {processes}")

            if i % 3 == 0 and rng.chance(0.33):
                bar.write_line(f"  🔄 {system_monitoring.generate_system_event(rng)}")

            rng.sleep_ms(200, 500)

    session.echo("📊 Resource Utilization Summary:")
    session.echo(f"  - Peak CPU: {cpu_base + rng.randint(5, 15)}%")
    session.echo(f"  - Peak Memory: {memory_base + rng.randint(5, 15)}%")
    session.echo(f"  - Network Throughput: {network_base + rng.randint(5, 10)} MB/s")
    session.echo(f"  - Disk Throughput: {disk_base + rng.randint(2, 8)} MB/s")
    session.echo(f"  - {system_monitoring.generate_system_recommendation(rng)}")
    session.echo()


def run_data_processing(session: Session) -> None:
    config, rng = session.config, session.rng
    operations = rng.randint(5, 20)

    session.echo(_DATA_PROCESSING_TITLES[config.dev_type], Color.CYAN)

    for _ in range(operations):
        operation = data_processing.generate_data_operation(rng, config.dev_type)
        records = rng.randint(100, 10000)
        size = rng.randint(1, 100)
        size_unit = "GB" if rng.chance(0.25) else "MB"

        session.echo(f"  🔄 {operation} {records} records ({size} {size_unit})")

        if rng.chance(0.33):
            subtasks = rng.randint(10, 30)
            with session.progress_bar(subtasks, SUBTASK_TEMPLATE) as bar:
                for step in range(subtasks):
                    bar.set_position(step)
                    rng.sleep_ms(20, 100)

                    if rng.chance(0.125):
                        sub_operation = data_processing.generate_data_sub_operation(rng, config.dev_type)
                        bar.write_line(f"       - {sub_operation}")

                bar.finish_and_clear()
        else:
            rng.sleep_ms(300, 800)

        if rng.chance(0.5):
            session.echo(f"     ✓ {data_processing.generate_data_details(rng, config.dev_type)}")

    session.echo("📊 Data Processing Summary:")
    session.echo(f"  - Records processed: {rng.randint(10000, 1000000)}")
    session.echo(f"  - Processing rate: {rng.randint(1000, 10000)} records/sec")
    session.echo(f"  - Total data size: {rng.randint(10, 500)} GB")
    session.echo(f"  - Estimated time saved: {rng.randint(10, 60)} minutes")

    if config.jargon_level >= JargonLevel.MEDIUM:
        session.echo(f"  - {jargon.generate_data_jargon(rng, config.dev_type, config.jargon_level)}")

    session.echo()


def run_network_activity(session: Session) -> None:
    config, rng = session.config, session.rng
    session.echo(_NETWORK_TITLES[config.dev_type], Color.MAGENTA)

    for _ in range(rng.randint(5, 15)):
        endpoint = network_activity.generate_endpoint(rng, config.dev_type).ljust(32)
        method = network_activity.generate_method(rng)
        status = network_activity.generate_status(rng)
        size = rng.randint(1, 1000)
        elapsed = rng.randint(10, 500)

        session.echo(f"  {method.ljust(8)}", _METHOD_COLORS.get(method, Color.DEFAULT), newline=False)
        session.echo(f"  {endpoint}  → ", newline=False)
        session.echo(str(status), status_color(status), newline=False)
        session.echo(f" | {pad_number(elapsed, ' ms', 3)} | {size} KB")

        if rng.chance(0.33):
            session.echo(f"     ↳ {network_activity.generate_request_details(rng, config.dev_type)}")

        rng.sleep_ms(100, 400)

    session.echo("📊 Network Activity Summary:")
    session.echo(f"  - Total requests: {rng.randint(1000, 10000)}")
    session.echo(f"  - Average response time: {rng.randint(50, 200)} ms")
    session.echo(f"  - Success rate: {rng.randint(95, 100)}%")
    session.echo(f"  - Bandwidth utilization: {rng.randint(10, 100)} MB/s")

    if config.jargon_level >= JargonLevel.MEDIUM:
        session.echo(f"  - {jargon.generate_network_jargon(rng, config.dev_type, config.jargon_level)}")

    session.echo()


ACTIVITIES: List[Callable[[Session], None]] = [
    run_code_analysis,
    run_performance_metrics,
    run_system_monitoring,
    run_data_processing,
    run_network_activity,
]
