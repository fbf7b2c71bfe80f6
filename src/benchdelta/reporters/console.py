"""Console comparison table with Rich formatting."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from benchdelta.config import ReportConfig
from benchdelta.results import Measurement, ResultSet
from benchdelta.stats import classify_change

from .layout import ColumnLayout, resolve_layout
from .styles import ENTRY_STYLE, HEADER_STYLE, VALUE_STYLE, style_for

logger = logging.getLogger(__name__)

MISSING = "-"


def _trim(value: float, decimals: int) -> str:
    """Format with at most `decimals` places, dropping trailing zeros."""
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_measurement(measurement: Measurement, config: ReportConfig | None = None) -> str:
    """
    Format a measurement as mean with its confidence half-width.

    Args:
        measurement: Measurement to format
        config: Report configuration (defaults used if not provided)

    Returns:
        String like "12.5 ms +- 0.39"
    """
    config = config or ReportConfig()
    ci = measurement.sem * config.z_value
    mean = _trim(measurement.mean, config.decimals)
    return f"{mean} {config.unit} +- {ci:.{config.decimals}f}"


def _at(measurements: Sequence[Measurement], index: int) -> Measurement | None:
    if index < len(measurements):
        return measurements[index]
    return None


def _value_cell(measurement: Measurement | None, config: ReportConfig) -> Text:
    if measurement is None:
        return Text(MISSING, style=VALUE_STYLE)
    return Text(format_measurement(measurement, config), style=VALUE_STYLE)


def _diff_cell(control: Measurement | None, test: Measurement | None) -> Text:
    if control is None or test is None:
        return Text("")
    if control.mean == 0:
        logger.warning(f"Baseline mean of {control.entry} is zero, skipping comparison")
        return Text(MISSING)
    change = classify_change(control.mean, test.mean, control.sem, test.sem)
    return Text(change.label, style=style_for(change.classification))


def build_rows(
    name: str,
    control: ResultSet | None,
    test: ResultSet | None,
    layout: ColumnLayout,
    config: ReportConfig | None = None,
) -> list[list[Text]]:
    """
    Build the rows for one benchmark.

    The first row is the benchmark header. Each following row is one
    measurement index present on either side. Entry names come from the
    test results when present, otherwise from control. Measurements are
    only compared when both sides have one at the same index.

    Args:
        name: Benchmark name
        control: Baseline results
        test: Candidate results
        layout: Columns to produce
        config: Report configuration

    Returns:
        List of rows, each a list of cells
    """
    config = config or ReportConfig()

    control_ms = control.measurements(name) if control is not None else ()
    test_ms = test.measurements(name) if test is not None else ()

    header = [Text(name, style=HEADER_STYLE)]
    if layout.has_control:
        header.append(Text("Time", style=HEADER_STYLE))
    if layout.has_test:
        header.append(Text("Time", style=HEADER_STYLE))
    if layout is ColumnLayout.BOTH:
        header.append(Text(config.diff_label, style=HEADER_STYLE))

    rows = [header]
    for i in range(max(len(control_ms), len(test_ms))):
        c = _at(control_ms, i)
        t = _at(test_ms, i)
        entry = t.entry if t is not None else c.entry
        row = [Text(entry, style=ENTRY_STYLE)]

        match layout:
            case ColumnLayout.BOTH:
                if c is None:
                    logger.warning(f"No baseline measurement for {name}[{i}] ({entry})")
                elif t is None:
                    logger.warning(f"No local measurement for {name}[{i}] ({entry})")
                row += [_value_cell(c, config), _value_cell(t, config), _diff_cell(c, t)]
            case ColumnLayout.CONTROL_ONLY:
                row.append(_value_cell(c, config))
            case ColumnLayout.TEST_ONLY:
                row.append(_value_cell(t, config))

        rows.append(row)

    return rows


def build_table(
    control: ResultSet | None,
    test: ResultSet | None,
    config: ReportConfig | None = None,
) -> Table:
    """
    Build the comparison table for two result sets.

    Args:
        control: Baseline (remote) results, may be None
        test: Candidate (local) results, may be None
        config: Report configuration

    Returns:
        Rich Table with one section per benchmark
    """
    config = config or ReportConfig()
    layout = resolve_layout(control, test)

    table = Table(title=config.title)
    table.add_column("")
    if layout.has_control:
        table.add_column(config.control_label, header_style="bold yellow", justify="right")
    if layout.has_test:
        table.add_column(config.test_label, header_style="bold green", justify="right")
    if layout is ColumnLayout.BOTH:
        table.add_column(config.diff_label, justify="right")

    source = test if layout.has_test else control
    names = source.benchmark_names()
    if layout is ColumnLayout.BOTH:
        baseline_only = [n for n in control.benchmark_names() if n not in test.benchmarks]
        if baseline_only:
            logger.warning(f"Benchmarks only in baseline: {', '.join(baseline_only)}")
        names += baseline_only

    for idx, name in enumerate(names):
        rows = build_rows(name, control, test, layout, config)
        for j, row in enumerate(rows):
            table.add_row(*row, end_section=(j == len(rows) - 1 and idx < len(names) - 1))

    logger.debug(f"Built table for {len(names)} benchmarks ({layout.value})")
    return table


def print_results(
    control: ResultSet | None,
    test: ResultSet | None,
    config: ReportConfig | None = None,
    console: Console | None = None,
) -> None:
    """
    Print the comparison table to console.

    Args:
        control: Baseline (remote) results
        test: Candidate (local) results
        config: Report configuration
        console: Rich console (creates new one if not provided)
    """
    if console is None:
        console = Console()

    console.print(build_table(control, test, config))
