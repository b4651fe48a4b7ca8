"""Report generation for analysis profiles."""

import csv
import json
import os
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, List, Optional

from jinja2 import Environment
from rich.console import Console
from rich.markup import escape
from rich.table import Table as RichTable

from ..profiling.stats_calculator import ColumnStats
from ..utils.logger import get_logger

logger = get_logger('report_generator')


STAT_FIELDS = [
    ('Sum', 'sum'),
    ('Mean', 'mean'),
    ('Median', 'median'),
    ('Std Dev', 'std_dev'),
    ('Min', 'min'),
    ('Max', 'max'),
]

NO_NUMERIC_MESSAGE = "No Numeric Column Found for Statistical Analysis."

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>CSV Analysis Report - {{ source }}</title>
    <style>
        body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; margin: 20px; background-color: #f5f5f5; }
        .container { max-width: 1200px; margin: 0 auto; background: white; padding: 30px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
        h1 { color: #333; border-bottom: 3px solid #007bff; padding-bottom: 10px; }
        h2 { color: #495057; margin-top: 30px; border-bottom: 2px solid #dee2e6; padding-bottom: 8px; }
        table { border-collapse: collapse; width: 100%; margin: 15px 0; }
        th, td { border: 1px solid #dee2e6; padding: 8px 12px; text-align: right; }
        th { background: #f8f9fa; }
        td.name, th.name { text-align: left; }
        .numeric { color: #28a745; font-weight: bold; }
        .text { color: #6c757d; }
    </style>
</head>
<body>
<div class="container">
    <h1>CSV Analysis Report</h1>
    <p>Source: <strong>{{ source }}</strong> &middot; {{ metadata.row_count }} rows, {{ metadata.column_count }} columns &middot; generated {{ generated_at }}</p>

    <h2>Column Information</h2>
    <table>
        <tr><th class="name">Column</th><th class="name">Type</th></tr>
        {% for column in columns %}
        <tr><td class="name">{{ column.name }}</td><td class="name {{ column.type | lower }}">{{ column.type }}</td></tr>
        {% endfor %}
    </table>

    <h2>Statistical Analysis (Numeric Columns)</h2>
    {% if statistics %}
    <table>
        <tr><th class="name">Column</th><th>Count</th>{% for label, _ in fields %}<th>{{ label }}</th>{% endfor %}</tr>
        {% for stat in statistics %}
        <tr><td class="name">{{ stat.name }}</td><td>{{ stat.count }}</td>{% for _, key in fields %}<td>{{ fmt(stat[key]) }}</td>{% endfor %}</tr>
        {% endfor %}
    </table>
    {% else %}
    <p>{{ no_numeric }}</p>
    {% endif %}
</div>
</body>
</html>
"""


class ReportGenerator:
    """Generates analysis reports (console, TXT, JSON, CSV, HTML)."""

    SUPPORTED_FORMATS = ('json', 'csv', 'html', 'txt')

    def __init__(self, output_dir: str = './reports', precision: int = 3):
        """
        Initialize report generator.

        Args:
            output_dir: Directory to save report files
            precision: Decimal places for floating point statistics
        """
        self.output_dir = output_dir
        self.precision = precision

    def format_value(self, value: Optional[float]) -> str:
        """Format a statistic; missing values (single-value std dev) render as n/a."""
        if value is None:
            return 'n/a'
        return f"{value:.{self.precision}f}"

    def render_text(self, profile: Dict[str, Any]) -> str:
        """Render the plain-text report."""
        metadata = profile['metadata']
        lines = [
            "=== CSV Analysis Report ===",
            f"Dataset: {metadata['row_count']} rows, {metadata['column_count']} columns",
            "",
            "Column Information",
        ]

        for column in profile['columns']:
            lines.append(f" {column['name']}: {column['type']}")
        lines.append("")

        statistics: List[ColumnStats] = profile['statistics']
        if not statistics:
            lines.append(NO_NUMERIC_MESSAGE)
            return "\n".join(lines) + "\n"

        lines.append("Statistical Analysis (Numeric Columns):")
        lines.append("-" * 40)
        for stat in statistics:
            lines.append("")
            lines.append(f"{stat.name}:")
            lines.append(f"  {'Count:':<11}{stat.count}")
            for label, key in STAT_FIELDS:
                lines.append(f"  {label + ':':<11}{self.format_value(getattr(stat, key))}")

        return "\n".join(lines) + "\n"

    def print_console(self, profile: Dict[str, Any], console: Optional[Console] = None):
        """Print the report to the terminal using rich tables."""
        console = console or Console()
        metadata = profile['metadata']

        console.print("[bold]=== CSV Analysis Report ===[/bold]")
        console.print(f"Dataset: {metadata['row_count']} rows, {metadata['column_count']} columns\n")

        columns_table = RichTable(title="Column Information", title_justify="left")
        columns_table.add_column("Column")
        columns_table.add_column("Type")
        for column in profile['columns']:
            style = "green" if column['type'] == 'Numeric' else "dim"
            columns_table.add_row(escape(column['name']), f"[{style}]{column['type']}[/{style}]")
        console.print(columns_table)

        statistics: List[ColumnStats] = profile['statistics']
        if not statistics:
            console.print(f"\n[yellow]{NO_NUMERIC_MESSAGE}[/yellow]")
            return

        stats_table = RichTable(title="Statistical Analysis (Numeric Columns)", title_justify="left")
        stats_table.add_column("Column")
        stats_table.add_column("Count", justify="right")
        for label, _ in STAT_FIELDS:
            stats_table.add_column(label, justify="right")

        for stat in statistics:
            stats_table.add_row(
                escape(stat.name),
                str(stat.count),
                *[self.format_value(getattr(stat, key)) for _, key in STAT_FIELDS]
            )
        console.print(stats_table)

    def generate_report(
        self,
        profile: Dict[str, Any],
        formats: List[str] = None
    ) -> Dict[str, str]:
        """
        Generate report files in specified formats.

        Args:
            profile: Profile dictionary from TableProfiler
            formats: List of formats to generate ['json', 'csv', 'html', 'txt']

        Returns:
            Dictionary mapping format to file path
        """
        if formats is None:
            formats = ['json', 'html']

        unknown = [fmt for fmt in formats if fmt not in self.SUPPORTED_FORMATS]
        if unknown:
            raise ValueError(f"Unsupported report formats: {', '.join(unknown)}")

        os.makedirs(self.output_dir, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        source = profile['metadata'].get('source') or 'table'
        filename_prefix = f"analysis_{Path(source).stem}_{timestamp}"

        logger.info(f"Generating reports in formats: {formats}")

        writers = {
            'json': self._generate_json,
            'csv': self._generate_csv,
            'html': self._generate_html,
            'txt': self._generate_txt,
        }

        report_files = {}
        for fmt in formats:
            report_files[fmt] = writers[fmt](profile, filename_prefix)

        logger.info(f"Reports generated successfully: {list(report_files.keys())}")
        return report_files

    def _path(self, filename_prefix: str, extension: str) -> str:
        return os.path.join(self.output_dir, f"{filename_prefix}.{extension}")

    def _generate_json(self, profile: Dict[str, Any], filename_prefix: str) -> str:
        """Generate JSON report."""
        filepath = self._path(filename_prefix, 'json')

        payload = dict(profile)
        payload['statistics'] = [stat.to_dict() for stat in profile['statistics']]

        with open(filepath, 'w') as f:
            json.dump(payload, f, indent=2, default=str)

        logger.info(f"JSON report generated: {filepath}")
        return filepath

    def _generate_csv(self, profile: Dict[str, Any], filename_prefix: str) -> str:
        """Generate CSV report with one row per numeric column."""
        filepath = self._path(filename_prefix, 'csv')
        fieldnames = ['name', 'count'] + [key for _, key in STAT_FIELDS]

        with open(filepath, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for stat in profile['statistics']:
                writer.writerow(stat.to_dict())

        logger.info(f"CSV report generated: {filepath}")
        return filepath

    def _generate_html(self, profile: Dict[str, Any], filename_prefix: str) -> str:
        """Generate HTML report file."""
        filepath = self._path(filename_prefix, 'html')

        template = Environment(autoescape=True).from_string(HTML_TEMPLATE)
        html_content = template.render(
            source=profile['metadata'].get('source') or 'in-memory table',
            metadata=profile['metadata'],
            columns=profile['columns'],
            statistics=[stat.to_dict() for stat in profile['statistics']],
            fields=STAT_FIELDS,
            fmt=self.format_value,
            no_numeric=NO_NUMERIC_MESSAGE,
            generated_at=datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        )

        with open(filepath, 'w') as f:
            f.write(html_content)

        logger.info(f"HTML report generated: {filepath}")
        return filepath

    def _generate_txt(self, profile: Dict[str, Any], filename_prefix: str) -> str:
        """Generate plain-text report."""
        filepath = self._path(filename_prefix, 'txt')

        with open(filepath, 'w') as f:
            f.write(self.render_text(profile))

        logger.info(f"Text report generated: {filepath}")
        return filepath
