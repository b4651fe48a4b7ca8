"""Command-line interface for CSV analyzer."""

import click
import sys
from typing import Optional
from . import __version__
from .utils.config_loader import ConfigLoader
from .utils.logger import setup_logging
from .loaders.csv_loader import CSVLoader, TableLoadError
from .loaders.sample_data import create_sample_data
from .profiling.profiler import TableProfiler
from .reporting.report_generator import ReportGenerator


@click.group()
@click.version_option(version=__version__)
def cli():
    """CSV column type inference and descriptive statistics."""
    pass


def run_analysis(
    file: str,
    config_loader: ConfigLoader,
    sample_rows: Optional[int] = None,
    delimiter: Optional[str] = None,
    output_dir: Optional[str] = None,
    formats: tuple = (),
    plain: bool = False
):
    """Load, profile and report on a single file."""
    loader_config = config_loader.get_loader_config()
    analysis_config = config_loader.get_analysis_config()
    reporting_config = config_loader.get_reporting_config()

    loader = CSVLoader(
        delimiter=delimiter or loader_config['delimiter'],
        encoding=loader_config['encoding']
    )
    profiler = TableProfiler(sample_rows=sample_rows or analysis_config['sample_rows'])
    report_gen = ReportGenerator(
        output_dir=output_dir or reporting_config['output_dir'],
        precision=reporting_config['precision']
    )

    click.echo(f"Loading CSV file: {file}")
    table = loader.load(file)
    profile = profiler.profile_table(table)

    if plain:
        click.echo(report_gen.render_text(profile), nl=False)
    else:
        report_gen.print_console(profile)

    formats = list(formats) or reporting_config['formats']
    if formats:
        report_files = report_gen.generate_report(profile, formats=formats)
        click.echo("\nReports generated:")
        for fmt, path in report_files.items():
            click.echo(f"  {fmt.upper()}: {path}")

    return profile


@cli.command('analyze')
@click.argument('file', type=click.Path(dir_okay=False))
@click.option('--config', '-c', help='Path to config YAML file')
@click.option('--env', '-e', help='Path to .env file')
@click.option('--sample-rows', '-n', type=click.IntRange(min=1),
              help='Rows inspected per column for type inference (default 10)')
@click.option('--delimiter', '-d', help='Field delimiter (default ",")')
@click.option('--output-dir', '-o', help='Output directory for report files')
@click.option('--formats', '-f', multiple=True,
              type=click.Choice(ReportGenerator.SUPPORTED_FORMATS),
              help='Report files to write (json, csv, html, txt)')
@click.option('--plain', is_flag=True, help='Print the plain-text report instead of tables')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def analyze(
    file: str,
    config: Optional[str],
    env: Optional[str],
    sample_rows: Optional[int],
    delimiter: Optional[str],
    output_dir: Optional[str],
    formats: tuple,
    plain: bool,
    verbose: bool
):
    """
    Infer column types and compute statistics for a CSV file.

    Examples:
        csv-analyzer analyze sales.csv

        csv-analyzer analyze data.tsv --delimiter $'\\t' -f json -f html -o ./reports
    """
    try:
        setup_logging(verbose=verbose)

        config_loader = ConfigLoader(config_path=config, env_path=env)
        run_analysis(file, config_loader, sample_rows, delimiter, output_dir, formats, plain)
        sys.exit(0)

    except TableLoadError as e:
        click.echo(f"\nError loading CSV: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"\nError: {str(e)}", err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


@cli.command('sample')
@click.argument('path', default='sample_data.csv', type=click.Path(dir_okay=False))
@click.option('--analyze/--no-analyze', 'analyze_after', default=True,
              help='Analyze the sample file after creating it')
@click.option('--config', '-c', help='Path to config YAML file')
@click.option('--env', '-e', help='Path to .env file')
@click.option('--plain', is_flag=True, help='Print the plain-text report instead of tables')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def sample(
    path: str,
    analyze_after: bool,
    config: Optional[str],
    env: Optional[str],
    plain: bool,
    verbose: bool
):
    """
    Create a sample product dataset and analyze it.

    Examples:
        csv-analyzer sample

        csv-analyzer sample ./data/products.csv --no-analyze
    """
    try:
        setup_logging(verbose=verbose)

        click.echo(f"Creating sample data file: {path}")
        create_sample_data(path)
        click.echo("Sample data created successfully!\n")

        if analyze_after:
            config_loader = ConfigLoader(config_path=config, env_path=env)
            run_analysis(path, config_loader, plain=plain)
        sys.exit(0)

    except Exception as e:
        click.echo(f"\nError: {str(e)}", err=True)
        if verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    cli()
