"""Command line entry point for json2struct."""

import sys
import time
from pathlib import Path
from typing import Optional

import click

from .__version__ import __version__
from .config.config_loader import OUTPUT_FORMATS, load_config
from .naming.conventions import canonical_language
from .reporting.generator import ReportGenerator
from .schema_inference.inferrer import StructureInferrer
from .schema_inference.structure import estimate_complexity
from .utils.exceptions import ConfigurationError, Json2StructError
from .utils.helpers import load_sample, root_name_from_path
from .utils.logger import setup_logger

logger = setup_logger()


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"json2struct version {__version__}")
    ctx.exit()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    '--version', '-V',
    is_flag=True,
    callback=print_version,
    expose_value=False,
    is_eager=True,
    help='Show version and exit'
)
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    '--language',
    '-l',
    multiple=True,
    help='Target naming convention: go, rust, typescript, python or generic '
         '(can be specified multiple times; each runs its own inference)'
)
@click.option(
    '--root-name',
    '-n',
    help='Name of the root record (default: inference.root_name, else derived from the input file name)'
)
@click.option(
    '--max-depth',
    type=click.IntRange(min=1),
    help='Strict maximum nesting depth (default: 20, raised automatically for deep samples)'
)
@click.option(
    '--merge-threshold',
    type=click.FloatRange(0.0, 1.0),
    help='Fraction of keys differently shaped array objects must share to be merged'
)
@click.option(
    '--config',
    '-c',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to configuration file'
)
@click.option(
    '--format',
    '-f',
    'output_format',
    type=click.Choice(OUTPUT_FORMATS),
    help='Report format (default: json)'
)
@click.option(
    '--output',
    '-o',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Write the report to this file instead of stdout'
)
@click.option(
    '--stats/--no-stats',
    default=True,
    help='Include structure statistics in the report'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']),
    help='Logging level'
)
@click.option(
    '--json-logs',
    is_flag=True,
    help='Use structured JSON log format'
)
def main(
    input_file: Path,
    language: tuple,
    root_name: Optional[str],
    max_depth: Optional[int],
    merge_threshold: Optional[float],
    config: Optional[Path],
    output_format: Optional[str],
    output: Optional[Path],
    stats: bool,
    log_level: Optional[str],
    json_logs: bool
):
    """
    Infer record types from the JSON sample INPUT_FILE.

    Prints (or writes) a report describing the inferred records, their
    fields and, optionally, the sample's structure statistics.
    """
    global logger

    try:
        config_dict = load_config(config)
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    logging_config = config_dict['logging']
    logger = setup_logger(
        log_level=log_level or logging_config.get('level', 'INFO'),
        json_format=json_logs or bool(logging_config.get('json_format', False)),
    )

    inference_config = dict(config_dict['inference'])
    if max_depth is not None:
        inference_config['max_depth'] = max_depth
    if merge_threshold is not None:
        inference_config['merge_threshold'] = merge_threshold

    reporting_config = dict(config_dict['reporting'])
    if output_format:
        reporting_config['output_format'] = output_format
    reporting_config['include_stats'] = stats

    languages = list(language) or [inference_config.get('language') or 'generic']
    # --root-name, then inference.root_name, then the input file name
    name = root_name or inference_config.get('root_name')
    name = str(name) if name is not None else root_name_from_path(input_file)

    try:
        logger.info(f"Loading sample: {input_file}")
        sample = load_sample(input_file)
        structure_stats = estimate_complexity(sample)
        logger.debug(f"Structure statistics: {structure_stats.to_dict()}")

        results = []
        for lang in languages:
            if canonical_language(lang) == 'generic' and lang.lower() != 'generic':
                logger.warning(f"Unknown language '{lang}', using generic naming")

            run_config = dict(inference_config, language=lang)
            started = time.perf_counter()
            model = StructureInferrer(run_config).infer(sample, name)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(f"[{lang}] inference finished in {elapsed_ms:.1f}ms")

            results.append({
                'language': canonical_language(lang),
                'model': model,
                'stats': structure_stats,
                'elapsed_ms': elapsed_ms,
            })

        generator = ReportGenerator(reporting_config)
        if output:
            generator.write(results, output)
            click.echo(f"Report written to {output}", err=True)
        else:
            click.echo(generator.render(results), nl=False)

    except Json2StructError as e:
        logger.error(f"{e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


# Entry point for CLI
if __name__ == '__main__':
    main()
