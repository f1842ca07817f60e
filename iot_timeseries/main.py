import argparse
import logging
import os
from typing import Any, Dict, List

from .config import Config
from .container import TsContainer
from .core.errors import TimeSeriesError
from .data.loader import DataLoader
from .evaluation.metrics import evaluate_cleaning
from .export.report import render_summary
from .export.text_export import output_to_csv, output_to_txt
from .utils.logger import setup_logger
from .visualization.plotting import SeriesVisualizer

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Clean and resample an IoT sensor time series')
    parser.add_argument('--config', type=str,
                        help='YAML configuration file, command line options take precedence')
    parser.add_argument('--data_path', type=str,
                        help='Path to input CSV file')
    parser.add_argument('--output_dir', type=str,
                        help='Directory to save cleaned, rejected and resampled series')
    parser.add_argument('--logs_path', type=str,
                        help='Path to save execution logs')
    parser.add_argument('--time_column', type=str, help='Timestamp column')
    parser.add_argument('--value_column', type=str, help='Sensor reading column')
    parser.add_argument('--percentile', type=float,
                        help='Run a percentile cleaning pass, e.g. 0.05')
    parser.add_argument('--zscore', type=float,
                        help='Run a z-score cleaning pass at the given level')
    parser.add_argument('--device_limits', type=float, nargs=2, metavar=('MIN', 'MAX'),
                        help='Run a device limit cleaning pass')
    parser.add_argument('--frequency', type=str, help='Resampling interval, e.g. 15m')
    parser.add_argument('--rule', type=str, choices=['avg', 'max', 'min', 'last'],
                        help='Aggregation rule')
    parser.add_argument('--plot', action='store_true',
                        help='Save overview and distribution plots')
    return parser.parse_args(argv)


def build_config(args) -> Config:
    config = Config.load_config(args.config) if args.config else Config()

    for attr in ('data_path', 'output_dir', 'time_column', 'value_column'):
        if getattr(args, attr):
            setattr(config.DATA, attr, getattr(args, attr))
    if args.logs_path:
        config.LOGGING.log_dir = args.logs_path
    if args.frequency:
        config.RESAMPLING.frequency = args.frequency
    if args.rule:
        config.RESAMPLING.rule = args.rule

    passes = []
    if args.device_limits:
        passes.append({'method': 'device_limits', 'min': args.device_limits[0],
                       'max': args.device_limits[1]})
    if args.percentile is not None:
        passes.append({'method': 'percentile', 'percentile': args.percentile})
    if args.zscore is not None:
        passes.append({'method': 'zscore', 'level': args.zscore})
    if passes:
        config.CLEANING.passes = passes
    return config


def apply_passes(container: TsContainer, passes: List[Dict[str, Any]]) -> None:
    """Run the configured cleaning passes in order."""
    for step in passes:
        method = step.get('method')
        if method == 'percentile':
            container.percentile_cleaning(step['percentile'])
        elif method == 'zscore':
            container.zscore_cleaning(step['level'])
        elif method == 'device_limits':
            container.device_limits_cleaning(step['min'], step['max'])
        else:
            raise ValueError(f"Unknown cleaning method: {method}")


def run(config: Config) -> TsContainer:
    data = config.DATA
    if not data.data_path:
        raise ValueError("No input data path configured")

    series = DataLoader.load_series(data.data_path, data.time_column,
                                    data.value_column, data.invalid_value)
    container = TsContainer(series, clear_rejected_on_reset=config.CLEANING.clear_rejected_on_reset)
    logger.info(f"Original summary:\n{render_summary(container.original.summary)}")

    apply_passes(container, config.CLEANING.passes)
    evaluate_cleaning(container.original, container.cleaned,
                      ', '.join(p.get('method', '?') for p in config.CLEANING.passes) or 'none')
    logger.info(f"Cleaned summary:\n{render_summary(container.cleaned.summary)}")

    resampling = config.RESAMPLING
    container.downsampling(resampling.frequency, resampling.rule,
                           strict=resampling.strict_frequency)

    os.makedirs(data.output_dir, exist_ok=True)
    output_to_csv(container.cleaned, os.path.join(data.output_dir, 'cleaned.csv'))
    output_to_csv(container.rejected, os.path.join(data.output_dir, 'rejected.csv'))
    output_to_csv(container.resampled, os.path.join(data.output_dir, 'resampled.csv'))
    output_to_txt(container.resampled, os.path.join(data.output_dir, 'resampled.txt'),
                  strict=data.strict_export)
    config.save_config(os.path.join(data.output_dir, 'config.yaml'))
    return container


def main(argv=None):
    args = parse_args(argv)
    config = build_config(args)
    setup_logger('iot_timeseries', config.LOGGING.log_file, config.LOGGING.log_dir,
                 level=getattr(logging, config.LOGGING.level.upper(), logging.INFO))

    try:
        container = run(config)
    except (TimeSeriesError, ValueError, OSError) as e:
        logger.error(f"Processing failed: {e}")
        return 1

    if args.plot:
        plot_dir = os.path.join(config.DATA.output_dir, 'plots')
        SeriesVisualizer.plot_pipeline(container, plot_dir)
        SeriesVisualizer.plot_distributions(container, plot_dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
