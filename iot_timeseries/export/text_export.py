import logging
from pathlib import Path

from ..core.errors import ExportError
from ..core.series import Series

logger = logging.getLogger(__name__)


def output_to_txt(series: Series, output_file: str, strict: bool = False) -> bool:
    """
    Write one '<index> \\t <timestamp> \\t <value>' line per sample.

    Args:
        series: Series to write
        output_file: Destination path
        strict: raise ExportError when the destination cannot be opened

    Returns:
        bool: True when the file was written
    """
    try:
        output = open(output_file, 'w')
    except OSError as e:
        if strict:
            raise ExportError(f"Cannot open {output_file}: {e}") from e
        logger.warning(f"Skipping export of {series.description!r}, cannot open {output_file}: {e}")
        return False

    with output:
        for i, sample in enumerate(series):
            output.write(f"{i} \t {sample.timestamp} \t {sample.value}\n")
    logger.info(f"Wrote {len(series)} samples to {output_file}")
    return True


def output_to_csv(series: Series, output_file: str) -> None:
    """Write the tabular view of a series, missing values left empty."""
    try:
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        series.to_frame().to_csv(output_file, index=False)
        logger.info(f"Saved {series.description!r} to {output_file}")
    except Exception as e:
        logger.error(f"Error saving {series.description!r}: {e}")
        raise
