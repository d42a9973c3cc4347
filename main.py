"""
main.py

Exercise the string and array utilities with a configurable array size and a
list of sample strings, printing one report line per call.

Usage:
    pip3 install -e .  # installs numpy, pandas, pyyaml
    python main.py

Set UTILS_CONFIG to a JSON or YAML settings file to override the defaults and
UTILS_LOG_LEVEL (e.g. DEBUG) to see library logging.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from utils.arrays import compute_sum, create_array
from utils.settings import RunnerSettings, load_settings
from utils.strings import duplicate_string

logger = logging.getLogger(__name__)

# Arrays longer than this are abbreviated in the report.
_PREVIEW_LIMIT = 10


def _format_array(values: List[int]) -> str:
    if len(values) <= _PREVIEW_LIMIT:
        return repr(values)
    head = ', '.join(str(v) for v in values[:_PREVIEW_LIMIT])
    return f'[{head}, ... ({len(values)} items)]'


def run(settings: RunnerSettings) -> List[str]:
    lines = []

    values = create_array(settings.array_size)
    lines.append(f'create_array({settings.array_size}) -> {_format_array(values)}')
    lines.append(f'compute_sum(create_array({settings.array_size})) -> {compute_sum(values)}')

    for sample in settings.sample_strings:
        copy = duplicate_string(sample)
        lines.append(f'duplicate_string({sample!r}) -> {copy!r}')

    logger.debug('Produced %d report lines', len(lines))
    return lines


def main(config_path: Optional[Union[str, Path]] = None) -> int:
    try:
        settings = load_settings(config_path)
        lines = run(settings)
    except (ValueError, TypeError, FileNotFoundError, RuntimeError) as exc:
        print(f'Error: {exc}')
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == '__main__':
    logging.basicConfig(level=os.environ.get('UTILS_LOG_LEVEL', 'WARNING').upper())
    raise SystemExit(main(os.environ.get('UTILS_CONFIG') or None))
