"""Load Allure result files from a results directory."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from allure_excel_export.config import RESULT_FILE_SUFFIX
from allure_excel_export.models.result import AllureResult

log = logging.getLogger(__name__)


def find_result_files(
    results_dir: Path, suffix: str = RESULT_FILE_SUFFIX
) -> Sequence[Path]:
    """List result files in a directory.

    Args:
        results_dir: Directory written by the Allure test adapter
        suffix: File name suffix identifying result files

    Returns:
        Matching paths sorted by file name.

    Raises:
        OSError: If the directory is missing or cannot be read

    """
    return sorted(
        (path for path in results_dir.iterdir() if path.name.endswith(suffix)),
        key=lambda path: path.name,
    )


def parse_result_files(paths: Iterable[Path]) -> Sequence[AllureResult]:
    """Parse result files, skipping any that cannot be read or validated."""
    results: list[AllureResult] = []
    for path in paths:
        try:
            content = path.read_text(encoding="utf-8")
            results.append(AllureResult.model_validate_json(content))
        except (OSError, ValueError) as e:
            log.warning("Could not parse %s: %s", path.name, e)
    return results


def load_results(
    results_dir: Path, suffix: str = RESULT_FILE_SUFFIX
) -> Sequence[AllureResult]:
    """Load every parsable result from a results directory."""
    return parse_result_files(find_result_files(results_dir, suffix))
