"""Configuration for a report export run."""

from pathlib import Path

from pydantic import BaseModel

DEFAULT_RESULTS_DIR = Path("./allure-results")
DEFAULT_OUTPUT_FILE = Path("./test-results.xlsx")
RESULT_FILE_SUFFIX = "-result.json"


class ExportConfig(BaseModel):
    """Input and output locations for an export."""

    results_dir: Path = DEFAULT_RESULTS_DIR
    output_file: Path = DEFAULT_OUTPUT_FILE
    result_suffix: str = RESULT_FILE_SUFFIX
