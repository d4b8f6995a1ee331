"""CLI entry point for exporting Allure results to Excel."""

import argparse
import logging
import sys
from pathlib import Path

from allure_excel_export.aggregator import build_rows, build_summary
from allure_excel_export.config import (
    DEFAULT_OUTPUT_FILE,
    DEFAULT_RESULTS_DIR,
    ExportConfig,
)
from allure_excel_export.emitter import write_report
from allure_excel_export.loader import find_result_files, parse_result_files


def run(config: ExportConfig) -> int:
    """Export results described by ``config`` and return exit code.

    Filesystem errors on the results directory or the output file propagate.
    """
    log = logging.getLogger("allure_excel_export")

    log.info("Scanning results directory: %s", config.results_dir)
    result_files = find_result_files(config.results_dir, config.result_suffix)
    print(f"Found {len(result_files)} test result files")

    results = parse_result_files(result_files)
    log.info("Parsed %d of %d result file(s)", len(results), len(result_files))

    rows = build_rows(results)
    summary = build_summary(results)
    log.info(
        "Summary: total=%d passed=%d failed=%d skipped=%d pass_rate=%.1f%%",
        summary.total,
        summary.passed,
        summary.failed,
        summary.skipped,
        summary.pass_rate,
    )

    output_file = write_report(rows, summary, config.output_file)
    print(f"✅ Excel report saved to: {output_file}")
    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Export Allure test results to an Excel report"
    )
    parser.add_argument(
        "results_dir",
        nargs="?",
        type=Path,
        default=DEFAULT_RESULTS_DIR,
        help=f"Directory of *-result.json files (default: {DEFAULT_RESULTS_DIR})",
    )
    parser.add_argument(
        "output_file",
        nargs="?",
        type=Path,
        default=DEFAULT_OUTPUT_FILE,
        help=f"Excel report to write (default: {DEFAULT_OUTPUT_FILE})",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = ExportConfig(results_dir=args.results_dir, output_file=args.output_file)
    sys.exit(run(config))


if __name__ == "__main__":  # pragma: no cover
    main()
