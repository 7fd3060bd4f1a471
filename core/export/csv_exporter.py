#!/usr/bin/env python3
"""
CSV Exporter - Serialize an analyzed cohort for download.

Serialization is pure (text in memory); writing the file is a separate step.
"""

import csv
import io
import logging
from pathlib import Path
from typing import Sequence, Union

from core.cohort import AnalyzedJob

logger = logging.getLogger(__name__)

CSV_HEADER = ["Job Title", "Match Percentage", "Required Skills", "Missing Skills"]
CSV_FILENAME = "skill-analysis.csv"
SKILL_SEPARATOR = "; "


def export_cohort_csv(cohort: Sequence[AnalyzedJob], line_terminator: str = "\n") -> str:
    """
    Render a cohort as CSV text.

    Title and skill-list fields are always quoted; embedded quotes are
    doubled. The match percentage is written as a bare integer.

    Args:
        cohort: Analyzed jobs, in display order
        line_terminator: "\\n" or "\\r\\n"

    Returns:
        CSV text including the header row
    """
    buffer = io.StringIO()

    header_writer = csv.writer(buffer, lineterminator=line_terminator)
    header_writer.writerow(CSV_HEADER)

    # QUOTE_NONNUMERIC quotes every str field and leaves the int percentage bare
    row_writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator=line_terminator)
    for entry in cohort:
        row_writer.writerow([
            entry.job.title,
            entry.match.match_percentage,
            SKILL_SEPARATOR.join(skill.name for skill in entry.job.required_skills),
            SKILL_SEPARATOR.join(skill.name for skill in entry.match.missing_skills),
        ])

    return buffer.getvalue()


def write_csv_file(
    csv_text: str,
    directory: Union[str, Path] = ".",
    filename: str = CSV_FILENAME
) -> Path:
    """
    Save exported CSV text as a UTF-8 file.

    Returns:
        Path of the written file
    """
    output_dir = Path(directory)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename

    with open(path, "w", newline="", encoding="utf-8") as f:
        f.write(csv_text)

    logger.info(f"Exported skill analysis to {path}")
    return path
