"""Export Module - CSV export of analyzed cohorts."""
from core.export.csv_exporter import (
    CSV_FILENAME, CSV_HEADER, export_cohort_csv, write_csv_file
)

__all__ = ['CSV_FILENAME', 'CSV_HEADER', 'export_cohort_csv', 'write_csv_file']
