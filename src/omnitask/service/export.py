# SPDX-License-Identifier: MIT

import csv
import html
import io
from enum import StrEnum
from pathlib import Path

from omnitask.model.report import Report


class ExportFormat(StrEnum):
    CSV = "csv"
    DOC = "doc"


CSV_HEADERS = ["ID", "Title", "Description", "Date", "Status", "Remarks"]


def export_file_name(report: Report, export_format: ExportFormat) -> str:
    return f"tasks_report_{str(report['period']).lower()}_{report['reference_date']}.{export_format}"


def report_to_csv(report: Report) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for task in report["tasks"]:
        writer.writerow(
            [
                task["id"],
                task["title"],
                task["description"],
                task["date"],
                str(task["status"]),
                task["remarks"],
            ]
        )
    return buffer.getvalue()


def report_to_doc(report: Report) -> str:
    """Render the report as an HTML document that word processors open as .doc."""
    rows = "".join(
        "<tr>"
        f"<td>{html.escape(task['title'])}</td>"
        f"<td>{html.escape(task['date'])}</td>"
        f"<td class=\"status\">{html.escape(str(task['status']))}</td>"
        f"<td>{html.escape(task['description'])}</td>"
        f"<td>{html.escape(task['remarks'])}</td>"
        "</tr>\n"
        for task in report["tasks"]
    )
    return (
        "<html xmlns:o='urn:schemas-microsoft-com:office:office' "
        "xmlns:w='urn:schemas-microsoft-com:office:word' "
        "xmlns='http://www.w3.org/TR/REC-html40'>\n"
        "<head>\n<title>Task Report</title>\n"
        "<style>\n"
        "body { font-family: Arial, sans-serif; }\n"
        "table { border-collapse: collapse; width: 100%; }\n"
        "th, td { border: 1px solid #ddd; padding: 8px; text-align: left; }\n"
        "th { background-color: #f2f2f2; }\n"
        ".status { font-weight: bold; }\n"
        "</style>\n</head>\n<body>\n"
        f"<h1>Task Report - {html.escape(str(report['period']))}</h1>\n"
        f"<h3>Period: {html.escape(report['range']['label'])}</h3>\n"
        "<table>\n"
        "<tr><th>Title</th><th>Date</th><th>Status</th><th>Description</th><th>Remarks</th></tr>\n"
        f"{rows}"
        "</table>\n</body></html>\n"
    )


def export_report(report: Report, export_format: ExportFormat, directory: Path) -> Path:
    """Write the report into directory and return the written file's path."""
    match export_format:
        case ExportFormat.CSV:
            content = report_to_csv(report)
        case ExportFormat.DOC:
            # The BOM lets word processors detect the encoding
            content = "\ufeff" + report_to_doc(report)
    file_path = directory / export_file_name(report, export_format)
    file_path.write_text(content, encoding="utf-8")
    return file_path
