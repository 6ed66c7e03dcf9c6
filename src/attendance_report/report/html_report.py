"""
Static HTML report writer.

Renders the attendance matrix into ``index.html`` with its stylesheet and
a small script for name search and printing. Templates ship with the
package and are rendered with Jinja2.
"""

import logging
from pathlib import Path
from typing import List, Mapping

from jinja2 import Environment, PackageLoader, select_autoescape

from ..models.matrix import AttendanceReport
from ..utils.file_utils import save_text
from .rows import MeetingColumn, build_student_rows, summarize


logger = logging.getLogger(__name__)


INDEX_FILE = "index.html"
STYLES_FILE = "styles.css"
SCRIPT_FILE = "script.js"

CELL_SYMBOLS = {
    "attended": "✓",
    "absent": "✗",
    "not-required": "—",
}


def create_environment() -> Environment:
    """Create the Jinja2 environment for the bundled templates."""
    return Environment(
        loader=PackageLoader("attendance_report", "report/templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


class HtmlReportWriter:
    """
    Writes the searchable, printable attendance report.

    Examples:
        >>> writer = HtmlReportWriter(Path("output"))
        >>> paths = writer.write(report, data.student_names)
    """

    def __init__(self, output_dir: Path, environment: Environment = None):
        """
        Initialize HtmlReportWriter.

        Args:
            output_dir: Directory receiving index.html, styles.css, script.js
            environment: Jinja2 environment (defaults to bundled templates)
        """
        self.output_dir = output_dir
        self.environment = environment or create_environment()

    def render_index(self, report: AttendanceReport, names: Mapping[str, str]) -> str:
        """
        Render the report page.

        Args:
            report: Matrix builder output
            names: student_id -> roster name

        Returns:
            HTML document as a string
        """
        template = self.environment.get_template(INDEX_FILE)
        return template.render(
            summary=summarize(report),
            meetings=[MeetingColumn.from_meeting(m) for m in report.sorted_meetings],
            students=build_student_rows(report, names),
            symbols=CELL_SYMBOLS,
            styles_file=STYLES_FILE,
            script_file=SCRIPT_FILE,
        )

    def render_asset(self, name: str) -> str:
        """Render a static asset (stylesheet or script)."""
        return self.environment.get_template(name).render()

    def write(self, report: AttendanceReport, names: Mapping[str, str]) -> List[Path]:
        """
        Write the report files.

        Args:
            report: Matrix builder output
            names: student_id -> roster name

        Returns:
            Paths of the files written

        Raises:
            OSError: If a report file cannot be written
        """
        contents = {
            INDEX_FILE: self.render_index(report, names),
            STYLES_FILE: self.render_asset(STYLES_FILE),
            SCRIPT_FILE: self.render_asset(SCRIPT_FILE),
        }

        written = []
        for name, content in contents.items():
            path = self.output_dir / name
            if not save_text(content, path):
                raise OSError(f"Failed to write report file: {path}")
            written.append(path)

        logger.info(f"Wrote HTML report to {self.output_dir / INDEX_FILE}")
        return written
