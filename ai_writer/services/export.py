"""Plain-text and PDF export of generated writing.

Exports are written as ``ai-writer-<epoch ms>.<ext>`` inside the target
directory. An existing file is never overwritten: a name already taken gets a
numeric suffix instead. PDF rendering wraps each source line into a
paragraph and numbers the pages; markdown is not interpreted.
"""

import time
from io import BytesIO
from pathlib import Path
from typing import Union
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import A4, LETTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from ai_writer.infrastructure.error_handling import ExportError
from ai_writer.infrastructure.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def export_filename(extension: str, attempt: int = 0) -> str:
    stem = f"ai-writer-{int(time.time() * 1000)}"
    if attempt:
        stem = f"{stem}-{attempt}"
    return f"{stem}.{extension}"


def _write_new_file(directory: Path, extension: str, data: bytes) -> Path:
    """Create a fresh export file holding ``data`` and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    attempt = 0
    while True:
        path = directory / export_filename(extension, attempt)
        try:
            with path.open("xb") as f:
                f.write(data)
            return path
        except FileExistsError:
            attempt += 1


def _require_content(content: str) -> None:
    if not content or not content.strip():
        raise ExportError("Nothing to export: content is empty")


def export_text(content: str, directory: PathLike) -> Path:
    """Write content to a UTF-8 text file and return its path."""
    _require_content(content)
    path = _write_new_file(Path(directory), "txt", content.encode("utf-8"))
    logger.info("Exported text file", path=str(path), chars=len(content))
    return path


def _add_page_number(canvas, doc) -> None:
    canvas.saveState()
    canvas.setFont("Helvetica", 9)
    canvas.drawCentredString(doc.pagesize[0] / 2, 1.2 * cm, str(doc.page))
    canvas.restoreState()


def render_pdf(content: str, page_size: str = "A4") -> bytes:
    """Render content as a page-wrapped PDF document."""
    _require_content(content)

    output = BytesIO()
    doc = SimpleDocTemplate(
        output,
        pagesize=LETTER if page_size.lower() == "letter" else A4,
        leftMargin=2.5 * cm,
        rightMargin=2.5 * cm,
        topMargin=2.5 * cm,
        bottomMargin=2.5 * cm,
        title="AI Writer export",
        creator="AI Writer",
    )

    base = getSampleStyleSheet()["BodyText"]
    body = ParagraphStyle("ExportBody", parent=base, fontSize=11, leading=15)

    story = []
    for line in content.splitlines():
        if not line.strip():
            story.append(Spacer(1, 0.3 * cm))
            continue
        story.append(Paragraph(escape(line), body))

    doc.build(story, onFirstPage=_add_page_number, onLaterPages=_add_page_number)
    return output.getvalue()


def export_pdf(content: str, directory: PathLike, page_size: str = "A4") -> Path:
    """Write content to a PDF file and return its path."""
    pdf_bytes = render_pdf(content, page_size=page_size)
    path = _write_new_file(Path(directory), "pdf", pdf_bytes)
    logger.info("Exported PDF file", path=str(path), size_kb=round(len(pdf_bytes) / 1024, 1))
    return path
