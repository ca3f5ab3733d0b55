"""
Export a generated biography draft to .docx.
The draft is Markdown limited to "# ", "## ", "---", "*italic*" lines and plain paragraphs,
so a line-by-line conversion is enough.
"""
from io import BytesIO
from docx import Document as DocxDocument
from docx.shared import Pt

from app.models.biography_session import BiographySession


def _is_italic_line(line: str) -> bool:
    return len(line) > 2 and line.startswith("*") and line.endswith("*") and not line.startswith("**")


def build_docx(session: BiographySession) -> BytesIO:
    """Return a BytesIO containing the .docx rendering of session.draft."""
    doc = DocxDocument()
    style = doc.styles["Normal"]
    style.font.size = Pt(12)

    for raw in (session.draft or "").splitlines():
        line = raw.strip()
        if not line or line == "---":
            continue
        if line.startswith("## "):
            doc.add_heading(line[3:], level=1)
        elif line.startswith("# "):
            doc.add_heading(line[2:], level=0)
        elif _is_italic_line(line):
            doc.add_paragraph().add_run(line[1:-1]).italic = True
        else:
            doc.add_paragraph(line)

    buf = BytesIO()
    doc.save(buf)
    buf.seek(0)
    return buf
