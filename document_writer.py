"""
Document Writer
===============
Cursor-based layout engine on top of a ReportLab canvas.

All positions are in millimetres on an A4 portrait page with y growing
downward from the top edge; they are converted to PDF points only at the
moment of drawing. The writer owns its cursor and page count exclusively:
callers move the cursor through writer operations, never directly.

Pagination is a single rule: every content-emitting operation first calls
``check_page_break`` with its own height estimate. There is no look-ahead
across operations.

Footers need the final page count, so finished pages are held back on the
canvas and stamped in a second pass by ``finish``.
"""

import io
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

import config
from food_models import Language, RatingTier, format_rating_value, rating_tier


logger = logging.getLogger("food-analysis.writer")


PAGE_MARGIN = 20
LINE_HEIGHT = 6
MIN_BLOCK_HEIGHT = 8
TITLE_HEIGHT = 15
SUBTITLE_HEIGHT = 10
BULLET_TEXT_OFFSET = 5
RATING_BOX_HEIGHT = 25
RATING_BOX_WIDTH = 35
FOOTER_FONT_SIZE = 8
FOOTER_OFFSET = 10


class ReportColors:
    """Fill colors for the three rating tiers."""
    GOOD = colors.HexColor('#22c55e')       # green-500
    WARNING = colors.HexColor('#eab308')    # yellow-500
    CRITICAL = colors.HexColor('#ef4444')   # red-500
    TEXT = colors.black
    INVERSE_TEXT = colors.white

    @classmethod
    def for_tier(cls, tier: RatingTier) -> colors.Color:
        return {
            RatingTier.GOOD: cls.GOOD,
            RatingTier.WARNING: cls.WARNING,
            RatingTier.CRITICAL: cls.CRITICAL,
        }[tier]


@dataclass(frozen=True)
class DrawOp:
    """One recorded drawing call; positions are in writer (mm, top-down) units."""
    kind: str
    page: int
    x: float
    y: float
    text: str = ""
    lines: Tuple[str, ...] = ()
    font_size: float = 0
    bold: bool = False
    fill: str = ""
    width: float = 0
    height: float = 0


_CUSTOM_FONT = "ReportSans"
_CUSTOM_BOLD_FONT = "ReportSans-Bold"


def resolve_fonts() -> Tuple[str, str]:
    """Return (regular, bold) font names, registering configured TTF files once."""
    if not config.REPORT_FONT_PATH:
        return "Helvetica", "Helvetica-Bold"

    registered = pdfmetrics.getRegisteredFontNames()
    if _CUSTOM_FONT not in registered:
        pdfmetrics.registerFont(TTFont(_CUSTOM_FONT, config.REPORT_FONT_PATH))
        logger.info(f"Registered report font {config.REPORT_FONT_PATH}")
    if not config.REPORT_BOLD_FONT_PATH:
        return _CUSTOM_FONT, _CUSTOM_FONT
    if _CUSTOM_BOLD_FONT not in registered:
        pdfmetrics.registerFont(TTFont(_CUSTOM_BOLD_FONT, config.REPORT_BOLD_FONT_PATH))
    return _CUSTOM_FONT, _CUSTOM_BOLD_FONT


class _DeferredPageCanvas(canvas.Canvas):
    """Canvas that keeps finished pages until the document is complete."""

    def __init__(self, *args, **kwargs):
        canvas.Canvas.__init__(self, *args, **kwargs)
        self._saved_page_states = []

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def emit_pages(self, stamp: Callable[[int, int], None]):
        """Replay held pages, letting ``stamp`` draw on each before it is emitted."""
        page_count = len(self._saved_page_states)
        for page_number, state in enumerate(list(self._saved_page_states), start=1):
            self.__dict__.update(state)
            stamp(page_number, page_count)
            canvas.Canvas.showPage(self)
        canvas.Canvas.save(self)


class DocumentWriter:
    """
    Page-aware drawing primitives for one document.

    A writer is single-use: create one per export, draw, then call
    ``finish`` to stamp footers and obtain the PDF bytes.
    """

    def __init__(self, language: Language = Language.EN,
                 font_name: Optional[str] = None,
                 bold_font_name: Optional[str] = None):
        default_font, default_bold = resolve_fonts()
        self.font_name = font_name or default_font
        self.bold_font_name = bold_font_name or default_bold
        self.language = Language(language)

        self.page_width = A4[0] / mm
        self.page_height = A4[1] / mm
        self.margin = PAGE_MARGIN
        self.current_y = float(self.margin)
        self.page_count = 1

        self.ops: List[DrawOp] = []
        self.pdf_bytes: Optional[bytes] = None

        self._buffer = io.BytesIO()
        self._canvas = _DeferredPageCanvas(self._buffer, pagesize=A4)

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def finished(self) -> bool:
        return self.pdf_bytes is not None

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------

    def add_new_page(self):
        self._ensure_open()
        self._canvas.showPage()
        self.page_count += 1
        self.current_y = float(self.margin)

    def check_page_break(self, required_height: float):
        # A block taller than a whole page starts where it is when the page is still empty
        if self.current_y <= self.margin:
            return
        if self.current_y + required_height > self.page_height - self.margin:
            self.add_new_page()

    def add_spacing(self, units: float):
        self.current_y += units

    def set_cursor(self, y: float):
        self.current_y = float(y)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def add_title(self, text: str, font_size: float = 20):
        self.check_page_break(TITLE_HEIGHT)
        self._draw_string("title", text, self.margin, self.current_y, font_size, bold=True)
        self.current_y += TITLE_HEIGHT

    def add_subtitle(self, text: str, font_size: float = 14):
        self.check_page_break(SUBTITLE_HEIGHT)
        self._draw_string("subtitle", text, self.margin, self.current_y, font_size, bold=True)
        self.current_y += SUBTITLE_HEIGHT

    def add_text(self, text: str, font_size: float = 10, bold: bool = False):
        lines = self.wrap(text, self.content_width, font_size, bold)
        self.check_page_break(max(MIN_BLOCK_HEIGHT, len(lines) * LINE_HEIGHT))
        self._draw_lines("text", text, lines, self.margin, font_size, bold)
        self.current_y += len(lines) * LINE_HEIGHT

    def add_bullet_point(self, text: str, indent: float = 0):
        bullet_x = self.margin + indent
        text_x = bullet_x + BULLET_TEXT_OFFSET
        lines = self.wrap(text, self.page_width - text_x - self.margin, 10)
        self.check_page_break(max(MIN_BLOCK_HEIGHT, len(lines) * LINE_HEIGHT))

        self._ensure_open()
        self._canvas.setFont(self.font_name, 10)
        self._canvas.setFillColor(ReportColors.TEXT)
        self._canvas.drawString(bullet_x * mm, self._pdf_y(self.current_y), '•')
        self._draw_lines("bullet", text, lines, text_x, 10, False)
        self.current_y += len(lines) * LINE_HEIGHT

    def add_rating_box(self, label: str, rating: float, x: float, y: float,
                       width: float = RATING_BOX_WIDTH):
        """Tier-colored box with the rating inside and the label below; cursor unchanged."""
        self._ensure_open()
        fill = ReportColors.for_tier(rating_tier(rating))
        self._canvas.setFillColor(fill)
        self._canvas.rect(x * mm, self._pdf_y(y + RATING_BOX_HEIGHT),
                          width * mm, RATING_BOX_HEIGHT * mm, fill=1, stroke=0)
        self.ops.append(DrawOp(
            kind="rating_box", page=self.page_count, x=x, y=y, text=label,
            fill=fill.hexval(), width=width, height=RATING_BOX_HEIGHT,
        ))

        center = x + width / 2
        self._draw_string("rating_value", format_rating_value(rating), center, y + 12, 16,
                          bold=True, centered=True, color=ReportColors.INVERSE_TEXT)
        self._draw_string("rating_label", label, center, y + RATING_BOX_HEIGHT + 5, 8,
                          centered=True)

    def add_rating_row(self, items: Sequence[Tuple[str, float]], box_width: float = 30,
                       spacing: float = 35, advance: float = 40):
        """Lay out rating boxes left to right from the margin, then advance the cursor."""
        self.check_page_break(advance)
        start_y = self.current_y
        for index, (label, rating) in enumerate(items):
            self.add_rating_box(label, rating, self.margin + index * spacing, start_y, box_width)
        self.current_y = start_y + advance

    def add_centered_text(self, text: str, y: float, font_size: float, bold: bool = False):
        """Absolute-position centered line; does not paginate or move the cursor."""
        self._draw_string("centered", text, self.page_width / 2, y, font_size,
                          bold=bold, centered=True)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def finish(self, footer: Callable[[int, int], str]) -> bytes:
        """Stamp ``footer(page, total)`` on every page and return the PDF bytes."""
        self._ensure_open()
        self._canvas.showPage()

        def stamp(page_number: int, page_count: int):
            text = footer(page_number, page_count)
            self._canvas.setFont(self.font_name, FOOTER_FONT_SIZE)
            self._canvas.setFillColor(ReportColors.TEXT)
            y = self.page_height - FOOTER_OFFSET
            self._canvas.drawCentredString(self.page_width / 2 * mm, self._pdf_y(y), text)
            self.ops.append(DrawOp(
                kind="footer", page=page_number, x=self.page_width / 2, y=y,
                text=text, font_size=FOOTER_FONT_SIZE,
            ))

        self._canvas.emit_pages(stamp)
        self.pdf_bytes = self._buffer.getvalue()
        self._buffer.close()
        return self.pdf_bytes

    def wrap(self, text: str, width: float, font_size: float, bold: bool = False) -> List[str]:
        """Split text into lines that fit ``width`` mm in the rendering font."""
        font = self.bold_font_name if bold else self.font_name
        max_width = width * mm
        lines = []
        for line in simpleSplit(text, font, font_size, max_width):
            lines.extend(self._break_word(line, font, font_size, max_width))
        return lines or [""]

    @staticmethod
    def _break_word(line: str, font: str, font_size: float, max_width: float) -> List[str]:
        """Split a line that is still too wide (one long token) by characters."""
        if pdfmetrics.stringWidth(line, font, font_size) <= max_width:
            return [line]
        pieces = []
        current = ""
        for char in line:
            if current and pdfmetrics.stringWidth(current + char, font, font_size) > max_width:
                pieces.append(current)
                current = char
            else:
                current += char
        pieces.append(current)
        return pieces

    def ops_of(self, kind: str) -> List[DrawOp]:
        return [op for op in self.ops if op.kind == kind]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _ensure_open(self):
        if self.finished:
            raise RuntimeError("DocumentWriter is finished; create a new writer")

    def _pdf_y(self, y: float) -> float:
        return (self.page_height - y) * mm

    def _draw_string(self, kind: str, text: str, x: float, y: float, font_size: float,
                     bold: bool = False, centered: bool = False,
                     color: colors.Color = ReportColors.TEXT):
        self._ensure_open()
        self._canvas.setFont(self.bold_font_name if bold else self.font_name, font_size)
        self._canvas.setFillColor(color)
        if centered:
            self._canvas.drawCentredString(x * mm, self._pdf_y(y), text)
        else:
            self._canvas.drawString(x * mm, self._pdf_y(y), text)
        self.ops.append(DrawOp(
            kind=kind, page=self.page_count, x=x, y=y, text=text, lines=(text,),
            font_size=font_size, bold=bold, fill=color.hexval(),
        ))

    def _draw_lines(self, kind: str, text: str, lines: List[str], x: float,
                    font_size: float, bold: bool):
        self._ensure_open()
        self._canvas.setFont(self.bold_font_name if bold else self.font_name, font_size)
        self._canvas.setFillColor(ReportColors.TEXT)
        for index, line in enumerate(lines):
            self._canvas.drawString(x * mm, self._pdf_y(self.current_y + index * LINE_HEIGHT), line)
        self.ops.append(DrawOp(
            kind=kind, page=self.page_count, x=x, y=self.current_y, text=text,
            lines=tuple(lines), font_size=font_size, bold=bold,
            fill=ReportColors.TEXT.hexval(),
        ))
