import csv
import io
import os
from datetime import datetime, timezone
from enum import Enum

from PIL import Image, ImageDraw, ImageFont

# A4 page at 150 DPI
DPI = 150
PAGE_W = int(8.27 * DPI)   # 1240
PAGE_H = int(11.69 * DPI)  # 1753
MARGIN = 75
ROW_H = 30


def _format(value) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def render_csv(rows: list[dict], columns: list[tuple[str, str]]) -> str:
    """Render rows as CSV with a header line. No rows gives an empty string."""
    if not rows:
        return ""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow([header for _, header in columns])
    for row in rows:
        writer.writerow([_format(row.get(key)) for key, _ in columns])
    return buf.getvalue()


def _get_font(size: int, bold: bool = False) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Try system fonts, fallback to default."""
    names = ["DejaVuSans-Bold.ttf", "LiberationSans-Bold.ttf"] if bold else ["DejaVuSans.ttf", "LiberationSans-Regular.ttf"]
    dirs = [
        "/usr/share/fonts/truetype/dejavu",
        "/usr/share/fonts/truetype/liberation",
        "/usr/share/fonts/TTF",
    ]
    for d in dirs:
        for name in names:
            fp = os.path.join(d, name)
            if os.path.exists(fp):
                return ImageFont.truetype(fp, size)
    return ImageFont.load_default()


def _fit(draw: ImageDraw.ImageDraw, text: str, font, width: int) -> str:
    while text and draw.textbbox((0, 0), text, font=font)[2] > width and len(text) > 3:
        text = text[:-4] + "..."
    return text


def _new_page(title: str | None, generated: str) -> tuple[Image.Image, ImageDraw.ImageDraw, int]:
    page = Image.new("RGB", (PAGE_W, PAGE_H), "white")
    draw = ImageDraw.Draw(page)
    y = MARGIN
    if title:
        title_font = _get_font(36, bold=True)
        w = draw.textbbox((0, 0), title, font=title_font)[2]
        draw.text(((PAGE_W - w) // 2, y), title, fill="#000000", font=title_font)
        y += 60
        small = _get_font(16)
        w = draw.textbbox((0, 0), generated, font=small)[2]
        draw.text((PAGE_W - MARGIN - w, y), generated, fill="#555555", font=small)
        y += 50
    return page, draw, y


def _draw_header(draw: ImageDraw.ImageDraw, headers: list[str], y: int, col_w: int) -> int:
    font = _get_font(16, bold=True)
    for i, header in enumerate(headers):
        draw.text((MARGIN + i * col_w, y), _fit(draw, header, font, col_w - 6), fill="#000000", font=font)
    y += ROW_H - 6
    draw.line([(MARGIN, y), (PAGE_W - MARGIN, y)], fill="#000000", width=2)
    return y + 10


def render_pdf(rows: list[dict], title: str, columns: list[tuple[str, str]]) -> bytes:
    """Render rows as a paged A4 table: title, generation time, header on every page, page footer."""
    generated = f"Generated on: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S UTC')}"
    headers = [header for _, header in columns]
    col_w = (PAGE_W - 2 * MARGIN) // max(1, len(columns))
    body_font = _get_font(14)

    page, draw, y = _new_page(title, generated)
    pages = [page]

    if not rows:
        draw.text((MARGIN, y), "No data available for this report.", fill="#000000", font=_get_font(18))
    else:
        y = _draw_header(draw, headers, y, col_w)
        for row in rows:
            if y + ROW_H > PAGE_H - 2 * MARGIN:
                page, draw, y = _new_page(None, generated)
                pages.append(page)
                y = _draw_header(draw, headers, y, col_w)
            for i, (key, _) in enumerate(columns):
                text = _fit(draw, _format(row.get(key)), body_font, col_w - 6)
                draw.text((MARGIN + i * col_w, y), text, fill="#222222", font=body_font)
            y += ROW_H

    footer_font = _get_font(12)
    total = len(pages)
    for n, page in enumerate(pages, start=1):
        draw = ImageDraw.Draw(page)
        label = f"Page {n} of {total}"
        w = draw.textbbox((0, 0), label, font=footer_font)[2]
        draw.text(((PAGE_W - w) // 2, PAGE_H - MARGIN), label, fill="#888888", font=footer_font)

    buf = io.BytesIO()
    pages[0].save(buf, format="PDF", save_all=True, append_images=pages[1:], resolution=DPI)
    return buf.getvalue()
