"""
Functions for rendering a receipt into its SVG template.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from barcode import Code128
from lxml.etree import (
    ParseError,
    SubElement,
    parse as lxml_parse,
)

from .consts import (
    BARCODE_HEIGHT,
    BARCODE_MODULE_WIDTH,
    ENCODING,
    JUST_LENGTHS,
    OUTPUT_DIR,
    TEMPLATE_FILE,
)
from .utils import calculate_age, format_receipt_date, format_receipt_time

if TYPE_CHECKING:
    from lxml.etree import _Element as LxmlElem, _ElementTree as LxmlTree

    from .models import Receipt

logger = logging.getLogger(__name__)

SVG_NS: str = "http://www.w3.org/2000/svg"


class RenderError(Exception):
    """
    Descriptive exception for receipt rendering errors.
    """


def render_receipt(receipt: Receipt, template: Path = TEMPLATE_FILE) -> LxmlTree:
    """
    Fill a fresh copy of the receipt template.

    Args:
        receipt:  Receipt to render.
        template: SVG template to fill.

    Return:
        LxmlTree: Rendered document.

    """

    try:
        tree: LxmlTree = lxml_parse(str(template), parser=None)
    except (OSError, ParseError) as e:
        msg = f"Could not read receipt template: {e!s}"
        raise RenderError(msg) from e

    _update_elements(tree.getroot(), receipt)
    return tree


def save_receipt(
    receipt: Receipt,
    output_dir: Path = OUTPUT_DIR,
    template: Path = TEMPLATE_FILE,
) -> Path:
    """
    Render a receipt and write it where downloads go.

    Args:
        receipt:    Receipt to render.
        output_dir: Directory to write into; created if missing.
        template:   SVG template to fill.

    Return:
        Path: Written file, named after the looked-up handle.

    """

    tree: LxmlTree = render_receipt(receipt, template)
    out_path: Path = Path(output_dir) / receipt.file_name

    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        tree.write(str(out_path), encoding=ENCODING, xml_declaration=True)  # type: ignore[reportCallIssue]
    except OSError as o:
        msg = f"Failed to write receipt: {o!s}"
        raise RenderError(msg) from o

    logger.info("Wrote receipt for %r to %s", receipt.user.login, out_path)
    return out_path


def _find(root: LxmlElem, element_id: str) -> Any:
    el: Any = root.find(path=f".//*[@id='{element_id}']", namespaces=None)
    if el is None:
        msg = f"Invalid or nonexistent element_id: {element_id!r}"
        raise RenderError(msg)

    return el


def _set_text(root: LxmlElem, element_id: str, text: str) -> None:
    _find(root, element_id).text = text


def _remove(root: LxmlElem, element_id: str) -> None:
    el: Any = _find(root, element_id)
    el.getparent().remove(el)


def _justify_from_dots(root: LxmlElem, dots_id: str, target_visible_len: int) -> None:
    dots_el: Any = root.find(path=f".//*[@id='{dots_id}']", namespaces=None)
    if dots_el is None:
        # line was removed
        return

    parent = dots_el.getparent()
    visible_len = sum(
        len(child.text or "")
        for child in parent
        if child is not dots_el and child.tag.split("}")[-1] == "tspan"
    )
    needed = max(target_visible_len - visible_len - 2, 1)

    dots_el.text = f" {'.' * needed} "


def _draw_barcode(root: LxmlElem, value: str) -> None:
    """
    Draw `value` as Code 128 bars, centered on the receipt.

    Args:
        root:  Root XML element of image.
        value: Text to encode.

    """

    group: Any = _find(root, "barcode")
    modules: str = Code128(value).build()[0]

    bar_width: float = len(modules) * BARCODE_MODULE_WIDTH
    receipt_width = float(root.get("width", "340"))
    group.set("transform", f"translate({(receipt_width - bar_width) / 2:g}, 0)")

    start: int | None = None
    for i, module in enumerate(f"{modules}0"):
        if module == "1" and start is None:
            start = i
        elif module != "1" and start is not None:
            SubElement(
                group,
                f"{{{SVG_NS}}}rect",
                x=f"{start * BARCODE_MODULE_WIDTH:g}",
                y="0",
                width=f"{(i - start) * BARCODE_MODULE_WIDTH:g}",
                height=f"{BARCODE_HEIGHT:g}",
                fill="#000000",
            )
            start = None


def _update_elements(root: LxmlElem, receipt: Receipt) -> None:
    """
    Batch update all receipt fields.

    Args:
        root:    Root XML element of image.
        receipt: Receipt to render.

    """

    user = receipt.user
    stats = receipt.stats

    _set_text(root, "date", format_receipt_date(receipt.issued_at))
    _set_text(root, "order", f"ORDER #{receipt.order_number:04d}")

    _set_text(root, "customer", user.display_name)
    _set_text(root, "handle", f"@{user.login}")
    if user.location:
        _set_text(root, "location", user.location)
    else:
        _remove(root, "location_line")

    _set_text(root, "repos", str(stats.total_repos))
    _set_text(root, "stars", str(stats.total_stars))
    _set_text(root, "forks", str(stats.total_forks))
    _set_text(root, "followers", str(user.followers))
    _set_text(root, "following", str(user.following))

    _set_text(root, "languages", stats.top_languages_display or "NONE")

    _set_text(root, "day", stats.most_active_day)
    _set_text(root, "size", f"{stats.total_size_mb}MB")
    _set_text(root, "score", str(stats.contribution_score))
    _set_text(root, "recent", str(stats.recent_activity))
    if stats.recent_commits is not None:
        _set_text(root, "commits", str(stats.recent_commits))
    else:
        _remove(root, "commits_line")
    _set_text(root, "age", calculate_age(user.created_at, receipt.issued_at))

    _set_text(root, "cashier", stats.cashier)
    _set_text(root, "time", format_receipt_time(receipt.issued_at))

    _set_text(root, "fortune", stats.fortune)
    _set_text(root, "coupon", stats.coupon_code)

    _set_text(root, "card", f"CARD #: **** **** **** {receipt.issued_at.year}")
    _set_text(root, "auth", str(receipt.auth_code))
    _set_text(root, "cardholder", user.login.upper())

    _draw_barcode(root, f"github.com/{user.login}")
    _set_text(root, "barcode_caption", f"github.com/{user.login}")

    for dots_id, target in JUST_LENGTHS.items():
        _justify_from_dots(root, dots_id, target)
