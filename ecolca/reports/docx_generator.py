"""DOCX report generator."""

import logging
from io import BytesIO
from pathlib import Path
from typing import Optional

import docxtpl
from docx import Document

from ..config.paths import TEMPLATE
from ..models.product import Product
from ..models.results import LCAResults
from .report_utils import build_report_context

logger = logging.getLogger(__name__)


def _render_template(template_path: Path, context: dict) -> bytes:
    """Fill the docxtpl template with the report context."""
    template = docxtpl.DocxTemplate(template_path)
    template.render(context)
    bio = BytesIO()
    template.save(bio)
    return bio.getvalue()


def _build_document(context: dict) -> bytes:
    """Lay out a plain report with python-docx when no template is available."""
    doc = Document()
    doc.add_heading(f"Life Cycle Assessment: {context['PROJECT']}", level=0)
    if context["DESCRIPTION"]:
        doc.add_paragraph(context["DESCRIPTION"])
    doc.add_paragraph(
        f"Functional unit: {context['FUNCTIONAL_UNIT']} · Lifespan: {context['LIFESPAN_YEARS']} years"
    )

    doc.add_heading("Summary", level=1)
    summary = [
        ("Total carbon footprint", f"{context['TOTAL_CO2']} kg CO₂e"),
        ("Energy consumption", f"{context['ENERGY']} kWh"),
        ("Water usage", f"{context['WATER']} L"),
        ("Waste generation", f"{context['WASTE']} kg"),
        ("Recyclability score", f"{context['RECYCLABILITY']} / 100"),
        ("Material efficiency", f"{context['MATERIAL_EFFICIENCY']} / 100"),
        ("Sustainability score", f"{context['SUSTAINABILITY']} / 100"),
    ]
    table = doc.add_table(rows=0, cols=2)
    for label, value in summary:
        cells = table.add_row().cells
        cells[0].text = label
        cells[1].text = value

    doc.add_heading("Carbon Footprint By Stage", level=1)
    table = doc.add_table(rows=1, cols=3)
    for cell, title in zip(table.rows[0].cells, ("Stage", "kg CO₂e", "Share")):
        cell.text = title
    for row in context["stages"]:
        cells = table.add_row().cells
        cells[0].text, cells[1].text, cells[2].text = row["STAGE"], row["CO2"], row["SHARE"]

    if context["materials"]:
        doc.add_heading("Materials", level=1)
        table = doc.add_table(rows=1, cols=5)
        for cell, title in zip(table.rows[0].cells, ("Material", "Type", "Quantity", "Recycled", "Recyclability")):
            cell.text = title
        for row in context["materials"]:
            cells = table.add_row().cells
            for cell, key in zip(cells, ("MATERIAL", "TYPE", "QUANTITY", "RECYCLED", "RECYCLABILITY")):
                cell.text = row[key]

    if context["recommendations"]:
        doc.add_heading("Recommendations", level=1)
        for tip in context["recommendations"]:
            doc.add_paragraph(tip, style="List Bullet")

    if context["EXEC_NOTES"]:
        doc.add_heading("Notes", level=1)
        doc.add_paragraph(context["EXEC_NOTES"])

    bio = BytesIO()
    doc.save(bio)
    return bio.getvalue()


def generate_docx_report(product: Product, results: LCAResults, notes: str = "",
                         template_path: Optional[Path] = TEMPLATE) -> bytes:
    """Generate DOCX report bytes, from the template when one exists."""
    context = build_report_context(product, results, notes)
    if template_path is not None and Path(template_path).exists():
        logger.info("Rendering report for %s from template %s", product.id, template_path)
        return _render_template(Path(template_path), context)
    logger.info("Building report for %s without template", product.id)
    return _build_document(context)
