"""Reports module for generating DOCX reports."""

from .docx_generator import generate_docx_report
from .report_utils import build_report_context, stage_breakdown_frame
