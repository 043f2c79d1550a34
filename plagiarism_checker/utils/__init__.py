"""
Presentation helpers.

- Match highlighting and severity badges (highlighting)
- Uploaded text decoding (text_loader)
- Result tables and text reports (report)
"""

from .highlighting import highlight_html, spans_in_original, severity_badge_html
from .text_loader import decode_uploaded_text, load_text_file
from .report import matches_table, format_report

__all__ = [
    'highlight_html',
    'spans_in_original',
    'severity_badge_html',
    'decode_uploaded_text',
    'load_text_file',
    'matches_table',
    'format_report'
]
