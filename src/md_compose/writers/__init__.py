from md_compose.writers.html import write_html
from md_compose.writers.markdown import write_markdown

__all__ = ["write_html", "write_markdown"]
