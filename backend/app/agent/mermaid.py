import re

from app.core.config import settings

# A fence marker plus whatever language tag is glued to it (```mermaid, ```text, ...).
FENCE_RE = re.compile(r"```[A-Za-z0-9_+-]*")
FENCE = "```"


def strip_fences(text: str) -> str:
    """Remove every fence marker, wherever it appears."""
    # Removing one marker can join backticks into a new one, so repeat until none remain.
    while FENCE in text:
        text = FENCE_RE.sub("", text)
    return text


def is_header_line(line: str, header: str) -> bool:
    return line.strip().lower() == header.strip().lower()


def clean_mermaid(text: str | None, header: str | None = None) -> str:
    """
    Normalize model output into Mermaid source that starts with exactly one header line.

    Fence markers are stripped, blank lines dropped and every copy of the header removed
    from the body; all other lines keep their original text and order.
    """
    header = (header or settings.MERMAID_HEADER).strip()
    body: list[str] = []
    for line in strip_fences(text or "").splitlines():
        if not line.strip():
            continue
        if is_header_line(line, header):
            continue
        body.append(line)
    return "\n".join([header, *body])
