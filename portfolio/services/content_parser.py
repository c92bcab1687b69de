import logging
import re
from typing import Dict, Tuple

import frontmatter
from frontmatter.default_handlers import BaseHandler

logger = logging.getLogger(__name__)

QUOTE_CHARS = ("'", '"')


class KeyValueHandler(BaseHandler):
    """
    Front matter handler for plain ``key: value`` headers.

    Unlike the YAML handler every value stays a string, and a line that does
    not look like ``key: value`` is skipped instead of failing the whole file.
    """

    FM_BOUNDARY = re.compile(r"^---[ \t]*\r?$", re.MULTILINE)
    START_DELIMITER = END_DELIMITER = "---"

    def split(self, text: str) -> Tuple[str, str]:
        # Raises ValueError when fewer than two delimiter lines are present
        before, fm, after = self.FM_BOUNDARY.split(text, 2)
        return fm, before + after

    def load(self, fm: str) -> Dict[str, str]:
        metadata: Dict[str, str] = {}
        for line in fm.split("\n"):
            key, sep, value = line.partition(":")
            key = key.strip()
            if not sep or not key:
                continue
            metadata[key] = strip_quotes(value.strip())
        return metadata

    def export(self, metadata: Dict[str, str], **kwargs) -> str:
        lines = []
        for key, value in metadata.items():
            key = str(key)
            value = str(value)
            if not key.strip() or ":" in key or "\n" in key or "\r" in key:
                raise ValueError(f"Cannot write front matter key {key!r}")
            if "\n" in value or "\r" in value:
                raise ValueError(f"Front matter value for {key!r} spans lines")
            lines.append(f'{key.strip()}: "{value}"')
        return "\n".join(lines)


def strip_quotes(value: str) -> str:
    """Remove one pair of matching surrounding quotes."""
    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[0] == value[-1]:
        return value[1:-1]
    return value


def parse_content(text: str) -> Tuple[Dict[str, str], str]:
    """
    Split a content file into its metadata header and body.

    Files without a complete ``---`` header come back untouched with empty
    metadata; nothing in here raises on malformed input.
    """
    handler = KeyValueHandler()
    try:
        fm, body = handler.split(text)
    except ValueError:
        logger.debug("No front matter header found, treating file as body")
        return {}, text
    return handler.load(fm), body.strip()


def dumps_content(metadata: Dict[str, str], body: str) -> str:
    """Write metadata and body back out in the content file format."""
    post = frontmatter.Post(body.strip())
    post.metadata.update(metadata)
    return frontmatter.dumps(post, handler=KeyValueHandler()) + "\n"
