import math


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"


def derive_title(metadata: dict, slug: str) -> str:
    """Human-readable title, falling back to the slug when the header has none."""
    if metadata and metadata.get("title"):
        return metadata["title"]
    return slug.replace("-", " ").replace("_", " ").title()
