from typing import Optional

from pydantic import BaseModel


class SitemapEntry(BaseModel):
    url: str
    lastModified: Optional[str] = None
