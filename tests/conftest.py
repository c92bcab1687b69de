import textwrap
from pathlib import Path


def write_posts(directory: Path, posts: dict[str, str], extension: str = ".mdx") -> Path:
    """
    Write ``{slug: raw_text}`` into ``directory`` as content files.
    Text is dedented and left-stripped, like the inline fixtures in the tests.
    """
    directory.mkdir(parents=True, exist_ok=True)
    for slug, raw in posts.items():
        (directory / f"{slug}{extension}").write_text(
            textwrap.dedent(raw).lstrip(), encoding="utf-8"
        )
    return directory


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_posts_return=None,
        get_post_return=None,
        list_all_return=None,
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._list_all_return = list_all_return or []
        self.calls = []

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        self.calls.append(slug)
        return self._get_post_return

    def list_all(self):
        return self._list_all_return


class FakeSitemapService:
    """
    Minimal sitemap service stand-in for router tests.
    """

    def __init__(self, entries_return=None, xml_return=""):
        self._entries_return = entries_return or []
        self._xml_return = xml_return

    def entries(self):
        return self._entries_return

    def xml(self):
        return self._xml_return
