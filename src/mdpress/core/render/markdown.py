"""markdown-it based conversion of post bodies to HTML"""

from markdown_it import MarkdownIt


class MarkdownConverter:
    """Renders markdown with a MarkdownIt preset; one parser instance per converter."""

    def __init__(self, preset: str = "gfm-like"):
        self.preset = preset
        self._md = MarkdownIt(preset, options_update={"linkify": False})

    def to_html(self, text: str) -> str:
        return self._md.render(text)
