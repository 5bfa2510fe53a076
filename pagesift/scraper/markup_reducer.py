"""
Markup reducer for turning fetched HTML into plain prose.
"""

import re
from bs4 import BeautifulSoup, Comment

from ..utils.logging import get_logger


SCRIPT_STYLE_RE = re.compile(r'<(script|style)[^>]*>[\s\S]*?</\1\s*>', re.IGNORECASE)
COMMENT_RE = re.compile(r'<!--[\s\S]*?-->')
# Single pass, so a region nested inside a region of the same name closes early
CHROME_RE = re.compile(r'<(nav|header|footer|aside|menu)[^>]*>[\s\S]*?</\1\s*>', re.IGNORECASE)
BLOCK_CLOSE_RE = re.compile(r'</(div|p|h[1-6]|li|section|article|blockquote|pre)\s*>', re.IGNORECASE)
TAG_RE = re.compile(r'<[^>]*>')
CONTROL_CHAR_RE = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')

# Replaced one after another, so "&amp;lt;" ends up as "<"
ENTITIES = [
   ('&nbsp;', ' '),
   ('&amp;', '&'),
   ('&lt;', '<'),
   ('&gt;', '>'),
   ('&quot;', '"'),
   ('&#39;', "'"),
]

CHROME_TAGS = ['nav', 'header', 'footer', 'aside', 'menu']
BLOCK_TAGS = ['div', 'p', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'li',
              'section', 'article', 'blockquote', 'pre']


class MarkupReducer:
   """Strips non-content markup from HTML and flattens it to prose.

   The default ``regex`` mode works on the raw markup string and has no
   notion of a DOM tree. ``parser`` mode walks a BeautifulSoup tree instead,
   which balances nested regions correctly but can produce different text
   on unusual markup.

   By default every whitespace run, newlines included, collapses to a single
   space. With ``keep_paragraphs`` block boundaries survive as blank lines.
   """

   MODES = ("regex", "parser")

   def __init__(self, mode: str = "regex", keep_paragraphs: bool = False):
       """Initialize markup reducer."""
       if mode not in self.MODES:
           raise ValueError(f"Unknown reducer mode: {mode}")
       self.mode = mode
       self.keep_paragraphs = keep_paragraphs
       self.logger = get_logger(__name__)

   def reduce(self, html: str) -> str:
       """Reduce HTML to normalized plain text."""
       if not html:
           return ""

       if self.mode == "parser":
           text = self._reduce_with_parser(html)
       else:
           text = self._reduce_with_regex(html)

       self.logger.debug(f"Reduced {len(html)} characters of markup to {len(text)} characters of text")
       return text

   def _reduce_with_regex(self, html: str) -> str:
       text = SCRIPT_STYLE_RE.sub('', html)
       text = COMMENT_RE.sub('', text)
       text = CHROME_RE.sub('', text)

       text = BLOCK_CLOSE_RE.sub('\n', text)
       text = TAG_RE.sub(' ', text)

       text = self.decode_entities(text)
       return self.normalize_whitespace(text, self.keep_paragraphs)

   def _reduce_with_parser(self, html: str) -> str:
       soup = BeautifulSoup(html, 'html.parser')

       for element in soup(['script', 'style'] + CHROME_TAGS):
           # Elements nested in an already removed region are gone too
           if not element.decomposed:
               element.decompose()

       for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
           comment.extract()

       for element in soup.find_all(BLOCK_TAGS):
           element.append('\n')

       # get_text decodes every entity, not only the common six
       text = soup.get_text(' ')
       return self.normalize_whitespace(text, self.keep_paragraphs)

   @staticmethod
   def decode_entities(text: str) -> str:
       """Decode the common HTML entities, one replacement after another."""
       for entity, replacement in ENTITIES:
           text = text.replace(entity, replacement)
       return text

   @staticmethod
   def normalize_whitespace(text: str, keep_paragraphs: bool = False) -> str:
       """Collapse whitespace runs to single spaces.

       With ``keep_paragraphs`` newlines are kept and runs of them become a
       single blank line.
       """
       text = CONTROL_CHAR_RE.sub(' ', text)

       if not keep_paragraphs:
           return re.sub(r'\s+', ' ', text).strip()

       text = re.sub(r'[^\S\n]+', ' ', text)
       text = re.sub(r' *\n *', '\n', text)
       text = re.sub(r'\n+', '\n\n', text)
       return text.strip()


def reduce_markup(html: str, mode: str = "regex", keep_paragraphs: bool = False) -> str:
   """Reduce HTML to plain text with a one-off reducer."""
   return MarkupReducer(mode, keep_paragraphs).reduce(html)
