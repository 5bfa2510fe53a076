"""
Shared fixtures for PageSift tests.
"""

import pytest
import requests

from pagesift.config.settings import Config


FOX_PAGE = """<html><head><title>Foxes</title><style>p { margin: 0 }</style></head>
<body>
<nav><a href="/">Home</a> <a href="/about">About</a></nav>
<h1>All about foxes</h1>
<p>The red fox is the largest of the true foxes and one of the most widely distributed members of the order Carnivora.</p>
<p>Foxes are small to medium-sized omnivorous mammals belonging to several genera of the family Canidae.</p>
<p>Cats are not related to dogs at all, and they prefer to hunt alone at night in quiet places.</p>
<p>Many people enjoy watching wildlife documentaries about foxes, wolves and other members of the dog family.</p>
<script>trackVisitor();</script>
<footer>Copyright 2024 Fox Facts</footer>
</body></html>"""


def build_response(text, status_code=200, content_type='text/html; charset=utf-8', url=None):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode('utf-8')
    response.encoding = 'utf-8'
    if content_type:
        response.headers['Content-Type'] = content_type
    response.url = url
    response.reason = 'OK' if status_code < 400 else 'Error'
    return response


@pytest.fixture
def make_response():
    """Factory for fake HTTP responses."""
    return build_response


@pytest.fixture
def fox_page():
    """A small HTML page about foxes."""
    return FOX_PAGE


@pytest.fixture
def config(tmp_path):
    """Config rooted in a temporary data directory."""
    return Config(data_dir=str(tmp_path))
