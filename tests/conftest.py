import logging

import pytest

from fetcher import FetchError, parse_page

SITE = "https://www.moonflix.co.nz/"


def video_item(slug, title):
    return (
        f'<div role="listitem" class="w-dyn-item">'
        f'<a class="link-video" href="/videos/{slug}">'
        f'<div class="div-title-video">{title}</div></a></div>'
    )


def show_section(slug, title, items):
    return (
        f'<div class="video-section"><div class="container">'
        f'<a class="link-category" href="/shows/{slug}"><h2 class="title-section">{title}</h2></a>'
        f'<div class="w-dyn-list"><div role="list" class="w-dyn-items">{"".join(items)}</div></div>'
        f'</div></div>'
    )


def embed_page(video_id):
    src = (
        "//cdn.embedly.com/widgets/media.html?src=https%3A%2F%2Fplayer.vimeo.com%2Fvideo%2F"
        f"{video_id}%3Fapp_id%3D122963&amp;dntp=1&amp;display_name=Vimeo"
        f"&amp;url=https%3A%2F%2Fvimeo.com%2F{video_id}&amp;type=text%2Fhtml&amp;schema=vimeo"
    )
    return f'<html><body><iframe class="embedly-embed" src="{src}"></iframe></body></html>'


class FakeFetcher:
    """Serves pages from a dict, raises FetchError for anything else."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def __call__(self, url):
        self.calls.append(url)
        body = self.pages.get(url)
        if body is None:
            raise FetchError(f"fetch failed: {url} → 404")
        if isinstance(body, Exception):
            raise body
        return parse_page(url, body)


@pytest.fixture
def logger():
    return logging.getLogger("tests")


@pytest.fixture
def landing_html():
    return "<html><body>" + "".join([
        show_section("first", "First Show", [
            video_item("a", "Video A"),
            video_item("b", "Video B"),
        ]),
        '<div class="video-section"><p>banner, not a show</p></div>',
        show_section("second", "Second Show", [video_item("c", "Video C")]),
    ]) + "</body></html>"


@pytest.fixture
def site_pages(landing_html):
    return {
        SITE: landing_html,
        SITE + "videos/a": embed_page(111),
        SITE + "videos/b": embed_page(222),
        SITE + "videos/c": embed_page(333),
    }


@pytest.fixture
def sleeps():
    return []
