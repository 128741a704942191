from typing import List, Optional

from bs4 import Tag

from config import SELECTORS
from fetcher import Page
from scraper.models import ShowSection
from utils import element_text


class ShowParser:
    def __init__(self, logger):
        self.logger = logger

    def extract_shows(self, page: Page) -> List[ShowSection]:
        sections = []
        for candidate in page.soup.select(SELECTORS["show_section"]):
            section = self.parse_section(candidate, page)
            if section is not None:
                sections.append(section)
        return sections

    def parse_section(self, candidate: Tag, page: Page) -> Optional[ShowSection]:
        # не кожна секція - шоу
        container = candidate.select_one(SELECTORS["show_container"])
        if container is None:
            return None

        link = container.select_one(SELECTORS["show_link"])
        if link is None:
            self.logger.debug("section without title container, skip")
            return None

        title_el = link.select_one(SELECTORS["show_title"])
        videos_el = container.select_one(SELECTORS["show_videos"])
        if title_el is None or videos_el is None:
            self.logger.debug("section without title or videos, skip")
            return None

        url = page.abs_url(link)
        if not url:
            self.logger.debug("show link without href, skip")
            return None

        return ShowSection(
            title=element_text(title_el),
            url=url,
            video_elements=videos_el.find_all(True, recursive=False),
        )
