import json
from pathlib import Path

from tqdm import tqdm

from fetcher import Page
from scraper.models import Catalog, Show, ShowSection
from scraper.show_parser import ShowParser
from scraper.video_parser import VideoParser


class CatalogBuilder:
    def __init__(self, logger, show_parser: ShowParser, video_parser: VideoParser, progress=True):
        self.logger = logger
        self.show_parser = show_parser
        self.video_parser = video_parser
        self.progress = progress

    def build(self, page: Page) -> Catalog:
        """Збирає всі шоу з головної сторінки у Catalog (порядок документа)"""
        shows = []
        for section in self.show_parser.extract_shows(page):
            try:
                shows.append(self.build_show(section, page))
            except KeyboardInterrupt:
                raise
            except Exception as e:
                self.logger.error(f"show {section.title} failed → {e}")

        self.logger.info(f"Complete! shows: {len(shows)}")
        return Catalog(shows=tuple(shows))

    def build_show(self, section: ShowSection, page: Page) -> Show:
        total = len(section.video_elements)
        self.logger.info(f"Title: {section.title} | URL: {section.url} | Videos: {total}")

        videos = []
        with tqdm(
                total=total,
                desc=section.title,
                unit="video",
                leave=False,
                disable=not self.progress,
        ) as progress:
            for idx, element in enumerate(section.video_elements, start=1):
                self.logger.info(f"Scraping video {idx}/{total}...")
                try:
                    result = self.video_parser.parse(element, page)
                except KeyboardInterrupt:
                    raise
                except Exception as e:
                    self.logger.error(f"[{section.title}] video {idx}/{total} error → {e}")
                    continue
                finally:
                    progress.update(1)

                if not result.ok:
                    self.logger.warning(f"[{section.title}] video {idx}/{total} skipped: {result.error}")
                    continue

                video = result.value
                self.logger.info(
                    f"Title: {video.title} | URL: {video.url} | Download URL: {video.download_url}"
                )
                videos.append(video)

        return Show(title=section.title, url=section.url, videos=tuple(videos))


def dump_catalog(catalog: Catalog) -> str:
    return json.dumps(catalog.to_dict(), ensure_ascii=False, indent=2)


def write_catalog(catalog: Catalog, path: Path, logger=None) -> bool:
    try:
        Path(path).write_text(dump_catalog(catalog), encoding="utf-8")
        return True
    except OSError as e:
        if logger:
            logger.error(f"write {path} failed → {e}")
        return False
