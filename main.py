#!/usr/bin/env python3
import sys
from pathlib import Path
import argparse
from logger import setup_logger
from fetcher import fetch
from scraper.catalog_builder import CatalogBuilder, dump_catalog, write_catalog
from scraper.embed_parser import EmbedParser
from scraper.show_parser import ShowParser
from scraper.video_parser import VideoParser
from utils import RetryPolicy
from config import SITE, OUTPUT_FILE, LOG_DIR, RETRY_DELAY, DOWNLOAD_ATTEMPTS


def main(
        site_url: str = SITE,
        output: Path = OUTPUT_FILE,
        retry_delay: float = RETRY_DELAY,
        log_dir: Path = LOG_DIR,
        fetch_page=fetch,
        sleep=None,
) -> int:
    logger = setup_logger("moonflix", log_dir)
    logger.info(f"Start: {site_url}")

    retry = RetryPolicy(attempts=DOWNLOAD_ATTEMPTS, delay=retry_delay)
    if sleep is not None:
        retry.sleep = sleep

    builder = CatalogBuilder(
        logger,
        ShowParser(logger),
        VideoParser(logger, EmbedParser(logger, fetch_page=fetch_page), retry=retry),
    )

    # ─── без головної сторінки каталогу немає ─────────────
    try:
        catalog = builder.build(fetch_page(site_url))
    except KeyboardInterrupt:
        raise
    except Exception:
        logger.exception("landing page scrape failed")
        print("Something went wrong, scraping failed!")
        return 1

    if write_catalog(catalog, output, logger):
        print(f"Result written to file: {output}")
        return 0

    print(f"Error writing the result to the file: {output}\nResult:\n\n{dump_catalog(catalog)}")
    return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Moonflix catalog scraper")
    parser.add_argument("--url", default=SITE, help="Головна сторінка moonflix")
    parser.add_argument("-o", "--output", type=Path, default=OUTPUT_FILE, help="JSON файл результату")
    parser.add_argument(
        "--retry-delay",
        type=float,
        default=RETRY_DELAY,
        help="Пауза (сек) перед повтором пошуку download_url"
    )
    parser.add_argument("--log-dir", type=Path, default=LOG_DIR)

    args = parser.parse_args()
    sys.exit(main(args.url, output=args.output, retry_delay=args.retry_delay, log_dir=args.log_dir))
