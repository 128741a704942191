import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def setup_logger(
        name: str,
        log_dir: Path,
        log_file: str = "scraper.log",
        console_level: int = logging.INFO,
) -> logging.Logger:
    """
    Logger for one scraper run: full DEBUG trail in ``log_dir/log_file``,
    progress and status lines on stdout.
    Calling it again for the same name returns the configured logger.
    """
    scrape_log = logging.getLogger(name)
    if scrape_log.handlers:
        return scrape_log

    log_dir.mkdir(parents=True, exist_ok=True)
    scrape_log.setLevel(logging.DEBUG)
    fmt = logging.Formatter(LOG_FORMAT)

    trail = logging.FileHandler(log_dir / log_file, encoding="utf-8")
    trail.setLevel(logging.DEBUG)
    trail.setFormatter(fmt)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level)
    console.setFormatter(fmt)

    scrape_log.addHandler(trail)
    scrape_log.addHandler(console)

    return scrape_log
