from pathlib import Path

SITE = "https://www.moonflix.co.nz/"
OUTPUT_FILE = Path("content.json")
LOG_DIR = Path("logs")
HEADERS = {
    "User-Agent": "Mozilla/5.0",
    "Referer": SITE,
}
TIMEOUT = 20

# Повтор пошуку download_url
DOWNLOAD_ATTEMPTS = 2  # перша спроба + один повтор
RETRY_DELAY = 10  # секунд між спробами

VIMEO_PLAYER_PATTERN = r"https://player\.vimeo\.com/video/\d+"

# CSS-селектори розмітки moonflix
SELECTORS = {
    "show_section": ".video-section",
    "show_container": ".container",
    "show_link": ".link-category",
    "show_title": ".title-section",
    "show_videos": ".w-dyn-items",
    "video_link": ".link-video",
    "video_title": ".div-title-video",
    "embed": ".embedly-embed",
}
