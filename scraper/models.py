from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True)
class Result:
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "Result":
        return cls(error=error)


@dataclass(frozen=True)
class Video:
    title: str
    url: str
    download_url: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "url": self.url,
            "download_url": self.download_url,
        }


@dataclass(frozen=True)
class Show:
    title: str
    url: str
    videos: tuple = ()

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "url": self.url,
            "videos": [v.to_dict() for v in self.videos],
        }


@dataclass(frozen=True)
class Catalog:
    shows: tuple = ()

    def to_dict(self) -> dict:
        return {"shows": [s.to_dict() for s in self.shows]}


@dataclass
class ShowSection:
    """Show found on the landing page, videos not parsed yet."""

    title: str
    url: str
    video_elements: List[Any] = field(default_factory=list)
