# capture/delivery.py
from __future__ import annotations
import logging
from typing import Callable, List, Optional
from pydantic import BaseModel

log = logging.getLogger(__name__)


class DownloadLink(BaseModel):
    href: str
    filename: str


class FileDelivery:
    """
    Hands the visitor the fixed ebook file. Each trigger is recorded so a
    renderer (or the gateway) can turn it into an actual download.
    """

    def __init__(self, href: str, filename: str,
                 on_trigger: Optional[Callable[[DownloadLink], None]] = None):
        self.link = DownloadLink(href=href, filename=filename)
        self.on_trigger = on_trigger
        self.triggered: List[DownloadLink] = []

    def trigger(self) -> DownloadLink:
        self.triggered.append(self.link)
        log.info("Download triggered href=%s filename=%s", self.link.href, self.link.filename)
        if self.on_trigger:
            self.on_trigger(self.link)
        return self.link
