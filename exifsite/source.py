"""
Read works out of an XML export.

The export looks like::

    <works>
      <work>
        <id>31820</id>
        <filename>162042.jpg</filename>
        <image_width>800</image_width>
        <image_height>600</image_height>
        <urls>
          <url type="small">http://.../135x135.jpg</url>
          <url type="medium">http://.../300x300.jpg</url>
          <url type="large">http://.../550x550.jpg</url>
        </urls>
        <exif>
          <model>NIKON D80</model>
          <make>NIKON CORPORATION</make>
        </exif>
      </work>
    </works>

Each ``<work>`` becomes a plain dict.  Absent elements become absent keys;
the image records decide what that means.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from .errors import SourceError

PLAIN_FIELDS = ("id", "filename", "image_width", "image_height")
EXIF_FIELDS = ("make", "model")


def parse_work(elem: ET.Element) -> dict:
    work = {}
    for name in PLAIN_FIELDS:
        child = elem.find(name)
        if child is not None:
            work[name] = (child.text or "").strip()

    exif = elem.find("exif")
    if exif is not None:
        # Left unstripped: blank EXIF text is handled by ImageRecord
        work["exif"] = {}
        for name in EXIF_FIELDS:
            child = exif.find(name)
            if child is not None:
                work["exif"][name] = child.text or ""

    urls = elem.find("urls")
    if urls is not None:
        work["urls"] = [
            {"type": url.get("type"), "value": (url.text or "").strip()}
            for url in urls.findall("url")
        ]
    return work


def load_works(path: Path) -> list[dict]:
    """Parse every ``<work>`` element in the document at `path`, in order."""
    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        raise SourceError(f"could not parse {path}: {e}") from e
    root = tree.getroot()
    # root.iter() includes the root itself, so a lone <work> document works too
    return [parse_work(elem) for elem in root.iter("work")]
