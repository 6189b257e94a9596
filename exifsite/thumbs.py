"""
Optional local thumbnails: download each image's small URL once and store
a square crop next to the pages, so the site doesn't hotlink.
"""

import hashlib
import io
from pathlib import Path

import httpx
from PIL import Image, UnidentifiedImageError

from .config import THUMB_SIZE, THUMBS_DIR
from .errors import ThumbnailError


def thumb_path(url: str) -> str:
    """Relative path (from the output dir) of the local copy of `url`."""
    digest = hashlib.sha1(url.encode("utf-8")).hexdigest()
    return f"{THUMBS_DIR}/{digest}.jpg"


def make_thumbnail(data: bytes, dst: Path):
    """Create a square center-crop thumbnail from encoded image bytes.

    Written to a sibling ``.part`` file first, so `dst` only ever holds a
    complete thumbnail.
    """
    tmp = dst.with_name(dst.name + ".part")
    try:
        with Image.open(io.BytesIO(data)) as img:
            img = img.convert("RGB")

            w, h = img.size
            side = min(w, h)
            left = (w - side) // 2
            top = (h - side) // 2
            img = img.crop((left, top, left + side, top + side))
            img = img.resize((THUMB_SIZE, THUMB_SIZE), Image.LANCZOS)
            img.save(tmp, "JPEG", quality=80)
        tmp.replace(dst)
    finally:
        tmp.unlink(missing_ok=True)


def fetch(client: httpx.Client, url: str) -> bytes:
    try:
        resp = client.get(url)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        raise ThumbnailError(f"could not download {url}: {e}") from e
    return resp.content


def mirror_thumbnails(images, output_dir: Path, client: httpx.Client | None = None,
                      verbose: bool = False) -> dict[str, str]:
    """
    Mirror the small URL of every image in `images`.  Returns a map of
    small URL -> relative local path.  Files that already exist are reused.
    Any failure aborts.
    """
    thumbs_dir = output_dir / THUMBS_DIR
    thumbs_dir.mkdir(exist_ok=True)

    own_client = client is None
    if own_client:
        client = httpx.Client(follow_redirects=True, timeout=30)

    mirrored: dict[str, str] = {}
    fetched = 0
    try:
        for image in images:
            url = image.url("small")
            if url in mirrored:
                continue
            rel = thumb_path(url)
            dst = output_dir / rel
            if not dst.exists():
                if verbose:
                    print(f"  Downloading {url}")
                data = fetch(client, url)
                try:
                    make_thumbnail(data, dst)
                except UnidentifiedImageError as e:
                    raise ThumbnailError(f"{url} is not an image: {e}") from e
                except (OSError, Image.DecompressionBombError) as e:
                    raise ThumbnailError(f"could not make a thumbnail of {url}: {e}") from e
                fetched += 1
            mirrored[url] = rel
    finally:
        if own_client:
            client.close()

    print(f"  Mirrored {len(mirrored)} thumbnails ({fetched} downloaded)")
    return mirrored
