"""
Build a static camera-gear site from an XML export of works.

One page per make/model pair, one per make, and an index, all cross-linked.
"""

from pathlib import Path

from .config import ASSETS_DIR, SiteConfig
from .render import SHARED_CSS, render_unit
from .site import Site
from .source import load_works
from .thumbs import mirror_thumbnails

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def write_page(path: Path, html: str):
    """Write (or overwrite) one page.  The directory must already exist."""
    path.write_text(html, encoding="utf-8")


def write_assets(output_dir: Path):
    assets_dir = output_dir / ASSETS_DIR
    assets_dir.mkdir(exist_ok=True)
    (assets_dir / "style.css").write_text(SHARED_CSS, encoding="utf-8")
    print(f"  Wrote {ASSETS_DIR}/style.css")


def write_units(units, output_dir: Path, thumb_src=None, verbose: bool = False) -> int:
    """Render and write `units` in the given order.  Returns the page count."""
    for unit in units:
        path = output_dir / unit.filename
        write_page(path, render_unit(unit, thumb_src))
        if verbose:
            print(f"  Wrote {unit.filename}")
    return len(units)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def generate_site(config: SiteConfig) -> Site:
    """
    Run every step in order.  The site is fully registered and frozen before
    anything is rendered, since make and index navigation depend on it.
    """
    output_dir = config.output_dir

    print("Step 1: Loading works...")
    works = load_works(config.input_path)
    print(f"  Loaded {len(works)} works from {config.input_path}")

    print("Step 2: Grouping by make and model...")
    site = Site.from_works(works)
    registry = site.registry
    print(f"  {len(registry.makes)} makes, {len(registry.models)} models")

    thumb_src = None
    if config.mirror_thumbs:
        print("Step 3: Mirroring thumbnails...")
        mirrored = mirror_thumbnails(site.images, output_dir, verbose=config.verbose)

        def thumb_src(image):
            return mirrored[image.url("small")]

    print("Step 4: Generating HTML...")
    write_assets(output_dir)
    count = write_units(registry.models, output_dir, thumb_src, config.verbose)
    print(f"  Wrote {count} model pages")
    count = write_units(registry.makes, output_dir, thumb_src, config.verbose)
    print(f"  Wrote {count} make pages")
    write_units([site.index], output_dir, thumb_src, config.verbose)
    print(f"  Wrote index.html ({len(site.index.thumbnails)} photos)")

    print(f"\nDone! Site written to {output_dir}/")
    return site
