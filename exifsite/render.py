"""One page template shared by the index, make and model pages."""

from jinja2 import Environment

from .config import ASSETS_DIR

_jinja_env = Environment(autoescape=True)
Template = _jinja_env.from_string

STYLESHEET = f"{ASSETS_DIR}/style.css"

SHARED_CSS = """\
/* ── base ── */
*, *::before, *::after { box-sizing: border-box; }
body {
  margin: 0; padding: 24px;
  font-family: "Helvetica Neue", system-ui, -apple-system, sans-serif;
  font-size: 15px; line-height: 1.6;
  background: #fafafa; color: #333;
}
a { color: #c0392b; text-decoration: none; }
a:hover { text-decoration: underline; }
h1 { font-size: 1.5em; font-weight: 500; margin: 0 0 16px; }

/* ── navigation ── */
.nav {
  margin-bottom: 20px; padding-bottom: 12px;
  border-bottom: 1px solid #ddd;
  font-size: 0.9em; display: flex; gap: 6px 16px; flex-wrap: wrap;
  list-style: none; padding-left: 0;
}

/* ── thumbnail grid ── */
.grid {
  display: grid;
  grid-template-columns: repeat(auto-fill, minmax(135px, 1fr));
  gap: 8px;
}
.grid figure { margin: 0; }
.grid img {
  width: 100%; aspect-ratio: 1; object-fit: cover; display: block;
  border-radius: 2px;
}
.grid figcaption { font-size: 0.75em; color: #888; text-align: center; }
.empty { color: #888; font-style: italic; }

@media (max-width: 640px) {
  body { padding: 14px; }
  .grid { grid-template-columns: repeat(auto-fill, minmax(100px, 1fr)); gap: 4px; }
}
"""

PAGE_TEMPLATE = Template("""\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{ unit.title }}</title>
<link rel="stylesheet" href="{{ stylesheet }}">
</head>
<body>
<h1>{{ unit.title }}</h1>
<ul class="nav">
{% for link in unit.navigation %}  <li><a href="{{ link.filename }}">{{ link.title }}</a></li>
{% endfor %}</ul>
{% set images = unit.thumbnails %}
{% if images %}
<div class="grid">
{% for image in images %}<figure><a href="{{ image.url('large') }}"><img src="{{ thumb_src(image) }}" alt="{{ image.filename }}" loading="lazy"></a><figcaption>{{ image.width }}&times;{{ image.height }}</figcaption></figure>
{% endfor %}
</div>
{% else %}
<p class="empty">No photos.</p>
{% endif %}
</body>
</html>
""")


def remote_thumb(image) -> str:
    return image.url("small")


def render_unit(unit, thumb_src=None) -> str:
    """Render one page.

    `thumb_src` maps an image record to the ``src`` of its thumbnail; by
    default the record's own small URL.
    """
    return PAGE_TEMPLATE.render(
        unit=unit,
        stylesheet=STYLESHEET,
        thumb_src=thumb_src or remote_thumb,
    )
