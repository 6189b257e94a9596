import pytest

from exifsite.site import Site

SAMPLE_URLS = {
    "small": "http://ih1.redbubble.net/work.31820.1.flat,135x135,075,f.jpg",
    "medium": "http://ih1.redbubble.net/work.31820.1.flat,300x300,075,f.jpg",
    "large": "http://ih1.redbubble.net/work.31820.1.flat,550x550,075,f.jpg",
}

SAMPLE_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<works>
  <work>
    <id>31820</id>
    <filename>162042.jpg</filename>
    <image_width>800</image_width>
    <image_height>600</image_height>
    <urls>
      <url type="small">http://ih1.redbubble.net/work.31820.1.flat,135x135,075,f.jpg</url>
      <url type="medium">http://ih1.redbubble.net/work.31820.1.flat,300x300,075,f.jpg</url>
      <url type="large">http://ih1.redbubble.net/work.31820.1.flat,550x550,075,f.jpg</url>
    </urls>
    <exif>
      <model>NIKON D80</model>
      <make>NIKON CORPORATION</make>
    </exif>
  </work>
  <work>
    <id>2041</id>
    <filename>2041.jpg</filename>
    <image_width>1024</image_width>
    <image_height>768</image_height>
    <urls>
      <url type="small">http://ih1.redbubble.net/work.2041.1.flat,135x135,075,f.jpg</url>
      <url type="medium">http://ih1.redbubble.net/work.2041.1.flat,300x300,075,f.jpg</url>
      <url type="large">http://ih1.redbubble.net/work.2041.1.flat,550x550,075,f.jpg</url>
    </urls>
    <exif>
      <model>Canon EOS 20D</model>
      <make>Canon</make>
    </exif>
  </work>
  <work>
    <id>2729</id>
    <filename>2729.jpg</filename>
    <image_width>1024</image_width>
    <image_height>683</image_height>
    <urls>
      <url type="small">http://ih1.redbubble.net/work.2729.1.flat,135x135,075,f.jpg</url>
      <url type="medium">http://ih1.redbubble.net/work.2729.1.flat,300x300,075,f.jpg</url>
      <url type="large">http://ih1.redbubble.net/work.2729.1.flat,550x550,075,f.jpg</url>
    </urls>
    <exif/>
  </work>
</works>
"""


def work(filename="1620421.jpg", make="NIKON CORPORATION", model="NIKON D80",
         sizes=("small", "medium", "large")):
    """A raw work dict as produced by source.load_works."""
    exif = {}
    if make is not None:
        exif["make"] = make
    if model is not None:
        exif["model"] = model
    return {
        "filename": filename,
        "image_width": "800",
        "image_height": "600",
        "exif": exif,
        "urls": [{"type": size, "value": SAMPLE_URLS[size]} for size in sizes],
    }


@pytest.fixture
def make_work():
    return work


@pytest.fixture
def site():
    return Site()


@pytest.fixture
def works_xml(tmp_path):
    path = tmp_path / "works.xml"
    path.write_text(SAMPLE_XML, encoding="utf-8")
    return path


@pytest.fixture
def output_dir(tmp_path):
    path = tmp_path / "site"
    path.mkdir()
    return path
