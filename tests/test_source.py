import pytest

from exifsite.errors import SourceError
from exifsite.images import ImageRecord
from exifsite.source import load_works


def test_load_works(works_xml):
    works = load_works(works_xml)
    assert len(works) == 3
    assert works[0] == {
        "id": "31820",
        "filename": "162042.jpg",
        "image_width": "800",
        "image_height": "600",
        "exif": {"make": "NIKON CORPORATION", "model": "NIKON D80"},
        "urls": [
            {"type": "small", "value": "http://ih1.redbubble.net/work.31820.1.flat,135x135,075,f.jpg"},
            {"type": "medium", "value": "http://ih1.redbubble.net/work.31820.1.flat,300x300,075,f.jpg"},
            {"type": "large", "value": "http://ih1.redbubble.net/work.31820.1.flat,550x550,075,f.jpg"},
        ],
    }


def test_empty_exif(works_xml):
    work = load_works(works_xml)[2]
    assert work["exif"] == {}
    assert ImageRecord(work).make == "Unknown Make"


def test_absent_elements_are_absent_keys(tmp_path):
    path = tmp_path / "works.xml"
    path.write_text("<works><work><filename>x.jpg</filename></work></works>")
    work = load_works(path)[0]
    assert work == {"filename": "x.jpg"}

    image = ImageRecord(work)
    assert image.model == "Unknown Model"


def test_blank_exif_text(tmp_path):
    path = tmp_path / "works.xml"
    path.write_text("<works><work><exif><make>  </make><model/></exif></work></works>")
    work = load_works(path)[0]
    assert work["exif"] == {"make": "  ", "model": ""}
    assert ImageRecord(work).make == "Unknown Make"


def test_nested_works(tmp_path):
    path = tmp_path / "works.xml"
    path.write_text(
        "<export><page><work><id>1</id></work></page><page><work><id>2</id></work></page></export>"
    )
    assert [w["id"] for w in load_works(path)] == ["1", "2"]


def test_no_works(tmp_path):
    path = tmp_path / "works.xml"
    path.write_text("<works/>")
    assert load_works(path) == []


def test_unparsable(tmp_path):
    path = tmp_path / "works.xml"
    path.write_text("<works><work>")
    with pytest.raises(SourceError):
        load_works(path)
