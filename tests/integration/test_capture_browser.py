"""
Integration tests: capture elements from real documents with headless Chromium.
"""

from PIL import Image

from vizcap_core import capture as capture_module
from vizcap_core.runner import run
from vizcap_core.screenshots import expected_size
from vizcap_core.targets import CaptureTarget


POSTERS = """
<div id="poster-dark" style="width:400px;height:300px;background:#111"></div>
<div id="visual-prng" style="width:120px;height:80px;background:#0a0"></div>
<div id="other-thing" style="width:50px;height:50px;background:#00f"></div>
"""


def _names(directory):
    return sorted(p.name for p in directory.iterdir())


def test_captures_matching_elements(capture_config, write_article):
    doc = write_article("01-posters.html", POSTERS)

    report = run([CaptureTarget.from_path(doc)], capture_config)

    out = doc.parent / "images" / "01-posters"
    assert _names(out) == ["poster-dark.png", "visual-prng.png"]
    assert report.captured_count == 2
    assert report.skipped_count == 0


def test_image_size_matches_box_times_scale(capture_config, write_article):
    doc = write_article("02-sizes.html", POSTERS)

    run([CaptureTarget.from_path(doc)], capture_config)

    out = doc.parent / "images" / "02-sizes"
    with Image.open(out / "poster-dark.png") as img:
        assert img.size == (800, 600)
    with Image.open(out / "visual-prng.png") as img:
        assert img.size == (240, 160)


def test_fractional_boxes_round_to_nearest_pixel(capture_config, write_article):
    doc = write_article("02-fractional.html", """
<div style="position:relative">
  <div id="visual-quarter" style="position:absolute;left:0;top:0;width:100.25px;height:40.5px;background:#0a0"></div>
  <div id="visual-offset" style="position:absolute;left:0.5px;top:60.5px;width:100px;height:30px;background:#00f"></div>
</div>
""")

    report = run([CaptureTarget.from_path(doc)], capture_config)

    out = doc.parent / "images" / "02-fractional"
    with Image.open(out / "visual-quarter.png") as img:
        assert img.size == expected_size(100.25, 40.5, 2) == (201, 81)
    with Image.open(out / "visual-offset.png") as img:
        assert img.size == expected_size(100, 30, 2) == (200, 60)
    assert [c.size for c in report.documents[0].captured] == [(201, 81), (200, 60)]


def test_zero_matches_leaves_empty_directory(capture_config, write_article):
    doc = write_article("03-empty.html", '<p id="intro">nothing to capture</p>')

    report = run([CaptureTarget.from_path(doc)], capture_config)

    out = doc.parent / "images" / "03-empty"
    assert out.is_dir()
    assert _names(out) == []
    assert report.documents[0].captures == []


def test_overlapping_elements_cropped_independently(capture_config, write_article):
    doc = write_article("04-overlap.html", """
<div style="position:relative">
  <div id="visual-back" style="position:absolute;left:0;top:0;width:200px;height:200px;background:rgb(255,0,0)"></div>
  <div id="visual-front" style="position:absolute;left:100px;top:100px;width:50px;height:50px;background:rgb(0,0,255)"></div>
</div>
""")

    run([CaptureTarget.from_path(doc)], capture_config)

    out = doc.parent / "images" / "04-overlap"
    with Image.open(out / "visual-front.png") as img:
        rgb = img.convert("RGB")
        assert rgb.size == (100, 100)
        assert rgb.getpixel((50, 50)) == (0, 0, 255)
    with Image.open(out / "visual-back.png") as img:
        rgb = img.convert("RGB")
        assert rgb.size == (400, 400)
        assert rgb.getpixel((10, 10)) == (255, 0, 0)


def test_element_removed_after_discovery(capture_config, write_article, monkeypatch):
    doc = write_article("05-vanish.html", POSTERS)
    discover = capture_module.discover_elements

    async def discover_then_remove(page, patterns):
        elements = await discover(page, patterns)
        await page.evaluate("() => document.getElementById('poster-dark').remove()")
        return elements

    monkeypatch.setattr(capture_module, "discover_elements", discover_then_remove)

    report = run([CaptureTarget.from_path(doc)], capture_config)

    document = report.documents[0]
    assert [c.element.id for c in document.not_found] == ["poster-dark"]
    assert [c.element.id for c in document.captured] == ["visual-prng"]
    assert _names(doc.parent / "images" / "05-vanish") == ["visual-prng.png"]


def test_rerun_is_idempotent(capture_config, write_article):
    doc = write_article("06-rerun.html", POSTERS)
    target = CaptureTarget.from_path(doc)
    out = doc.parent / "images" / "06-rerun"

    run([target], capture_config)
    first = {name: (out / name).stat().st_size for name in _names(out)}
    run([target], capture_config)
    second = {name: (out / name).stat().st_size for name in _names(out)}

    assert first.keys() == second.keys()
    assert first == second


def test_documents_processed_sequentially(capture_config, write_article):
    a = write_article("07-a.html", '<div id="logo-a" style="width:10px;height:10px;background:#000"></div>')
    b = write_article("08-b.html", '<div id="brand-b" style="width:10px;height:10px;background:#000"></div>')

    report = run([CaptureTarget.from_path(a), CaptureTarget.from_path(b)], capture_config)

    assert [d.target.base_name for d in report.documents] == ["07-a", "08-b"]
    assert _names(a.parent / "images" / "07-a") == ["logo-a.png"]
    assert _names(b.parent / "images" / "08-b") == ["brand-b.png"]
