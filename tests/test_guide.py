import pytest

from plant_palette.guide import DEFAULT_GUIDE, guide_text, load_guide


def test_bundled_guide_sections_and_tips():
    guide = load_guide()
    headings = [s["heading"] for s in guide["sections"]]
    assert headings == ["Introduction: Container Plants and Ecology", "Preamble", "General Guidance"]
    assert list(guide["sections"][2]["tips"]) == ["Containers", "Compost", "Watering", "Feeding", "Location"]
    assert "Denis J Vickers" in guide["credits"][0]


def test_guide_text_wraps_and_lists_tips():
    text = guide_text(load_guide(DEFAULT_GUIDE), width=60)
    lines = text.splitlines()
    assert all(len(line) <= 60 for line in lines)
    assert "General Tips:" in lines
    tips = [line for line in lines if line.startswith("  * ")]
    assert [t.split(":")[0] for t in tips] == [
        "  * Containers", "  * Compost", "  * Watering", "  * Feeding", "  * Location"
    ]
    assert text.endswith("Adapted into webapp by Marco Mak.\n")


def test_small_guide_file(tmp_path):
    path = tmp_path / "guide.yaml"
    path.write_text("title: Notes\nsections:\n  - heading: Watering\n    paragraphs: [Little and often.]\n",
                    encoding="utf-8")
    assert guide_text(load_guide(path)) == "Notes\n\nWatering\n--------\nLittle and often.\n"


def test_guide_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_guide(tmp_path / "nope.yaml")
    empty = tmp_path / "empty.yaml"
    empty.write_text("title: Nothing\n", encoding="utf-8")
    with pytest.raises(ValueError, match="no sections"):
        load_guide(empty)
