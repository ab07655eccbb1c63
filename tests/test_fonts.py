from lifegrid.fonts import caption_family, font_candidates, has_true_bold, measure_text


def test_caption_family():
    assert caption_family("Playfair Display") == "Playfair Display"
    assert caption_family("monospace") == "monospace"
    assert caption_family("Comic Sans") == "serif"
    assert caption_family("system") == "serif"
    assert caption_family(None) == "serif"


def test_candidates_prefer_fonts_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("LIFEGRID_FONTS_DIR", str(tmp_path))
    paths = font_candidates("Lora", "italic")
    assert paths[0] == (tmp_path / "Lora-Italic.ttf", True)
    # Regular faces come last and are not exact matches
    assert paths[-1][1] is False


def test_measure_grows_with_text():
    assert measure_text("", 20) == 0.0
    short = measure_text("12", 20)
    long = measure_text("1234", 20)
    assert 0 < short < long


def test_regular_weight_needs_no_bold():
    assert has_true_bold(20, 400) is True
