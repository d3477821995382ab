import pytest

from rallykit.codriver import (
    CodriverSigns,
    CodriverUserConfig,
    CodriverVoice,
    match_notes,
)


VOCAB = {"hardleft": "A", "overjump": "B", "hard": "C"}


def test_match_notes_prefers_longest_run():
    assert match_notes("hard left over jump", VOCAB) == ["A", "B"]


def test_match_notes_skips_unknown_words():
    assert match_notes("foo hard bar", VOCAB) == ["C"]


def test_match_notes_empty():
    assert match_notes("   ", VOCAB) == []


def test_default_user_config():
    uc = CodriverUserConfig()
    assert (uc.life, uc.scale, uc.posx, uc.posy) == pytest.approx((3.0, 0.2, 0.0, 0.45))


def test_signs_alpha_full_then_fading_then_gone():
    signs = CodriverSigns(VOCAB)
    signs.set("hard left", 10.0)
    assert signs.current == ["A"]
    assert signs.alpha(11.0) == 1.0
    fading = signs.alpha(10.0 + signs.uc.life + 0.25)
    later = signs.alpha(10.0 + signs.uc.life + 0.75)
    assert 0.0 < later < fading < 1.0
    assert signs.alpha(10.0 + signs.uc.life + 2.0) is None
    assert signs.current == []


def test_signs_without_notes_show_nothing():
    signs = CodriverSigns(VOCAB)
    assert signs.alpha(0.0) is None
    assert signs.layout(0.0) == []


def test_layout_is_centered_and_evenly_spaced():
    uc = CodriverUserConfig(scale=0.3, posx=0.1, posy=0.2)
    signs = CodriverSigns(VOCAB, uc)
    signs.set("hard left over jump", 0.0)
    placed = signs.layout(0.5)
    assert [p[0] for p in placed] == ["A", "B"]
    (_, x0, y0, s0, a0), (_, x1, y1, s1, a1) = placed
    assert x0 + x1 == pytest.approx(2 * uc.posx)
    assert x1 - x0 == pytest.approx(2 * uc.scale)
    assert y0 == y1 == uc.posy
    assert s0 == s1 == uc.scale
    assert a0 == a1 == 1.0


def test_voice_plays_words_in_order():
    played = []
    voice = CodriverVoice(VOCAB, 0.7, lambda s, v: played.append((s, v)))
    thread = voice.say("hard left over jump")
    thread.join(timeout=5)
    assert played == [("A", 0.7), ("B", 0.7)]


def test_voice_without_words_is_silent():
    played = []
    voice = CodriverVoice({}, 1.0, lambda s, v: played.append(s))
    assert voice.say("hard left") is None
    assert played == []