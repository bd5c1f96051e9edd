"""Tests for correction synthesis."""

from agri_verify.correction.synthesizer import CORRECTION_DELIMITER, add_corrections


def test_no_corrections_returns_text_unchanged():
    text = "Rice yields about 4000 kg per hectare."
    assert add_corrections(text, []) is text


def test_corrections_appended_after_original():
    text = "Rice is a rabi crop. It matures in 60 days."
    c1 = "Rice is actually a kharif crop"
    c2 = "Actual duration for Rice is 150 days"
    result = add_corrections(text, [c1, c2])
    assert result.startswith(text)
    tail = result[len(text):]
    assert tail.startswith(CORRECTION_DELIMITER)
    assert c1 in tail
    assert c2 in tail
    assert tail.index(c1) < tail.index(c2)
    assert result == text + "\n\n**Important Note:** " + c1 + " " + c2
