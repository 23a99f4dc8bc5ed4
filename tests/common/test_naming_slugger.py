import pytest

from releasekit.common.naming.slugger import sanitize_title


def test_sanitize_title_basic():
    assert sanitize_title("Spider-Man: No Way Home") == "SpiderMan.No.Way.Home"


def test_sanitize_title_substitutions():
    assert sanitize_title("Fast & Furious 6") == "Fast.and.Furious.6"
    assert sanitize_title("Meet @ Noon") == "Meet.at.Noon"


def test_sanitize_title_strips_punctuation_and_dots():
    assert sanitize_title("  What's Up, Doc?  ") == "Whats.Up.Doc"
    assert sanitize_title("...And Justice (For All)!") == "And.Justice.For.All"
    assert sanitize_title("Face/Off") == "FaceOff"


def test_sanitize_title_empty():
    assert sanitize_title("") == ""
    assert sanitize_title(None) == ""


@pytest.mark.parametrize(
    "title",
    [
        "Spider-Man: No Way Home",
        "Mission: Impossible - Dead Reckoning Part One",
        "Amélie",
        "Dr. Strangelove or: How I Learned to Stop Worrying",
        "[REC]²",
        "  .. weird ..  title ",
    ],
)
def test_sanitize_title_idempotent(title):
    once = sanitize_title(title)
    assert sanitize_title(once) == once
