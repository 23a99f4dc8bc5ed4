from releasekit.common.strings.layout import truncate, wrap_words
from releasekit.common.strings.units import format_duration, format_size, kbps


def test_truncate_short_text_untouched():
    assert truncate("hello", 10) == "hello"


def test_truncate_adds_ellipsis():
    assert truncate("abcdefghij", 8) == "abcde..."
    assert len(truncate("abcdefghij", 8)) == 8


def test_truncate_counts_characters_not_bytes():
    text = "éèàùç" * 4  # 20 chars, 40 bytes in UTF-8
    assert truncate(text, 20) == text
    out = truncate(text, 10)
    assert out == "éèàùçéè..."


def test_wrap_words_never_splits_words():
    lines = wrap_words("the quick brown fox jumps over the lazy dog", 10)
    assert lines == ["the quick", "brown fox", "jumps over", "the lazy", "dog"]
    assert all(len(line) <= 10 for line in lines)


def test_wrap_words_long_word_on_its_own_line():
    assert wrap_words("a supercalifragilistic b", 5) == ["a", "supercalifragilistic", "b"]


def test_wrap_words_empty():
    assert wrap_words("   ", 10) == []


def test_format_size():
    assert format_size(512) == "512 B"
    assert format_size(1536) == "1.50 KiB"
    assert format_size(1024 ** 3) == "1.00 GiB"


def test_format_duration():
    assert format_duration(7500) == "2 h 5 min"
    assert format_duration(2700) == "45 min"
    assert format_duration(0) == "0 min"


def test_kbps_truncates():
    assert kbps(128_999) == 128
    assert kbps(999) == 0
