import pytest

from tenant_store.util import camel_case, derive_prefix, normalize_identifier, split_words, upper_snake_case


@pytest.mark.parametrize("text,expected", [
    ("memes galore", "memesGalore"),
    ("Memes Galore", "memesGalore"),
    ("memes_galore", "memesGalore"),
    ("  memes--galore ", "memesGalore"),
    ("MEMES_GALORE", "memesGalore"),
    ("downloader", "downloader"),
    ("HTTPServer", "httpServer"),
    ("cache2", "cache2"),
])
def test_camel_case(text, expected):
    assert camel_case(text) == expected


@pytest.mark.parametrize("text,expected", [
    ("memesGalore", "MEMES_GALORE"),
    ("downloader", "DOWNLOADER"),
    ("httpServer", "HTTP_SERVER"),
    ("cache2", "CACHE_2"),
])
def test_upper_snake_case(text, expected):
    assert upper_snake_case(text) == expected


def test_split_words_handles_acronyms_and_digits():
    assert split_words("parseHTTPResponse2x") == ["parse", "HTTP", "Response", "2", "x"]


def test_derive_prefix_only_uses_safe_characters():
    prefix = derive_prefix("weird #name/with:stuff")
    assert prefix == "WEIRD_NAME_WITH_STUFF"
    assert all(c.isupper() or c.isdigit() or c == "_" for c in prefix)


def test_normalize_identifier_rejects_empty():
    with pytest.raises(ValueError):
        normalize_identifier("  #!  ")
