import pytest

from ruletok.errors import UnsupportedLanguageError
from ruletok.languages import resolve_language_pack, supported_languages


def test_supported_languages() -> None:
    assert supported_languages() == ["de", "en", "es", "eu", "fr", "gl", "it", "nl", "pl"]


def test_resolve_language_pack_alias() -> None:
    assert resolve_language_pack("en-US").code == "en"
    assert resolve_language_pack("EN").code == "en"
    assert resolve_language_pack("es_MX").code == "es"


@pytest.mark.parametrize("tag", ["xx", "ko", "english!", "", "e"])
def test_unsupported_language_raises(tag: str) -> None:
    with pytest.raises(UnsupportedLanguageError) as excinfo:
        resolve_language_pack(tag)

    assert excinfo.value.language == tag
    assert isinstance(excinfo.value, ValueError)


def test_english_abbreviations() -> None:
    pack = resolve_language_pack("en")

    assert pack.is_abbreviation("Mr")
    assert pack.is_abbreviation("e.g")
    assert pack.is_abbreviation("N.Y.C")
    assert pack.is_abbreviation("C", following=" elegans")
    assert not pack.is_abbreviation("I", following=" Then")
    assert not pack.is_abbreviation("J")
    assert not pack.is_abbreviation("Smith")
    assert not pack.is_abbreviation("a")


def test_language_specific_abbreviations() -> None:
    assert resolve_language_pack("de").is_abbreviation("z.B")
    assert resolve_language_pack("es").is_abbreviation("Sra")
    assert not resolve_language_pack("es").is_abbreviation("Mrs")


def test_clitic_patterns_by_language() -> None:
    assert resolve_language_pack("en").clitic_patterns()
    assert resolve_language_pack("fr").clitic_patterns()[0].search("l'homme") is not None
    assert resolve_language_pack("it").clitic_patterns()[0].search("dell'anno") is not None
    assert resolve_language_pack("de").clitic_patterns() == ()
