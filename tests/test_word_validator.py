import pytest

from models.game import RejectionReason
from services.spell_checker import WordListSpellChecker
from services.word_validator import WordValidator, normalize_word

DICTIONARY = ["silkworm", "worms", "worm", "milk", "silk", "sow", "works", "wormsilk", "silky", "moor"]


def _validator(**kwargs) -> WordValidator:
    return WordValidator(WordListSpellChecker(DICTIONARY, "en"), language="en", **kwargs)


def test_accepts_valid_word_and_prepends_it():
    used = ["milk"]
    result = _validator().validate("worms", "silkworm", used)
    assert result.is_accepted
    assert result.reason is None
    assert used == ["worms", "milk"]


def test_candidate_is_normalized_before_checks():
    used = []
    result = _validator().validate("  WoRmS\n", "silkworm", used)
    assert result.is_accepted
    assert used == ["worms"]


@pytest.mark.parametrize("candidate,used,expected", [
    ("worms", ["worms"], RejectionReason.DUPLICATE_WORD),
    (" WORMS ", ["worms"], RejectionReason.DUPLICATE_WORD),
    ("silky", [], RejectionReason.NOT_POSSIBLE),
    ("moor", [], RejectionReason.NOT_POSSIBLE),  # root has a single 'o'
    ("mikl", [], RejectionReason.NOT_RECOGNIZED),
    ("sow", [], RejectionReason.TOO_SHORT),
    ("silkworm", [], RejectionReason.SAME_AS_ROOT),
])
def test_rejections(candidate, used, expected):
    before = list(used)
    result = _validator().validate(candidate, "silkworm", used)
    assert result.reason is expected
    assert not result.is_accepted
    assert used == before


def test_first_failing_check_wins():
    v = _validator()
    # duplicate and too short: originality is checked first
    assert v.validate("sow", "silkworm", ["sow"]).reason is RejectionReason.DUPLICATE_WORD
    # impossible and unknown: possibility is checked before the dictionary
    assert v.validate("zzz", "silkworm", []).reason is RejectionReason.NOT_POSSIBLE
    # unknown and too short: dictionary is checked before length
    assert v.validate("wok", "silkworm", []).reason is RejectionReason.NOT_RECOGNIZED


@pytest.mark.parametrize("candidate", ["", "   ", "\n\t"])
def test_empty_candidate_is_ignored(candidate):
    used = ["worm"]
    result = _validator().validate(candidate, "silkworm", used)
    assert result.is_ignored
    assert result.reason is None
    assert not result.is_accepted
    assert used == ["worm"]


def test_rejection_is_repeatable():
    v = _validator()
    used = ["worm"]
    first = v.validate("silky", "silkworm", used)
    second = v.validate("silky", "silkworm", used)
    assert first.reason is second.reason is RejectionReason.NOT_POSSIBLE
    assert used == ["worm"]


def test_rejection_carries_title_and_message():
    result = _validator().validate("silky", "silkworm", [])
    assert result.title == "Word not possible"
    assert result.message == "You cannot spell that word from silkworm"

    result = _validator().validate("sow", "silkworm", [])
    assert result.title == "Word too short"
    assert "4 letters" in result.message


def test_min_word_length_is_configurable():
    v = _validator(min_word_length=5)
    assert v.validate("worm", "silkworm", []).reason is RejectionReason.TOO_SHORT
    assert v.validate("worms", "silkworm", []).is_accepted


def test_anagram_mode_requires_all_letters():
    v = _validator(possible_mode="anagram")
    assert v.validate("worms", "silkworm", []).reason is RejectionReason.NOT_POSSIBLE
    assert v.validate("wormsilk", "silkworm", []).is_accepted
    assert v.validate("silkworm", "silkworm", []).reason is RejectionReason.SAME_AS_ROOT


def test_unknown_possible_mode_is_rejected():
    with pytest.raises(ValueError):
        _validator(possible_mode="fuzzy")


@pytest.mark.parametrize("word,root,expected", [
    ("worm", "silkworm", True),
    ("silk", "silkworm", True),
    ("llama", "lamb", False),
    ("", "silkworm", True),
    ("silkworms", "silkworm", False),
])
def test_is_possible_subset(word, root, expected):
    assert _validator().is_possible(word, root) is expected


def test_normalize_word():
    assert normalize_word("  Hello World \n") == "hello world"
    assert normalize_word("") == ""


def test_explicit_zero_min_word_length_is_kept():
    v = _validator(min_word_length=0)
    assert v.min_word_length == 0
    assert v.validate("sow", "silkworm", []).is_accepted
