# tests/test_corrector.py
# AutoCorrector: dictionary loading, normalization boundary, statistics

import logging

import pytest

from trie_autocorrector.core.corrector import AutoCorrector
from trie_autocorrector.utils.config_manager import Config


def test_load_dictionary_normalizes_tokens(dictionary_file):
    ac = AutoCorrector()
    count = ac.load_dictionary(dictionary_file)
    # "123" normalizes to nothing and is skipped
    assert count == 15
    assert ac.loaded
    assert ac.tree.frequency("hello") == 3
    assert ac.tree.frequency("cat") == 2
    assert ac.is_correct("World")
    assert not ac.tree.search("123")


def test_constructor_loads_dictionary(dictionary_file):
    ac = AutoCorrector(dictionary_file)
    assert ac.word_count == 12


def test_missing_dictionary_warns_and_stays_usable(tmp_path, caplog):
    missing = tmp_path / "nope.txt"
    with caplog.at_level(logging.WARNING, logger="trie_autocorrector"):
        ac = AutoCorrector(missing)
    assert ac.word_count == 0
    assert not ac.loaded
    assert "Could not open dictionary file" in caplog.text
    assert ac.correct("anything") == []


def test_directory_as_dictionary_is_not_fatal(tmp_path):
    ac = AutoCorrector()
    assert ac.load_dictionary(tmp_path) == 0
    assert ac.word_count == 0


def test_correct_exact_and_fuzzy(dictionary_file):
    ac = AutoCorrector(dictionary_file)
    assert ac.correct("Hello!") == ["hello"]
    assert ac.correct("wrold") == ["world"]
    assert ac.correct("cot", max_dist=1) == ["cat"]
    assert ac.correct("speling") == ["spelling"]
    assert ac.correct("zzzzzz") == []


def test_correct_drops_tokens_without_letters(dictionary_file):
    ac = AutoCorrector(dictionary_file)
    assert ac.correct("1234") == []
    assert ac.correct("") == []
    # nothing reached the tree, nothing recorded
    assert ac.stats.total_queries == 0


def test_load_words_and_add_word():
    ac = AutoCorrector()
    assert ac.load_words(["Alpha", "beta", "42", "alpha"]) == 3
    assert ac.word_count == 2
    assert ac.add_word("Gamma.")
    assert not ac.add_word("...")
    assert ac.is_correct("gamma")


def test_stats_are_recorded(dictionary_file):
    ac = AutoCorrector(dictionary_file)
    ac.correct("hello")
    ac.correct("wrold")
    ac.correct("zzzzzz")
    s = ac.stats.summary()
    assert s["total_queries"] == 3
    assert s["answered"] == 2
    assert s["exact_hits"] == 1
    assert s["success_rate"] == pytest.approx(66.67)
    assert s["avg_latency_ms"] >= 0


def test_prune_flag_gives_same_answers(dictionary_file):
    plain = AutoCorrector(dictionary_file)
    pruned = AutoCorrector(dictionary_file, prune=True)
    for q in ("wrold", "helo", "quik", "brwn", "programing", "ct", "xyz"):
        assert pruned.correct(q) == plain.correct(q)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        AutoCorrector(max_dist=-1)
    with pytest.raises(ValueError):
        AutoCorrector(max_suggestions=0)


def test_from_config(dictionary_file):
    cfg = Config()
    cfg.update(max_dist=1, max_suggestions=2, prune=True)
    ac = AutoCorrector.from_config(cfg, dictionary_file)
    assert ac.max_dist == 1
    assert ac.max_suggestions == 2
    assert ac.prune
    assert ac.correct("cot") == ["cat"]


def test_check_reports_exact_hits(dictionary_file):
    ac = AutoCorrector(dictionary_file)
    assert ac.check("Hello!") == (["hello"], True)
    assert ac.check("wrold") == (["world"], False)
    assert ac.check("42") == ([], False)
    assert ac.stats.exact_hits == 1


def test_repr_survives_rejected_arguments():
    ac = AutoCorrector.__new__(AutoCorrector)
    with pytest.raises(ValueError):
        ac.__init__(max_dist=-1)
    assert "words=0" in repr(ac)
    with pytest.raises(ValueError):
        ac.__init__(max_suggestions=0)
    assert "AutoCorrector(" in repr(ac)


def test_negative_bound_per_query_is_not_fatal(dictionary_file):
    ac = AutoCorrector(dictionary_file)
    assert ac.correct("hello", max_dist=-1) == ["hello"]
    assert ac.correct("wrold", max_dist=-1) == []
