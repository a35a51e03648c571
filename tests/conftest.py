# tests/conftest.py
import logging

import pytest

from trie_autocorrector.core.trie import PrefixTree


@pytest.fixture(autouse=True)
def _reset_package_logger():
    # configure_logging() stops propagation; caplog needs it back
    yield
    pkg = logging.getLogger("trie_autocorrector")
    for h in list(pkg.handlers):
        pkg.removeHandler(h)
        h.close()
    pkg.propagate = True
    pkg.setLevel(logging.NOTSET)


@pytest.fixture
def cat_tree():
    """cat x2, cats, car"""
    t = PrefixTree()
    t.insert("cat")
    t.insert("cat")
    t.insert("cats")
    t.insert("car")
    return t


@pytest.fixture
def dictionary_file(tmp_path):
    p = tmp_path / "dictionary.txt"
    p.write_text(
        "Hello, hello HELLO world!\n"
        "the quick brown fox 123\n"
        "spelling correct   programming\n"
        "cat cat cats car\n",
        encoding="utf-8",
    )
    return p
