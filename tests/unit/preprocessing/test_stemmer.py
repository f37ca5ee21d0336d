"""Unit tests for the Snowball stemmer wrapper."""

import threading

import pytest

from blockthetweet.exceptions import ConfigLoadError
from blockthetweet.preprocessing.exceptions import StemmerLoadError
from blockthetweet.preprocessing.stemmer import Stemmer


def test_english_stems(stemmer):
    assert stemmer.stem("running") == "run"
    assert stemmer.stem("days") == "day"
    assert stemmer.stem("great") == "great"


def test_stem_is_deterministic(stemmer):
    words = ["blocking", "tweets", "generously", "happily"]
    
    assert [stemmer.stem(w) for w in words] == [stemmer.stem(w) for w in words]


def test_language_name_is_case_insensitive():
    assert Stemmer("English").language == "english"


def test_unknown_language_fails_at_construction():
    with pytest.raises(StemmerLoadError) as exc_info:
        Stemmer("klingon")
    
    assert isinstance(exc_info.value, ConfigLoadError)
    assert exc_info.value.details["language"] == "klingon"


def test_each_thread_gets_its_own_instance(stemmer):
    instances = []
    
    def worker():
        stemmer.stem("running")
        instances.append(stemmer._instance())
    
    threads = [threading.Thread(target=worker) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    
    main_instance = stemmer._instance()
    assert len({id(i) for i in instances}) == 3
    assert all(i is not main_instance for i in instances)


def test_concurrent_stemming_matches_sequential(stemmer):
    words = ["running", "days", "tweeted", "blocks"] * 50
    expected = [stemmer.stem(w) for w in words]
    results: dict[int, list[str]] = {}
    
    def worker(n: int):
        results[n] = [stemmer.stem(w) for w in words]
    
    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    
    assert all(r == expected for r in results.values())


def test_stemmer_does_not_fold_case(stemmer):
    assert stemmer.stem("École") == "École"
    assert stemmer.stem("ÉTÉ") == "ÉTÉ"
