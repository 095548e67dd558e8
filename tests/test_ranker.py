from conftest import outcome
from lanprobe.core.models import ProbeStatus
from lanprobe.core.ranker import PriorityRanker


def describe(ranked):
    return [(s.outcome.port, s.outcome.scheme.value, s.score) for s in ranked]


def test_closed_outcomes_are_dropped():
    ranked = PriorityRanker().rank([
        outcome(443, "https", "OPEN"),
        outcome(8080, "https", "SSL_ANOMALY"),
        outcome(8888, "https", "CLOSED"),
    ])
    assert describe(ranked) == [(443, "https", 113), (8080, "https", 62)]


def test_port_priority_breaks_equal_status():
    ranked = PriorityRanker().rank([
        outcome(8888, "https", "OPEN"),
        outcome(8080, "https", "OPEN"),
    ])
    assert describe(ranked) == [(8080, "https", 112), (8888, "https", 111)]


def test_clean_answer_beats_tls_anomaly():
    ranked = PriorityRanker().rank([
        outcome(443, "https", "SSL_ANOMALY"),
        outcome(8888, "http", "OPEN"),
    ])
    assert describe(ranked) == [(8888, "http", 101), (443, "https", 63)]


def test_https_beats_http_on_same_port():
    ranked = PriorityRanker().rank([
        outcome(8080, "http", "OPEN"),
        outcome(8080, "https", "OPEN"),
    ])
    assert describe(ranked) == [(8080, "https", 112), (8080, "http", 102)]


def test_ties_keep_input_order():
    first = outcome(9000, "https", "OPEN")
    second = outcome(9001, "https", "OPEN")
    ranker = PriorityRanker()
    assert [s.outcome for s in ranker.rank([first, second])] == [first, second]
    assert [s.outcome for s in ranker.rank([second, first])] == [second, first]
    assert ranker.score(first) == ranker.score(second) == 110


def test_nothing_reachable():
    ranker = PriorityRanker()
    assert ranker.rank([]) == []
    assert ranker.rank([outcome(443, "https", "CLOSED"), outcome(8080, "http", "CLOSED")]) == []
    assert ranker.best([outcome(443, "https", "CLOSED")]) is None


def test_custom_weights():
    ranker = PriorityRanker(port_priority={8888: 50})
    best = ranker.best([outcome(443, "https", "OPEN"), outcome(8888, "https", "OPEN")])
    assert best.outcome.port == 8888
    assert best.score == 160
    assert best.status is ProbeStatus.OPEN
