import threading

from ecfmp.api import ApiElementCollection, StringIdentifierApiElementCollection
from ecfmp.fir import FlightInformationRegion

EGTT = FlightInformationRegion(1, "EGTT", "London")
EGPX = FlightInformationRegion(2, "EGPX", "Scottish")


def make_collection():
    return StringIdentifierApiElementCollection([EGTT, EGPX])


def test_count_and_len():
    collection = make_collection()
    assert collection.count() == 2
    assert len(collection) == 2


def test_empty_collection():
    collection = ApiElementCollection()
    assert collection.count() == 0
    assert collection.get(1) is None
    assert list(collection) == []


def test_get_by_id():
    collection = make_collection()
    assert collection.get(1) is EGTT
    assert collection.get(2) is EGPX
    assert collection.get(3) is None


def test_contains_id():
    collection = make_collection()
    assert 1 in collection
    assert 3 not in collection


def test_first_with_predicate():
    collection = make_collection()
    assert collection.first(lambda fir: fir.name == "Scottish") is EGPX
    assert collection.first(lambda fir: fir.name == "Nowhere") is None


def test_contains_where():
    collection = make_collection()
    assert collection.contains_where(lambda fir: fir.identifier == "EGTT") is True
    assert collection.contains_where(lambda fir: fir.identifier == "LFFF") is False


def test_iteration_yields_all_elements():
    collection = make_collection()
    assert sorted(fir.id for fir in collection) == [1, 2]


def test_contains_identifier():
    collection = make_collection()
    assert collection.contains_identifier("EGPX") is True
    assert collection.contains_identifier("LFFF") is False


def test_first_by_identifier():
    collection = make_collection()
    assert collection.first_by_identifier("EGTT") is EGTT
    assert collection.first_by_identifier("LFFF") is None


def test_later_element_with_same_id_wins():
    replacement = FlightInformationRegion(1, "EGTX", "Other")
    collection = ApiElementCollection([EGTT, replacement])
    assert collection.count() == 1
    assert collection.get(1) is replacement


def test_concurrent_reads_are_consistent():
    collection = StringIdentifierApiElementCollection([EGTT, EGPX])
    counts = []

    def reader():
        counts.extend(collection.count() for _ in range(100))

    threads = [threading.Thread(target=reader) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(counts) == 400
    assert set(counts) == {2}
    assert collection.count() == 2