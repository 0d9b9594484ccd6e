import pytest

from dslab.heaps import MaxHeap, MinHeap

SAMPLES = [
    [],
    [7],
    [5, 3, 8, 1],
    [10, 4, 15, 2],
    [4, 4, 1, 1, 9, -3, 0, 9],
    list(range(20, 0, -1)),
]


def test_min_heapsort_source_example():
    assert MinHeap([5, 3, 8, 1]).heapsort() == [1, 3, 5, 8]


def test_max_heapsort_source_example():
    assert MaxHeap([10, 4, 15, 2]).heapsort() == [15, 10, 4, 2]


@pytest.mark.parametrize("values", SAMPLES)
def test_min_heapsort_sorts_ascending(values):
    heap = MinHeap(values)
    assert heap.heapsort() == sorted(values)
    assert len(heap) == 0


@pytest.mark.parametrize("values", SAMPLES)
def test_max_heapsort_sorts_descending(values):
    heap = MaxHeap(values)
    assert heap.heapsort() == sorted(values, reverse=True)
    assert len(heap) == 0


def test_extract_min_interleaved_with_insert():
    heap = MinHeap([6, 2, 9])
    assert heap.extract_min() == 2
    heap.insert(1)
    heap.insert(7)
    assert len(heap) == 4
    assert heap.extract_min() == 1
    assert heap.heapsort() == [6, 7, 9]


def test_extract_max_interleaved_with_insert():
    heap = MaxHeap([6, 2, 9])
    assert heap.extract_max() == 9
    heap.insert(11)
    assert heap.extract_max() == 11
    assert heap.heapsort() == [6, 2]


def test_extract_from_empty_heap_raises():
    with pytest.raises(IndexError):
        MinHeap().extract_min()
    with pytest.raises(IndexError):
        MaxHeap().extract_max()


def test_len_counts_inserts():
    heap = MinHeap()
    for count, value in enumerate([3, 3, 3], start=1):
        heap.insert(value)
        assert len(heap) == count