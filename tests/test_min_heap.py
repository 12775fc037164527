import pytest

from graphalgos.min_heap import HeapError, MinHeap


def _heap(capacity, items):
    heap = MinHeap(capacity)
    for vertex, priority in items:
        heap.insert(vertex, priority)
    return heap


def _drain(heap):
    order = []
    while not heap.is_empty():
        order.append(heap.extract_min())
    return order


@pytest.mark.parametrize(
    "capacity, items, expected",
    [
        (5, [(0, 10), (1, 5), (2, 8)], [1, 2, 0]),
        (
            6,
            [(0, 60), (1, 10), (2, 30), (3, 20), (4, 40), (5, 50)],
            [1, 3, 2, 4, 5, 0],
        ),
    ],
)
def test_extraction_order(capacity, items, expected):
    heap = _heap(capacity, items)
    assert _drain(heap) == expected
    assert heap.is_empty()


def test_decrease_key():
    heap = _heap(3, [(0, 10), (1, 15), (2, 20)])
    heap.decrease_key(2, 5)
    assert heap.extract_min() == 2


def test_contains_and_priority():
    heap = _heap(2, [(0, 4), (1, 9)])
    assert (0 in heap, 1 in heap) == (True, True)
    assert heap.priority(0) == 4


def test_decrease_key_on_missing_vertex_does_nothing():
    heap = _heap(2, [(0, 5)])
    heap.decrease_key(1, 1)
    assert 1 not in heap
    assert heap.priority(0) == 5
    assert len(heap) == 1


def test_contains_false_after_extract():
    heap = _heap(3, [(0, 7), (1, 4)])
    assert 1 in heap
    assert heap.extract_min() == 1
    assert 1 not in heap


@pytest.mark.parametrize("new_priority", [7, 5])
def test_decrease_key_ignores_higher_or_equal_priority(new_priority):
    heap = _heap(2, [(0, 5)])
    heap.decrease_key(0, new_priority)
    assert heap.priority(0) == 5


def test_is_empty_throughout_operations():
    heap = MinHeap(3)
    states = [heap.is_empty()]
    heap.insert(0, 3)
    states.append(heap.is_empty())
    heap.extract_min()
    states.append(heap.is_empty())
    assert states == [True, False, True]


@pytest.mark.parametrize(
    "capacity, items, extracted, action, expected_len",
    [
        (2, [], 0, lambda h: h.extract_min(), 0),
        (2, [(0, 5)], 0, lambda h: h.priority(1), 1),
        (2, [(0, 1), (1, 2)], 0, lambda h: h.insert(2, 3), 2),
        (2, [(0, 10)], 1, lambda h: h.priority(0), 0),
    ],
    ids=["extract-empty", "priority-missing", "overflow", "priority-removed"],
)
def test_errors(capacity, items, extracted, action, expected_len):
    heap = _heap(capacity, items)
    for _ in range(extracted):
        heap.extract_min()
    with pytest.raises(HeapError):
        action(heap)
    assert len(heap) == expected_len
    assert heap.is_empty() == (expected_len == 0)


def test_len_and_errors_are_runtime_errors():
    heap = _heap(1, [(0, 1)])
    assert len(heap) == 1
    with pytest.raises(RuntimeError):
        heap.insert(1, 2)