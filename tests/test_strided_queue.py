import pytest

from tremolo.strided_queue import StridedQueue


def test_push_back():
    testee = StridedQueue(5)
    testee.set_stride(3)

    testee.push_back([1, 0, 0, 2, 0, 0, 3, 0, 0, 4, 0, 0, 5])
    assert [testee.at(i) for i in range(5)] == [1, 2, 3, 4, 5]

    testee.push_back([0, 0, 6, 0, 0, 7, 0])
    assert [testee.at(i) for i in range(5)] == [3, 4, 5, 6, 7]

    testee.push_back([0, 1, 0, 0, 2, 0, 0, 3, 0, 0, 4, 0, 0, 5, 0, 0])
    assert [testee.at(i) for i in range(5)] == [1, 2, 3, 4, 5]

    testee.push_back([6])
    assert [testee.at(i) for i in range(5)] == [2, 3, 4, 5, 6]

    testee.push_back([0])
    assert [testee.at(i) for i in range(5)] == [2, 3, 4, 5, 6]

    testee.push_back([0, 7])
    assert [testee.at(i) for i in range(5)] == [3, 4, 5, 6, 7]

    testee.push_back([0])
    testee.push_back([0])
    testee.push_back([8])
    testee.push_back([0])
    testee.push_back([0])
    testee.push_back([9])
    assert [testee.at(i) for i in range(5)] == [5, 6, 7, 8, 9]

    testee.push_back(
        [0, 0, 10, 0, 0, 20, 0, 0, 30, 0, 0, 40, 0, 0, 50,
         0, 0, 60, 0, 0, 70, 0, 0, 80, 0, 0, 90, 0]
    )
    assert [testee.at(i) for i in range(5)] == [50, 60, 70, 80, 90]


def test_initial_contents_are_zeros():
    testee = StridedQueue(4)
    assert list(testee) == [0.0, 0.0, 0.0, 0.0]
    assert len(testee) == 4


def test_stride_one_keeps_every_sample():
    testee = StridedQueue(3)
    testee.push_back([1, 2])
    assert list(testee) == [0.0, 1, 2]
    testee.push_back([3, 4])
    assert list(testee) == [2, 3, 4]
    assert testee.front() == 2


def test_push_back_zeros_shifts_in_zeros():
    testee = StridedQueue(5)
    testee.push_back([1, 2, 3, 4, 5])
    testee.push_back_zeros(2)
    assert list(testee) == [3, 4, 5, 0.0, 0.0]


def test_push_back_zeros_more_than_size_clears_everything():
    testee = StridedQueue(3)
    testee.push_back([1, 2, 3])
    testee.push_back_zeros(10)
    assert list(testee) == [0.0, 0.0, 0.0]


def test_set_stride_clamps_to_one():
    testee = StridedQueue(3)
    testee.set_stride(0)
    assert testee.stride == 1


def test_at_out_of_range_raises():
    testee = StridedQueue(3)
    with pytest.raises(IndexError):
        testee.at(3)
    with pytest.raises(IndexError):
        testee.at(-1)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        StridedQueue(0)