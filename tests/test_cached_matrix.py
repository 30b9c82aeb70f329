import threading

import numpy as np

from cachematrix.model import CachedMatrix, SynchronizedCachedMatrix


def test_create_holds_value_without_inverse(diagonal_matrix):
    cached = CachedMatrix(diagonal_matrix)

    assert cached.get_value() is diagonal_matrix
    assert cached.get_inverse() is None
    assert not cached.has_inverse
    assert cached.generation == 0


def test_create_keeps_input_as_given():
    rows = [[4, 7], [2, 6]]
    cached = CachedMatrix(rows)

    assert cached.get_value() is rows


def test_default_is_one_by_one_nan_matrix():
    cached = CachedMatrix()

    value = cached.get_value()
    assert value.shape == (1, 1)
    assert np.isnan(value[0, 0])


def test_set_inverse_is_stored_without_validation(diagonal_matrix):
    cached = CachedMatrix(diagonal_matrix)
    bogus = np.zeros((2, 2))

    cached.set_inverse(bogus)

    assert cached.get_inverse() is bogus
    assert cached.has_inverse


def test_set_value_clears_inverse(diagonal_matrix):
    cached = CachedMatrix(diagonal_matrix)
    cached.set_inverse(np.linalg.inv(diagonal_matrix))
    replacement = np.identity(2)

    cached.set_value(replacement)

    assert cached.get_value() is replacement
    assert cached.get_inverse() is None
    assert cached.generation == 1


def test_set_value_with_equal_matrix_still_clears_inverse(diagonal_matrix):
    cached = CachedMatrix(diagonal_matrix)
    cached.set_inverse(np.linalg.inv(diagonal_matrix))

    cached.set_value(diagonal_matrix.copy())

    assert cached.get_inverse() is None


def test_generation_counts_replacements(diagonal_matrix):
    cached = CachedMatrix(diagonal_matrix)
    for _ in range(3):
        cached.set_value(diagonal_matrix)

    assert cached.generation == 3


def test_repr_reports_cache_state(diagonal_matrix):
    cached = CachedMatrix(diagonal_matrix)
    assert repr(cached) == "CachedMatrix(generation=0, cached=False)"

    cached.set_inverse(np.identity(2))
    assert repr(cached) == "CachedMatrix(generation=0, cached=True)"


def test_synchronized_container_has_same_contract(diagonal_matrix):
    cached = SynchronizedCachedMatrix(diagonal_matrix)
    cached.set_inverse(np.identity(2))

    cached.set_value(np.identity(2))

    assert cached.get_inverse() is None
    assert cached.generation == 1


def test_synchronized_set_value_waits_for_lock(diagonal_matrix):
    cached = SynchronizedCachedMatrix(diagonal_matrix)
    done = threading.Event()

    def replace():
        cached.set_value(np.identity(2))
        done.set()

    with cached.lock:
        worker = threading.Thread(target=replace)
        worker.start()
        assert not done.wait(timeout=0.1)
        assert cached.get_value() is diagonal_matrix

    worker.join(timeout=5)
    assert done.is_set()
    assert cached.generation == 1
