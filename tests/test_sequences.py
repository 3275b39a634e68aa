import pytest

from listbench.sequences import (
    ArraySequence,
    BaseSequence,
    LinkedSequence,
    SEQUENCES,
    get_sequence,
    list_sequences,
)


@pytest.fixture(params=[ArraySequence, LinkedSequence], ids=["list", "deque"])
def sequence(request):
    return request.param()


def test_starts_empty(sequence):
    assert sequence.size() == 0
    assert sequence.is_empty()
    assert len(sequence) == 0


def test_capabilities(sequence):
    """append, insert, get, remove and size behave like a list."""
    for value in range(5):
        sequence.append(value)
    sequence.insert(0, -1)
    sequence.insert(3, 99)

    assert list(sequence.container) == [-1, 0, 1, 99, 2, 3, 4]
    assert sequence.get(3) == 99
    assert sequence.remove(3) == 99
    assert sequence.remove(0) == -1
    assert sequence.remove(sequence.size() - 1) == 4
    assert list(sequence.container) == [0, 1, 2, 3]
    assert sequence.size() == 4


def test_fill_replaces_contents(sequence):
    sequence.append("stale")
    sequence.fill(3)

    assert list(sequence.container) == [0, 1, 2]
    sequence.fill(0)
    assert sequence.is_empty()


def test_remove_negative_index(sequence):
    sequence.fill(4)

    assert sequence.remove(-1) == 3
    assert sequence.remove(-2) == 1
    assert list(sequence.container) == [0, 2]


def test_remove_from_empty_raises(sequence):
    with pytest.raises(IndexError):
        sequence.remove(0)


def test_fresh_instances_do_not_share_state():
    first = LinkedSequence()
    second = LinkedSequence()
    first.append(1)

    assert second.is_empty()


def test_registry():
    assert list_sequences() == ["list", "deque"]
    assert get_sequence("list") is ArraySequence
    assert get_sequence("DEQUE") is LinkedSequence
    assert all(issubclass(cls, BaseSequence) for cls in SEQUENCES.values())


def test_unknown_sequence():
    with pytest.raises(ValueError, match="Unknown sequence: vector"):
        get_sequence("vector")


def test_base_is_abstract():
    with pytest.raises(TypeError):
        BaseSequence()
