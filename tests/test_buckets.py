import pytest

from chaintable.buckets import BucketStore, Entry, IndexOutOfRange


def test_new_store_is_empty():
    store = BucketStore(8)
    assert store.capacity == 8
    for i in range(8):
        assert store.get_chain(i) == []
    assert list(store.entries()) == []


def test_chains_are_independent():
    store = BucketStore(4)
    store.get_chain(1).append(Entry("a", 1, 97))
    store.get_chain(1).append(Entry("i", 2, 105))
    store.get_chain(3).append(Entry("c", 3, 99))

    assert [e.key for e in store.get_chain(1)] == ["a", "i"]
    assert store.get_chain(0) == []
    assert [e.key for e in store.entries()] == ["a", "i", "c"]


def test_get_chain_out_of_range():
    store = BucketStore(4)
    with pytest.raises(IndexOutOfRange):
        store.get_chain(4)
    with pytest.raises(IndexOutOfRange):
        store.get_chain(-1)


def test_replace_allocates_fresh_store():
    store = BucketStore(4)
    store.get_chain(0).append(Entry("a", 1, 97))

    new = store.replace(8)
    assert new.capacity == 8
    assert list(new.entries()) == []
    # old store is left alone
    assert len(store.get_chain(0)) == 1
