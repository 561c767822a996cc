import pytest

from onekit.alist import AList, DynArray


def make(n):
    xs = AList()
    for i in range(n):
        xs = xs.cons(i)
    return xs


def test_cons_keeps_order_and_grows_past_capacity():
    xs = make(120)
    assert len(xs) == 120
    assert list(xs) == list(range(120))


def test_cons_returns_list_for_chaining():
    xs = AList().cons("a").cons("b")
    assert list(xs) == ["a", "b"]


def test_car_of_nonempty_and_empty():
    assert make(5).car() == 0
    assert AList().car() is None


def test_cdr_drops_first_and_leaves_original():
    xs = make(4)
    rest = xs.cdr()
    assert list(rest) == [1, 2, 3]
    assert list(xs) == [0, 1, 2, 3]


def test_cdr_of_single_and_empty():
    assert AList([7]).cdr().is_empty()
    assert AList().cdr().is_empty()


def test_append_combines():
    xs = AList([1, 2])
    ys = AList([3, 4])
    out = xs.append(ys)
    assert list(out) == [1, 2, 3, 4]
    assert list(ys) == [3, 4]


def test_append_empty_cases():
    assert list(AList([1]).append(AList())) == [1]
    assert list(AList([1]).append(None)) == [1]
    assert list(AList().append(AList([5, 6]))) == [5, 6]


def test_slice_range():
    xs = make(10)
    assert list(xs.slice(2, 5)) == [2, 3, 4]
    assert list(xs.slice(0, 10)) == list(xs)


def test_slice_empty_when_start_not_before_stop():
    xs = make(10)
    assert xs.slice(4, 4).is_empty()
    assert xs.slice(6, 3).is_empty()


@pytest.mark.parametrize("start, stop", [(-1, 3), (0, 11)])
def test_slice_out_of_bounds(start, stop):
    with pytest.raises(IndexError):
        make(10).slice(start, stop)


def test_nth_and_setnth():
    xs = make(5)
    assert xs.nth(3) == 3
    assert xs.setnth(3, "x") is xs
    assert xs.nth(3) == "x"
    assert len(xs) == 5


@pytest.mark.parametrize("n", [-1, 5])
def test_nth_out_of_range(n):
    with pytest.raises(IndexError):
        make(5).nth(n)


@pytest.mark.parametrize("n", [-1, 5])
def test_setnth_out_of_range_leaves_list(n):
    xs = make(5)
    with pytest.raises(IndexError):
        xs.setnth(n, 99)
    assert list(xs) == [0, 1, 2, 3, 4]


def test_clone_is_independent():
    xs = make(3)
    ys = xs.clone()
    assert ys == xs
    ys.cons(9)
    assert len(xs) == 3
    assert len(ys) == 4


def test_purge_counts_and_empties():
    xs = make(7)
    assert xs.purge() == 7
    assert xs.is_empty()
    assert len(xs) == 0


def test_dynarray_starts_empty():
    da = DynArray()
    assert da.high_index() == -1
    with pytest.raises(IndexError):
        da.get_from(0)


def test_dynarray_put_and_get_with_gaps():
    da = DynArray()
    da.put_at(0, "a").put_at(200, "z")
    assert da.high_index() == 200
    assert da.get_from(0) == "a"
    assert da.get_from(200) == "z"
    assert da.get_from(100) is None


def test_dynarray_high_index_does_not_shrink():
    da = DynArray()
    da.put_at(10, 1)
    da.put_at(3, 2)
    assert da.high_index() == 10
    assert da.get_from(3) == 2


def test_dynarray_errors():
    da = DynArray()
    da.put_at(2, "x")
    with pytest.raises(IndexError):
        da.put_at(-1, "y")
    with pytest.raises(IndexError):
        da.get_from(3)
    with pytest.raises(IndexError):
        da.get_from(-1)
    assert da.high_index() == 2