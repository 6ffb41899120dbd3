import pytest

from bvgenealogy.analysis.compare import check_parents, compare_parents, parent_edges, read_parents


def test_identical_parents():
    report = compare_parents([1, -1, 1], [1, -1, 1])
    assert report.identical == 3
    assert report.identical_fraction == 1.0
    assert report.edge_recall == 1.0


def test_mutual_pair_still_recovers_edges():
    report = compare_parents([1, 2, 1, 2], [-1, 0, 1, 2])
    assert report.identical == 1
    assert report.expected_edges == 3
    assert report.recovered_edges == 3
    assert parent_edges([1, 2, 1, 2]) == {frozenset((0, 1)), frozenset((1, 2)), frozenset((2, 3))}


def test_length_mismatch_is_an_error():
    with pytest.raises(ValueError):
        compare_parents([1, -1], [1, -1, 0])


def test_read_parents(tmp_path):
    path = tmp_path / "parents.txt"
    path.write_text("1\n-1\n1\n")
    assert read_parents(path) == [1, -1, 1]
    empty = tmp_path / "empty.txt"
    empty.write_text("")
    assert read_parents(empty) == []


def test_check_parents_flags_out_of_range():
    report = check_parents([1, -1, 7], 3)
    assert report.roots == [1]
    assert report.out_of_range == [2]
    assert not report.ok
    assert not check_parents([1, -1], 3).ok
    assert check_parents([1, -1, 1], 3).ok
