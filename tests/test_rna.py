import pytest

from labworks.rna.rna import RNA, Nucl, char_to_nucl, nucl_to_char


def test_index_operator():
    a = RNA("TGTCGG")
    a[4] = a[3] = Nucl.A
    assert str(a) == "TGTAAG"


def test_const_index_operator():
    a = RNA.repeat(Nucl.C, 5)
    k = a[2]
    assert k == a[2]
    assert k is Nucl.C


def test_not_and_sum_operators():
    a = RNA("TAGTCC")
    b = RNA("TTTTTT")
    c = ~a + ~b
    assert str(c) == "ATCAGGAAAAAA"


def test_is_complementary():
    a = RNA("GACCTAGGGG")
    b = RNA("CTGGATCCCC")
    c = RNA("TCAT")
    assert a.is_complementary(b)
    assert not a.is_complementary(c)


def test_split():
    a = RNA.repeat(Nucl.C, 12)
    for nucl in (Nucl.G, Nucl.T, Nucl.A, Nucl.G):
        a.add(nucl)
    b = a.split(4)
    c = a.split(0)
    assert str(b) == "CCCCCCCCGTAG"
    assert str(c) == "CCCCCCCCCCCCGTAG"


def test_add_plus_keeps_memory_tight():
    a = RNA()
    total = 100_000
    for _ in range(total):
        a.add_plus(Nucl.G)
        assert a.capacity() <= total // 4
    assert len(a) == total


def test_many_adds_keep_content():
    a = RNA()
    for _ in range(100_000):
        a.add(Nucl.G)
    assert str(a) == "G" * 100_000


def test_first_add_allocates_initial_block():
    a = RNA()
    a.add(Nucl.A)
    assert a.capacity() == 8


def test_add_doubles_capacity():
    a = RNA()
    for _ in range(33):
        a.add(Nucl.C)
    assert a.capacity() == 16


def test_repeat_has_exact_capacity():
    a = RNA.repeat(Nucl.T, 12)
    assert a.capacity() == 3
    assert str(a) == "TTTTTTTTTTTT"


def test_repeat_non_positive_is_empty():
    assert len(RNA.repeat(Nucl.G, 0)) == 0
    assert str(RNA.repeat(Nucl.G, -3)) == ""


@pytest.mark.parametrize("text", ["", "A", "GC", "TAG", "GATC", "CCGTA", "AGCTAGCTA"])
def test_string_round_trip(text):
    assert str(RNA(text)) == text


def test_unknown_letters_read_as_t():
    assert str(RNA("AXGZ")) == "ATGT"
    assert char_to_nucl("x") is Nucl.T
    assert nucl_to_char(7) == "T"
    assert nucl_to_char(Nucl.G) == "G"


@pytest.mark.parametrize("left", ["", "A", "GC", "TAG", "GATC", "CCGTAGG"])
@pytest.mark.parametrize("right", ["", "T", "CA", "GGA", "ACGT", "TTGCAGC"])
def test_sum_is_concatenation(left, right):
    assert str(RNA(left) + RNA(right)) == left + right


@pytest.mark.parametrize("text", ["A", "GC", "TAG", "GATC", "CCGTA", "AGCTAGCTA"])
def test_double_invert_is_identity(text):
    rna = RNA(text)
    assert ~~rna == rna
    assert ~rna != rna


def test_invert_pairs_bases():
    assert str(~RNA("AGCT")) == "TCGA"


def test_equality_ignores_capacity():
    assert RNA("CCCC") == RNA.repeat(Nucl.C, 4)
    assert RNA("CCC") != RNA("CCCC")
    assert RNA("CCCA") != RNA("CCCG")


def test_split_empty_and_out_of_range():
    assert len(RNA().split(2)) == 0
    a = RNA("GATTACA")
    b = a.split(7)
    assert b == a
    b[0] = Nucl.T
    assert str(a) == "GATTACA"


def test_index_out_of_range():
    a = RNA("GA")
    with pytest.raises(IndexError):
        a[2]
    with pytest.raises(IndexError):
        a[-1] = Nucl.A
    assert str(a) == "GA"
    assert len(a) == 2


def test_setitem_accepts_letter():
    a = RNA("AAAA")
    a[1] = "C"
    assert str(a) == "ACAA"