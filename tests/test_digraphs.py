import pytest

from playfair import Digraph, InvalidText, Mode, normalize, split_digraphs

E = Mode.ENCRYPT
D = Mode.DECRYPT


def pairs(text, mode=E, **kwargs):
    return [str(d) for d in split_digraphs(text, mode, **kwargs)]


def test_normalize():
    assert normalize("Hello, World J") == "helloworldi"
    assert normalize("") == ""


def test_normalize_strict():
    assert normalize("Jam", strict=True) == "iam"
    with pytest.raises(InvalidText):
        normalize("attack at dawn", strict=True)


def test_balloon():
    assert split_digraphs("balloon", E) == [
        Digraph("b", "a"), Digraph("l", "x", True), Digraph("l", "o"), Digraph("o", "n"),
    ]


def test_repairs_after_filler():
    assert pairs("tree stump") == ["tr", "ex", "es", "tu", "mp"]
    assert pairs("aaa") == ["ax", "ax", "ax"]


def test_odd_length_is_padded():
    digraphs = split_digraphs("abc", E)
    assert [str(d) for d in digraphs] == ["ab", "cx"]
    assert digraphs[-1].filler


def test_repeated_filler_letter_uses_alternate():
    assert pairs("xx") == ["xz", "xz"]
    assert pairs("abx") == ["ab", "xz"]
    assert pairs("zz", filler="z") == ["zx", "zx"]


def test_custom_filler():
    assert pairs("balloon", filler="Q") == ["ba", "lq", "lo", "on"]


@pytest.mark.parametrize("filler", ["", "xy", "j", "1"])
def test_invalid_filler(filler):
    with pytest.raises(InvalidText):
        split_digraphs("balloon", E, filler=filler)


def test_no_degenerate_pairs_on_encrypt():
    for digraph in split_digraphs("committee bookkeeper xxx", E):
        assert digraph.first != digraph.second


def test_decrypt_takes_pairs_as_given():
    assert pairs("aabb", D) == ["aa", "bb"]
    assert not any(d.filler for d in split_digraphs("aabb", D))


def test_decrypt_odd_length():
    with pytest.raises(InvalidText):
        split_digraphs("abc", D)


def test_empty_text():
    assert split_digraphs("", E) == []
    assert split_digraphs("", D) == []


def test_mode():
    assert Mode.ENCRYPT.flip() is Mode.DECRYPT
    assert Mode.DECRYPT.flip() is Mode.ENCRYPT
    assert Mode.coerce("encrypt") is Mode.ENCRYPT
    assert Mode.coerce(" Decrypt ") is Mode.DECRYPT
    assert Mode.coerce(-1) is Mode.DECRYPT
    assert Mode.coerce(Mode.ENCRYPT) is Mode.ENCRYPT
    with pytest.raises(ValueError):
        Mode.coerce("sideways")
    with pytest.raises(ValueError):
        Mode.coerce(2)
