import pytest

from pngpong.chunk import Chunk
from pngpong.chunk_type import ChunkType, ChunkTypeError
from pngpong.commands import decode, encode, print_png, remove
from pngpong.png import Png
from pngpong.stream import PngError


def make_png():
    return Png(
        [
            Chunk(ChunkType.from_str("FrSt"), b"I am the first chunk"),
            Chunk(ChunkType.from_str("miDl"), b"I am another chunk"),
            Chunk(ChunkType.from_str("LASt"), b"I am the last chunk"),
        ]
    )


@pytest.fixture
def png_path(tmp_path):
    path = tmp_path / "image.png"
    path.write_bytes(bytes(make_png()))
    return path


def test_encode_in_place(png_path):
    encode(png_path, "RuSt", "hidden words")
    png = Png.from_bytes(png_path.read_bytes())
    assert len(png) == 4
    assert png.chunk_by_type("RuSt").data_as_string() == "hidden words"


def test_encode_to_output(png_path, tmp_path):
    original = png_path.read_bytes()
    out = tmp_path / "out.png"
    encode(str(png_path), "RuSt", "elsewhere", str(out))
    assert png_path.read_bytes() == original
    png = Png.from_bytes(out.read_bytes())
    assert png.chunk_by_type("RuSt").data_as_string() == "elsewhere"
    assert out.read_bytes().startswith(original)


def test_encode_invalid_type(png_path):
    with pytest.raises(ChunkTypeError):
        encode(png_path, "R1St", "x")


def test_encode_bad_file(tmp_path):
    path = tmp_path / "bad.png"
    path.write_bytes(b"not a png file at all")
    with pytest.raises(PngError):
        encode(path, "RuSt", "x")


def test_encode_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        encode(tmp_path / "absent.png", "RuSt", "x")


def test_decode_prints_message(png_path, capsys):
    encode(png_path, "RuSt", "secret words")
    assert decode(png_path, "RuSt") == "secret words"
    assert capsys.readouterr().out == "secret words\n"


def test_decode_missing_type(png_path):
    with pytest.raises(PngError):
        decode(png_path, "RuSt")


def test_remove(png_path):
    removed = remove(png_path, "miDl")
    assert removed.data_as_string() == "I am another chunk"
    png = Png.from_bytes(png_path.read_bytes())
    assert [str(c.chunk_type) for c in png.chunks] == ["FrSt", "LASt"]


def test_remove_then_encode_round_trip(png_path):
    before = png_path.read_bytes()
    encode(png_path, "RuSt", "temporary")
    remove(png_path, "RuSt")
    assert png_path.read_bytes() == before


def test_remove_missing(png_path):
    with pytest.raises(PngError):
        remove(png_path, "RuSt")


def test_print_png(png_path, capsys):
    text = print_png(png_path)
    assert capsys.readouterr().out == text + "\n"
    assert text == str(make_png())
    assert "Chunk type: FrSt" in text