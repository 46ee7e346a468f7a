# pngpong

Hide short text messages inside PNG files and get them back out again.

A PNG file is an eight-byte signature followed by a list of chunks. Each
chunk has a four-letter type, some data and a CRC-32 checksum. `pngpong`
appends a chunk of a type you choose whose data is your message, encoded
as UTF-8. Image viewers skip chunk types they do not know, so the picture
looks the same.

## Installation

```
pip install .
```

## Command line

Hide a message. By default the file is changed in place. Give a fourth
argument to write the result to another file instead:

```
pngpong encode picture.png RuSt "meet me at noon"
pngpong encode picture.png RuSt "meet me at noon" hidden.png
```

Print the message held in the first chunk of that type:

```
pngpong decode hidden.png RuSt
```

Remove the first chunk of a type. The file is rewritten in place:

```
pngpong remove hidden.png RuSt
```

Print every chunk in a file, with its length, type, data bytes and CRC:

```
pngpong print hidden.png
```

On success the command exits with status 0. If a file cannot be read or
written, the file is not a valid PNG, the chunk type is not a valid name,
or no chunk of the type is found, it prints `Error: ...` to standard error
and exits with status 1.

### Choosing a chunk type

A chunk type must be exactly four ASCII letters. The case of each letter
carries meaning in the PNG format, and `ChunkType` reports it:

- First letter upper case: the chunk is critical (`is_critical`).
- Second letter upper case: the chunk is public (`is_public`).
- Third letter upper case: the reserved bit is valid
  (`is_reserved_bit_valid`).
- Fourth letter lower case: the chunk is safe to copy (`is_safe_to_copy`).

`is_valid` is true when all four bytes are letters and the reserved bit is
valid. A type whose third letter is lower case, such as `Rust`, is still
accepted but is not valid. A type such as `RuSt` works well for hidden
messages.

## Library use

```python
from pngpong.chunk import Chunk
from pngpong.chunk_type import ChunkType
from pngpong.png import Png

with open("picture.png", "rb") as fh:
    png = Png.from_bytes(fh.read())

png.append_chunk(Chunk(ChunkType.from_str("RuSt"), b"meet me at noon"))

found = png.chunk_by_type("RuSt")
print(found.data_as_string())

with open("hidden.png", "wb") as fh:
    fh.write(bytes(png))
```

### `pngpong.chunk_type`

`ChunkType(raw)` takes four bytes, each an ASCII letter;
`ChunkType.from_str(text)` takes a four-character name. Both raise
`ChunkTypeError` (a `ValueError`) otherwise. `bytes(t)` and `str(t)` give
the raw bytes and the name; chunk types compare equal by their bytes and
can be used as dictionary keys.

### `pngpong.chunk`

`Chunk(chunk_type, data)` builds a chunk and computes its CRC.
`Chunk.from_bytes(raw)` parses length, type, data and CRC, and raises
`ChunkError` if the data is too short or the stored CRC is wrong. A chunk
has the properties `chunk_type`, `data`, `length` and `crc`;
`data_as_string()` decodes the data as UTF-8 and raises `ChunkError` if it
is not valid UTF-8. `bytes(chunk)` gives the serialised chunk.
`calculate_crc(chunk_type, data)` returns the CRC-32 of the type followed
by the data.

### `pngpong.png`

`Png(chunks)` holds chunks in order behind the standard signature.
`Png.from_bytes(raw)` parses a whole file. `append_chunk(chunk)` adds a
chunk at the end. `remove_first_chunk(name)` removes and returns the first
chunk of that type, raising `PngError` if there is none and
`ChunkTypeError` if the name is invalid. `chunk_by_type(name)` returns the
first matching chunk, or `None` if there is none or the name is invalid.
The `header` and `chunks` properties give the signature and a tuple of the
chunks; a `Png` can be iterated and has a length. `bytes(png)` gives the
whole file and `str(png)` a readable listing.

### `pngpong.stream`

`check_header(raw)` checks the PNG signature and returns the bytes after
it. `read_chunks(raw)` parses a whole file into a list of chunks, and
`write_png(chunks)` serialises chunks behind the signature. They raise
`PngError` (a `ValueError`) for a missing or wrong signature, a chunk that
runs past the end of the data, or a chunk with a bad type or wrong CRC.
Fewer than four bytes left after the last chunk are ignored.

### `pngpong.commands`

`encode(path, chunk_type, message, output_path=None)`,
`decode(path, chunk_type)`, `remove(path, chunk_type)` and
`print_png(path)` are the actions behind the commands. `decode` and
`print_png` also return the text they print, and `remove` returns the
chunk it removed.

## What it does not do

`pngpong` works only at the level of chunks. It does not decode or check
the image data, does not check the order or contents of standard chunks
such as `IHDR` or `IEND`, and does not encrypt or compress messages: a
hidden message is stored as plain UTF-8 that anyone listing the chunks
can read.