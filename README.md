# blobtext

`blobtext` keeps a piece of text as a chain of *blobs*. A blob is a short
string that is linked to the blob before it and the blob after it. You can
split a blob in two at a given offset or join it with the blob that follows.
You can also turn the whole chain back into text, or cut it off after a number
of lines.

## Installing

```
pip install .
```

## Using it from Python

```python
from blobtext.blobs import BlobList, chunk, load_text, load_file

chunk("hello world", 4)        # ['hell', 'o wo', 'rld']

# Each line, newline included, is cut into blobs of 8 characters (the default).
blobs = load_text("first line\nsecond line\n", 8)

# blob_size=None: every line becomes one blob.
per_line = load_text("first line\nsecond line\n", None)

# The same, reading a UTF-8 file. Line endings are kept as they are.
blobs = load_file("notes.txt", 8)

len(blobs)             # number of blobs
blobs[0], blobs[-1]    # indexing is zero-based and accepts negative indices
list(blobs)            # blob data from first to last
list(reversed(blobs))  # blob data from last to first

blobs.split(3, 1)      # split the 1st blob before its 4th character
blobs.join(1)          # append the 2nd blob to the 1st and drop the 2nd
blobs.append("more")   # add a blob at the end

blobs.text()           # all blob data as one string
blobs.render(24)       # the text, cut off after 24 lines
blobs.render()         # the whole text
```

A `BlobList` can also be built directly from strings:

```python
blobs = BlobList(["abc", "def"])
```

### Splitting and joining

`split(at, n)` and `join(n)` count blobs from 1. `split(at, n)` has no other
options and follows these rules:

- If `n` is past the end, the last blob is split.
- An offset `at` below 1 is treated as 1.
- An offset at or past the end of the blob is treated as the blob's last character.

Neither half is ever left empty. A blob shorter than two characters is not
changed. Calling `split` on an empty list raises `IndexError`.

`join(n)` does nothing when `n` is the last blob or a number past it.

### Errors

- `chunk` raises `ValueError` for a size of zero or less.
- `chunk("")` returns `[""]`.
- `render` raises `ValueError` for a negative line count.

## Using it from the command line

The `blobtext` command loads a text file into blobs and prints it.

```
blobtext [path] [--blob-size N | --lines] [--separator TEXT] [--max-lines N | --fit]
```

- `path`: the file to read. The default is `split.txt`.
- `--blob-size N`: the number of characters per blob. The default is 8.
- `--lines`: make one blob per line.
- `--separator TEXT`: text printed after every blob, for example `--separator '|'`.
- `--max-lines N`: print at most `N` lines.
- `--fit`: print only as many lines as the terminal has rows.

The exit status is:

- 0 on success.
- 1 if the file cannot be read.
- 2 for a blob size that is not positive or a negative line limit.

## What it does not do

The command only loads a file and prints it. There is no interactive editor,
and splitting, joining or saving changed text is only possible from Python.
Text is never written back to a file.

## Running the tests

```
pip install .[test]
pytest
```