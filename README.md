# wordloop

wordloop takes a list of Russian words and tries to put them in a closed chain. In the chain every
word starts with the last letter of the word before it, and the last word leads back to the first.
When a word ends in `ь`, `ъ` or `ы`, the letter before that one counts as its last letter.

## Installation

```
pip install .
```

## Usage from the command line

```
wordloop [INPUT] [OUTPUT]
```

`INPUT` defaults to `InputFile.txt` and `OUTPUT` defaults to `OutputFile.txt`. Put the words in the
input file in lower-case Russian letters, separated by whitespace. The file is read as UTF-8, and a
byte-order mark is accepted.

- If the input file does not exist, the command creates an empty input file and an empty output
  file, prints a message and stops.
- If a chain is found, its words are written to the output file. Each word is followed by a space,
  and the file starts with a UTF-8 byte-order mark.
- If no chain is found, the output file is left empty and `Решений не существует!` is printed.
- If the input file has no words, or a word fails validation, an error message is printed. For an
  empty input file the output file is also left empty.

A word fails validation if it:

- has a capital letter,
- has a character that is not a Russian letter,
- starts with `ь`, `ъ` or `ы`,
- or ends in two of those letters.

Messages are printed in Russian. The command always exits with status 0.

## Usage as a library

```python
from wordloop.chain import solve, WordError

chain = solve(["арбуз", "зонт", "тигра"])
print(chain)  # the words in chain order, or None
```

`solve` validates every word and raises `WordError`, a subclass of `ValueError`, for a word it
rejects. It raises `ValueError` when it gets no words. It returns `None` in two cases: when some
letter starts a different number of words than it ends, and when the words cannot be spliced into
a single loop.

`wordloop.chain` also has the lower-level steps:

- `last_char(word)`: the letter that counts as the end of a word.
- `validate_word(word)`: raises `WordError` for a word that cannot be used.
- `has_balanced_letters(words)`: checks whether every letter starts as many words as it ends.
- `loop_and_merge(front, back, dlist)`: groups the list into chains and splices them together.
  It returns one `(front, back)` cursor pair per chain. A chain that was merged into another is
  replaced by a pair of end cursors.
- `merge(front1, back1, front2, back2)`: tries to splice one loop into another, rotating the
  second loop as needed.
- `count_loops(loops, dlist)`: the number of loops left unmerged.

`wordloop.cli.run(input_path, output_path)` does what the command does and returns `True` when
it writes a chain.

### The linked list

`wordloop.dlist.DList` is a doubly linked list of strings. It supports `append`, `clear`,
iteration, `len` and truth testing, and gives cursors through `begin()`, `end()` and `back()`.

A `Cursor` has a `value` property that can be read and written, and supports equality. It moves
with `+` and `-` by an integer. `pull(other)` moves one node, and `pull_range(front, back)` moves
a run of nodes, so that they stand just before the cursor.

## Running the tests

```
pip install .[test]
pytest
```