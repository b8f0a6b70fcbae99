# posixem

Small helpers that behave like well-known Unix calls, for code written with
those calls in mind that has to run on any platform. The package has no
dependencies beyond the standard library.

## Modules

### `posixem.atomic`

`AtomicInt(value=0)` is an integer counter guarded by a lock.

- `set(value)`, `read()`, `add(amount)`, `sub(amount)`, `inc()` and `dec()`.
- `inc_and_test()` increments the counter and returns the value it held
  before the increment.
- `dec_and_test()` decrements the counter and returns the value it held
  before the decrement.

### `posixem.dirent`

`opendir(name)` returns a `Directory`. The same object can be built directly
with `Directory(name)`.

- An empty or missing path raises `FileNotFoundError`. A path that is not a
  directory raises `NotADirectoryError`.
- `read()` returns the next `DirEntry`, or `None` once the listing is
  exhausted. A `DirEntry` has the fields `name`, `mode` and `is_dir`.
- The `.` and `..` entries come first. The directory's contents follow in
  the order the filesystem reports them.
- `rewind()` starts the listing again.
- `close()` ends the stream. Any call on a closed stream, including a second
  `close()`, raises `OSError` with `EBADF`.
- A `Directory` is iterable and works as a context manager. It closes on exit.
- The properties `path` and `closed` describe the stream.

### `posixem.hostname`

`gethostname(max_length=None)` returns the machine's host name.

`max_length` is the size of a buffer that includes room for a terminator, so
the name must be strictly shorter than it. A name that does not fit raises
`OSError` with `ENAMETOOLONG`. A negative `max_length` raises `ValueError`.

### `posixem.globtypes`

- `GlobFlag` is an `IntFlag`. Its members are `ERR`, `MARK`, `NOSORT`,
  `DOOFFS`, `NOCHECK`, `APPEND`, `NOESCAPE`, `PERIOD`, `MAGCHAR`, `NOMAGIC`,
  `TILDE`, `ONLYDIR`, `TILDE_CHECK`, `ONLYREG`, `NODOTSDIRS` and `LIMIT`.
- `GlobResult` is a frozen dataclass with the fields `paths`, `offsets` and
  `flags`.
  - It has `len()` and can be iterated over its paths.
  - The property `matchc` gives the number of paths.
  - The property `pathv` gives the paths after `offsets` leading `None` slots.
  - The property `magic` is true when `MAGCHAR` is set.
- The errors are `GlobNoSpaceError` (code 1), `GlobAbortedError` (code 2) and
  `GlobNoMatchError` (code 3). All of them derive from `GlobError`.

### `posixem.globbing`

`glob(pattern, flags=GlobFlag(0), errfunc=None, offsets=0, limit=None)`
returns a `GlobResult`.

Pattern syntax:

- Only the last path component may contain the metacharacters `*` and `?`.
- Either `/` or `\` separates directories.
- A trailing `.*` also matches names without an extension, so `*.*` matches
  every entry.
- A wildcard search includes the `.` and `..` entries of the searched
  directory.
- Results are in sorted order, with `.` and `..` first. `NOSORT` shuffles them
  into a random order.

Flags:

- A leading `*` or `?` skips names that start with `.`, unless `PERIOD` is
  given.
- `NODOTSDIRS` drops `.` and `..` from such a search.
- `MARK` appends `/` to directories.
- `ONLYDIR` keeps only directories. `ONLYREG` drops directories.
- `TILDE` expands a leading `~` or `~/` to the home directory. If the home
  directory cannot be found, `GlobAbortedError` is raised.
- `DOOFFS` applies `offsets`.
- `LIMIT` caps the matches at `limit`, which must be positive. Reaching the
  cap raises `GlobNoSpaceError`, whose `result` holds the matches found.

When nothing matches:

- A wildcard pattern that names a directory part returns an empty result.
- Otherwise `errfunc`, if given, is called with the pattern and an errno
  value.
- The pattern itself is then returned if `NOCHECK` is given, or if `NOMAGIC`
  is given and the pattern has no metacharacters. Otherwise
  `GlobNoMatchError` is raised.
- With `TILDE_CHECK`, a pattern whose tilde was expanded always raises
  `GlobNoMatchError`.

`MAGCHAR` is set in the result's flags when the pattern contained
metacharacters.

## What it does not do

- Backslash escaping is not supported.
- Character classes (`[...]`) and brace expansion are not supported.
- `~user` forms are not expanded.
- `GlobFlag.ERR`, `APPEND` and `NOESCAPE` are accepted but have no effect.
- There is no command-line program; everything is used from Python.

## Installation

```
pip install posixem
```

## Examples

```python
from posixem.dirent import opendir

with opendir(".") as directory:
    names = sorted(entry.name for entry in directory)
```

```python
from posixem.globbing import glob
from posixem.globtypes import GlobFlag, GlobNoMatchError

try:
    for path in glob("*.txt", GlobFlag.MARK):
        print(path)
except GlobNoMatchError:
    print("nothing matched")
```

```python
from posixem.atomic import AtomicInt

counter = AtomicInt(0)
counter.inc()
counter.add(5)
assert counter.read() == 6
```

## Running the tests

```
pip install -e ".[test]"
pytest
```