# pipex

`pipex` runs two commands connected by a pipe. The first command reads its
standard input from one file. The second command writes its output to
another file. It behaves like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

You can also run it as `python -m pipex.pipeline` with the same arguments.

Exactly four arguments are required, and neither command may be empty. If
these rules are not met, `pipex` prints `error : arguments` to standard
error and exits with status 1.

Each command is split on spaces, and quotes are not interpreted. If the
command name starts with `/` or `.` and names an executable file, that file
is run. Otherwise each directory in `PATH` is searched in turn for an
executable of that name. Empty `PATH` entries are skipped.

The output file is created if it does not exist and truncated if it does.
A new output file gets mode `0644`.

Each stage fails on its own. If a stage cannot open its file or find its
command, it prints a message to standard error and that command does not
run. The other stage still runs. The messages are:

- `open infile error: <reason>` or `open outfile error: <reason>` when a
  file cannot be opened.
- `command not found` when the command is blank, is made only of spaces,
  or cannot be found.
- `Error: path not found` when a `PATH` search is needed and no `PATH`
  variable is set.
- `execve cmd error: <reason>` when the program cannot be started.

### Exit status

The exit status of `pipex` follows the second stage:

| Second stage | Exit status |
| --- | --- |
| Ran and exited | Its exit status |
| Ran and was ended by a signal | 0 |
| Command not found | 127 |
| Output file could not be opened | 1 |
| No `PATH` set | 1 |
| Program could not be started | 1 |

A failure in the first stage does not change the exit status.

### Example

```sh
pipex /etc/passwd "grep root" "wc -l" count.txt
```

## Library use

The pieces behind the command can also be used on their own.

```python
from pipex.paths import command_path, search_dirs
from pipex.pipeline import resolve_command, run_pipeline

env = {"PATH": "/usr/bin:/bin"}
print(search_dirs(env))                  # ['/usr/bin', '/bin']
print(command_path("ls", env))           # first executable ls found, or None
print(resolve_command("ls -l", env))     # (path to ls, ['ls', '-l'])

status = run_pipeline("in.txt", "cat", "wc -l", "out.txt", env)
```

`run_pipeline` uses `os.environ` when `env` is omitted.

`resolve_command` raises two errors:

- `pipex.pipeline.CommandNotFoundError` when the command is blank or cannot
  be found. Its `exit_status` is 127.
- `pipex.paths.PathNotFoundError` when there is no `PATH`.

`run_pipeline` raises `pipex.pipeline.PipexError` if the pipe itself cannot
be created.

The package also has these helper modules:

- `pipex.text`: string helpers such as `split`, `parse_int`, `trim`,
  `substring`, `compare_prefix` and `find_within`.
- `pipex.chars`: ASCII character classification and case conversion.
- `pipex.memory`: byte-buffer search, compare, copy, move and fill.
- `pipex.output`: writing text and numbers to a stream or a file
  descriptor.
- `pipex.linkedlist`: a small singly linked list, `LinkedList`, made of
  `Node` objects.

## What it does not do

`pipex` joins exactly two commands. It does not build longer pipelines.
It does not read here-documents or append to the output file. Commands are
not parsed the way a shell parses them, so there is no quoting, no
escaping, no globbing and no variable expansion.

## Running the tests

```sh
pip install -e ".[test]"
pytest
```