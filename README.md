# pipexpy

`pipexpy` runs two commands connected by a pipe. The first command reads from
an input file and the second writes to an output file. It behaves like this
shell line:

```sh
< file1 cmd1 | cmd2 > file2
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipexpy file1 "cmd1" "cmd2" file2
```

For example:

```sh
pipexpy input.txt "grep hello" "wc -l" output.txt
```

The same command can also be started with `python -m pipexpy.pipeline`.

Each command is split on spaces into a program name and its arguments. There
is no quoting and there is no shell expansion. If the program name contains a
`/`, it is used as given. If it does not, each directory listed in `PATH` is
tried in order, and the first executable file found is used. The commands run
with an empty environment.

Behaviour:

- Exactly four arguments are expected. With any other number, the usage line
  is printed and the exit status is 0.
- An empty argument prints the usage line, and the exit status is 1.
- If the output file already exists, it must be readable and writable.
  Otherwise the error is reported on standard error and the exit status is 1.
  The output file is truncated before the commands run, or it is created with
  mode `0644` if it does not exist.
- If the input file cannot be opened, the error is reported on standard error.
  The first command then reads from the null device.
- If a command cannot be found or cannot be started, its name and the reason
  are reported on standard error. The other command still runs. A command
  that follows a failed one reads empty input.
- The exit status of the program does not depend on the exit statuses of the
  commands.

## Library use

The building blocks can be imported:

```python
from pipexpy.commands import CommandNotFoundError, find_paths, resolve_command, split_words
from pipexpy.params import UsageError, check_params, output_file_exists
from pipexpy.pipeline import PipelineFiles, open_files, run_pipeline

split_words("ls  -l", " ")                          # ['ls', '-l']
paths = find_paths({"PATH": "/usr/bin:/bin"})       # ['/usr/bin', '/bin']
print(resolve_command("ls -l", paths))              # e.g. /usr/bin/ls

with open_files("input.txt", "output.txt") as files:
    statuses = run_pipeline(["cat", "tr a-z A-Z", "wc -l"], files, paths)
```

The library calls work like this:

- `resolve_command` raises `CommandNotFoundError` when no executable is found.
- `check_params` raises `UsageError` for an empty argument. It raises
  `FileNotFoundError` or `PermissionError` when the output file exists but
  cannot be read and written.
- `run_pipeline` accepts any number of commands and returns one exit status
  per command. A command that could not be started counts as 1.

## Limitations

The `pipexpy` command accepts exactly two commands. Longer pipelines are only
available through `run_pipeline`. Neither offers here-documents, appending to
the output file, quoting, or variable expansion in commands.

## Running the tests

```sh
pip install ".[test]"
pytest
```