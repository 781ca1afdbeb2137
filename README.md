# mshell

This package has two tools. The first is a small interactive shell. The
second is a pipeline runner that chains commands between an input file, or
a here-document, and an output file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The interactive shell

Start it with:

```
mshell
```

It shows the prompt `minishell$ `. Each line is split into words on
whitespace. Single or double quotes group text into one word. A quote with
no closing quote runs to the end of the line. Escape sequences are not
handled. Blank lines are ignored.

The shell runs two commands itself:

- `echo [-n] words...` prints the words. A first argument of exactly `-n`
  leaves out the newline.
- `exit [code]` leaves the shell. The code is the leading integer of the
  argument, and defaults to 0.

For any other command:

- If the word contains a `/`, it is run directly.
- Otherwise it is searched for on `PATH`.
- If nothing is found, `<name>: command not found` is printed and the
  status is 127.

Ctrl-D ends the session and prints `exit`. Ctrl-C drops the current line
and shows a new prompt. When `readline` is available, line editing and
history work as usual.

From Python:

```python
from mshell.tokenizer import tokenize
from mshell.shell import run_line, find_executable

tokenize("echo 'hello world' \"again\"")
# ['echo', 'hello world', 'again']

status = run_line("ls -l")           # exit status, or None for a blank line
find_executable("ls", "/usr/bin:/bin")
```

### What the shell does not do

The shell runs one command per line. It has none of the following:

- pipes (`|`)
- redirections (`<`, `>`, `>>`, `<<`)
- variable expansion or `$?`
- globbing
- `cd`, `export` or `unset`

The exit status of a command is not kept between lines.

## The pipeline runner

```
mshell-pipex infile "grep root" "wc -l" outfile
```

This does the same as `< infile grep root | wc -l > outfile`, and any
number of commands may be given. Each command string is split on spaces,
and quotes have no meaning here. Its program is found as follows:

- Names that start with `/` or `./` are checked directly.
- Other names are searched for on `PATH`.
- If there is no `PATH`, the name itself is tried.

The output file is created, or emptied if it exists. If the input or output
file cannot be opened, an error message is printed and the status is 1.

With a here-document:

```
mshell-pipex here_doc LIMITER "grep test" "wc -l" outfile
```

This shows the prompt `pipe heredoc> ` and reads lines from standard input.
It stops at a line equal to `LIMITER`, or at end of input. The lines read
are fed to the first command. The output file is emptied before the
pipeline writes to it.

If a command cannot be found, `command not found` is written where that
command's output would have gone. The final status is worked out like this:

- If any command was not found, the status is 127.
- Otherwise it is the status of the last command.
- If the last command was killed by a signal, the status is 128 plus the
  signal number.

If there are too few arguments, a usage message is printed and the status
is 1.

From Python:

```python
from mshell.pipex_io import build_pipex, PipexError
from mshell.pipex_exec import run_pipeline, combine_statuses

with build_pipex(["pipex", "in.txt", "sort", "uniq -c", "out.txt"]) as pipex:
    status = run_pipeline(pipex)

combine_statuses([0, 127, 0])   # 127
```

`mshell.pipex_cmds` parses the command arguments into `Command` objects,
each with a `path` and `args`. `mshell.pipex_io` holds the argument checks,
`read_heredoc` and the file openers. Setup errors raise `PipexError`, whose
`status` is the exit status to use.

## Library helpers

`mshell.builtins` holds standalone versions of several commands:

- `echo`, which accepts any number of leading `-n`, `-nn`, ... options
- `pwd`
- `env`
- `exit_builtin`, which handles `exit [n]` with numeric checks. It raises
  `SystemExit`, or returns 1 when given too many arguments.
- `parse_exit_code` and `is_valid_number`

These versions write to the streams passed in. The interactive shell does
not call them; it uses only its simple `echo` and `exit`.

`mshell.libft` has small string helpers: `atoi`, `itoa`, `split`,
`strtrim`, `substr` and `is_space`.

`mshell.ftprintf` has `format_printf` and `printf`. They accept the
`%c %s %p %d %i %u %x %X %%` conversions:

```python
from mshell.ftprintf import format_printf

format_printf("%d %x %s", 42, 255, None)
# '42 ff (null)'
```