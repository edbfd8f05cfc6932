# minishell

A small interactive command shell. It shows a prompt in the form
`user@host:~/path$ `, reads one line at a time and runs the commands on it.
A working directory under `$HOME` is shown with `~` in place of the home
directory.

## Installing

```
pip install .
```

## Running

```
minishell
```

The command takes no options besides `-h`/`--help`. The shell runs until
`exit` is given or the input ends.

## What it understands

A line is split into chunks at the operators `;`, `&&`, `||`, `&` and `|`.
Each chunk is split into words at whitespace. A word may be quoted with `'`
or `"`; the quotes are removed and the word may then hold whitespace.

Commands run from left to right:

- after `;` the next command always runs;
- after `&&` the next command runs only if the previous one succeeded;
- after `||` the next command runs only if the previous one failed.

Built-in commands:

- `cd [dir]`: change directory, or go to `$HOME` when no directory is given;
- `pwd`: print the working directory;
- `echo [words...]`: print the words separated by single spaces;
- `clear`: clear the terminal screen;
- `exit`: leave the shell with status 0.

The commands `cat`, `ls` and `whoami` are run as external programs, and the
shell waits for them to finish. Such a command counts as having succeeded
once it has been waited for, whatever its exit status. Any other name is
reported as `command not found` and counts as a failure.

After each line the shell prints the chunks it parsed, with their kinds
(`CHUNK`, `AND`, `OR`, `BACK`, `SEPARATOR`, `PIPE`).

## What it does not do

- `|` and `&` are recognised but not acted on: no pipelines are built and
  nothing runs in the background. When one of them follows a command, the
  commands after it are not run.
- There is no input or output redirection, no variable expansion, no
  globbing and no command history.
- Only the three external programs listed above can be started; other
  programs on `PATH` are not looked up.

## Using it as a library

```python
from minishell.parser import chunk_texts, token_texts

chunk_texts("ls -l && pwd")   # ['ls -l ', '&&', 'pwd']
token_texts('echo "a b" c')   # ['echo', 'a b', 'c']
```

`minishell.parser.scan_chunks` and `minishell.parser.scan_tokens` return
`Chunk` and `Token` records with their kind, text and position.
`minishell.executor.execute_command` runs a list of chunks and returns the
status of the last command run, and `minishell.shell.format_prompt` builds
the prompt string from a `UserInfo`, a working directory and a home
directory. `exit` raises `minishell.internal.ShellExit`.

## Tests

```
pip install .[test]
pytest
```