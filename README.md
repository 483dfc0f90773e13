# righthook

A small Git hooks manager. Hooks and the jobs they run are described in a
`.righthook.yml` file at the root of your repository; `righthook install`
writes thin shell scripts into the repository's hooks directory that call
`righthook run <hook>` when Git fires them.

## Installation

```sh
pip install righthook
```

The installed hook scripts look for the `righthook` command on `PATH` and fail
with a message if it is not there. `git` must also be on `PATH`.

## Configuration

Each top-level key of `.righthook.yml` names a hook. A hook holds a list of
`jobs` and may set `parallel: true` to run them all at once:

```yaml
pre-commit:
  parallel: true
  jobs:
    - name: lint
      run: ruff check {staged_files}
    - run: pytest -q

pre-push:
  jobs:
    - name: format check
      run: black --check {push_files}
```

Each job has:

- `run` – the shell command, run with `sh -c` from the current directory.
- `name` – optional; the command itself is shown when it is missing.
- `glob`, `exclude` – optional lists of strings. They are read and checked
  but do not yet filter anything.

Inside a command, these placeholders are replaced before it runs:

- `{staged_files}` – files staged in the index that still exist, relative to
  the repository root, separated by spaces.
- `{push_files}` – files that differ between `HEAD` and
  `refs/remotes/origin/HEAD`. This needs the remote head to be set, for example
  with `git remote set-head origin main`; otherwise the job reports an error.

Without `parallel: true` the jobs run one after another, in order. In either
case every job runs; each is reported as `❯ <name>` followed by its standard
output, and a failing job's name and standard error are shown in red.

## Usage

Install hook scripts for every key in the configuration that is a Git hook
name (other keys are skipped). If there is no `.righthook.yml` yet, a starting
one, holding only comments, is written first:

```sh
righthook install
```

Scripts go into the directory set by `core.hooksPath`, or `.git/hooks`.
Existing scripts are left in place unless you overwrite them:

```sh
righthook install --force
```

Run a hook by hand:

```sh
righthook run pre-commit
```

The command exits with status 1 when the hook is not in the configuration or
any job fails, listing the failed jobs as `jobs failed: <names>`.

Remove the hook scripts that righthook installed (files in the hooks directory
containing `call_righthook`; files ending in `.sample` are left alone):

```sh
righthook uninstall
```

`righthook --version` prints the version; with no command, righthook prints a
short hint and exits.

## Environment

- `RIGHTHOOK_VERBOSE`, or `RIGHTHOOK_DEBUG` when it is unset – show debug
  messages, such as skipped hook names.
- `RIGHTHOOK_TRACE` – also show each command as it is run.

A variable counts as on unless set to `0`, `false` or `no`, in any letter case.

## Use from Python

- `righthook.config.Config.load(root)` reads `.righthook.yml` from `root` and
  gives `hooks`, a dict of `Hook` objects with `jobs` and `parallel`.
- `righthook.git.Git(path)` finds the repository containing `path`, with
  `root`, `hooks`, `staged_files()` and `push_files()`.
- `await righthook.runner.Runner(hook, git).run()` runs a hook's jobs and raises
  `righthook.runner.JobsFailed` if any failed.
- `righthook.commands.install(force)`, `run(hook_name)` (a coroutine) and
  `uninstall()` are what the command line calls; `install` and `uninstall`
  return the hooks they installed or removed.

## Limitations

- Commands and hook scripts use `sh`, so righthook works on POSIX systems only.
- `glob` and `exclude` do not restrict which files a job sees.
- `{push_files}` has no fallback when `refs/remotes/origin/HEAD` is missing.