# penrose

Building blocks for a tiling window manager. The package is pure Python with no
third-party dependencies.

## Modules

### `penrose.layout`

- `Region(x, y, w, h)`: a frozen rectangle with `values()`, `as_rows(n)`,
  `as_columns(n)`, `split_at_width(new_width)` and `split_at_height(new_height)`.
  The split methods raise `ValueError` if asked for more than the region holds.
- `Change.MORE` / `Change.LESS`: the direction of an adjustment.
- `LayoutConf(floating=False, gapless=False, follow_focus=False, allow_wrapping=True)`.
- `Layout(symbol, conf, func, max_main, ratio)`: a layout function together
  with its own `max_main` and `ratio`.
  - `Layout.floating(symbol)` builds a floating layout (`max_main=1`, `ratio=1.0`).
  - `arrange(clients, focused, region)` calls the layout function with the
    current `max_main` and `ratio`. It raises `RuntimeError` if no function is set.
  - `update_max_main(change)` adds or removes one main client and never goes
    below zero.
  - `update_main_ratio(change, step)` moves the ratio by `step`, kept within
    `[0.0, 1.0]`.
- Layout functions: `side_stack`, `bottom_stack`, `monocle` and `floating`.
  Each takes `(clients, focused, region, max_main, ratio)` and returns a list
  of `(client_id, region_or_None)` pairs. Clients are any objects with an `id`
  attribute. A `None` region means the client is hidden. `monocle` returns an
  empty list when nothing is focused, and `floating` always returns an empty
  list.
- `client_breakdown(clients, n_main)` returns the number of clients in the
  main area and the number in the secondary area.

### `penrose.hooks`

- `Hook`: subclass it and override only the trigger points you need, for
  example `startup`, `new_client`, `remove_client`,
  `client_added_to_workspace`, `client_name_updated`, `layout_applied`,
  `layout_change`, `workspace_change`, `workspaces_updated`, `screen_change`,
  `screens_updated`, `randr_notify`, `focus_change` and `event_handled`.
  A method that is not overridden does nothing.
- `HookName`: the trigger points. A member that takes arguments is called
  with them to build a trigger, for example `HookName.NEW_CLIENT(42)`. Passing
  the wrong number of arguments raises `TypeError`.
- `run_hooks(hooks, wm, hook_name)` calls the matching method on every hook in
  registration order. If a hook raises an exception, the remaining hooks are
  not run and the exception propagates.

### `penrose.actions`

- `run_external(cmd)` returns a handler that starts `cmd` when it is called
  with a window manager.
- `run_internal(method, *args)` returns a handler that calls
  `wm.<method>(*args)`.
- `spawn_output_lines(cmd, *args)` runs a program and returns its stripped
  stdout split into lines.
- `perror(template, *args)` builds a `PenroseError` from a message or a
  `{}`-style template.
- `make_map(*pairs)` builds a dict from `(key, value)` pairs. Later pairs
  replace earlier ones.

### `penrose.helpers`

- `spawn(cmd)` and `spawn_with_args(cmd, args)` start a program and discard
  its output.
- `spawn_for_output(cmd)` and `spawn_for_output_with_args(cmd, args)` return
  the program's stdout.
- All four raise `SpawnError` (a `PenroseError`) if the program cannot be
  started or its output is not UTF-8.
- `parse_xmodmap(text)` turns `xmodmap -pke` output into a mapping from key
  name to key code. `keycodes_from_xmodmap()` runs `xmodmap -pke` and parses
  the result. Both raise `PenroseError` on bad input.
- `index_selectors(length)` returns `IndexSelector(0)` through
  `IndexSelector(length - 1)`.
- `logging_error_handler()` returns a callable that logs errors to the
  `penrose` logger.

## Example: a layout

```python
from dataclasses import dataclass

from penrose.layout import Change, Layout, LayoutConf, Region, side_stack

@dataclass
class Client:
    id: int

layout = Layout("[side]", LayoutConf(), side_stack, 1, 0.6)
layout.update_max_main(Change.MORE)

screen = Region(0, 0, 1000, 600)
actions = layout.arrange([Client(1), Client(2), Client(3)], 1, screen)
```

## Example: a hook

```python
from penrose.hooks import Hook, HookName, run_hooks

class LogAddedClients(Hook):
    def __init__(self):
        self.seen = {}

    def client_added_to_workspace(self, wm, client_id, wix):
        self.seen.setdefault(wix, set()).add(client_id)

hook = LogAddedClients()
run_hooks([hook], None, HookName.CLIENT_ADDED_TO_WORKSPACE(7, 0))
```

## What this package does not do

This package has no window manager itself. It has no X server connection, no
event loop, no workspace or screen management, and no key binding parser.
Those pieces must be supplied by the program that uses these building blocks.
There is no command-line entry point.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```