"""User defined functionality triggered at fixed points of window manager execution.

A :class:`Hook` overrides the methods for the trigger points it cares about.
The base implementations check the trigger's arguments and return
``NotImplemented`` to mark the trigger as not handled by that hook, and
:func:`run_hooks` passes over them. Hooks are always run in the order in which
they were registered, and each one receives the window manager so that it can
inspect or change its state.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from penrose.layout import Region

logger = logging.getLogger("penrose")


class HookName(enum.Enum):
    """The trigger points at which registered hooks are run.

    Members that take arguments are called with them to build a trigger,
    e.g. ``HookName.NEW_CLIENT(42)``. Members without arguments can be passed
    to :func:`run_hooks` directly.
    """

    STARTUP = "startup"
    NEW_CLIENT = "new_client"
    REMOVE_CLIENT = "remove_client"
    CLIENT_ADDED_TO_WORKSPACE = "client_added_to_workspace"
    CLIENT_NAME_UPDATED = "client_name_updated"
    LAYOUT_APPLIED = "layout_applied"
    LAYOUT_CHANGE = "layout_change"
    WORKSPACE_CHANGE = "workspace_change"
    WORKSPACES_UPDATED = "workspaces_updated"
    SCREEN_CHANGE = "screen_change"
    SCREENS_UPDATED = "screens_updated"
    RANDR_NOTIFY = "randr_notify"
    FOCUS_CHANGE = "focus_change"
    EVENT_HANDLED = "event_handled"

    @property
    def arity(self) -> int:
        """Number of arguments the trigger carries."""
        return _ARITY[self]

    def __call__(self, *args: Any) -> HookTrigger:
        if len(args) != self.arity:
            raise TypeError(
                f"{self.name} takes {self.arity} argument(s), got {len(args)}"
            )
        return HookTrigger(self, tuple(args))


_ARITY: dict[HookName, int] = {
    HookName.STARTUP: 0,
    HookName.NEW_CLIENT: 1,
    HookName.REMOVE_CLIENT: 1,
    HookName.CLIENT_ADDED_TO_WORKSPACE: 2,
    HookName.CLIENT_NAME_UPDATED: 3,
    HookName.LAYOUT_APPLIED: 2,
    HookName.LAYOUT_CHANGE: 2,
    HookName.WORKSPACE_CHANGE: 2,
    HookName.WORKSPACES_UPDATED: 2,
    HookName.SCREEN_CHANGE: 1,
    HookName.SCREENS_UPDATED: 1,
    HookName.RANDR_NOTIFY: 0,
    HookName.FOCUS_CHANGE: 1,
    HookName.EVENT_HANDLED: 0,
}


@dataclass(frozen=True)
class HookTrigger:
    """A trigger point together with the arguments passed to each hook."""

    name: HookName
    args: tuple[Any, ...] = ()


class Hook:
    """Base class for hooks.

    Each trigger method builds its trigger (checking the arguments) and
    returns ``NotImplemented`` until a subclass overrides it, which marks the
    trigger as not handled by this hook.
    """

    @staticmethod
    def _unhandled(name: HookName, *args: Any) -> Any:
        trigger = name(*args)
        logger.debug("%s not handled by this hook", trigger.name.value)
        return NotImplemented

    def startup(self, wm: Any) -> Any:
        """Called once at startup, after state is set up and before the event loop."""
        return self._unhandled(HookName.STARTUP)

    def new_client(self, wm: Any, client_id: int) -> Any:
        """Called when a new client is created, before it joins a workspace."""
        return self._unhandled(HookName.NEW_CLIENT, client_id)

    def remove_client(self, wm: Any, client_id: int) -> Any:
        """Called after a client has been removed from window manager state."""
        return self._unhandled(HookName.REMOVE_CLIENT, client_id)

    def client_added_to_workspace(self, wm: Any, client_id: int, wix: int) -> Any:
        """Called whenever a client is added to a workspace."""
        return self._unhandled(HookName.CLIENT_ADDED_TO_WORKSPACE, client_id, wix)

    def client_name_updated(
        self, wm: Any, client_id: int, name: str, is_root: bool
    ) -> Any:
        """Called when WM_NAME or _NET_WM_NAME changes on a window."""
        return self._unhandled(HookName.CLIENT_NAME_UPDATED, client_id, name, is_root)

    def layout_applied(self, wm: Any, workspace_index: int, screen_index: int) -> Any:
        """Called after a layout is applied to the active workspace."""
        return self._unhandled(HookName.LAYOUT_APPLIED, workspace_index, screen_index)

    def layout_change(self, wm: Any, workspace_index: int, screen_index: int) -> Any:
        """Called after a workspace's layout has been cycled."""
        return self._unhandled(HookName.LAYOUT_CHANGE, workspace_index, screen_index)

    def workspace_change(
        self, wm: Any, previous_workspace: int, new_workspace: int
    ) -> Any:
        """Called after the active workspace on a screen changes."""
        return self._unhandled(
            HookName.WORKSPACE_CHANGE, previous_workspace, new_workspace
        )

    def workspaces_updated(self, wm: Any, names: Sequence[str], active: int) -> Any:
        """Called when workspaces are added or removed at runtime."""
        return self._unhandled(HookName.WORKSPACES_UPDATED, names, active)

    def screen_change(self, wm: Any, screen_index: int) -> Any:
        """Called after focus moves to a new screen."""
        return self._unhandled(HookName.SCREEN_CHANGE, screen_index)

    def screens_updated(self, wm: Any, dimensions: Sequence[Region]) -> Any:
        """Called when the list of known screens is updated."""
        return self._unhandled(HookName.SCREENS_UPDATED, dimensions)

    def randr_notify(self, wm: Any) -> Any:
        """Called when the connection reports a RandR notification."""
        return self._unhandled(HookName.RANDR_NOTIFY)

    def focus_change(self, wm: Any, client_id: int) -> Any:
        """Called after a client gains focus."""
        return self._unhandled(HookName.FOCUS_CHANGE, client_id)

    def event_handled(self, wm: Any) -> Any:
        """Called at the end of each pass of the event loop."""
        return self._unhandled(HookName.EVENT_HANDLED)


Hooks = list[Hook]


def run_hooks(hooks: Iterable[Hook], wm: Any, hook_name: HookName | HookTrigger) -> None:
    """Run every hook, in order, for the given trigger.

    An exception raised by a hook stops the remaining hooks and propagates.
    """
    trigger = hook_name if isinstance(hook_name, HookTrigger) else hook_name()
    method = trigger.name.value
    logger.debug("Running %s hooks", method)
    handled = 0
    for hook in hooks:
        if getattr(hook, method)(wm, *trigger.args) is not NotImplemented:
            handled += 1
    logger.debug("%d hook(s) handled %s", handled, method)