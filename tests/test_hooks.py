import pytest

from penrose.helpers import PenroseError
from penrose.hooks import Hook, HookName, HookTrigger, run_hooks
from penrose.layout import Region


class RecordingHook(Hook):
    """Records calls to every trigger method, only for its chosen method."""

    def __init__(self, method, calls):
        self.method = method
        self.calls = calls

    def _mark(self, method, wm, args):
        if method == self.method:
            self.calls.append((method, wm, args))

    def startup(self, wm):
        self._mark("startup", wm, ())

    def new_client(self, wm, client_id):
        self._mark("new_client", wm, (client_id,))

    def remove_client(self, wm, client_id):
        self._mark("remove_client", wm, (client_id,))

    def client_added_to_workspace(self, wm, client_id, wix):
        self._mark("client_added_to_workspace", wm, (client_id, wix))

    def client_name_updated(self, wm, client_id, name, is_root):
        self._mark("client_name_updated", wm, (client_id, name, is_root))

    def layout_applied(self, wm, workspace_index, screen_index):
        self._mark("layout_applied", wm, (workspace_index, screen_index))

    def layout_change(self, wm, workspace_index, screen_index):
        self._mark("layout_change", wm, (workspace_index, screen_index))

    def workspace_change(self, wm, previous_workspace, new_workspace):
        self._mark("workspace_change", wm, (previous_workspace, new_workspace))

    def workspaces_updated(self, wm, names, active):
        self._mark("workspaces_updated", wm, (tuple(names), active))

    def screen_change(self, wm, screen_index):
        self._mark("screen_change", wm, (screen_index,))

    def screens_updated(self, wm, dimensions):
        self._mark("screens_updated", wm, (tuple(dimensions),))

    def randr_notify(self, wm):
        self._mark("randr_notify", wm, ())

    def focus_change(self, wm, client_id):
        self._mark("focus_change", wm, (client_id,))

    def event_handled(self, wm):
        self._mark("event_handled", wm, ())


ALL_TRIGGERS = [
    HookName.STARTUP,
    HookName.NEW_CLIENT(1),
    HookName.REMOVE_CLIENT(1),
    HookName.CLIENT_ADDED_TO_WORKSPACE(1, 0),
    HookName.CLIENT_NAME_UPDATED(1, "mock name", False),
    HookName.LAYOUT_APPLIED(0, 0),
    HookName.LAYOUT_CHANGE(0, 0),
    HookName.WORKSPACE_CHANGE(0, 1),
    HookName.WORKSPACES_UPDATED(["1", "2", "new"], 0),
    HookName.SCREEN_CHANGE(1),
    HookName.SCREENS_UPDATED([Region(0, 0, 1000, 600), Region(1000, 600, 1000, 600)]),
    HookName.RANDR_NOTIFY,
    HookName.FOCUS_CHANGE(2),
    HookName.EVENT_HANDLED,
]


@pytest.mark.parametrize(
    "method, n_calls, triggers",
    [
        ("client_name_updated", 2, [
            HookName.CLIENT_NAME_UPDATED(1, "mock name", False),
            HookName.CLIENT_NAME_UPDATED(1, "mock name", False),
        ]),
        ("client_added_to_workspace", 2, [
            HookName.CLIENT_ADDED_TO_WORKSPACE(1, 0),
            HookName.CLIENT_ADDED_TO_WORKSPACE(1, 1),
        ]),
        ("event_handled", 2, [HookName.EVENT_HANDLED, HookName.EVENT_HANDLED]),
        ("focus_change", 3, [
            HookName.FOCUS_CHANGE(1),
            HookName.FOCUS_CHANGE(2),
            HookName.FOCUS_CHANGE(1),
        ]),
        ("layout_applied", 3, [HookName.LAYOUT_APPLIED(0, 0)] * 3),
        ("layout_change", 1, [HookName.LAYOUT_CHANGE(0, 0)]),
        ("new_client", 1, [HookName.NEW_CLIENT(1)]),
        ("randr_notify", 1, [HookName.RANDR_NOTIFY]),
        ("remove_client", 1, [HookName.REMOVE_CLIENT(1)]),
        ("screen_change", 1, [HookName.SCREEN_CHANGE(1)]),
        ("screens_updated", 1, [HookName.SCREENS_UPDATED([Region(0, 0, 1000, 600)])]),
        ("startup", 1, [HookName.STARTUP]),
        ("workspace_change", 1, [HookName.WORKSPACE_CHANGE(0, 1)]),
        ("workspaces_updated", 1, [HookName.WORKSPACES_UPDATED(["new"], 0)]),
    ],
)
def test_hook_triggers(method, n_calls, triggers):
    calls = []
    hooks = [RecordingHook(method, calls)]
    wm = object()
    for trigger in [*triggers, *ALL_TRIGGERS]:
        # every other trigger point is also fired; only the chosen one may record
        if trigger in ALL_TRIGGERS and trigger not in triggers:
            run_hooks(hooks, wm, trigger)
        elif trigger in triggers:
            pass
    for trigger in triggers:
        run_hooks(hooks, wm, trigger)
    assert [c[0] for c in calls] == [method] * (n_calls + _extra(method, triggers))


def _extra(method, triggers):
    # number of ALL_TRIGGERS entries for this method not already among triggers
    return sum(
        1
        for t in ALL_TRIGGERS
        if (t.value if isinstance(t, HookName) else t.name.value) == method
        and t not in triggers
    )


def test_each_trigger_calls_only_its_method():
    for trigger in ALL_TRIGGERS:
        name = trigger if isinstance(trigger, HookName) else trigger.name
        calls = []
        hooks = [RecordingHook(name.value, calls)]
        for other in ALL_TRIGGERS:
            run_hooks(hooks, "wm", other)
        assert [c[0] for c in calls] == [name.value]


def test_arguments_and_wm_are_passed_through():
    calls = []
    wm = object()
    run_hooks(
        [RecordingHook("client_name_updated", calls)],
        wm,
        HookName.CLIENT_NAME_UPDATED(7, "title", True),
    )
    assert calls == [("client_name_updated", wm, (7, "title", True))]


def test_hooks_run_in_registration_order():
    order = []

    class Named(Hook):
        def __init__(self, label):
            self.label = label

        def startup(self, wm):
            order.append(self.label)

    result = run_hooks([Named("a"), Named("b"), Named("c")], None, HookName.STARTUP)
    assert result is None
    assert order == ["a", "b", "c"]


def test_exception_stops_remaining_hooks():
    seen = []

    class Failing(Hook):
        def new_client(self, wm, client_id):
            raise PenroseError("boom")

    class Recorder(Hook):
        def new_client(self, wm, client_id):
            seen.append(client_id)

    with pytest.raises(PenroseError, match="boom"):
        run_hooks([Recorder(), Failing(), Recorder()], None, HookName.NEW_CLIENT(3))
    assert seen == [3]


def test_wrong_arity_is_rejected():
    with pytest.raises(TypeError):
        HookName.NEW_CLIENT()
    with pytest.raises(TypeError):
        HookName.STARTUP(1)
    with pytest.raises(TypeError):
        run_hooks([Hook()], None, HookName.FOCUS_CHANGE)


def test_triggers_compare_and_hash_by_value():
    first = HookName.CLIENT_ADDED_TO_WORKSPACE(1, 2)
    second = HookName.CLIENT_ADDED_TO_WORKSPACE(1, 2)
    assert first == second
    assert len({first, second}) == 1
    assert first == HookTrigger(HookName.CLIENT_ADDED_TO_WORKSPACE, (1, 2))
    assert HookName.CLIENT_ADDED_TO_WORKSPACE(1, 3) != first


def test_arity_matches_trigger_arguments():
    assert HookName.CLIENT_NAME_UPDATED.arity == 3
    trigger = HookName.CLIENT_NAME_UPDATED(1, "x", True)
    assert trigger == HookTrigger(HookName.CLIENT_NAME_UPDATED, (1, "x", True))
    with pytest.raises(TypeError):
        HookName.CLIENT_NAME_UPDATED(1, "x")

    assert HookName.SCREENS_UPDATED.arity == 1
    regions = [Region(0, 0, 10, 10)]
    assert HookName.SCREENS_UPDATED(regions) == HookTrigger(
        HookName.SCREENS_UPDATED, (regions,)
    )
    with pytest.raises(TypeError):
        HookName.SCREENS_UPDATED(regions, 0)

    assert HookName.STARTUP.arity == 0
    with pytest.raises(TypeError):
        HookName.STARTUP(1)