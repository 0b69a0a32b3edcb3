from userland import core
from userland.core import UserlandCapabilities
from userland.debug import (
    DebugApplication,
    DebugBreakpoint,
    DebugCapabilities,
    DebugTarget,
    DebugWatchpoint,
    get_application,
    init,
)


def _target(target_id, target_type="process", state="running"):
    return DebugTarget(id=target_id, name=f"t{target_id}", target_type=target_type, state=state)


def test_defaults():
    app = DebugApplication()
    assert app.name == "debug"
    assert app.version == "0.1.0"
    assert app.capabilities == UserlandCapabilities.all()
    assert int(app.debug_capabilities) == 0xFFFF
    assert app.targets == ()


def test_add_get_remove_by_id():
    app = DebugApplication()
    target = _target(7)
    app.add_target(target)
    assert app.get_target(7) is target
    assert app.get_target(8) is None
    app.remove_target(7)
    assert app.get_target(7) is None


def test_remove_only_first_with_id():
    app = DebugApplication()
    first = _target(1)
    second = _target(1)
    app.add_target(first)
    app.add_target(second)
    app.remove_target(1)
    assert app.targets == (second,)


def test_remove_missing_is_noop():
    app = DebugApplication()
    app.add_target(_target(1))
    app.remove_target(99)
    assert len(app.targets) == 1


def test_targets_by_type_and_state():
    app = DebugApplication()
    a = _target(1, "process", "running")
    b = _target(2, "thread", "stopped")
    c = _target(3, "process", "stopped")
    for t in (a, b, c):
        app.add_target(t)
    assert app.get_targets_by_type("process") == [a, c]
    assert app.get_targets_by_state("stopped") == [b, c]
    assert app.get_targets_by_state("exited") == []


def test_target_holds_points():
    bp = DebugBreakpoint(id=1, address=0x1000, breakpoint_type="software")
    wp = DebugWatchpoint(id=2, address=0x2000, size=8, watchpoint_type="write", condition="x > 1")
    target = DebugTarget(1, "proc", "process", "running", [bp], [wp], DebugCapabilities.BREAKPOINT)
    assert target.breakpoints[0].address == 0x1000
    assert target.watchpoints[0].condition == "x > 1"
    assert bp.condition is None
    assert DebugCapabilities.BREAKPOINT in target.capabilities
    assert DebugCapabilities.WATCHPOINT not in target.capabilities


def test_init_registers_globally():
    app = init()
    try:
        assert get_application() is app
        assert app in core.get_applications()
    finally:
        core.unregister_application(app)
    assert app not in core.get_applications()


def test_restart_succeeds():
    assert DebugApplication().restart() is None