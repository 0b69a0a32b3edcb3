import pytest

from userland.core import (
    Application,
    ApplicationError,
    ApplicationManager,
    UserlandCapabilities,
    get_application,
    get_applications,
    register_application,
    unregister_application,
)


def _app(name="demo"):
    return Application(name, "1.0", UserlandCapabilities.SHELL)


def test_all_capabilities_covers_sixteen_bits():
    caps = UserlandCapabilities.all()
    assert int(caps) == 0xFFFF
    for member in UserlandCapabilities:
        assert member in caps


def test_capability_bits():
    caps = UserlandCapabilities.all()
    assert int(caps & UserlandCapabilities.SHELL) == 1
    assert int(caps & UserlandCapabilities.SYSTEM) == 1 << 15


def test_manager_register_and_lookup():
    manager = ApplicationManager()
    first = _app("one")
    second = _app("two")
    manager.register(first)
    manager.register(second)
    assert manager.get_application("two") is second
    assert manager.get_application("missing") is None
    assert manager.get_applications() == [first, second]


def test_manager_lookup_returns_first_with_name():
    manager = ApplicationManager()
    first = _app("same")
    second = _app("same")
    manager.register(first)
    manager.register(second)
    assert manager.get_application("same") is first


def test_manager_unregister_by_identity():
    manager = ApplicationManager()
    first = _app("same")
    second = _app("same")
    manager.register(first)
    manager.register(second)
    manager.unregister(second)
    assert manager.get_applications() == [first]
    manager.unregister(_app("same"))
    assert manager.get_applications() == [first]


def test_get_applications_returns_copy():
    manager = ApplicationManager()
    manager.register(_app())
    listing = manager.get_applications()
    listing.clear()
    assert len(manager.get_applications()) == 1


def test_global_registry_round_trip():
    app = _app("core-test-global")
    register_application(app)
    try:
        assert get_application("core-test-global") is app
        assert app in get_applications()
    finally:
        unregister_application(app)
    assert get_application("core-test-global") is None


def test_restart_stops_then_starts():
    calls = []

    class Recording(Application):
        def start(self):
            calls.append("start")

        def stop(self):
            calls.append("stop")

    app = Recording("rec", "1", UserlandCapabilities.AI)
    result = Application.restart(app)
    assert result is None
    assert calls == ["stop", "start"]
    Application.restart(app)
    assert calls == ["stop", "start", "stop", "start"]


def test_restart_stops_on_failed_stop():
    calls = []

    class Failing(Application):
        def start(self):
            calls.append("start")

        def stop(self):
            raise ApplicationError("cannot stop")

    app = Failing("f", "1", UserlandCapabilities.AI)
    with pytest.raises(ApplicationError):
        Application.restart(app)
    assert calls == []


def test_application_attributes():
    app = Application("x", "2.0", UserlandCapabilities.NETWORK)
    assert (app.name, app.version) == ("x", "2.0")
    assert app.capabilities == UserlandCapabilities.NETWORK