import pytest

from userland import ai, core, debug, monitor, network, shell, storage, system


@pytest.fixture
def started():
    apps = system.init()
    yield apps
    for app in apps:
        core.unregister_application(app)


def test_init_order(started):
    assert [app.name for app in started] == ["shell", "ai", "monitor", "network", "storage", "debug"]


def test_init_registers_every_application(started):
    registered = core.get_applications()
    for app in started:
        assert any(r is app for r in registered)


def test_init_sets_module_applications(started):
    modules = [shell, ai, monitor, network, storage, debug]
    for module, app in zip(modules, started):
        assert module.get_application() is app


def test_registration_order_is_preserved(started):
    registered = core.get_applications()
    positions = [next(i for i, r in enumerate(registered) if r is app) for app in started]
    assert positions == sorted(positions)


def test_every_application_has_all_userland_capabilities(started):
    for app in started:
        assert app.capabilities == core.UserlandCapabilities.all()
        assert app.version == "0.1.0"


def test_cleanup_unregisters(started):
    for app in started:
        core.unregister_application(app)
    registered = core.get_applications()
    assert all(r is not app for app in started for r in registered)