# userland

A small user-space application layer. Each application has a name, a
version, a lifecycle state and a set of capability flags. A shared,
thread-safe registry keeps the applications that have been registered, in
registration order.

There are six built-in applications. Each one keeps a catalogue of entries:

| Module              | Application          | Entries                     | Collection property |
|---------------------|----------------------|-----------------------------|---------------------|
| `userland.shell`    | `ShellApplication`   | `ShellCommand`              | `commands`          |
| `userland.ai`       | `AiApplication`      | `AiModel`                   | `models`            |
| `userland.monitor`  | `MonitorApplication` | `MonitorTarget`             | `targets`           |
| `userland.network`  | `NetworkApplication` | `NetworkInterface`          | `interfaces`        |
| `userland.storage`  | `StorageApplication` | `StorageDevice`             | `devices`           |
| `userland.debug`    | `DebugApplication`   | `DebugTarget`               | `targets`           |

A collection property returns a tuple of the entries, in the order they were
added.

## Installation

```
pip install .
```

## Starting the applications

`userland.system.init()` creates the shell, AI, monitor, network, storage and
debug applications, in that order, registers each with the global registry
and returns them as a list:

```python
from userland import core, system

apps = system.init()
print([app.name for app in core.get_applications()])
# ['shell', 'ai', 'monitor', 'network', 'storage', 'debug']
```

Each module also has its own `init()`, which creates, stores, registers and
returns that one application, and `get_application()`, which returns the one
stored by the last `init()` call, or `None` before any call. Each `init()`
call registers a new instance; earlier ones stay registered.

```python
from userland import core, storage

storage.init()
app = core.get_application("storage")
assert app is storage.get_application()
```

## Applications

`userland.core.Application` holds `name`, `version`, `capabilities`, `state`,
`updates` and `configured`. Every built-in application has version `"0.1.0"`
and `capabilities` equal to `UserlandCapabilities.all()` (the sixteen flags
`SHELL` through `SYSTEM`). Each also carries its own flag set with every flag
of its kind: `shell_capabilities`, `ai_capabilities`,
`monitor_capabilities`, `net_capabilities`, `storage_capabilities`,
`debug_capabilities`.

The lifecycle methods never fail and track an `ApplicationState`:

- `start()` and `resume()` set `RUNNING`; `stop()` sets `STOPPED`;
  `pause()` sets `PAUSED`; `restart()` stops and then starts.
- `update()` adds one to `updates`.
- `configure()` sets `configured` to `True`.
- `debug()` returns a dict with `name`, `version`, `state`, `updates` and
  `configured`.

A new application starts `STOPPED`. `core.ApplicationError` is there for
subclasses whose lifecycle operations can fail.

## Working with catalogues

```python
from userland.shell import ShellApplication, ShellCapabilities, ShellCommand

shell = ShellApplication()
shell.add_command(
    ShellCommand(
        name="ls",
        description="List directory contents",
        usage="ls [path]",
        examples=["ls", "ls /tmp"],
        capabilities=ShellCapabilities.EXECUTE | ShellCapabilities.COMPLETION,
    )
)
shell.get_command("ls")
shell.get_commands_by_capability(ShellCapabilities.EXECUTE)
shell.remove_command("ls")
```

A lookup that finds nothing returns `None`; a filter returns a list, empty
when nothing matches. Removing an entry that is not there does nothing. When
several entries match a lookup or removal, the first one added is used.
Capability filters keep entries whose flags include every flag asked for.

The lookups per application:

- shell: `get_command(name)`, `get_commands_by_capability(capability)`
- AI: `get_model(name)`, `get_models_by_type(model_type)`,
  `get_models_by_capability(capability)`; models carry `AiParameter` and
  `AiMetric` lists
- monitor: `get_target(name)`, `get_targets_by_type(target_type)`,
  `get_targets_by_capability(capability)`; targets carry `MonitorMetric`
  lists
- network: `get_interface(name)`, `get_interface_by_index(index)`
- storage: `get_device(name)`, `get_device_by_serial(serial)`; devices carry
  a `StorageStatistics` whose counters start at zero
- debug: `get_target(target_id)`, `get_targets_by_type(target_type)`,
  `get_targets_by_state(state)`; targets carry `DebugBreakpoint` and
  `DebugWatchpoint` lists, and are removed by id with `remove_target(target_id)`

Network addresses are checked when they are made: `Ipv4Address` takes three
4-byte values, `Ipv6Address` a 16-byte address and a prefix length from 0 to
255, and `NetworkInterface.mac` must be 6 bytes. A wrong length raises
`ValueError`.

```python
from userland.network import Ipv4Address, NetworkInterface

eth = NetworkInterface(
    name="eth0",
    index=1,
    if_type="ethernet",
    mtu=1500,
    mac=bytes([0x02, 0, 0, 0, 0, 0x01]),
    ipv4=[Ipv4Address(bytes([10, 0, 0, 2]), bytes([255, 255, 255, 0]), bytes([10, 0, 0, 255]))],
)
```

## Your own applications

Subclass `core.Application` and register an instance:

```python
from userland.core import Application, UserlandCapabilities, register_application

class Clock(Application):
    def __init__(self):
        super().__init__("clock", "1.0.0", UserlandCapabilities.SYSTEM)

register_application(Clock())
```

`unregister_application` removes that same instance; matching is by
identity, not by name. `core.ApplicationManager` is the registry class, if a
separate one is wanted.

## What it does not do

The catalogues hold only the entries given to them. Nothing runs shell
commands, loads or runs models, reads sensors, configures network interfaces,
talks to storage devices or sets breakpoints in a process. Nothing is saved to
disk, and the package has no command-line program.

## Tests

```
pip install .[test]
pytest
```