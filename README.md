# patternkit

Compact, working examples of classic object-oriented design patterns. Each
module can be used as a small library and also has a demo command that walks
through it.

| Module | Pattern | Demo command |
| --- | --- | --- |
| `patternkit.decorator` | Decorator (power-ups on a game character) | `patternkit-decorator` |
| `patternkit.adapter` | Adapter (XML provider behind a JSON interface) | `patternkit-adapter` |
| `patternkit.command` | Command (toggle buttons on a remote control) | `patternkit-command` |
| `patternkit.facade` | Facade (one call to boot a computer) | `patternkit-facade` |
| `patternkit.youtube` | Observer (channel and subscribers) | `patternkit-youtube` |
| `patternkit.notifications` | Decorator + Observer + Strategy + Singleton | `patternkit-notifications` |

## Installation

```
pip install patternkit
```

Python 3.10 or later is required. The package has no runtime dependencies.

## Usage

Most operations both print what they report and return it, so the results can
be inspected in code as well as read on the console.

### Decorator

```python
from patternkit.decorator import Mario, HeightUp, GunPowerUp, StarPowerUp

hero = GunPowerUp(HeightUp(Mario()))
print(hero.abilities())   # Mario with HeightUp with Gun

hero = StarPowerUp(hero)
print(hero.abilities())   # ... with Gun with Start Power (Limited Time)
```

`Character` is the abstract base; `CharacterDecorator` wraps any character.

### Adapter

```python
from patternkit.adapter import XmlDataProvider, XmlDataProviderAdapter, Client

provider = XmlDataProvider()
print(provider.xml_data("Alice:42"))   # <user><name>Alice</name><id>42</id></user>

adapter = XmlDataProviderAdapter(provider)
print(adapter.json_data("Alice:42"))   # {"name":"Alice", "id":42}

Client().get_report(adapter, "Alice:42")   # prints and returns the JSON
```

Input is expected in `name:id` form. Without a `:` the whole input is used for
both the name and the id.

### Command

```python
from patternkit.command import Fan, FanCommand, Light, LightCommand, RemoteController

remote = RemoteController()
remote.set_command(0, LightCommand(Light()))
remote.set_command(1, FanCommand(Fan()))

remote.press_button(0)   # "Light is ON"
remote.press_button(0)   # "Light is OFF"
remote.press_button(2)   # "No command assigned at button 2"
```

The remote has `RemoteController.NUM_BUTTONS` (4) buttons. Each button
toggles: the first press executes its command, the next one undoes it.
`set_command` ignores indices outside the range and resets the button's toggle
state; `press_button` returns the message it printed.

### Facade

```python
from patternkit.facade import ComputerFacade

lines = ComputerFacade().start_computer()
print(lines[-1])   # Computer Booted Successfully!
```

`start_computer` runs the power supply, cooling system, CPU, memory, hard
drive, `BIOS.boot` and operating system steps in order and returns every line
it printed.

### Observer

```python
from patternkit.youtube import Channel, Subscriber

channel = Channel("CoderArmy")
varun = Subscriber("Varun", channel)
channel.subscribe(varun)
messages = channel.upload_video("Decorator Pattern Tutorial")
```

`upload_video` records the title, prints an announcement and returns the
message of each subscriber in subscription order. Subscribing the same
subscriber twice has no effect; unsubscribing one that is not subscribed is
ignored.

### Notification system

```python
from patternkit.notifications import (
    EmailStrategy,
    Logger,
    NotificationEngine,
    NotificationService,
    PopUpStrategy,
    SMSStrategy,
    SignatureDecorator,
    SimpleNotification,
    TimestampDecorator,
)

service = NotificationService.get_instance()
observable = service.observable

Logger(observable)
engine = NotificationEngine(observable)
engine.add_strategy(EmailStrategy("someone@example.com"))
engine.add_strategy(SMSStrategy("mobile"))
engine.add_strategy(PopUpStrategy())

note = SignatureDecorator(
    TimestampDecorator(SimpleNotification("Your order has been shipped!")),
    "Customer Care",
)
service.send_notification(note)
```

- `NotificationService.get_instance()` always returns the same service. Its
  `send_notification` appends to `notifications` and hands the notification
  to `observable`, returning each observer's result.
- `Logger` and `NotificationEngine` attach themselves to the given observable
  (or to the shared service's one when none is given); pass `attach=False`
  to create them without attaching.
- `NotificationObservable.notification_content()` raises `LookupError` when
  no notification has been set.
- `TimestampDecorator` prefixes a fixed timestamp, `[2025-04-13 14:22:00]`.

## Limitations

The examples only model their subjects. Nothing is actually delivered:
`EmailStrategy`, `SMSStrategy` and `PopUpStrategy` write their message to
standard output, the devices in `patternkit.command` and the parts in
`patternkit.facade` only print status lines, and no state is stored beyond
the objects in memory.

## Demo commands

Each module's demo prints a short walk-through of its pattern:

```
patternkit-decorator
patternkit-adapter
patternkit-command
patternkit-facade
patternkit-youtube
patternkit-notifications
```

## Running the tests

```
pip install "patternkit[test]"
pytest
```