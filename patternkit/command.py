"""A remote control whose buttons toggle commands on household devices."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Command(ABC):
    """An action that can be carried out and reversed."""

    @abstractmethod
    def execute(self) -> str:
        """Carry out the action and return what was reported."""

    @abstractmethod
    def undo(self) -> str:
        """Reverse the action and return what was reported."""


def _report(message: str) -> str:
    print(message)
    return message


class Light:
    """A light that can be switched on and off."""

    def on(self) -> str:
        return _report("Light is ON")

    def off(self) -> str:
        return _report("Light is OFF")


class Fan:
    """A fan that can be switched on and off."""

    def on(self) -> str:
        return _report("Fan is ON")

    def off(self) -> str:
        return _report("Fan is OFF")


class LightCommand(Command):
    """Switches a light on, and off again on undo."""

    def __init__(self, light: Light) -> None:
        self._light = light

    def execute(self) -> str:
        return self._light.on()

    def undo(self) -> str:
        return self._light.off()


class FanCommand(Command):
    """Switches a fan on, and off again on undo."""

    def __init__(self, fan: Fan) -> None:
        self._fan = fan

    def execute(self) -> str:
        return self._fan.on()

    def undo(self) -> str:
        return self._fan.off()


class RemoteController:
    """A remote with a fixed number of toggle buttons."""

    NUM_BUTTONS = 4

    def __init__(self) -> None:
        self._buttons: list[Command | None] = [None] * self.NUM_BUTTONS
        self._pressed: list[bool] = [False] * self.NUM_BUTTONS

    def _valid(self, index: int) -> bool:
        return 0 <= index < self.NUM_BUTTONS

    def set_command(self, index: int, command: Command) -> None:
        """Bind ``command`` to button ``index``; out-of-range indices are ignored."""
        if self._valid(index):
            self._buttons[index] = command
            self._pressed[index] = False

    def press_button(self, index: int) -> str:
        """Toggle the command on button ``index`` and return the report."""
        command = self._buttons[index] if self._valid(index) else None
        if command is None:
            return _report(f"No command assigned at button {index}")
        if self._pressed[index]:
            message = command.undo()
        else:
            message = command.execute()
        self._pressed[index] = not self._pressed[index]
        return message


def main(argv: list[str] | None = None) -> int:
    """Toggle a light and a fan, then press an unassigned button."""
    del argv
    remote = RemoteController()
    remote.set_command(0, LightCommand(Light()))
    remote.set_command(1, FanCommand(Fan()))

    print("--- Toggling Light Button 0 ---")
    remote.press_button(0)
    remote.press_button(0)

    print("--- Toggling Fan Button 1 ---")
    remote.press_button(1)
    remote.press_button(1)

    print("--- Pressing Unassigned Button 2 ---")
    remote.press_button(2)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())