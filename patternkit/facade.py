"""A single entry point that boots a computer from its subsystems."""

from __future__ import annotations


def _report(message: str) -> str:
    print(message)
    return message


class PowerSupply:
    def provide_power(self) -> str:
        return _report("Power Supply: Providing power...")


class CoolingSystem:
    def start_fans(self) -> str:
        return _report("Cooling System: Fans started...")


class CPU:
    def initialize(self) -> str:
        return _report("CPU: Initialization started...")


class HardDrive:
    def spin_up(self) -> str:
        return _report("HardDrive: Spinning Up....")


class Memory:
    def self_test(self) -> str:
        return _report("Memory: Self-test passed...")


class OperatingSystem:
    def load(self) -> str:
        return _report("Operating System: Loading into memory...")


class BIOS:
    def boot(self, cpu: CPU, memory: Memory) -> list[str]:
        """Run CPU and memory checks and return the reported lines."""
        return [
            _report("BIOS: Booting CPU and Memory checks..."),
            cpu.initialize(),
            memory.self_test(),
        ]


class ComputerFacade:
    """Hides the boot sequence of a computer behind one call."""

    def __init__(self) -> None:
        self._power_supply = PowerSupply()
        self._cooling_system = CoolingSystem()
        self._cpu = CPU()
        self._memory = Memory()
        self._hard_drive = HardDrive()
        self._bios = BIOS()
        self._os = OperatingSystem()

    def start_computer(self) -> list[str]:
        """Boot every subsystem in order and return the reported lines."""
        lines = [
            _report("----- Starting Computer -----"),
            self._power_supply.provide_power(),
            self._cooling_system.start_fans(),
            self._cpu.initialize(),
            self._memory.self_test(),
            self._hard_drive.spin_up(),
        ]
        lines.extend(self._bios.boot(self._cpu, self._memory))
        lines.append(self._os.load())
        lines.append(_report("Computer Booted Successfully!"))
        return lines


def main(argv: list[str] | None = None) -> int:
    """Boot a computer through the facade."""
    del argv
    ComputerFacade().start_computer()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())