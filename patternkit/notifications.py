"""Notifications built from decorators, delivered to observers and strategies."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import ClassVar


class Notification(ABC):
    """A message that can render its content."""

    @abstractmethod
    def content(self) -> str:
        """Return the full text of the notification."""


class SimpleNotification(Notification):
    """A plain text notification."""

    def __init__(self, text: str) -> None:
        self._text = text

    def content(self) -> str:
        return self._text


class NotificationDecorator(Notification, ABC):
    """A notification that wraps another and changes its content."""

    def __init__(self, notification: Notification) -> None:
        self._notification = notification


class TimestampDecorator(NotificationDecorator):
    """Prefixes the content with a timestamp."""

    TIMESTAMP = "[2025-04-13 14:22:00]"

    def content(self) -> str:
        return f"{self.TIMESTAMP} {self._notification.content()}"


class SignatureDecorator(NotificationDecorator):
    """Appends a signature block to the content."""

    def __init__(self, notification: Notification, signature: str) -> None:
        super().__init__(notification)
        self._signature = signature

    def content(self) -> str:
        return f"{self._notification.content()}\n-- {self._signature}\n\n"


class Observer(ABC):
    """Something that reacts when an observable changes."""

    @abstractmethod
    def update(self) -> object:
        """React to a change and return what was produced."""


class NotificationObservable:
    """Holds the current notification and informs observers of changes."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []
        self.notification: Notification | None = None

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Remove every registration of ``observer``."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify_observers(self) -> list[object]:
        """Update each observer in order and return their results."""
        return [observer.update() for observer in list(self._observers)]

    def set_notification(self, notification: Notification) -> list[object]:
        """Replace the current notification and notify observers."""
        self.notification = notification
        return self.notify_observers()

    def notification_content(self) -> str:
        """Return the current notification's content.

        Raises LookupError when no notification has been set.
        """
        if self.notification is None:
            raise LookupError("no notification has been set")
        return self.notification.content()


def _emit(message: str) -> str:
    sys.stdout.write(message)
    return message


def _default_observable() -> NotificationObservable:
    return NotificationService.get_instance().observable


class Logger(Observer):
    """Logs every new notification."""

    def __init__(
        self,
        observable: NotificationObservable | None = None,
        attach: bool = True,
    ) -> None:
        self._observable = observable if observable is not None else _default_observable()
        if attach:
            self._observable.add_observer(self)

    def update(self) -> str:
        content = self._observable.notification_content()
        return _emit(f"Logging New Notification : \n{content}")


class NotificationStrategy(ABC):
    """A channel through which a notification is delivered."""

    @abstractmethod
    def send(self, content: str) -> str:
        """Deliver ``content`` and return what was emitted."""


class EmailStrategy(NotificationStrategy):
    """Delivers notifications by e-mail."""

    def __init__(self, email_id: str) -> None:
        self.email_id = email_id

    def send(self, content: str) -> str:
        return _emit(f"Sending email Notification to: {self.email_id}\n{content}")


class SMSStrategy(NotificationStrategy):
    """Delivers notifications by text message."""

    def __init__(self, mobile_number: str) -> None:
        self.mobile_number = mobile_number

    def send(self, content: str) -> str:
        return _emit(f"Sending SMS Notification to: {self.mobile_number}\n{content}")


class PopUpStrategy(NotificationStrategy):
    """Delivers notifications as a pop-up."""

    def send(self, content: str) -> str:
        return _emit(f"Sending Popup Notification: \n{content}")


class NotificationEngine(Observer):
    """Sends each new notification through all of its strategies."""

    def __init__(
        self,
        observable: NotificationObservable | None = None,
        attach: bool = True,
    ) -> None:
        self._observable = observable if observable is not None else _default_observable()
        self._strategies: list[NotificationStrategy] = []
        if attach:
            self._observable.add_observer(self)

    def add_strategy(self, strategy: NotificationStrategy) -> None:
        self._strategies.append(strategy)

    def update(self) -> list[str]:
        content = self._observable.notification_content()
        return [strategy.send(content) for strategy in self._strategies]


class NotificationService:
    """Entry point for sending notifications; keeps a history of them."""

    _instance: ClassVar[NotificationService | None] = None

    def __init__(self) -> None:
        self.observable = NotificationObservable()
        self.notifications: list[Notification] = []

    @classmethod
    def get_instance(cls) -> NotificationService:
        """Return the shared service, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def send_notification(self, notification: Notification) -> list[object]:
        """Record ``notification`` and publish it to observers."""
        self.notifications.append(notification)
        return self.observable.set_notification(notification)


def main(argv: list[str] | None = None) -> int:
    """Send one decorated notification through a logger and three channels."""
    del argv
    service = NotificationService.get_instance()
    Logger()
    engine = NotificationEngine()
    engine.add_strategy(EmailStrategy("customer@example.com"))
    engine.add_strategy(SMSStrategy("+00 0000000000"))
    engine.add_strategy(PopUpStrategy())

    notification: Notification = SimpleNotification("Your order has been shipped!")
    notification = TimestampDecorator(notification)
    notification = SignatureDecorator(notification, "Customer Care")
    service.send_notification(notification)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())