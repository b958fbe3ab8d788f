"""A video channel that notifies its subscribers of new uploads."""

from __future__ import annotations


class Channel:
    """A channel holding subscribers and its latest video."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.latest_video = ""
        self._subscribers: list[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> None:
        """Add ``subscriber`` unless it is already subscribed."""
        if not any(s is subscriber for s in self._subscribers):
            self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: Subscriber) -> None:
        """Remove ``subscriber`` if it is subscribed."""
        for position, existing in enumerate(self._subscribers):
            if existing is subscriber:
                del self._subscribers[position]
                return

    def notify_subscribers(self) -> list[str]:
        """Update every subscriber and return their messages in order."""
        return [subscriber.update() for subscriber in self._subscribers]

    def upload_video(self, title: str) -> list[str]:
        """Publish ``title`` and notify subscribers."""
        self.latest_video = title
        print(f'\n[{self.name} uploaded "{title}"]')
        return self.notify_subscribers()

    def video_data(self) -> str:
        return f"\nCheckout our new Video: {self.latest_video}\n"


class Subscriber:
    """A named viewer following one channel."""

    def __init__(self, name: str, channel: Channel) -> None:
        self.name = name
        self._channel = channel

    def update(self) -> str:
        """Print and return the notification for the channel's latest video."""
        message = f"Hey {self.name},{self._channel.video_data()}"
        print(message, end="")
        return message


def main(argv: list[str] | None = None) -> int:
    """Subscribe two viewers, drop one, and upload a video."""
    del argv
    channel = Channel("CoderArmy")
    first = Subscriber("Varun", channel)
    second = Subscriber("Tarun", channel)

    channel.subscribe(first)
    channel.subscribe(second)
    channel.unsubscribe(first)
    channel.upload_video("Decorator Pattern Tutorial")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())