import pytest

from patternkit.notifications import (
    EmailStrategy,
    Logger,
    NotificationEngine,
    NotificationObservable,
    NotificationService,
    Observer,
    PopUpStrategy,
    SignatureDecorator,
    SimpleNotification,
    SMSStrategy,
    TimestampDecorator,
    main,
)

SHIPPED = "Your order has been shipped!"


class _Recorder(Observer):
    def __init__(self, tag, log):
        self.tag = tag
        self.log = log

    def update(self):
        self.log.append(self.tag)
        return self.tag


def _decorated():
    n = SimpleNotification(SHIPPED)
    n = TimestampDecorator(n)
    return SignatureDecorator(n, "Customer Care")


def test_simple_notification_content():
    assert SimpleNotification("hello").content() == "hello"


def test_timestamp_decorator_prefixes():
    n = TimestampDecorator(SimpleNotification("hi"))
    assert n.content() == "[2025-04-13 14:22:00] hi"


def test_signature_decorator_appends():
    n = SignatureDecorator(SimpleNotification("hi"), "Team")
    assert n.content() == "hi\n-- Team\n\n"


def test_stacked_decorators():
    assert _decorated().content() == (
        "[2025-04-13 14:22:00] " + SHIPPED + "\n-- Customer Care\n\n"
    )


def test_content_without_notification_raises():
    with pytest.raises(LookupError):
        NotificationObservable().notification_content()


def test_observers_notified_in_order():
    log = []
    obs = NotificationObservable()
    obs.add_observer(_Recorder("a", log))
    obs.add_observer(_Recorder("b", log))
    results = obs.set_notification(SimpleNotification("x"))
    assert results == ["a", "b"]
    assert log == ["a", "b"]


def test_remove_observer_removes_all_registrations():
    log = []
    obs = NotificationObservable()
    rec = _Recorder("a", log)
    other = _Recorder("b", log)
    obs.add_observer(rec)
    obs.add_observer(other)
    obs.add_observer(rec)
    obs.remove_observer(rec)
    assert obs.notify_observers() == ["b"]


def test_set_notification_replaces_current():
    obs = NotificationObservable()
    obs.set_notification(SimpleNotification("first"))
    obs.set_notification(SimpleNotification("second"))
    assert obs.notification_content() == "second"


def test_logger_attaches_and_logs(capsys):
    obs = NotificationObservable()
    Logger(obs)
    results = obs.set_notification(SimpleNotification("x"))
    assert results == ["Logging New Notification : \nx"]
    assert capsys.readouterr().out == "Logging New Notification : \nx"


def test_logger_without_attach_is_not_notified():
    obs = NotificationObservable()
    Logger(obs, attach=False)
    assert obs.set_notification(SimpleNotification("x")) == []


def test_strategies_format(capsys):
    assert EmailStrategy("a@example.com").send("c") == (
        "Sending email Notification to: a@example.com\nc"
    )
    assert SMSStrategy("+00 0").send("c") == "Sending SMS Notification to: +00 0\nc"
    assert PopUpStrategy().send("c") == "Sending Popup Notification: \nc"
    out = capsys.readouterr().out
    assert out.endswith("Sending Popup Notification: \nc")


def test_engine_sends_through_every_strategy():
    obs = NotificationObservable()
    engine = NotificationEngine(obs)
    engine.add_strategy(EmailStrategy("a@example.com"))
    engine.add_strategy(PopUpStrategy())
    (sent,) = obs.set_notification(SimpleNotification("msg"))
    assert len(sent) == 2
    assert all(s.endswith("msg") for s in sent)
    assert sent[0].startswith("Sending email Notification to: a@example.com")


def test_service_records_history_and_publishes():
    service = NotificationService()
    Logger(service.observable)
    first = SimpleNotification("one")
    second = _decorated()
    service.send_notification(first)
    results = service.send_notification(second)
    assert service.notifications == [first, second]
    assert results == ["Logging New Notification : \n" + second.content()]


def test_get_instance_is_shared():
    log = []
    first = NotificationService.get_instance()
    recorder = _Recorder("shared", log)
    first.observable.add_observer(recorder)
    try:
        second = NotificationService.get_instance()
        note = SimpleNotification("via second")
        results = second.send_notification(note)
        assert results == ["shared"]
        assert log == ["shared"]
        assert first.notifications[-1] is note
        assert first.observable.notification_content() == "via second"
    finally:
        first.observable.remove_observer(recorder)


def test_default_observers_use_shared_service():
    shared = NotificationService.get_instance().observable
    logger = Logger()
    try:
        shared.set_notification(SimpleNotification("shared"))
        assert logger.update() == "Logging New Notification : \nshared"
    finally:
        shared.remove_observer(logger)


def test_main_output(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "Logging New Notification : \n[2025-04-13 14:22:00] " + SHIPPED in out
    assert "Sending Popup Notification: \n" in out
    assert out.index("Logging New Notification") < out.index("Sending email Notification")