"""Tests for the unbuffered CredentialRelay."""

import threading
import time

import pytest

from wxtoken.src.services.relay import CredentialRelay, RelayClosed, RelayTimeout


def _spawn(target, *args):
    t = threading.Thread(target=target, args=args, daemon=True)
    t.start()
    return t


class TestRendezvous:
    def test_publish_blocks_until_received(self):
        relay = CredentialRelay()
        done = threading.Event()

        def publisher():
            relay.publish("TOKEN")
            done.set()

        _spawn(publisher)
        time.sleep(0.05)
        assert not done.is_set()

        assert relay.receive(timeout=1) == "TOKEN"
        assert done.wait(1)

    def test_receive_blocks_until_published(self):
        relay = CredentialRelay()
        got = []
        t = _spawn(lambda: got.append(relay.receive(timeout=2)))
        time.sleep(0.05)
        assert got == []

        relay.publish("TOKEN")
        t.join(1)
        assert got == ["TOKEN"]

    def test_values_arrive_in_order(self):
        relay = CredentialRelay()
        seqs = []

        def publisher():
            for value in ("t1", "t2", "t3"):
                seqs.append(relay.publish(value))

        _spawn(publisher)
        received = [relay.receive(timeout=1) for _ in range(3)]

        assert received == ["t1", "t2", "t3"]
        # publish devuelve tras la entrega, así que la secuencia ya está completa
        time.sleep(0.05)
        assert seqs == [1, 2, 3]

    def test_receive_timeout(self):
        with pytest.raises(RelayTimeout):
            CredentialRelay().receive(timeout=0)


class TestClose:
    def test_close_wakes_blocked_receiver(self):
        relay = CredentialRelay()
        errors = []

        def receiver():
            try:
                relay.receive()
            except RelayClosed as exc:
                errors.append(exc)

        t = _spawn(receiver)
        time.sleep(0.05)
        relay.close()
        t.join(1)

        assert len(errors) == 1
        assert relay.closed

    def test_close_wakes_blocked_publisher(self):
        relay = CredentialRelay()
        errors = []

        def publisher():
            try:
                relay.publish("TOKEN")
            except RelayClosed as exc:
                errors.append(exc)

        t = _spawn(publisher)
        time.sleep(0.05)
        relay.close()
        t.join(1)

        assert len(errors) == 1

    def test_calls_after_close_fail(self):
        relay = CredentialRelay()
        relay.close()
        with pytest.raises(RelayClosed):
            relay.publish("x")
        with pytest.raises(RelayClosed):
            relay.receive(timeout=0)
