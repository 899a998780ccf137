import copy

from laminar.link_conditioner import LinkConditioner


def test_defaults_send_everything():
    conditioner = LinkConditioner()
    assert conditioner.packet_loss == 0.0
    assert conditioner.latency == 0.0
    assert all(conditioner.should_send() for _ in range(200))


def test_full_loss_drops_everything():
    conditioner = LinkConditioner(packet_loss=1.0)
    assert not any(conditioner.should_send() for _ in range(200))


def test_same_seed_gives_same_decisions():
    first = LinkConditioner(packet_loss=0.5, seed=7)
    second = LinkConditioner(packet_loss=0.5, seed=7)
    assert [first.should_send() for _ in range(100)] == [
        second.should_send() for _ in range(100)
    ]


def test_partial_loss_drops_some_and_sends_some():
    conditioner = LinkConditioner(packet_loss=0.5)
    decisions = [conditioner.should_send() for _ in range(1000)]
    sent = sum(decisions)
    assert 0 < sent < len(decisions)


def test_packet_loss_can_be_changed():
    conditioner = LinkConditioner()
    conditioner.packet_loss = 1.0
    assert conditioner.should_send() is False


def test_copy_continues_same_sequence():
    original = LinkConditioner(packet_loss=0.9)
    original.should_send()
    clone = copy.deepcopy(original)
    assert [original.should_send() for _ in range(50)] == [
        clone.should_send() for _ in range(50)
    ]