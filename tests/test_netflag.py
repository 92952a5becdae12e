from primer.netflag import Flags, is_cast, is_up, set_broadcast, turn_down


def bits(v):
    return f"{int(v):b}"


def test_sequence_from_source():
    v = Flags.MULTICAST | Flags.UP
    assert (bits(v), is_up(v)) == ("10001", True)
    v = turn_down(v)
    assert (bits(v), is_up(v)) == ("10000", False)
    v = set_broadcast(v)
    assert (bits(v), is_up(v)) == ("10010", False)
    assert is_cast(v) is True


def test_turn_down_returns_new_value():
    original = Flags.UP | Flags.LOOPBACK
    lowered = turn_down(original)
    assert is_up(original)
    assert not is_up(lowered)
    assert lowered & Flags.LOOPBACK == Flags.LOOPBACK


def test_turn_down_is_idempotent():
    v = Flags.MULTICAST
    assert turn_down(turn_down(v)) == turn_down(v) == v


def test_is_cast_false_without_broadcast_or_multicast():
    assert is_cast(Flags.UP | Flags.LOOPBACK | Flags.POINT_TO_POINT) is False


def test_set_broadcast_keeps_other_flags():
    v = set_broadcast(Flags.UP)
    assert is_up(v)
    assert is_cast(v)