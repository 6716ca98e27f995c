import pytest

from advent_of_code_2023.days.day20 import (
    BROADCASTER,
    ModuleKind,
    Network,
    NetworkState,
    pulse_counts,
    part_a,
    part_b,
)
from advent_of_code_2023.models import ParseError

EXAMPLE_SIMPLE = [
    "broadcaster -> a, b, c",
    "%a -> b",
    "%b -> c",
    "%c -> inv",
    "&inv -> a",
]

EXAMPLE_OUTPUT = [
    "broadcaster -> a",
    "%a -> inv, con",
    "&inv -> b",
    "%b -> con",
    "&con -> output",
]


def test_parse_network() -> None:
    network = Network.from_lines(EXAMPLE_OUTPUT)
    assert network.kinds[BROADCASTER] is ModuleKind.BROADCAST
    assert network.kinds["a"] is ModuleKind.FLIP_FLOP
    assert network.kinds["con"] is ModuleKind.CONJUNCTION
    assert network.outputs["a"] == ["inv", "con"]
    assert sorted(network.inputs["con"]) == ["a", "b"]
    assert "output" not in network.kinds


@pytest.mark.parametrize(
    "lines",
    [
        ["broadcaster -> a", "?a -> b"],
        ["broadcaster a"],
        ["%a -> b"],
        ["broadcaster -> a", "%a -> b", "&a -> b"],
    ],
)
def test_invalid_network(lines: list[str]) -> None:
    with pytest.raises(ParseError):
        Network.from_lines(lines)


def test_single_press() -> None:
    network = Network.from_lines(EXAMPLE_SIMPLE)
    state, pulses = network.press(NetworkState())
    assert state == NetworkState()
    assert len(pulses) == 12
    assert sum(1 for p in pulses if p.high) == 4
    assert pulses[0].source == "button"


def test_flip_flops_toggle() -> None:
    network = Network.from_lines(EXAMPLE_OUTPUT)
    state, _ = network.press(NetworkState())
    assert state.flip_flops_on == frozenset({"a", "b"})
    state, _ = network.press(state)
    assert state.flip_flops_on == frozenset({"b"})


def test_pulse_counts() -> None:
    assert pulse_counts(Network.from_lines(EXAMPLE_SIMPLE), 1000) == (8000, 4000)
    assert pulse_counts(Network.from_lines(EXAMPLE_OUTPUT), 1000) == (4250, 2750)


def test_part_a() -> None:
    assert part_a(Network.from_lines(EXAMPLE_SIMPLE)) == 32000000
    assert part_a(Network.from_lines(EXAMPLE_OUTPUT)) == 11687500


def test_part_b_without_counters() -> None:
    assert part_b(Network.from_lines(EXAMPLE_SIMPLE)) is None


def test_part_b_counters() -> None:
    # Counters that first fire on presses 3 and 2
    lines = [
        "broadcaster -> a0, b0",
        "%a0 -> a1, ca",
        "%a1 -> ca",
        "&ca -> a0, x, y, rx",
        "%b0 -> b1",
        "%b1 -> cb",
        "&cb -> b0, x, y, rx",
    ]
    network = Network.from_lines(lines)
    assert part_b(network, max_presses=100) == 6


def flip_flop_chain(length: int) -> Network:
    # Binary counter that returns to all off after 2**length presses
    lines = ["broadcaster -> f0"]
    lines += [f"%f{i} -> f{i + 1}" for i in range(length - 1)]
    lines.append(f"%f{length - 1} -> out")
    return Network.from_lines(lines)


def test_pulse_counts_repeat_with_counter_period() -> None:
    chain = flip_flop_chain(8)
    low, high = pulse_counts(chain, 256, max_steps=1000)
    assert pulse_counts(chain, 512, max_steps=1000) == (2 * low, 2 * high)


def test_pulse_counts_projected_far_ahead() -> None:
    network = Network.from_lines(EXAMPLE_SIMPLE)
    assert pulse_counts(network, 10**12) == (8 * 10**12, 4 * 10**12)


def test_pulse_counts_without_repeat() -> None:
    # Period 2**8 is longer than the presses the simulator may try
    with pytest.raises(ValueError):
        pulse_counts(flip_flop_chain(8), 1000, max_steps=100)
