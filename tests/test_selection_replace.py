from __future__ import annotations

import random
from typing import Optional, Sequence

import pytest

from list_engine.selection import (
    DELETION,
    INSERTION,
    UNCHANGED,
    Hunk,
    ListState,
    apply_edit_script,
    compute_edit_script,
    list_state,
    remap_index,
    replace,
    selected_element,
)


def kinds(script: Sequence[Hunk]) -> list[tuple[str, tuple]]:
    return [(hunk.kind, hunk.elements) for hunk in script]


def naive_lcs_length(left: Sequence[object], right: Sequence[object]) -> int:
    table = [[0] * (len(right) + 1) for _ in range(len(left) + 1)]
    for i, a in enumerate(left):
        for j, b in enumerate(right):
            if a == b:
                table[i + 1][j + 1] = table[i][j] + 1
            else:
                table[i + 1][j + 1] = max(table[i][j + 1], table[i + 1][j])
    return table[len(left)][len(right)]


def reference_remap(script: Sequence[Hunk], index: int) -> int:
    """Remap via an explicit alignment of (source index, target index) pairs."""

    pairs: list[tuple[Optional[int], Optional[int]]] = []
    src = tgt = 0
    for hunk in script:
        for _ in hunk.elements:
            if hunk.kind == UNCHANGED:
                pairs.append((src, tgt))
                src += 1
                tgt += 1
            elif hunk.kind == DELETION:
                pairs.append((src, None))
                src += 1
            else:
                pairs.append((None, tgt))
                tgt += 1

    position = next(n for n, (s, _) in enumerate(pairs) if s == index)
    if pairs[position][1] is not None:
        return pairs[position][1]
    before = sum(1 for s, t in pairs[:position] if t is not None)
    return max(0, min(tgt - 1, before))


def random_sequence(rng: random.Random, alphabet: str = "abcd") -> list[str]:
    return [rng.choice(alphabet) for _ in range(rng.randint(0, 9))]


def test_edit_script_for_identical_sequences() -> None:
    script = compute_edit_script(["a", "b"], ["a", "b"])

    assert kinds(script) == [(UNCHANGED, ("a", "b"))]


def test_edit_script_for_empty_sequences() -> None:
    assert compute_edit_script([], []) == []


def test_edit_script_leading_insertion() -> None:
    script = compute_edit_script(["a", "b", "c"], ["z", "a", "b", "c"])

    assert kinds(script) == [(INSERTION, ("z",)), (UNCHANGED, ("a", "b", "c"))]


def test_edit_script_disjoint_sequences_delete_then_insert() -> None:
    script = compute_edit_script(["a", "b"], ["x", "y", "z"])

    assert kinds(script) == [(DELETION, ("a", "b")), (INSERTION, ("x", "y", "z"))]


def test_edit_script_replacement_in_middle() -> None:
    script = compute_edit_script(["a", "b", "c"], ["a", "x", "c"])

    assert kinds(script) == [
        (UNCHANGED, ("a",)),
        (DELETION, ("b",)),
        (INSERTION, ("x",)),
        (UNCHANGED, ("c",)),
    ]


def test_edit_script_handles_unhashable_elements() -> None:
    script = compute_edit_script([[1], [2]], [[2], [3]])

    assert kinds(script) == [
        (DELETION, ([1],)),
        (UNCHANGED, ([2],)),
        (INSERTION, ([3],)),
    ]


def test_hunk_lengths() -> None:
    assert Hunk(DELETION, ("a", "b")).source_length == 2
    assert Hunk(DELETION, ("a", "b")).target_length == 0
    assert Hunk(INSERTION, ("a",)).source_length == 0
    assert Hunk(UNCHANGED, ("a",)).target_length == 1


@pytest.mark.parametrize("seed", range(60))
def test_edit_script_covers_both_sequences_minimally(seed: int) -> None:
    rng = random.Random(seed)
    source, target = random_sequence(rng), random_sequence(rng)

    script = compute_edit_script(source, target)

    assert apply_edit_script(script) == (tuple(source), tuple(target))
    unchanged = sum(len(h.elements) for h in script if h.kind == UNCHANGED)
    assert unchanged == naive_lcs_length(source, target)
    assert all(h.elements for h in script)
    assert all(a.kind != b.kind for a, b in zip(script, script[1:]))


@pytest.mark.parametrize("seed", range(4))
def test_edit_script_for_long_sequences_stays_minimal(seed: int) -> None:
    rng = random.Random(seed)
    source = [rng.randrange(20) for _ in range(300)]
    target = [rng.randrange(20) for _ in range(280)]

    script = compute_edit_script(source, target)

    assert apply_edit_script(script) == (tuple(source), tuple(target))
    unchanged = sum(len(h.elements) for h in script if h.kind == UNCHANGED)
    assert unchanged == naive_lcs_length(source, target)
    assert all(a.kind != b.kind for a, b in zip(script, script[1:]))
    assert not any(
        a.kind == INSERTION and b.kind == DELETION for a, b in zip(script, script[1:])
    )


def test_replace_shuffled_long_list_keeps_invariants() -> None:
    rng = random.Random(7)
    elements = [f"item {n}" for n in range(600)]
    state = ListState(name="big", elements=tuple(elements), selected=400)
    shuffled = elements[:]
    rng.shuffle(shuffled)

    updated = replace(shuffled, state)

    assert updated.elements == tuple(shuffled)
    assert updated.selected is not None
    assert 0 <= updated.selected < len(shuffled)
    script = compute_edit_script(elements, shuffled)
    assert apply_edit_script(script) == (tuple(elements), tuple(shuffled))
    assert updated.selected == remap_index(script, 400)


def test_remap_leading_insertion_shifts_right() -> None:
    script = compute_edit_script(["a", "b", "c"], ["z", "a", "b", "c"])

    assert remap_index(script, 1) == 2


def test_remap_leading_deletion_shifts_left() -> None:
    script = compute_edit_script(["a", "b", "c"], ["b", "c"])

    assert remap_index(script, 2) == 1


@pytest.mark.parametrize(
    ("source", "target", "index", "expected"),
    [
        (["a", "b", "c"], ["a", "c"], 1, 1),
        (["a", "b", "c"], ["a", "b"], 2, 1),
        (["a", "b", "c"], ["a", "x", "c"], 1, 1),
        (["a", "b", "c"], ["x", "y"], 2, 0),
    ],
)
def test_remap_deleted_element_lands_on_neighbour(
    source, target, index: int, expected: int
) -> None:
    assert remap_index(compute_edit_script(source, target), index) == expected


def test_remap_across_interleaved_hunks() -> None:
    source = ["a", "b", "c", "d", "e"]
    target = ["x", "a", "c", "y", "d", "e"]
    script = compute_edit_script(source, target)

    assert kinds(script) == [
        (INSERTION, ("x",)),
        (UNCHANGED, ("a",)),
        (DELETION, ("b",)),
        (UNCHANGED, ("c",)),
        (INSERTION, ("y",)),
        (UNCHANGED, ("d", "e")),
    ]
    assert [remap_index(script, i) for i in range(5)] == [1, 2, 2, 4, 5]


@pytest.mark.parametrize("seed", range(120))
def test_remap_matches_alignment_reference(seed: int) -> None:
    rng = random.Random(seed)
    source = random_sequence(rng) or ["a"]
    target = random_sequence(rng) or ["b"]
    script = compute_edit_script(source, target)

    for index in range(len(source)):
        assert remap_index(script, index) == reference_remap(script, index)


@pytest.mark.parametrize("seed", range(60))
def test_remap_follows_surviving_elements(seed: int) -> None:
    rng = random.Random(seed)
    source = random_sequence(rng, "abcdefgh") or ["a"]
    target = random_sequence(rng, "abcdefgh") or ["a"]
    script = compute_edit_script(source, target)

    cursor = 0
    for hunk in script:
        if hunk.kind == INSERTION:
            continue
        for _ in hunk.elements:
            if hunk.kind == UNCHANGED:
                assert target[remap_index(script, cursor)] == source[cursor]
            cursor += 1


def test_replace_with_leading_insertion_keeps_element_selected() -> None:
    state = ListState("l", ("a", "b", "c"), 1)

    updated = replace(["z", "a", "b", "c"], state)

    assert updated.selected == 2
    assert selected_element(updated) == (2, "b")


def test_replace_with_identical_content_returns_same_snapshot() -> None:
    state = ListState("l", ("a", "b", "c"), 2)

    assert replace(["a", "b", "c"], state) is state
    assert replace(iter(("a", "b", "c")), state) is state


def test_replace_with_empty_clears_selection() -> None:
    state = ListState("l", ("a", "b", "c"), 1)

    updated = replace([], state)

    assert updated.elements == ()
    assert updated.selected is None
    assert updated.name == "l"


def test_replace_empty_list_selects_first() -> None:
    updated = replace(["x", "y"], list_state("l", []))

    assert updated.elements == ("x", "y")
    assert updated.selected == 0


def test_replace_disjoint_content_falls_back_to_start() -> None:
    updated = replace(["x", "y"], ListState("l", ("a", "b", "c"), 2))

    assert updated.selected == 0


def test_replace_reordered_content() -> None:
    state = ListState("l", ("a", "b", "c", "d"), 2)

    updated = replace(["d", "c", "b", "a"], state)

    assert updated.elements == ("d", "c", "b", "a")
    assert 0 <= updated.selected < 4


@pytest.mark.parametrize("seed", range(40))
def test_replace_twice_equals_replace_once(seed: int) -> None:
    rng = random.Random(seed)
    initial = random_sequence(rng)
    state = list_state("l", initial)
    if initial:
        state = ListState("l", tuple(initial), rng.randrange(len(initial)))
    target = random_sequence(rng)

    once = replace(target, state)

    assert replace(target, once) == once
    assert replace(target, once) is once
