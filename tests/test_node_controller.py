import random

import pytest

from rhythmgame.config import InputControl, ScoreType, perfect_judge
from rhythmgame.models import DataStore, Difficulty, GameState
from rhythmgame.node import Node
from rhythmgame.node_controller import NodeController


@pytest.fixture
def data():
    store = DataStore()
    store.game.game_state = GameState.GAME
    return store


def _controller(data, seed=1):
    controller = NodeController(data, random.Random(seed))
    controller.init()
    return controller


def _place(data, line, index):
    node = Node(data.game)
    node.spawn(line)
    node.index = index
    data.game.stage_nodes.append(node)
    return node


def test_judge_node_perfect(data):
    controller = _controller(data)
    assert controller.judge_node(0.0) is True
    assert data.user.scores[ScoreType.PERFECT] == 1
    assert (data.user.fast_count, data.user.slow_count) == (0, 0)


def test_judge_node_fast_and_slow(data):
    controller = _controller(data)
    great = data.game.judge(ScoreType.GREAT)
    good = data.game.judge(ScoreType.GOOD)
    assert controller.judge_node(-great * 0.9) is True
    assert controller.judge_node(good * 0.9) is True
    assert data.user.scores[ScoreType.GREAT] == 1
    assert data.user.scores[ScoreType.GOOD] == 1
    assert data.user.fast_count == 1
    assert data.user.slow_count == 1


def test_judge_node_outside_windows(data):
    controller = _controller(data)
    assert controller.judge_node(data.game.judge(ScoreType.BAD)) is False
    assert sum(data.user.scores.values()) == 0


@pytest.mark.parametrize("seed", range(20))
def test_beginner_counts(data, seed):
    data.game.difficulty = Difficulty.BEGINNER
    controller = _controller(data, seed)
    assert controller.node_count_for_beat(4) == 0
    assert controller.node_count_for_beat(0) in (1, 2)
    assert data.game.debug_beat_index == 0


@pytest.mark.parametrize("difficulty", list(Difficulty)[1:])
def test_counts_stay_in_range_and_accumulate(data, difficulty):
    data.game.difficulty = difficulty
    controller = _controller(data, 7)
    total = 0
    for beat in range(data.game.beat_info.total_beats()):
        count = controller.node_count_for_beat(beat)
        assert 0 <= count <= 3
        total += count
    assert data.game.debug_spawn_node_count == total


@pytest.mark.parametrize("seed", range(20))
def test_generate_nodes_uses_distinct_lines(data, seed):
    controller = _controller(data, seed)
    controller.generate_nodes(3)
    lines = [node.line for node in data.game.stage_nodes]
    assert 1 <= len(lines) <= 3
    assert len(set(lines)) == len(lines)
    assert all(0 <= line <= 3 for line in lines)
    assert all(node.active and node.index == 0 for node in data.game.stage_nodes)


def test_tap_hits_note_on_judgement_line(data):
    controller = _controller(data)
    node = _place(data, 0, perfect_judge())
    data.user.input[InputControl.BUTTON_1].tapped = True
    controller.update(0.0)
    assert node.is_hit is True
    assert data.user.scores[ScoreType.PERFECT] == 1
    assert data.user.combo_count == 1
    assert data.user.max_combo_count == 1
    assert data.user.indicator == [pytest.approx(0.0)]


def test_tap_on_other_line_does_not_hit(data):
    controller = _controller(data)
    node = _place(data, 0, perfect_judge())
    data.user.input[InputControl.BUTTON_2].tapped = True
    controller.update(0.0)
    assert node.is_hit is False
    assert data.user.combo_count == 0


def test_late_note_is_missed(data):
    controller = _controller(data)
    data.user.combo_count = 4
    node = _place(data, 1, perfect_judge() + 4)
    controller.update(0.0)
    assert node.is_miss is True
    assert data.user.scores[ScoreType.MISS] == 1
    assert data.user.combo_count == 0


def test_finished_notes_return_to_pool(data):
    controller = _controller(data)
    node = _place(data, 2, perfect_judge())
    node.set_hit()
    data.game.game_state = GameState.RESULT
    controller.update(0.5)
    assert data.game.stage_nodes == []
    assert node.active is False
    controller.generate_nodes(1)
    assert data.game.stage_nodes == [node]
    assert node.active is True


def test_no_spawn_outside_play_states(data):
    data.game.game_state = GameState.RESULT
    controller = _controller(data)
    for beat in range(1, data.game.beat_info.total_beats()):
        data.game.current_beat_index = beat
        controller.update(0.0)
    assert data.game.stage_nodes == []
    assert data.game.debug_spawn_node_count == 0


def test_spawning_waits_for_bar_start(data):
    controller = _controller(data, 3)
    total = data.game.beat_info.total_beats()
    seen_before_start = []
    for beat in range(1, total * 2):
        data.game.current_beat_index = beat % total
        controller.update(0.0)
        if not data.game.stage_nodes:
            seen_before_start.append(beat)
    assert seen_before_start
    assert data.game.stage_nodes
    assert all(0 <= node.line <= 3 for node in data.game.stage_nodes)
    assert data.game.debug_spawn_node_count >= len(data.game.stage_nodes)