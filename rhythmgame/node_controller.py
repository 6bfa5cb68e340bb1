"""Spawning, moving, judging and recycling of notes."""

from __future__ import annotations

import random
from collections import deque

from .config import ACTION_BUTTONS, ScoreType, judge_end, perfect_judge
from .controllers import Controller
from .models import DataStore, Difficulty, GameState
from .node import Node
from .randomness import get_random


def _c_remainder(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend, as with truncating division."""
    return a - b * int(a / b)


class NodeController(Controller):
    """Owns the lifecycle of the notes on the stage."""

    def __init__(self, data: DataStore, rng: random.Random | None = None) -> None:
        self._data = data
        self._rng = rng
        self._prev_beat_index = 0
        self._spawn_lines: set[int] = set()
        self._pool: deque[Node] = deque()
        self._started = False

    def init(self) -> None:
        self._prev_beat_index = 0
        self._started = False

    def update(self, delta_time: float) -> None:
        game = self._data.game
        self._cleanup(delta_time)

        if game.game_state not in (GameState.TITLE, GameState.GAME):
            return

        self._spawn()
        self._judge()
        self._move()

        self._prev_beat_index = game.current_beat_index

    def _random(self, low: int, high: int, exclude=()) -> int:
        return get_random(low, high, exclude, self._rng)

    def _spawn(self) -> None:
        game = self._data.game
        if game.current_beat_index == self._prev_beat_index:
            return

        max_beat = game.beat_info.total_beats()
        time_to_judgment = float(perfect_judge())
        time_per_beat = game.beat_info.beat_interval()

        beats = int(time_to_judgment / time_per_beat) % max_beat
        if beats == 0:
            beats = max_beat - max_beat // game.note_speed
        else:
            beats = max_beat - (beats // game.note_speed) % max_beat

        target = _c_remainder(max_beat + game.current_beat_index - beats, max_beat)

        # Notes start from the first beat of a bar.
        if target == 0:
            self._started = True
        if not self._started:
            return

        count = self.node_count_for_beat(target)
        if count <= 0:
            return
        self.generate_nodes(count)

    def _move(self) -> None:
        for node in self._data.game.stage_nodes:
            if node.active and not node.has_effect():
                node.move()

    def _judge(self) -> None:
        game = self._data.game
        user = self._data.user

        for line, control in enumerate(ACTION_BUTTONS):
            button = user.input.get(control)
            if button is None or not button.tapped:
                continue

            for node in game.stage_nodes:
                if not node.active or node.has_effect() or node.line != line:
                    continue
                duration = node.time_to_judgment_line()
                if not self.judge_node(duration):
                    continue
                user.indicator.append(duration)
                user.combo_count += 1
                user.max_combo_count = max(user.max_combo_count, user.combo_count)
                node.set_hit()
                break

        for node in game.stage_nodes:
            if not node.active or node.has_effect():
                continue
            if node.time_to_judgment_line() > game.judge(ScoreType.BAD):
                node.set_miss()
            elif node.index > judge_end():
                node.back()
                node.set_miss()
            else:
                continue
            user.scores[ScoreType.MISS] += 1
            user.combo_count = 0

    def _cleanup(self, delta_time: float) -> None:
        nodes = self._data.game.stage_nodes
        for node in nodes:
            node.on_effect(delta_time)

        finished = [node for node in nodes if not node.active]
        nodes[:] = [node for node in nodes if node.active]
        for node in finished:
            node.clear()
            self._pool.append(node)

    def node_count_for_beat(self, beat_index: int) -> int:
        """Decide how many notes appear on a subdivision of the bar."""
        game = self._data.game
        bottom = game.beat_info.bottom
        rand = self._random
        difficulty = game.difficulty
        count = 0

        if difficulty is Difficulty.BEGINNER:
            if beat_index == 0:
                count = rand(0, 1) + 1
        elif difficulty is Difficulty.EASY:
            if beat_index == 0:
                count = rand(0, 1) + 1
            elif beat_index % bottom == 0:
                if rand(0, 4) == 0:
                    count = 1
        elif difficulty is Difficulty.NORMAL:
            if beat_index == 0:
                count = rand(0, 1) + 1
            elif beat_index % bottom == 0:
                if rand(0, 1) == 0:
                    count = rand(0, 1) + 1
        elif difficulty is Difficulty.HARD:
            if beat_index == 0:
                count = rand(0, 1) + 1
            elif beat_index % bottom == 0:
                if rand(0, 1) == 0:
                    count = rand(0, 1) + 1
            elif beat_index % (bottom // 2) == 0:
                if rand(0, bottom) == 0:
                    count = 1
        elif difficulty is Difficulty.VERY_HARD:
            if beat_index == 0:
                count = rand(0, 2) + 1
            elif beat_index % (bottom // 2) == 0:
                if rand(0, 3) != 0:
                    count = rand(0, 1) + 1
        elif difficulty is Difficulty.EXPERT:
            if beat_index == 0:
                count = rand(0, 2) + 1
            elif beat_index % bottom == 0:
                count = rand(0, 1) + 1
            elif beat_index % (bottom // 4) == 0:
                if rand(0, 1) == 0:
                    count = 1
        elif difficulty is Difficulty.MASTER:
            if beat_index == 0:
                count = rand(0, 3)
            elif beat_index % bottom == 0:
                count = rand(0, 2)
            elif beat_index % (bottom // 2) == 0:
                count = rand(0, 2)
            elif beat_index % (bottom // 4) == 0:
                if rand(0, 1) == 0:
                    if rand(0, 5) == 0:
                        count = 1
                    else:
                        count = rand(0, 2) + 1

        game.debug_beat_index = beat_index
        game.debug_spawn_node_count += count
        return count

    def generate_nodes(self, count: int) -> None:
        """Spawn up to count notes on distinct lines, avoiding last spawn's lines."""
        game = self._data.game
        prev_lines = set(self._spawn_lines)
        self._spawn_lines.clear()

        for _ in range(count):
            line = self._random(0, 3, prev_lines)
            if line in self._spawn_lines:
                continue
            node = self._pool.popleft() if self._pool else Node(game)
            node.spawn(line)
            game.stage_nodes.append(node)
            self._spawn_lines.add(line)

    def judge_node(self, duration: float) -> bool:
        """Score a hit that is duration seconds off; False if outside every window."""
        game = self._data.game
        user = self._data.user
        offset = abs(duration)

        for score_type in (ScoreType.PERFECT, ScoreType.GREAT,
                           ScoreType.GOOD, ScoreType.BAD):
            if offset < game.judge(score_type):
                user.scores[score_type] += 1
                break
        else:
            return False

        if offset >= game.judge(ScoreType.PERFECT):
            if duration < 0:
                user.fast_count += 1
            else:
                user.slow_count += 1
        return True