import pytest

from rhythmgame.config import InputControl, judge_end, perfect_judge
from rhythmgame.geometry import Point
from rhythmgame.models import DataStore, Difficulty
from rhythmgame.node import Node
from rhythmgame.screens import (
    GameScreen,
    IndicatorScreen,
    JudgeScreen,
    MetronomeScreen,
    OptionScreen,
)


def _row(screen, y):
    return "".join(screen.char_at(Point(x, y)) for x in range(screen.size.width))


def _column(screen, x, rows):
    return "".join(screen.char_at(Point(x, y)) for y in rows)


@pytest.fixture
def data():
    return DataStore()


# GameScreen

@pytest.fixture
def game_screen(data):
    screen = GameScreen(data)
    screen.init()
    return screen


def test_game_screen_placement(game_screen):
    assert game_screen.position == Point(3, 2)
    assert game_screen.contains(Point(3, 2))
    assert not game_screen.contains(Point(2, 2))


def test_game_screen_lane_borders(game_screen):
    assert _row(game_screen, 0) == "]   |   |   |   ["


def test_game_screen_keys_on_second_last_row(game_screen):
    row = _row(game_screen, game_screen.size.height - 2)
    assert [row[x] for x in (2, 6, 10, 14)] == ["D", "F", "J", "K"]


def test_game_screen_judgement_line(game_screen):
    row = _row(game_screen, game_screen.size.height - 5)
    assert row.count("=") == 8
    assert [row[x] for x in (2, 6, 10, 14)] == [" "] * 4


def test_game_screen_bottom_row_blank(game_screen):
    assert _row(game_screen, game_screen.size.height - 1).strip() == ""


def test_game_screen_tap_effects(data, game_screen):
    data.user.input[InputControl.BUTTON_1].effect_frame = 0.1
    data.user.input[InputControl.BUTTON_2].effect_frame = 0.2
    data.user.input[InputControl.BUTTON_3].pressed = True
    game_screen.pre_render()
    bottom = _row(game_screen, game_screen.size.height - 1)
    assert [bottom[x] for x in (2, 6, 10, 14)] == ["*", "+", "-", " "]


def test_game_screen_draws_node_on_judgement_line(data, game_screen):
    node = Node(data.game)
    node.spawn(1)
    node.index = perfect_judge()
    data.game.stage_nodes.append(node)
    game_screen.pre_render()
    assert game_screen.char_at(Point(6, perfect_judge())) == "-"


def test_game_screen_halves_distance_past_line(data, game_screen):
    node = Node(data.game)
    node.spawn(2)
    node.index = perfect_judge() + 4
    data.game.stage_nodes.append(node)
    game_screen.pre_render()
    assert game_screen.char_at(Point(10, perfect_judge() + 2)) == "-"


def test_game_screen_skips_inactive_and_finished_nodes(data, game_screen):
    inactive = Node(data.game)
    inactive.spawn(0)
    inactive.index = 3
    inactive.active = False
    gone = Node(data.game)
    gone.spawn(3)
    gone.index = judge_end() + 1
    data.game.stage_nodes.extend([inactive, gone])
    game_screen.pre_render()
    rows = range(game_screen.size.height - 2)
    assert _column(game_screen, 2, rows).strip() == ""
    assert _column(game_screen, 14, rows).strip() == ""


# IndicatorScreen

@pytest.fixture
def indicator(data):
    screen = IndicatorScreen(data)
    screen.init()
    return screen


def test_indicate_to_point_centre_and_ends(indicator, data):
    centre = indicator.indicate_to_point(0.0)
    assert indicator.indicate_to_point(10.0) == 2 * centre
    assert indicator.indicate_to_point(-10.0) == 0
    assert indicator.indicate_to_point(-0.01) <= centre <= indicator.indicate_to_point(0.01)


def test_indicate_to_point_is_symmetric(indicator):
    centre = indicator.indicate_to_point(0.0)
    for value in (0.02, 0.05, 0.1):
        left = indicator.indicate_to_point(-value)
        right = indicator.indicate_to_point(value)
        assert centre - left == right - centre


def test_indicator_frame_and_labels(indicator):
    assert _row(indicator, 0).startswith(" ---- Indicator ")
    assert indicator.char_at(Point(25, 6)) == "|"
    labels = _row(indicator, 7)
    assert labels.index("fast") < labels.index("slow")


def test_indicator_bar_is_mirrored(indicator):
    for i in range(24):
        assert indicator.char_at(Point(1 + i, 6)) == indicator.char_at(Point(49 - i, 6))
    assert indicator.char_at(Point(24, 6)) == "*"
    assert indicator.char_at(Point(1, 6)) == "~"


def test_indicator_stacks_hits(data, indicator):
    column = 1 + indicator.indicate_to_point(0.0)
    data.user.indicator.append(0.0)
    indicator.pre_render()
    assert indicator.char_at(Point(column, 5)) == "_"
    data.user.indicator.append(0.0)
    indicator.pre_render()
    assert indicator.char_at(Point(column, 5)) == "o"


def test_indicator_forgets_old_hits(data, indicator):
    column = 1 + indicator.indicate_to_point(0.0)
    data.user.indicator.append(0.0)
    indicator.pre_render()
    data.game.game_time = 200.0
    indicator.post_render()
    indicator.pre_render()
    assert indicator.char_at(Point(column, 5)) == " "


def test_indicator_keeps_recent_hits(data, indicator):
    column = 1 + indicator.indicate_to_point(0.0)
    data.user.indicator.append(0.0)
    indicator.pre_render()
    data.game.game_time = 50.0
    indicator.post_render()
    indicator.pre_render()
    assert indicator.char_at(Point(column, 5)) == "_"


# JudgeScreen

def test_judge_screen_shows_windows(data):
    screen = JudgeScreen(data)
    screen.init()
    screen.pre_render()
    assert _row(screen, 0) == "PERFECT  40 ms"
    assert _row(screen, 3) == "BAD     320 ms"


def test_judge_screen_tracks_scale(data):
    screen = JudgeScreen(data)
    screen.init()
    screen.pre_render()
    before = int(_row(screen, 2)[8:11])
    data.game.judge_scale = 4.0
    screen.pre_render()
    assert int(_row(screen, 2)[8:11]) == 2 * before


# MetronomeScreen

@pytest.fixture
def metronome(data):
    screen = MetronomeScreen(data)
    screen.init()
    return screen


def test_metronome_size_follows_signature(data, metronome):
    assert metronome.size.height == 2 + 3 + data.game.beat_info.bottom
    assert _row(metronome, 0).startswith("+ Metronome ")


def test_metronome_grid_columns(metronome):
    first = metronome.beat_grid_position(0)
    second_beat = metronome.beat_grid_position(4)
    assert first == Point(5, 3)
    assert metronome.beat_grid_position(1) == first + Point(0, 1)
    assert second_beat.y == first.y
    assert second_beat.x - first.x == metronome.beat_grid_position(8).x - second_beat.x


def test_metronome_negative_index_rounds_towards_zero(metronome):
    assert metronome.beat_grid_position(-1) == metronome.beat_grid_position(0) - Point(0, 1)


def test_metronome_beat_markers(data, metronome):
    for beat in range(data.game.beat_info.top):
        x = metronome.beat_grid_position(beat * 4).x
        assert metronome.char_at(Point(x, 2)) == "o"


def test_metronome_moves_marker(data, metronome):
    data.game.current_beat_index = 0
    metronome.pre_render()
    start = metronome.beat_grid_position(0)
    assert metronome.char_at(start) == "+"
    assert metronome.char_at(Point(start.x, 2)) == "O"

    data.game.current_beat_index = 4
    metronome.pre_render()
    assert metronome.char_at(start) == " "
    assert metronome.char_at(Point(start.x, 2)) == "o"
    assert metronome.char_at(metronome.beat_grid_position(4)) == "+"


# OptionScreen

@pytest.fixture
def options(data):
    screen = OptionScreen(data)
    screen.init()
    return screen


def test_option_screen_shows_settings(data, options):
    data.game.difficulty = Difficulty.NORMAL
    data.game.beat_info.bpm = 120
    data.game.judge_scale = 2.0
    options.pre_render()
    assert _row(options, 2)[24:35] == "    Normal "
    assert _row(options, 3)[30:34] == " 120"
    assert _row(options, 5)[30:33] == "2.0"


def test_option_screen_toggles(data, options):
    data.game.play_sound = False
    data.system.show_debug = True
    options.pre_render()
    assert _row(options, 6)[30:34] == " Off"
    assert _row(options, 7)[30:34] == "  On"


def test_option_screen_focus_markers(data, options):
    data.user.option_focus = 3
    options.pre_render()
    for option in range(7):
        row = _row(options, 2 + option)
        expected = (">>", "<<") if option == 3 else ("  ", "  ")
        assert (row[22:24], row[36:38]) == expected


def test_option_screen_every_difficulty_label(data, options):
    for difficulty in Difficulty:
        if difficulty is Difficulty.NONE:
            continue
        data.game.difficulty = difficulty
        options.pre_render()
        label = _row(options, 2)[24:35].replace(" ", "")
        assert label.lower() == difficulty.name.replace("_", "").lower()