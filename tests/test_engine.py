import random

import pytest

from conftest import ScriptedRandom, overlapping_obstacle
from spacegame.config import HEIGHT, Difficulty, GameConfig
from spacegame.engine import GameEvent, update
from spacegame.entities import Position
from spacegame.state import new_game_state


def test_update_does_not_mutate_input(state, rng, config):
    state.obstacles = [Position(0, 100)]
    result = update(state, rng, config)
    assert state.obstacles == [Position(0, 100)]
    assert result.state.obstacles == [Position(0, 103)]
    assert result.state is not state


def test_obstacles_and_power_ups_fall_and_leave_through_bottom(state, rng, config):
    state.obstacles = [Position(0, HEIGHT - 3), Position(0, HEIGHT - 2)]
    state.power_ups = [Position(40, HEIGHT - 3), Position(40, HEIGHT - 2)]
    nxt = update(state, rng, config).state
    assert nxt.obstacles == [Position(0, HEIGHT)]
    assert nxt.power_ups == [Position(40, HEIGHT)]


def test_projectile_hit_scores_ten_and_hides_projectile(state, rng, config):
    state.projectile = Position(100, 200)
    state.projectile_visible = True
    state.obstacles = [Position(98, 180)]
    result = update(state, rng, config)
    assert result.state.score == 10
    assert not result.state.projectile_visible
    assert result.state.obstacles == []
    assert result.events == [GameEvent.PROJECTILE_HIT]


def test_projectile_destroys_at_most_one_obstacle_per_tick(state, rng, config):
    state.projectile = Position(100, 200)
    state.projectile_visible = True
    state.obstacles = [Position(98, 180), Position(95, 185)]
    nxt = update(state, rng, config).state
    assert nxt.score == 10
    assert nxt.obstacles == [Position(95, 188)]


def test_projectile_leaving_the_top_is_hidden(state, rng, config):
    state.projectile = Position(100, 5)
    state.projectile_visible = True
    state.obstacles = [Position(98, -20)]
    nxt = update(state, rng, config).state
    assert not nxt.projectile_visible
    assert nxt.score == 0
    assert len(nxt.obstacles) == 1


def test_projectile_moves_up_when_clear(state, rng, config):
    state.projectile = Position(100, 200)
    state.projectile_visible = True
    nxt = update(state, rng, config).state
    assert nxt.projectile == Position(100, 190)
    assert nxt.projectile_visible


def test_unshielded_collision_costs_a_life_and_removes_obstacle(state, rng, config):
    assert state.lives == 3
    state.obstacles = [overlapping_obstacle(state.player)]
    result = update(state, rng, config)
    assert result.state.lives == 2
    assert result.state.obstacles == []
    assert result.events == [GameEvent.PLAYER_HIT]


def test_at_most_one_life_lost_per_tick(state, rng, config):
    p = state.player
    state.obstacles = [Position(p.x, p.y), Position(p.x + 20, p.y + 5), Position(p.x + 30, p.y + 20)]
    nxt = update(state, rng, config).state
    assert nxt.lives == 2
    assert len(nxt.obstacles) == 2


def test_shield_blocks_all_obstacle_damage(state, rng, config):
    state.shield_active = True
    state.obstacles = [overlapping_obstacle(state.player), Position(state.player.x, state.player.y)]
    result = update(state, rng, config)
    assert result.state.lives == 3
    assert len(result.state.obstacles) == 2
    assert GameEvent.PLAYER_HIT not in result.events


def test_power_up_grants_a_life(state, rng, config):
    state.power_ups = [Position(state.player.x + 5, state.player.y + 5)]
    result = update(state, rng, config)
    assert result.state.lives == 4
    assert result.state.power_ups == []
    assert result.events == [GameEvent.POWER_UP_COLLECTED]


def test_several_power_ups_collected_in_one_tick(state, rng, config):
    p = state.player
    state.power_ups = [Position(p.x, p.y), Position(p.x + 30, p.y + 30), Position(0, 0)]
    nxt = update(state, rng, config).state
    assert nxt.lives == 5
    assert nxt.power_ups == [Position(0, 3)]


def test_game_over_when_last_life_lost(state, rng, config):
    state.lives = 1
    state.obstacles = [overlapping_obstacle(state.player)]
    result = update(state, rng, config)
    assert result.state.lives == 0
    assert result.state.is_game_over
    assert result.events == [GameEvent.PLAYER_HIT, GameEvent.GAME_OVER]


def test_game_over_is_terminal(state, rng, config):
    state.lives = 0
    state.is_game_over = True
    state.power_ups = [Position(state.player.x, state.player.y)]
    result = update(state, rng, config)
    assert result.state is state
    assert result.events == []
    assert result.state.is_game_over


def test_spawn_places_obstacle_and_power_up_at_top(state, config):
    result = update(state, ScriptedRandom([0.0, 0.1]), config)
    obstacles, power_ups = result.state.obstacles, result.state.power_ups
    assert len(obstacles) == 1
    assert obstacles[0].y == 0
    assert 0 <= obstacles[0].x <= config.max_spawn_x
    assert power_ups == obstacles


def test_spawn_without_power_up(state, config):
    nxt = update(state, ScriptedRandom([0.01, 0.5]), config).state
    assert len(nxt.obstacles) == 1
    assert nxt.power_ups == []


@pytest.mark.parametrize("difficulty, spawns", [
    (Difficulty.NORMAL, False),
    (Difficulty.CHALLENGE, True),
])
def test_spawn_roll_uses_selected_difficulty(difficulty, spawns):
    config = GameConfig.for_difficulty(difficulty)
    state = new_game_state(config)
    nxt = update(state, ScriptedRandom([0.03, 0.9]), config).state
    assert bool(nxt.obstacles) == spawns


def test_spawn_roll_reads_the_state_probability(config):
    state = new_game_state(config)
    state.spawn_probability = Difficulty.CHALLENGE.value
    assert config.spawn_probability == Difficulty.NORMAL.value
    nxt = update(state, ScriptedRandom([0.03, 0.9]), config).state
    assert len(nxt.obstacles) == 1


def test_new_state_starts_with_configured_lives():
    assert new_game_state(GameConfig(start_lives=5)).lives == 5
    assert new_game_state(GameConfig()).lives == 3


def test_invariants_hold_over_a_long_random_run():
    config = GameConfig(spawn_probability=0.5)
    state = new_game_state(config)
    rng = random.Random(1234)
    game_over_seen = False
    for tick in range(3000):
        if tick % 7 == 0 and not state.projectile_visible:
            state.projectile = Position(state.player.x + 22, state.player.y)
            state.projectile_visible = True
        state.shield_active = (tick // 200) % 2 == 1
        before = state
        after = update(before, rng, config).state

        assert after.score - before.score in (0, 10)
        if after.score > before.score:
            assert not after.projectile_visible
        if before.shield_active:
            assert after.lives >= before.lives
        assert after.lives >= before.lives - 1
        if game_over_seen:
            assert after.is_game_over
        if after.is_game_over and not before.is_game_over:
            assert before.lives > 0 and after.lives <= 0
        game_over_seen = after.is_game_over
        state = after
