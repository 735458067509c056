import random

import numpy as np
import pytest
from gymnasium.utils.env_checker import check_env

from game.asteroids import AsteroidsEnv, GameConfig, UnknownDifficultyError, run_random_episode
import game.asteroids.env as env_module

from conftest import make_obstacle


@pytest.fixture
def env():
    env = AsteroidsEnv(difficulty="medium", max_steps=300)
    yield env
    env.close()


def test_passes_gymnasium_checks():
    env = AsteroidsEnv()
    check_env(env, skip_render_check=True)
    env.close()


def test_reset_observation(env):
    obs, info = env.reset(seed=1)
    assert obs.shape == env.observation_space.shape
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["score"] == 0
    assert info["step"] == 0


def test_observations_stay_in_bounds(env):
    env.reset(seed=2)
    env.action_space.seed(2)
    for _ in range(300):
        obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
        assert env.observation_space.contains(obs)
        if terminated or truncated:
            break


def test_same_seed_same_episode():
    def rollout():
        env = AsteroidsEnv(difficulty="hard")
        env.reset(seed=11)
        observations = []
        for i in range(120):
            obs, *_ = env.step(np.array([i % 3, i % 2]))
            observations.append(obs)
        return np.stack(observations)

    np.testing.assert_array_equal(rollout(), rollout())


def test_actions_map_to_inputs(env):
    env.reset(seed=3)
    x0 = env.run.ship.x
    env.step(np.array([1, 0]))
    assert env.run.ship.x == pytest.approx(x0 - 220 * env.dt)
    env.step(np.array([2, 1]))
    assert env.run.ship.x == pytest.approx(x0)
    assert len(env.run.projectiles) == 1


def test_truncates_at_max_steps():
    env = AsteroidsEnv(max_steps=5)
    env.reset(seed=0)
    env.run.spawn_timer = 1e9
    results = [env.step(np.array([0, 0])) for _ in range(5)]
    assert [r[3] for r in results] == [False] * 4 + [True]
    assert not any(r[2] for r in results)


def test_terminates_with_penalty_when_hit(env):
    env.reset(seed=4)
    cx, cy = env.run.ship.center
    env.run.obstacles.append(make_obstacle(cx, cy))
    obs, reward, terminated, truncated, info = env.step(np.array([0, 0]))
    assert terminated
    assert reward < -4.0


def test_kill_is_rewarded(env):
    env.reset(seed=5)
    env.run.spawn_timer = 1e9
    mx, my = env.run.ship.muzzle
    env.run.obstacles.append(make_obstacle(mx, my - 14, radius=10.0))
    obs, reward, terminated, truncated, info = env.step(np.array([0, 1]))
    assert info["score"] == 10
    assert reward > 1.0


def test_unknown_difficulty():
    with pytest.raises(UnknownDifficultyError):
        AsteroidsEnv(difficulty="impossible")


def test_random_episode_summary():
    result = run_random_episode(difficulty="hard", seed=0)
    assert 1 <= result["length"] <= 1800
    assert result["score"] >= 0
    assert result["score"] % 10 == 0


def test_random_episode_uses_given_config(monkeypatch):
    cfg = GameConfig(width=800, height=900)
    seen = []

    class SpyEnv(AsteroidsEnv):
        def __init__(self, **kwargs):
            super().__init__(**kwargs)
            seen.append(self.config)

    monkeypatch.setattr(env_module, "AsteroidsEnv", SpyEnv)
    run_random_episode(seed=0, config=cfg)
    assert seen == [cfg]


def test_reset_leaves_global_rngs_alone():
    random.seed(123)
    np.random.seed(123)
    expected = (random.random(), np.random.rand())

    random.seed(123)
    np.random.seed(123)
    env = AsteroidsEnv()
    env.reset(seed=7)
    assert (random.random(), np.random.rand()) == expected
    env.close()
