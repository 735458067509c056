"""
Entry point for the asteroid shooter
Plays the game in an arcade window, or runs random-agent episodes headless.
"""

import argparse
import logging

import numpy as np

from game.asteroids import DIFFICULTIES, GameConfig, run_random_episode


def run_random_agent(difficulty: str, episodes: int, seed=None, render: bool = False, config=None):
    """Run random-agent episodes and print a summary"""
    print(f"\n{'='*60}")
    print(f"Random agent on {difficulty} for {episodes} episode(s)")
    print(f"{'='*60}\n")

    returns, scores, lengths = [], [], []
    for ep in range(episodes):
        ep_seed = None if seed is None else seed + ep
        result = run_random_episode(
            difficulty=difficulty, render=render, seed=ep_seed, config=config
        )
        returns.append(result["return"])
        scores.append(result["score"])
        lengths.append(result["length"])
        print(f"Episode {ep + 1}: return={result['return']:.2f}, "
              f"score={result['score']}, length={result['length']}")

    print(f"\nMean return: {np.mean(returns):.2f} +/- {np.std(returns):.2f}")
    print(f"Mean score:  {np.mean(scores):.1f}")
    print(f"Mean length: {np.mean(lengths):.1f}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Asteroid shooter")
    parser.add_argument(
        "--difficulty",
        type=str,
        default="easy",
        choices=list(DIFFICULTIES),
        help="Starting difficulty (default: easy)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON file with GameConfig overrides",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--random-agent",
        action="store_true",
        help="Run random-agent episodes instead of opening the game",
    )
    parser.add_argument(
        "--episodes",
        type=int,
        default=5,
        help="Episodes for --random-agent (default: 5)",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Render --random-agent episodes in a window",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig.from_json(args.config) if args.config else GameConfig()

    if args.random_agent:
        run_random_agent(
            args.difficulty, args.episodes, seed=args.seed, render=args.render, config=config
        )
        return

    # arcade needs a display; keep it out of headless runs
    from game.asteroids.window import play
    best = play(config=config, difficulty=args.difficulty, seed=args.seed)
    print(f"Best score this session: {best}")


if __name__ == "__main__":
    main()
