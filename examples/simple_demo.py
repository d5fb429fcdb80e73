"""
Simple demonstration of game rating accounts without the console session.
"""

import numpy as np

from game_rating import GameAccount, GameMode, PointsPolicy, PolicyKind


def main():
    print("Game Rating Demonstration")
    print("-------------------------")

    rng = np.random.default_rng(7)

    # One account per points policy, same games for each
    games = [
        ("Bob", "Win", 1200),
        ("Carol", "Win", 1350),
        ("Dave", "Win", 1100),
        ("Erin", "Loss", 1500),
        ("Frank", "Draw", 1400),
    ]

    for kind in PolicyKind:
        account = GameAccount("Alice", 1000, policy=PointsPolicy(kind), rng=rng)
        for opponent, outcome, rating in games:
            account.record_result(opponent, outcome, rating)

        print(f"\nPoints policy: {kind.value}")
        account.print_stats()

    # The formula path scores against a random opponent rating
    print("\nFormula path:")
    account = GameAccount("Alice", 1200, rng=rng)
    account.win_game("Bob")
    account.lose_game("Carol")
    account.set_game_mode(GameMode.PRACTICE)
    account.win_game("Dave")
    account.print_stats()


if __name__ == "__main__":
    main()
