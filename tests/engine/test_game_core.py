import unittest

from ludo_sim.dice import Dice, LoadedDice
from ludo_sim.errors import ConfigurationError, StalledRoundError
from ludo_sim.game import Game
from ludo_sim.strategy import AggressiveStrategy, BalancedStrategy, DefensiveStrategy, RandomStrategy

from tests.helpers import place


class TestGameSetup(unittest.TestCase):
    def test_initial_state(self):
        game = Game(num_players=4, num_tokens=4, dice=Dice(seed=1))
        self.assertEqual(len(game.players), 4)
        self.assertEqual(len(game.board), 16)
        self.assertEqual(game.geometry.track_length, 52)
        for player in game.players:
            self.assertTrue(player.all_in_pocket())
            self.assertEqual(len(player.tokens), 4)
            self.assertTrue(all(t.owner == player.number for t in player.tokens))

    def test_default_strategy_mapping(self):
        game = Game(num_players=5, num_tokens=1, dice=Dice(seed=1))
        kinds = [type(p.strategy) for p in game.players]
        self.assertEqual(
            kinds,
            [RandomStrategy, AggressiveStrategy, DefensiveStrategy, BalancedStrategy, RandomStrategy],
        )

    def test_rejects_bad_counts(self):
        with self.assertRaises(ConfigurationError):
            Game(num_players=0, num_tokens=4)
        with self.assertRaises(ConfigurationError):
            Game(num_players=2, num_tokens=0)

    def test_rejects_unknown_strategy(self):
        with self.assertRaises(ConfigurationError):
            Game(num_players=2, num_tokens=1, strategies={1: "teleporter"})

    def test_roll_dice_range(self):
        dice = Dice(seed=3)
        for _ in range(200):
            self.assertTrue(1 <= dice.roll() <= 6)


class TestPlayRound(unittest.TestCase):
    def test_round_terminates_with_winner(self):
        for seed in range(5):
            game = Game(num_players=4, num_tokens=4, dice=Dice(seed=seed))
            result = game.play_round()
            self.assertTrue(result.winners)
            self.assertTrue(set(result.winners) <= {1, 2, 3, 4})
            self.assertGreater(result.turns, 0)
            for number in result.winners:
                player = game.players[number - 1]
                self.assertEqual(
                    player.completed_count(game.geometry.finish_distance), 4
                )

    def test_same_seed_same_round(self):
        first = Game(num_players=3, num_tokens=2, dice=Dice(seed=42)).play_round()
        second = Game(num_players=3, num_tokens=2, dice=Dice(seed=42)).play_round()
        self.assertEqual(first, second)

    def test_single_player_round(self):
        result = Game(num_players=1, num_tokens=2, dice=Dice(seed=9)).play_round()
        self.assertEqual(result.winners, [1])

    def test_simultaneous_winners(self):
        game = Game(
            num_players=2,
            num_tokens=1,
            dice=LoadedDice(rolls=[6, 6]),
            strategies={},
        )
        last = game.geometry.finish_distance - 6
        for player in game.players:
            place(game.geometry, player.tokens[0], last)
        result = game.play_round()
        self.assertEqual(result.winners, [1, 2])
        self.assertTrue(result.tied)
        self.assertEqual(result.turns, 1)

    def test_later_players_still_act_after_a_win(self):
        game = Game(
            num_players=2,
            num_tokens=1,
            dice=LoadedDice(rolls=[6, 3]),
            strategies={},
        )
        geo = game.geometry
        red, green = game.players
        place(geo, red.tokens[0], geo.finish_distance - 6)
        place(geo, green.tokens[0], 4)
        result = game.play_round()
        self.assertEqual(result.winners, [1])
        self.assertEqual(green.tokens[0].distance, 7)

    def test_stalled_round_guard(self):
        game = Game(
            num_players=2,
            num_tokens=1,
            dice=LoadedDice(rolls=[1] * 6),
            strategies={},
            max_turns=1,
        )
        with self.assertRaises(StalledRoundError):
            game.play_round()


if __name__ == "__main__":
    unittest.main()
