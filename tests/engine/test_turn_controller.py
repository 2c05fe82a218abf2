import unittest

from ludo_sim.dice import LoadedDice
from ludo_sim.game import Game
from ludo_sim.turn import TurnController

from tests.helpers import place


def scripted_game(rolls, num_players=2, num_tokens=4, strategies=None):
    return Game(
        num_players=num_players,
        num_tokens=num_tokens,
        dice=LoadedDice(seed=7, rolls=list(rolls)),
        strategies=strategies or {},
    )


def controller_for(game):
    return TurnController(
        board=game.board,
        resolver=game.resolver,
        dice=game.dice,
        num_tokens=game.num_tokens,
    )


class TestRethrowFromPocket(unittest.TestCase):
    def test_three_rolls_when_stuck_in_pocket(self):
        game = scripted_game([1, 2, 3, 4])
        result = controller_for(game).play_turn(game.players[0])
        self.assertEqual(result.rolls, [1, 2, 3])
        self.assertEqual(result.moves, [])
        self.assertFalse(result.won)
        self.assertEqual(game.dice.rolls, [4])

    def test_no_rethrow_when_a_token_left_the_pocket(self):
        game = scripted_game([3, 5], num_tokens=2)
        player = game.players[0]
        place(game.geometry, player.tokens[0], game.geometry.finish_distance)
        result = controller_for(game).play_turn(player)
        self.assertEqual(result.rolls, [3])
        self.assertEqual(game.dice.rolls, [5])

    def test_six_after_rethrow_enters_and_rolls_again(self):
        game = scripted_game([1, 6, 2])
        player = game.players[0]
        result = controller_for(game).play_turn(player)
        self.assertEqual(result.rolls, [1, 6, 2])
        self.assertEqual(len(result.moves), 2)
        self.assertTrue(result.moves[0].enters_from_pocket)
        self.assertEqual(sorted(t.distance for t in player.tokens), [0, 0, 0, 3])


class TestExtraRollsAndTowers(unittest.TestCase):
    def test_six_grants_another_roll(self):
        game = scripted_game([6, 2], num_tokens=1)
        player = game.players[0]
        place(game.geometry, player.tokens[0], 10)
        result = controller_for(game).play_turn(player)
        self.assertEqual(result.rolls, [6, 2])
        self.assertEqual(player.tokens[0].distance, 18)

    def test_tower_moves_together(self):
        game = scripted_game([3], num_tokens=2)
        player = game.players[0]
        a, b = player.tokens
        place(game.geometry, a, 5)
        place(game.geometry, b, 5)
        result = controller_for(game).play_turn(player)
        self.assertEqual((a.distance, b.distance), (8, 8))
        self.assertEqual(a.cell, b.cell)
        self.assertEqual(len(result.moves), 2)
        self.assertTrue(result.moves[1].forms_stack)

    def test_pocketed_tokens_are_not_a_tower(self):
        game = scripted_game([6, 1], num_tokens=3)
        player = game.players[0]
        controller_for(game).play_turn(player)
        self.assertEqual(sorted(t.distance for t in player.tokens), [0, 0, 2])

    def test_win_ends_turn_even_on_six(self):
        game = scripted_game([6, 6, 6], num_tokens=1)
        player = game.players[0]
        place(game.geometry, player.tokens[0], game.geometry.finish_distance - 6)
        result = controller_for(game).play_turn(player)
        self.assertTrue(result.won)
        self.assertEqual(result.rolls, [6])
        self.assertEqual(game.dice.rolls, [6, 6])

    def test_finished_tokens_are_not_evaluated(self):
        game = scripted_game([4], num_tokens=2)
        player = game.players[0]
        place(game.geometry, player.tokens[0], game.geometry.finish_distance)
        place(game.geometry, player.tokens[1], 3)
        result = controller_for(game).play_turn(player)
        self.assertEqual([m.token_id for m in result.moves], [player.tokens[1].token_id])
        self.assertFalse(result.won)


class TestStrategyDrivesChoice(unittest.TestCase):
    def test_aggressive_player_takes_the_capture(self):
        game = scripted_game([3], num_tokens=2, strategies={1: "aggressive"})
        geo = game.geometry
        red, green = game.players
        hunter, runner = red.tokens
        place(geo, hunter, 2)
        place(geo, runner, 10)
        victim = green.tokens[0]
        # green token sitting on ring cell 5
        place(geo, victim, (5 - geo.entry_cell(2)) % geo.track_length + 1)
        result = controller_for(game).play_turn(red)
        self.assertTrue(result.moves[0].captures_opponent)
        self.assertEqual(result.captures, 1)
        self.assertTrue(victim.in_pocket)
        self.assertEqual(runner.distance, 10)


if __name__ == "__main__":
    unittest.main()
