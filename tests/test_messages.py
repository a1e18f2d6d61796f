import unittest

from ludo_engine.dice import ScriptedDice
from ludo_engine.game import Game
from ludo_engine.messages import describe, status_line
from ludo_engine.types import Color


class MessageTests(unittest.TestCase):
    def setUp(self):
        self.dice = ScriptedDice()
        self.game = Game(dice=self.dice)

    def roll(self, value):
        self.dice.extend([value])
        return self.game.request_roll()

    def test_status_lines(self):
        self.assertEqual(
            status_line(self.game.get_snapshot()), "RED's turn - Roll the dice!"
        )
        self.roll(6)
        self.assertEqual(
            status_line(self.game.get_snapshot()), "RED rolled 6 - Select token!"
        )

    def test_no_moves(self):
        res = self.roll(4)
        self.assertEqual(
            describe(res, Color.RED), "RED rolled 4 - No moves GREEN's turn."
        )

    def test_roll_again(self):
        res = self.roll(6)
        self.assertEqual(describe(res, Color.RED), "RED rolled 6 - Select token!")
        res = self.game.select_token(0)
        self.assertEqual(describe(res, Color.RED), "RED moved token 0 RED - Roll again!")

    def test_capture(self):
        self.game.state.token(Color.RED, 0).move_to(10)
        self.game.state.token(Color.GREEN, 0).move_to(20)
        self.game.state.current_player = Color.GREEN
        self.roll(3)
        res = self.game.select_token(0)
        self.assertEqual(
            describe(res, Color.GREEN), "GREEN captured RED! GREEN - Roll again!"
        )

    def test_win(self):
        for tid in (1, 2, 3):
            self.game.state.token(Color.RED, tid).move_to(56)
        self.game.state.token(Color.RED, 0).move_to(55)
        self.roll(1)
        res = self.game.select_token(0)
        self.assertEqual(describe(res, Color.RED), "RED WINS!")
        self.assertEqual(status_line(self.game.get_snapshot()), "RED WINS!")

    def test_rejected(self):
        res = self.game.select_token(0)
        self.assertTrue(describe(res, Color.RED).startswith("Not allowed:"))


if __name__ == "__main__":
    unittest.main()
