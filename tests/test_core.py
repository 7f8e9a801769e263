import random
import unittest

from falling_blocks.game import (
    PIECE_I,
    Action,
    BlockColor,
    GameConfig,
    TetrisGame,
    TetrominoType,
    kind_of,
    new_game,
)


class ScriptedRandom(random.Random):
    """Hands out piece kinds in a fixed, repeating order."""

    def __init__(self, kinds):
        super().__init__(0)
        self.kinds = list(kinds)
        self.calls = 0

    def choice(self, seq):
        kind = self.kinds[self.calls % len(self.kinds)]
        self.calls += 1
        return kind


def scripted_game(width=10, height=24, kinds=(TetrominoType.O,)):
    return new_game(width, height, rng=ScriptedRandom(kinds))


class SpawnTests(unittest.TestCase):
    def test_spawn_is_centred_at_the_top(self):
        game = scripted_game(kinds=[TetrominoType.O])
        self.assertEqual(game.current_piece_x, 5)
        self.assertEqual(game.current_piece_y, 23)
        self.assertEqual(game.current_piece_color, BlockColor.YELLOW)
        self.assertFalse(game.has_lost())

    def test_fresh_piece_drop_y_is_the_floor(self):
        for kind in TetrominoType:
            game = scripted_game(kinds=[kind])
            piece = game.current_piece
            self.assertEqual(game.current_piece_y, 24 - piece.max_y - 1)
            self.assertEqual(game.get_current_piece_drop_y(), -piece.min_y)
            self.assertEqual(game.current_piece_color, kind.color)

    def test_each_kind_spawns_in_its_own_colour(self):
        expected = {
            TetrominoType.I: BlockColor.AQUA,
            TetrominoType.J: BlockColor.BLUE,
            TetrominoType.L: BlockColor.ORANGE,
            TetrominoType.O: BlockColor.YELLOW,
            TetrominoType.S: BlockColor.GREEN,
            TetrominoType.T: BlockColor.PURPLE,
            TetrominoType.Z: BlockColor.RED,
        }
        for kind, color in expected.items():
            game = scripted_game(kinds=[kind])
            self.assertEqual(game.current_piece_color, color)
            self.assertEqual(game.current_piece, kind.piece())
            game.drop_current_piece()
            self.assertEqual(game.current_piece_color, color)

    def test_seeded_games_repeat(self):
        def kinds(seed):
            game = TetrisGame(GameConfig(random_seed=seed))
            seen = []
            for _ in range(5):
                seen.append(kind_of(game.current_piece))
                game.drop_current_piece()
            return seen

        self.assertEqual(kinds(3), kinds(3))


class MovementTests(unittest.TestCase):
    def test_side_moves_stop_at_walls(self):
        game = scripted_game()
        for _ in range(4):
            self.assertTrue(game.move_left())
        self.assertEqual(game.current_piece_x, 1)
        self.assertFalse(game.move_left())
        self.assertEqual(game.current_piece_x, 1)

        for _ in range(8):
            self.assertTrue(game.move_right())
        self.assertEqual(game.current_piece_x, 9)
        self.assertFalse(game.move_right())
        self.assertEqual(game.current_piece_x, 9)

    def test_move_down_locks_on_the_floor(self):
        game = scripted_game()
        for _ in range(22):
            self.assertFalse(game.move_down())
        self.assertEqual(game.current_piece_y, 1)
        self.assertTrue(game.move_down())
        for x, y in [(4, 0), (5, 0), (4, 1), (5, 1)]:
            self.assertEqual(game.get_block(x, y), BlockColor.YELLOW)
        # next piece starts again at the top
        self.assertEqual(game.current_piece_y, 23)
        self.assertEqual(game.get_current_piece_drop_y(), 3)

    def test_drop_y_follows_moves(self):
        game = scripted_game(kinds=[TetrominoType.S])
        self.assertEqual(game.get_current_piece_drop_y(), 0)
        game.drop_current_piece()
        self.assertEqual(game.get_current_piece_drop_y(), 2)
        game.move_left()
        game.move_left()
        game.move_left()
        self.assertEqual(game.get_current_piece_drop_y(), 0)

    def test_queries_are_idempotent(self):
        game = scripted_game()
        game.drop_current_piece()
        first = (game.get_block(4, 0), game.has_lost(), game.rows_completed())
        second = (game.get_block(4, 0), game.has_lost(), game.rows_completed())
        self.assertEqual(first, second)


class RotationTests(unittest.TestCase):
    def test_rotation_against_right_wall_kicks_left(self):
        game = scripted_game(kinds=[TetrominoType.I])
        self.assertEqual(game.get_current_piece_drop_y(), -1)
        self.assertTrue(game.rotate_current_piece())
        self.assertTrue(game.current_piece.equals(PIECE_I.rotate()))
        self.assertEqual(game.get_current_piece_drop_y(), 1)

        while game.move_right():
            pass
        self.assertEqual(game.current_piece_x, 8)  # cells in column 9

        self.assertTrue(game.rotate_current_piece())
        self.assertEqual(game.current_piece_x, 7)
        xs = [game.current_piece_x + x for x, _ in game.current_piece.cells]
        self.assertEqual(max(xs), 9)
        self.assertEqual(min(xs), 6)

    def test_blocked_rotation_changes_nothing(self):
        game = scripted_game(kinds=[TetrominoType.I])
        game.rotate_current_piece()
        while game.move_right():
            pass
        before = (game.current_piece, game.current_piece_x, game.current_piece_y)
        game.board.columns[6:9, 21] = BlockColor.RED

        self.assertFalse(game.rotate_current_piece())
        self.assertEqual((game.current_piece, game.current_piece_x, game.current_piece_y), before)
        self.assertFalse(game.has_lost())


class RowsAndLossTests(unittest.TestCase):
    def test_two_squares_complete_two_rows(self):
        game = scripted_game(width=4, height=6)
        self.assertTrue(game.move_left())
        self.assertEqual(game.drop_current_piece(), 0)
        self.assertTrue(game.move_right())
        self.assertEqual(game.drop_current_piece(), 2)
        self.assertEqual(game.rows_completed(), 2)
        for x in range(4):
            for y in range(6):
                self.assertIsNone(game.get_block(x, y))

    def test_stacking_in_the_middle_loses(self):
        game = scripted_game(height=6)
        game.drop_current_piece()
        game.drop_current_piece()
        self.assertFalse(game.has_lost())
        game.drop_current_piece()
        self.assertTrue(game.has_lost())
        self.assertTrue(game.has_lost())

        x, y = game.current_piece_x, game.current_piece_y
        self.assertFalse(game.move_left())
        self.assertFalse(game.move_right())
        self.assertFalse(game.move_down())
        self.assertFalse(game.rotate_current_piece())
        self.assertEqual(game.drop_current_piece(), 0)
        self.assertEqual((game.current_piece_x, game.current_piece_y), (x, y))
        self.assertEqual(game.rows_completed(), 0)


class StepAndResetTests(unittest.TestCase):
    def test_step_dispatches_commands(self):
        game = scripted_game()
        self.assertTrue(game.step(Action.LEFT))
        self.assertEqual(game.current_piece_x, 4)
        self.assertTrue(game.step(Action.RIGHT))
        self.assertEqual(game.current_piece_x, 5)
        self.assertFalse(game.step(Action.SOFT_DROP))
        self.assertEqual(game.current_piece_y, 22)
        self.assertTrue(game.step(Action.ROTATE))
        self.assertFalse(game.step(Action.NONE))
        self.assertTrue(game.step(Action.HARD_DROP))
        self.assertEqual(game.current_piece_y, 23)

    def test_state_overlays_active_piece(self):
        game = scripted_game(width=4, height=4)
        state = game.get_state()
        self.assertEqual(state.shape, (4, 4))
        self.assertEqual(state[3, 1], -int(BlockColor.YELLOW))
        self.assertEqual(state[2, 2], -int(BlockColor.YELLOW))
        game.drop_current_piece()
        state = game.get_state()
        self.assertEqual(state[0, 1], int(BlockColor.YELLOW))

    def test_reset_clears_board_and_rows(self):
        game = scripted_game(width=4, height=6)
        game.move_left()
        game.drop_current_piece()
        game.move_right()
        game.drop_current_piece()
        game.drop_current_piece()
        game.reset()
        self.assertEqual(game.rows_completed(), 0)
        self.assertIsNone(game.get_block(1, 0))
        self.assertFalse(game.has_lost())


if __name__ == "__main__":
    unittest.main()
