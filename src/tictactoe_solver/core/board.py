"""
Board representation with bit-packing.

A noughts and crosses position is two 9-bit occupancy sets:
- player: cells held by the side to move
- opponent: cells held by the side that just moved

Cell indices:
    0 | 1 | 2
    ---------
    3 | 4 | 5
    ---------
    6 | 7 | 8

Cell i is bit (1 << i). Every move swaps the two roles, so the side that
just moved is always "opponent" and only opponent can ever hold a line.
"""

from dataclasses import dataclass
from typing import Iterator, List

from .exceptions import InvalidBoardError, InvalidMoveError

FULL_BOARD = 0b111111111

# Rows, columns, diagonals
LINE_MASKS = (
    0b000000111,
    0b000111000,
    0b111000000,
    0b001001001,
    0b010010010,
    0b100100100,
    0b100010001,
    0b001010100,
)


def has_won(places: int) -> bool:
    """Check whether an occupancy set contains a complete line."""
    return any(places & line == line for line in LINE_MASKS)


def lowest_bit(bits: int) -> int:
    """Isolate the least significant set bit (0 if no bits are set)."""
    return bits & -bits


@dataclass(frozen=True)
class Board:
    """
    Immutable board position, relative to the side to move.

    Construct with Board.new() or Board.from_bits(); the plain constructor
    performs no validation and is used for internally derived boards.
    """

    player: int = 0
    opponent: int = 0

    @classmethod
    def new(cls) -> "Board":
        """Empty starting board."""
        return cls()

    @classmethod
    def from_bits(cls, player: int, opponent: int) -> "Board":
        """
        Construct a board from raw occupancy sets.

        Args:
            player: Cells held by the side to move
            opponent: Cells held by the side that moved last

        Returns:
            Validated Board

        Raises:
            InvalidBoardError: If the bits do not describe a reachable position
        """
        if player & FULL_BOARD != player:
            raise InvalidBoardError("player has excess bits set", player, opponent)
        if opponent & FULL_BOARD != opponent:
            raise InvalidBoardError("opponent has excess bits set", player, opponent)
        if player & opponent:
            raise InvalidBoardError(
                "player and opponent have both played the same cell", player, opponent
            )

        player_turns = player.bit_count()
        opponent_turns = opponent.bit_count()
        if player_turns > opponent_turns:
            raise InvalidBoardError("player has had too many turns", player, opponent)
        if opponent_turns > player_turns + 1:
            raise InvalidBoardError("opponent has had too many turns", player, opponent)

        # Opponent always placed the last mark, so a line held by player
        # means the game ended before opponent's final move.
        if has_won(player):
            raise InvalidBoardError(
                "opponent had a turn after player won", player, opponent
            )

        return cls(player=player, opponent=opponent)

    @property
    def occupied(self) -> int:
        """Bit-set of all marked cells."""
        return self.player | self.opponent

    @property
    def move_count(self) -> int:
        """Number of marks on the board."""
        return self.occupied.bit_count()

    def empty_cells(self) -> List[int]:
        """Indices of unmarked cells, ascending."""
        free = FULL_BOARD & ~self.occupied
        return [cell for cell in range(9) if free & (1 << cell)]

    def has_lost(self) -> bool:
        """True if the opponent completed a line (the side to move lost)."""
        return has_won(self.opponent)

    def moves(self) -> Iterator["Board"]:
        """
        Yield every successor board, one per empty cell in ascending order.

        Successors are flipped: this board's opponent becomes their player.
        Does not check has_lost(); the caller decides whether play continues.
        """
        remain = FULL_BOARD & ~(self.player | self.opponent)
        while remain:
            bit = lowest_bit(remain)
            remain &= ~bit
            yield self._with_move_bits(bit)

    def with_move(self, cell: int) -> "Board":
        """
        Play a mark on the given cell for the side to move.

        Args:
            cell: Cell index 0-8

        Returns:
            New (flipped) Board after the move

        Raises:
            InvalidMoveError: If the cell is out of range or taken, or the game is over
        """
        if not 0 <= cell <= 8:
            raise InvalidMoveError("cell is out of range", cell)
        bit = 1 << cell
        if bit & self.occupied:
            raise InvalidMoveError("cell is already taken", cell)
        if self.has_lost():
            raise InvalidMoveError("game is already decided", cell)
        return self._with_move_bits(bit)

    def _with_move_bits(self, position: int) -> "Board":
        # Only reached with a single free in-range cell (moves() or with_move()).
        assert 0 < position <= 0b100000000 and position & (position - 1) == 0, (
            "position is invalid"
        )
        assert position & (self.player | self.opponent) == 0, "position is already taken"

        board = Board(player=self.opponent, opponent=self.player | position)

        assert board.player & board.opponent == 0, (
            "player and opponent have both played the same cell"
        )
        return board

    def __str__(self) -> str:
        """Three rows of X/O/space; X is whoever moved first."""
        if self.move_count & 1:
            ex, oh = self.opponent, self.player
        else:
            ex, oh = self.player, self.opponent

        rows = []
        for row in range(3):
            chars = []
            for col in range(3):
                bit = 1 << (row * 3 + col)
                if ex & bit:
                    chars.append("X")
                elif oh & bit:
                    chars.append("O")
                else:
                    chars.append(" ")
            rows.append("".join(chars))
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"Board(0b{self.player:09b}, 0b{self.opponent:09b})"
