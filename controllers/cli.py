import logging

from config import DEFAULT_ROWS, DEFAULT_COLUMNS, LINE_LENGTH
from models.enums import Owner
from services.ai_service import AIPlayer, RandomAI
from services.game_controller import GameController
from services.game_repository import GameRepository
from services.utils import cell_for_owner, parse_board_size, parse_move, parse_owner

logger = logging.getLogger(__name__)

HUMAN = Owner.A

MAIN_MENU = [
    ("1", "New Game"),
    ("2", "Continue Game"),
    ("3", "Board Editor"),
    ("4", "Save Game"),
    ("5", "Load Game"),
    ("6", "List Saved Games"),
    ("7", "Delete Saved Game"),
    ("8", "Exit"),
]


class CommandLineInterface:
    """
    Text front end: a human (X) plays against the AI (O).

    Input and output go through input_func / output so the whole loop can be
    driven from a script.
    """

    def __init__(self, repository: GameRepository, ai_player: AIPlayer = None,
                 input_func=None, output=None, line_length: int = LINE_LENGTH):
        self.repository = repository
        self.ai_player = ai_player or AIPlayer(RandomAI(), owner=HUMAN.opposite())
        self.input = input_func or input
        self.output = output or print
        self.line_length = line_length
        self.game = GameController(DEFAULT_ROWS, DEFAULT_COLUMNS, line_length)
        self.running = True

        self.handlers = {
            "1": self.new_game,
            "2": self.play_game,
            "3": self.board_editor,
            "4": self.save_game,
            "5": self.load_game,
            "6": self.list_saved_games,
            "7": self.delete_game,
            "8": self.exit,
        }

    def prompt(self, message: str) -> str:
        return self.input(message).strip()

    def start(self):
        self.output("\n=== GOMOKU (Five in a Row) ===\n")
        logger.info("CLI started")
        try:
            while self.running:
                self.print_main_menu()
                choice = self.prompt("Choose an option: ")
                handler = self.handlers.get(choice)
                if handler is None:
                    self.output("Invalid choice. Please try again.")
                    continue
                handler()
        except EOFError:
            logger.info("Input closed, leaving CLI")
        logger.info("CLI terminated")

    def print_main_menu(self):
        self.output("\n=== MAIN MENU ===")
        for key, label in MAIN_MENU:
            self.output(f"{key}. {label}")

    def new_game(self):
        self.output("\n=== NEW GAME ===")
        text = self.prompt(f"Enter board size (rows columns, default {DEFAULT_ROWS} {DEFAULT_COLUMNS}): ")
        try:
            rows, columns = parse_board_size(text, (DEFAULT_ROWS, DEFAULT_COLUMNS))
        except ValueError:
            self.output(f"Invalid input. Using default {DEFAULT_ROWS}x{DEFAULT_COLUMNS} board.")
            rows, columns = DEFAULT_ROWS, DEFAULT_COLUMNS

        self.game = GameController(rows, columns, self.line_length)
        self.play_game()

    def play_game(self):
        while not self.game.is_game_over:
            self.output("\n" + self.game.board.render())
            if self.game.current_owner == HUMAN:
                if not self.human_move():
                    return
            elif not self.ai_move():
                return

        self.output("\n" + self.game.board.render())
        self.output(f"\n*** {self.game.status_message()} ***")

    def human_move(self) -> bool:
        """Returns False when the player asks to go back to the menu."""
        while True:
            text = self.prompt(f"\n{HUMAN.label}'s turn ({HUMAN.symbol}). Enter move (row column) or 'menu': ")
            if text.lower() == "menu":
                return False
            try:
                move = parse_move(text)
            except ValueError:
                self.output("Invalid input format. Use: row column")
                continue
            if self.game.submit_move(move):
                return True
            self.output("Invalid move! Try again.")

    def ai_move(self) -> bool:
        owner = self.game.current_owner
        self.output(f"\n{owner.label}'s turn ({owner.symbol}) - {self.ai_player.strategy_name} is thinking...")
        move = self.ai_player.make_move(self.game.board)
        if move is None or not self.game.submit_move(move):
            self.output("AI has no move to play.")
            return False
        self.output(f"AI played at: {move.row} {move.column}")
        return True

    def board_editor(self):
        self.output("\n=== BOARD EDITOR ===")
        self.output("Commands:")
        self.output("  set <row> <col> <player>  - Set cell (player: 1, 2, or 0 for empty)")
        self.output("  show                      - Display board")
        self.output("  clear                     - Clear board")
        self.output("  done                      - Finish editing")

        board = self.game.board
        while True:
            parts = self.prompt("\nEditor> ").split()
            if not parts:
                continue
            command = parts[0].lower()

            if command == "set":
                if len(parts) != 4:
                    self.output("Usage: set <row> <col> <player>")
                    continue
                try:
                    row, col = int(parts[1]), int(parts[2])
                    owner = parse_owner(parts[3])
                except ValueError:
                    self.output("Invalid input.")
                    continue
                if not board.is_in_bounds(row, col):
                    self.output("Position is outside the board.")
                    continue
                board.set(row, col, cell_for_owner(owner))
                self.output("Cell updated.")
            elif command == "show":
                self.output("\n" + board.render())
            elif command == "clear":
                board.clear()
                self.output("Board cleared.")
            elif command == "done":
                break
            else:
                self.output("Unknown command.")

        self.game.recompute_outcome()
        if self.game.is_game_over:
            self.output(f"Edited position is final: {self.game.status_message()}")

    def save_game(self):
        name = self.prompt("\nEnter name for saved game: ")
        if not name:
            self.output("Invalid name.")
            return
        if self.repository.save_game(name, self.game):
            self.output("Game saved successfully!")
        else:
            self.output("Failed to save game.")

    def load_game(self):
        name = self.prompt("\nEnter name of game to load: ")
        loaded = self.repository.load_game(name)
        if loaded is None:
            self.output("Failed to load game.")
            return
        self.game = loaded
        self.output("Game loaded successfully!")
        self.output(self.game.board.render())
        self.output(self.game.status_message())

    def list_saved_games(self):
        saved_games = self.repository.list_saved_game_details()
        self.output("\n=== SAVED GAMES ===")
        if not saved_games:
            self.output("No saved games found.")
            return
        for index, saved in enumerate(saved_games, start=1):
            saved_at = (saved["saved_at"] or "?")[:16].replace("T", " ")
            self.output(
                f"{index}. {saved['name']} ({saved['rows']}x{saved['columns']}, "
                f"{saved['move_count']} moves, saved {saved_at})"
            )

    def delete_game(self):
        name = self.prompt("\nEnter name of game to delete: ")
        if self.repository.delete_game(name):
            self.output("Game deleted.")
        else:
            self.output("No saved game with that name.")

    def exit(self):
        self.output("\nThank you for playing Gomoku!")
        self.running = False
