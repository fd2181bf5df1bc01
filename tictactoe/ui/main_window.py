import logging

from ..game_logic import Draw, Win, place_mark, reset, status_text
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont, QKeySequence
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

WINDOW_SIZE = (420, 560)

STATUS_STYLE = "color: #8acaff; font-weight: bold;"
WINNER_STYLE = "color: lime; font-weight: bold;"
DRAW_STYLE = "color: #ffd27f; font-weight: bold;"


class TicTacToeWindow(QMainWindow):
    """
    main window: holds the current game state and redraws on every change
    """
    def __init__(self):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.state = reset()
        self.board_widget = BoardWidget(parent=self)

        self._setup_ui()
        self._render()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic Tac Toe")
        self.resize(*WINDOW_SIZE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QPushButton { padding: 6px 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()              # title + subtitle
        self.main_layout.addWidget(self.header_widget)

        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setAccessibleName("Game status")
        self.main_layout.addWidget(self.status_label)

        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # restart button
        self.main_layout.addWidget(self.controls_bottom_widget)
        self.board_widget.setFocus()

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.new_action = new_action = QAction("New Game", self)
        new_action.setShortcut(QKeySequence(QKeySequence.New))
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.setShortcut(QKeySequence(QKeySequence.Quit))
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_header(self):
        self.header_widget = QWidget()
        vl = QVBoxLayout(self.header_widget)
        self.title_label = QLabel("Tic Tac Toe")
        f = QFont(); f.setPointSize(22); f.setBold(True); self.title_label.setFont(f)
        self.subtitle_label = QLabel("Minimal two-player game")
        self.subtitle_label.setStyleSheet("color: #aaa;")
        for w in (self.title_label, self.subtitle_label):
            w.setAlignment(Qt.AlignCenter)
            vl.addWidget(w)

    def _create_bottom_controls(self):
        # restart centered under the board
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.reset_button = QPushButton("Restart Game")
        self.reset_button.setAccessibleName("Restart the current game")
        self.reset_button.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.reset_button.clicked.connect(self.reset_game)
        hl.addStretch(1); hl.addWidget(self.reset_button); hl.addStretch(1)

    def _render(self):
        """
        push the current state to every view
        """
        outcome = self.state.outcome
        if isinstance(outcome, Win):
            style = WINNER_STYLE
        elif isinstance(outcome, Draw):
            style = DRAW_STYLE
        else:
            style = STATUS_STYLE
        self.status_label.setStyleSheet(style)
        self.status_label.setText(status_text(self.state))
        self.board_widget.set_state(self.state)

    def _set_state(self, state):
        # skip redraw when the move was rejected
        if state is self.state:
            return
        self.state = state
        self._render()
        if self.state.is_finished:
            logger.info("game over: %s", status_text(self.state))

    @Slot(int)
    def _on_cell_clicked(self, index):
        self._set_state(place_mark(self.state, index))

    @Slot()
    def reset_game(self):
        # back to an empty board, X first
        logger.info("new game")
        self.state = reset()
        self._render()
        self.board_widget.setFocus()
