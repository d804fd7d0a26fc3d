# twisty_sim/app/main_window.py
from __future__ import annotations

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from twisty_sim.config import (
    DEFAULT_THEME,
    DEFAULT_VARIANT,
    HEADINGS,
    INFO_NOTES,
    NOTICE_TIMEOUT_MS,
    SWITCH_LABELS,
)
from twisty_sim.core.session import PuzzleSession, SessionState
from twisty_sim.logic.moves import PuzzleVariant
from twisty_sim.render.twisty_view import TwistyPlayerView

THEME_STYLES = {
    "dark": """
        QMainWindow, QWidget { background: #1e1e26; color: #e8e8f0; }
        QPushButton { background: #3a3a4a; border-radius: 6px; padding: 6px 10px; }
        QPushButton:disabled { color: #80808a; }
    """,
    "light": """
        QMainWindow, QWidget { background: #f4f4f8; color: #1e1e26; }
        QPushButton { background: #dcdce6; border-radius: 6px; padding: 6px 10px; }
        QPushButton:disabled { color: #9a9aa4; }
    """,
}
THEME_ICONS = {"dark": "🌙", "light": "⭐"}


class MainWindow(QMainWindow):
    """Ventana principal: panel de control + widget externo del puzzle.

    Esta clase solo conecta la UI con `PuzzleSession`:
    - Botones Scramble / Solve / Switch (deshabilitados mientras la sesión está busy)
    - Lecturas "Moves: n" y "Current Algorithm: ..."
    - Tema claro/oscuro y avisos transitorios en la barra de estado
    """

    def __init__(
        self,
        variant: PuzzleVariant = DEFAULT_VARIANT,
        switchable: bool = True,
    ) -> None:
        """Inicializa la ventana principal, crea la UI y conecta señales.

        Args:
            variant: Puzzle inicial.
            switchable: False para una app de un solo puzzle (sin botón Switch).
        """
        super().__init__()
        self.setWindowTitle("Twisty Puzzle Simulator - PySide6")
        self.theme: str = DEFAULT_THEME

        # --- Widget externo + sesión ---
        self.view: TwistyPlayerView = TwistyPlayerView(self)
        self.session: PuzzleSession = PuzzleSession(
            self.view, variant=variant, switchable=switchable, parent=self
        )

        # --- UI ---
        root = QWidget()
        root_layout = QHBoxLayout(root)
        root_layout.addWidget(self.view, 1)

        panel = QWidget()
        panel_layout = QVBoxLayout(panel)
        panel.setFixedWidth(320)

        self.lbl_heading = QLabel("")
        self.lbl_heading.setWordWrap(True)
        panel_layout.addWidget(self.lbl_heading)

        row_main = QHBoxLayout()
        self.btn_scramble = QPushButton("Scramble")
        self.btn_solve = QPushButton("Solve")
        row_main.addWidget(self.btn_scramble)
        row_main.addWidget(self.btn_solve)
        panel_layout.addLayout(row_main)

        self.btn_switch = QPushButton("")
        self.btn_switch.setVisible(self.session.switchable)
        panel_layout.addWidget(self.btn_switch)

        self.btn_theme = QPushButton("")
        panel_layout.addWidget(self.btn_theme)

        self.lbl_moves = QLabel("")
        panel_layout.addWidget(self.lbl_moves)

        self.lbl_alg = QLabel("")
        self.lbl_alg.setWordWrap(True)
        panel_layout.addWidget(self.lbl_alg, 1)

        self.lbl_info = QLabel("")
        self.lbl_info.setWordWrap(True)
        panel_layout.addWidget(self.lbl_info)

        root_layout.addWidget(panel)
        self.setCentralWidget(root)

        # --- Conexiones ---
        self.btn_scramble.clicked.connect(self.session.scramble)
        self.btn_solve.clicked.connect(self.session.solve)
        self.btn_switch.clicked.connect(self.session.switch_variant)
        self.btn_theme.clicked.connect(self.on_toggle_theme)

        self.session.state_changed.connect(self._refresh_status)
        self.session.busy_changed.connect(self._on_busy_changed)
        self.session.variant_changed.connect(self._refresh_variant_labels)
        self.session.notice.connect(self.show_notice)
        self.view.page_failed.connect(self.show_notice)
        self.view.timeline_failed.connect(self.show_notice)

        self._apply_theme()
        self._refresh_variant_labels(self.session.variant)
        self._refresh_status(self.session.state)

        self.session.start()

    # -------------------
    # Helpers UI
    # -------------------
    def _refresh_status(self, state: SessionState) -> None:
        """Actualiza las lecturas de movimientos y algoritmo actual."""
        self.lbl_moves.setText(state.moves_text())
        self.lbl_alg.setText(state.algorithm_text())

    def _refresh_variant_labels(self, variant: PuzzleVariant) -> None:
        """Actualiza título, nota informativa y texto del botón Switch."""
        self.lbl_heading.setText(HEADINGS[variant])
        self.lbl_info.setText(f"<b>Note:</b> {INFO_NOTES[variant]}")
        self.btn_switch.setText(SWITCH_LABELS.get(variant, ""))

    def _on_busy_changed(self, busy: bool) -> None:
        self._set_controls_enabled(not busy)

    def _set_controls_enabled(self, enabled: bool) -> None:
        """Habilita o deshabilita los controles interactivos.

        Args:
            enabled: True para habilitar; False mientras la sesión está busy.
        """
        self.btn_scramble.setEnabled(enabled)
        self.btn_solve.setEnabled(enabled)
        self.btn_switch.setEnabled(enabled)

    def show_notice(self, message: str) -> None:
        """Muestra un aviso transitorio que se oculta solo."""
        self.statusBar().showMessage(message, NOTICE_TIMEOUT_MS)

    # -------------------
    # Tema
    # -------------------
    def on_toggle_theme(self) -> None:
        self.theme = "light" if self.theme == "dark" else "dark"
        self._apply_theme()

    def _apply_theme(self) -> None:
        self.setStyleSheet(THEME_STYLES[self.theme])
        self.btn_theme.setText(THEME_ICONS[self.theme])
        self.view.set_theme(self.theme)
